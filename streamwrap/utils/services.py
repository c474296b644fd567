from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class KnownService:
    id: str
    name: str
    known_names: List[str] = field(default_factory=list)


# Order matters: when several aliases match, the later entry wins.
SERVICE_DETAILS: List[KnownService] = [
    KnownService(
        id="realdebrid",
        name="Real-Debrid",
        known_names=["RD", "Real Debrid", "RealDebrid", "Real-Debrid"],
    ),
    KnownService(
        id="alldebrid",
        name="AllDebrid",
        known_names=["AD", "All Debrid", "AllDebrid", "All-Debrid"],
    ),
    KnownService(
        id="premiumize",
        name="Premiumize",
        known_names=["PM", "Premiumize"],
    ),
    KnownService(
        id="debridlink",
        name="Debrid-Link",
        known_names=["DL", "Debrid Link", "DebridLink", "Debrid-Link"],
    ),
    KnownService(
        id="torbox",
        name="TorBox",
        known_names=["TB", "TRB", "TorBox"],
    ),
    KnownService(
        id="offcloud",
        name="Offcloud",
        known_names=["OC", "Offcloud"],
    ),
    KnownService(
        id="putio",
        name="put.io",
        known_names=["PO", "put.io", "putio"],
    ),
    KnownService(
        id="easynews",
        name="Easynews",
        known_names=["EN", "Easynews"],
    ),
    KnownService(
        id="easydebrid",
        name="EasyDebrid",
        known_names=["ED", "EasyDebrid"],
    ),
    KnownService(
        id="pikpak",
        name="PikPak",
        known_names=["PKP", "PikPak"],
    ),
    KnownService(
        id="seedr",
        name="Seedr",
        known_names=["SR", "Seedr"],
    ),
]
