from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


@dataclass
class StreamBehaviorHints:
    countryWhitelist: Optional[List[str]] = None
    notWebReady: Optional[bool] = None
    bingeGroup: Optional[str] = None
    proxyHeaders: Optional[Dict[str, Any]] = None
    videoHash: Optional[str] = None
    videoSize: Optional[Union[int, str]] = None
    filename: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StreamBehaviorHints":
        return cls(
            countryWhitelist=data.get("countryWhitelist"),
            notWebReady=data.get("notWebReady"),
            bingeGroup=data.get("bingeGroup"),
            proxyHeaders=data.get("proxyHeaders"),
            videoHash=data.get("videoHash"),
            videoSize=data.get("videoSize"),
            filename=data.get("filename"),
        )


@dataclass
class RawStream:
    # Identification
    url: Optional[str] = None
    ytId: Optional[str] = None
    externalUrl: Optional[str] = None
    infoHash: Optional[str] = None
    fileIdx: Optional[int] = None

    # Display
    name: Optional[str] = None
    title: Optional[str] = None  # deprecated
    description: Optional[str] = None
    subtitles: Optional[List[Dict[str, Any]]] = None
    sources: Optional[List[str]] = None
    behaviorHints: StreamBehaviorHints = field(default_factory=StreamBehaviorHints)

    # Fields some addons add on top of the stremio protocol
    filename: Optional[str] = None
    torrentTitle: Optional[str] = None
    size: Optional[Union[int, str]] = None
    sizebytes: Optional[Union[int, str]] = None
    sizeBytes: Optional[Union[int, str]] = None
    torrentSize: Optional[Union[int, str]] = None
    duration: Optional[int] = None
    personal: Optional[bool] = None

    # Torbox
    hash: Optional[str] = None
    magnet: Optional[str] = None
    nzb: Optional[str] = None
    is_cached: Optional[bool] = None
    seeders: Optional[int] = None
    peers: Optional[int] = None
    quality: Optional[str] = None
    resolution: Optional[str] = None
    language: Optional[str] = None
    type: Optional[str] = None
    adult: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RawStream":
        if not isinstance(data, dict):
            raise ValueError("Stream must be a dictionary.")

        hints = data.get("behaviorHints")
        stream = cls(
            url=data.get("url"),
            ytId=data.get("ytId"),
            externalUrl=data.get("externalUrl"),
            infoHash=data.get("infoHash"),
            fileIdx=data.get("fileIdx"),
            name=data.get("name"),
            title=data.get("title"),
            description=data.get("description"),
            subtitles=data.get("subtitles"),
            sources=data.get("sources"),
            behaviorHints=(
                StreamBehaviorHints.from_dict(hints)
                if isinstance(hints, dict)
                else StreamBehaviorHints()
            ),
            filename=data.get("filename"),
            torrentTitle=data.get("torrentTitle"),
            size=data.get("size"),
            sizebytes=data.get("sizebytes"),
            sizeBytes=data.get("sizeBytes"),
            torrentSize=data.get("torrentSize"),
            duration=data.get("duration"),
            personal=data.get("personal"),
            hash=data.get("hash"),
            magnet=data.get("magnet"),
            nzb=data.get("nzb"),
            is_cached=data.get("is_cached"),
            seeders=data.get("seeders"),
            peers=data.get("peers"),
            quality=data.get("quality"),
            resolution=data.get("resolution"),
            language=data.get("language"),
            type=data.get("type"),
            adult=data.get("adult"),
        )

        # Validation for at least one stream identifier
        if not stream.has_identity():
            raise ValueError(
                "At least one of 'url', 'ytId', 'infoHash', 'externalUrl', "
                "'hash', 'magnet' or 'nzb' must be specified."
            )
        return stream

    def has_identity(self) -> bool:
        return bool(
            self.url
            or self.ytId
            or self.infoHash
            or self.externalUrl
            or self.hash
            or self.magnet
            or self.nzb
        )

    def get_description(self) -> str:
        return self.description or self.title or ""

    def __repr__(self):
        return f"RawStream(name={self.name}, url={self.url}, infoHash={self.infoHash}, externalUrl={self.externalUrl})"


@dataclass
class StreamRequest:
    type: str  # "movie" or "series"
    id: str  # imdb id, with ":season:episode" for series
