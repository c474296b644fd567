from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ParsedNameData:
    title: Optional[str] = None
    year: Optional[int] = None
    season: Optional[int] = None
    episode: Optional[int] = None
    resolution: str = "Unknown"
    quality: str = "Unknown"
    codec: str = "Unknown"
    audio: str = "Unknown"
    visual_tags: List[str] = field(default_factory=list)
    release_group: Optional[str] = None
    languages: List[str] = field(default_factory=list)


@dataclass
class TorrentInfo:
    info_hash: Optional[str] = None
    file_idx: Optional[int] = None
    sources: Optional[List[str]] = None
    seeders: Optional[int] = None


@dataclass
class UsenetInfo:
    age: Optional[str] = None


@dataclass
class ProviderInfo:
    id: str
    cached: Optional[bool] = None


@dataclass
class AddonInfo:
    name: str
    id: str


@dataclass
class StreamDetails:
    subtitles: Optional[List[Dict[str, Any]]] = None
    behavior_hints: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ParsedStream:
    addon: AddonInfo
    parsed_info: ParsedNameData = field(default_factory=ParsedNameData)
    filename: Optional[str] = None
    size: Optional[int] = None
    url: Optional[str] = None
    external_url: Optional[str] = None
    info_hash: Optional[str] = None
    torrent: TorrentInfo = field(default_factory=TorrentInfo)
    usenet: UsenetInfo = field(default_factory=UsenetInfo)
    provider: Optional[ProviderInfo] = None
    indexers: Optional[str] = None
    duration: Optional[int] = None
    personal: Optional[bool] = None
    stream: StreamDetails = field(default_factory=StreamDetails)

    @property
    def languages(self) -> List[str]:
        return self.parsed_info.languages

    def to_dict(self) -> Dict[str, Any]:
        """
        Renders the canonical record in its camelCase wire shape.

        ``_infoHash`` is left out entirely when no hash was resolved, the
        ``torrent`` and ``usenet`` sub records are always present.
        """
        info = self.parsed_info
        data: Dict[str, Any] = {
            "title": info.title,
            "year": info.year,
            "season": info.season,
            "episode": info.episode,
            "resolution": info.resolution,
            "quality": info.quality,
            "encode": info.codec,
            "audioTags": info.audio,
            "visualTags": list(info.visual_tags),
            "releaseGroup": info.release_group,
            "languages": list(info.languages),
            "addon": {"name": self.addon.name, "id": self.addon.id},
            "filename": self.filename,
            "size": self.size,
            "url": self.url,
            "externalUrl": self.external_url,
            "torrent": {
                "infoHash": self.torrent.info_hash,
                "fileIdx": self.torrent.file_idx,
                "sources": self.torrent.sources,
                "seeders": self.torrent.seeders,
            },
            "provider": (
                {"id": self.provider.id, "cached": self.provider.cached}
                if self.provider
                else None
            ),
            "usenet": {"age": self.usenet.age},
            "indexers": self.indexers,
            "duration": self.duration,
            "personal": self.personal,
            "stream": {
                "subtitles": self.stream.subtitles,
                "behaviorHints": dict(self.stream.behavior_hints),
            },
        }
        if self.info_hash is not None:
            data["_infoHash"] = self.info_hash
        return data
