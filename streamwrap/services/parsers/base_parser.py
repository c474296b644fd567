import logging
import re
from typing import Callable, Optional

from streamwrap.domain.interface.parser_interface import StreamParserInterface
from streamwrap.domain.parsed_stream import (
    AddonInfo,
    ParsedNameData,
    ParsedStream,
    ProviderInfo,
    StreamDetails,
    TorrentInfo,
    UsenetInfo,
)
from streamwrap.domain.stream import RawStream
from streamwrap.utils.extractors import (
    INDEXER_EMOJIS,
    SEEDERS_EMOJIS,
    extract_country_codes,
    extract_country_flags,
    extract_duration_in_ms,
    extract_info_hash,
    extract_size_in_bytes,
    extract_string_between_emojis,
    parse_int,
    parse_service_data,
)
from streamwrap.utils.filename_parser import parse_filename
from streamwrap.utils.languages import LanguageSet, code_to_language, emoji_to_language
from streamwrap.utils.log import streamlog


SEASON_EPISODE_PATTERN = re.compile(
    r"(?<![^ \[_(\-.])"
    r"(?:s(?:eason)?[ .\-_]?(\d+)[ .\-_]?(?:e(?:pisode)?[ .\-_]?(\d+))?|(\d+)[xX](\d+))"
    r"(?![^ \])_.-])",
    re.IGNORECASE,
)
YEAR_PATTERN = re.compile(r"(?<![^ \[_(\-.])(\d{4})(?=[ \])_.-]|$)", re.IGNORECASE)


def is_descriptive(line: Optional[str]) -> bool:
    """True when a line carries a season/episode marker or a release year."""
    if not line:
        return False
    return bool(SEASON_EPISODE_PATTERN.search(line) or YEAR_PATTERN.search(line))


class BaseStreamParser(StreamParserInterface):
    """
    Default normalization for addons whose streams loosely follow the
    stremio shape: metadata comes from the filename hint when there is one
    and from the free text description otherwise.
    """

    def __init__(
        self,
        addon: AddonInfo,
        filename_parser: Callable[[str], ParsedNameData] = parse_filename,
    ):
        self.addon = addon
        self.filename_parser = filename_parser

    def parse(self, stream: RawStream) -> Optional[ParsedStream]:
        try:
            return self.parse_stream(stream)
        except Exception as e:
            streamlog(
                f"{self.addon.name}: failed to parse stream {stream!r}: {e}",
                logging.ERROR,
            )
            return None

    def parse_stream(self, stream: RawStream) -> ParsedStream:
        description = stream.get_description()
        filename = self.resolve_filename(stream, description)

        string_to_parse = filename or description or ""
        if description and not is_descriptive(filename):
            # a bare filename carries less than a well formatted description
            string_to_parse = description.replace("\n", " ").strip()
        parsed_info = self.filename_parser(string_to_parse)

        languages = LanguageSet(parsed_info.languages)
        for code_or_flag in extract_country_flags(description) + extract_country_codes(
            description
        ):
            languages.add(emoji_to_language(code_or_flag) or code_to_language(code_or_flag))

        seeders = extract_string_between_emojis(SEEDERS_EMOJIS, description)
        indexer = extract_string_between_emojis(INDEXER_EMOJIS, description)
        duration = parse_int(stream.duration) or extract_duration_in_ms(description)

        provider = parse_service_data(stream.name or "")
        if stream.infoHash and provider:
            # p2p results never come from a debrid service
            provider = None

        info_hash = stream.infoHash or extract_info_hash(stream.url or "")

        parsed_info.languages = languages.to_list()
        return self.create_parsed_result(
            parsed_info,
            stream,
            filename=filename,
            size=self.resolve_size(stream, description),
            provider=provider,
            seeders=parse_int(seeders),
            indexer=indexer or None,
            duration=duration or None,
            personal=stream.personal,
            info_hash=info_hash.lower() if info_hash else None,
        )

    def resolve_filename(self, stream: RawStream, description: str) -> Optional[str]:
        filename = (
            stream.behaviorHints.filename or stream.torrentTitle or stream.filename
        )
        if filename or not description:
            return filename

        lines = description.split("\n")
        return next((line for line in lines if is_descriptive(line)), lines[0])

    def resolve_size(self, stream: RawStream, description: str) -> Optional[int]:
        size = (
            stream.behaviorHints.videoSize
            or stream.size
            or stream.sizebytes
            or stream.sizeBytes
            or stream.torrentSize
            or extract_size_in_bytes(description, 1024)
            or extract_size_in_bytes(stream.name or "", 1024)
        )
        return parse_int(size) or None

    def create_parsed_result(
        self,
        parsed_info: ParsedNameData,
        stream: RawStream,
        filename: Optional[str] = None,
        size: Optional[int] = None,
        provider: Optional[ProviderInfo] = None,
        seeders: Optional[int] = None,
        usenet_age: Optional[str] = None,
        indexer: Optional[str] = None,
        duration: Optional[int] = None,
        personal: Optional[bool] = None,
        info_hash: Optional[str] = None,
    ) -> ParsedStream:
        hints = stream.behaviorHints
        proxy_headers = hints.proxyHeaders or {}
        behavior_hints = {
            "countryWhitelist": hints.countryWhitelist,
            "notWebReady": hints.notWebReady,
            "videoHash": hints.videoHash,
        }
        if proxy_headers.get("request") or proxy_headers.get("response"):
            behavior_hints["proxyHeaders"] = {
                "request": proxy_headers.get("request"),
                "response": proxy_headers.get("response"),
            }

        return ParsedStream(
            addon=AddonInfo(name=self.addon.name, id=self.addon.id),
            parsed_info=parsed_info,
            filename=filename,
            size=size,
            url=stream.url,
            external_url=stream.externalUrl,
            info_hash=info_hash,
            torrent=TorrentInfo(
                info_hash=stream.infoHash,
                file_idx=stream.fileIdx,
                sources=stream.sources,
                seeders=seeders,
            ),
            usenet=UsenetInfo(age=usenet_age),
            provider=provider,
            indexers=indexer,
            duration=duration,
            personal=personal,
            stream=StreamDetails(
                subtitles=stream.subtitles,
                behavior_hints=behavior_hints,
            ),
        )
