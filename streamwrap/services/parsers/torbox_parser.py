from typing import List, Optional, Tuple

from streamwrap.domain.parsed_stream import ParsedStream, ProviderInfo
from streamwrap.domain.stream import RawStream
from streamwrap.services.parsers.base_parser import BaseStreamParser
from streamwrap.utils.extractors import (
    INDEXER_EMOJIS,
    SEEDERS_EMOJIS,
    extract_info_hash,
    extract_size_in_bytes,
    extract_string_between_emojis,
    parse_int,
)
from streamwrap.utils.languages import LanguageSet
from streamwrap.utils.log import streamlog


STREAM_TYPES = ("torrent", "usenet", "web")
PERSONAL_MARKER = "Your Media"

FILENAME_LABELS = ("name", "filename", "title")
SIZE_LABELS = ("size",)
LANGUAGE_LABELS = ("language", "languages")
KNOWN_LABELS = FILENAME_LABELS + SIZE_LABELS + LANGUAGE_LABELS + ("quality", "type")

# line order torbox uses when labels are missing or renamed
FILENAME_POSITION = 1
SIZE_POSITION = 2
LANGUAGE_POSITION = 3

STAT_MARKERS = tuple(SEEDERS_EMOJIS + INDEXER_EMOJIS)


class TorboxDescription:
    """
    Torbox descriptions carry one ``Label: value`` pair per line, closed by
    a ``Type: <type> | <label>: <age or seeders>`` line.

    Fields are kept in line order. A lookup tries the labels first and then
    falls back to the line position torbox normally uses for that field.
    """

    def __init__(self, description: str, explicit_type: Optional[str] = None):
        self.fields: List[Tuple[str, str]] = []
        self.type = explicit_type if explicit_type in STREAM_TYPES else None
        self.age_or_seeders: Optional[str] = None

        for line in description.split("\n"):
            if line.startswith("Type"):
                self._parse_type_line(line)
                self.fields.append(("type", self.age_or_seeders or ""))
                continue
            label, sep, value = line.partition(":")
            if not sep:
                label, value = "", label
            self.fields.append((label.strip().lower(), value.strip()))

    def _parse_type_line(self, line: str):
        parts = line.split("|")
        if self.type is None:
            declared = parts[0].partition(":")[2].strip().lower()
            self.type = declared or None
        if len(parts) > 1:
            segment = parts[1]
            if ":" in segment:
                segment = segment.partition(":")[2]
            self.age_or_seeders = segment.strip() or None

    def get(self, labels, position: Optional[int] = None) -> Optional[str]:
        for label, value in self.fields:
            if label in labels:
                return value or None
        if position is None or position >= len(self.fields):
            return None

        label, value = self.fields[position]
        # a known label at this position belongs to another field
        if label in KNOWN_LABELS or value.startswith(STAT_MARKERS):
            return None
        return value or None


class TorboxStreamParser(BaseStreamParser):
    def parse_stream(self, stream: RawStream) -> ParsedStream:
        personal = False
        if PERSONAL_MARKER in (stream.name or ""):
            streamlog(f"Detected personal stream in {stream.name}")
            personal = True

        description = stream.get_description()
        fields = TorboxDescription(description, explicit_type=stream.type)

        filename = stream.behaviorHints.filename or fields.get(
            FILENAME_LABELS, FILENAME_POSITION
        )
        parsed_info = self.filename_parser(filename or description)

        languages = LanguageSet(parsed_info.languages)
        languages.add(
            stream.language or fields.get(LANGUAGE_LABELS, LANGUAGE_POSITION)
        )
        parsed_info.languages = languages.to_list()

        seeders = None
        if fields.type == "torrent":
            seeders = parse_int(stream.seeders)
            if seeders is None:
                seeders = parse_int(fields.age_or_seeders)
        age = fields.age_or_seeders if fields.type == "usenet" else None

        info_hash = stream.hash or extract_info_hash(stream.url or "")
        if age and info_hash:
            # only torrents are identified by an info hash
            info_hash = None

        indexer = extract_string_between_emojis(INDEXER_EMOJIS, description)

        return self.create_parsed_result(
            parsed_info,
            stream,
            filename=filename,
            size=self.resolve_torbox_size(stream, fields),
            provider=ProviderInfo(id="torbox", cached=stream.is_cached),
            seeders=seeders,
            usenet_age=age,
            indexer=indexer or None,
            personal=personal,
            info_hash=info_hash.lower() if info_hash else None,
        )

    def resolve_torbox_size(
        self, stream: RawStream, fields: TorboxDescription
    ) -> Optional[int]:
        size = parse_int(stream.size) or parse_int(stream.behaviorHints.videoSize)
        if not size:
            # torbox reports decimal units
            size_field = fields.get(SIZE_LABELS, SIZE_POSITION)
            size = extract_size_in_bytes(size_field or "", 1000)
        return size or None
