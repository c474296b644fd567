import logging

from guessit import guessit

from streamwrap.domain.parsed_stream import ParsedNameData
from streamwrap.utils.languages import LanguageSet
from streamwrap.utils.log import streamlog


QUALITY_LABELS = {
    "Ultra HD Blu-ray": "BluRay REMUX",
    "Blu-ray": "BluRay",
    "Web": "WEB-DL",
    "HDTV": "HDTV",
    "DVD": "DVDRip",
    "Camera": "CAM",
    "HD Camera": "CAM",
    "Telesync": "TS",
    "HD Telesync": "TS",
    "Screener": "SCR",
}

CODEC_LABELS = {
    "H.264": "AVC",
    "H.265": "HEVC",
    "Xvid": "XviD",
    "DivX": "DivX",
    "AV1": "AV1",
    "VP9": "VP9",
    "MPEG-2": "MPEG-2",
}

VISUAL_TAGS = {"HDR10", "HDR10+", "Dolby Vision", "HLG", "SDR"}


def _first(value):
    if isinstance(value, list):
        return value[0] if value else None
    return value


def _as_list(value):
    if value is None:
        return []
    return value if isinstance(value, list) else [value]


def _language_name(language) -> str:
    code = getattr(language, "alpha3", None)
    if code == "mul":
        return "Multi"
    if code == "und":
        return "Unknown"
    return getattr(language, "name", None) or str(language)


def parse_filename(filename: str) -> ParsedNameData:
    """
    Tokenizes a release name into ParsedNameData using guessit.

    ``languages`` is returned normalized and free of duplicates so callers can
    keep appending to it.
    """
    if not filename:
        return ParsedNameData()

    try:
        guess = guessit(filename)
    except Exception as e:
        streamlog(f"Failed to parse filename {filename}: {e}", logging.WARNING)
        return ParsedNameData()

    source = _first(guess.get("source"))
    if source and "Remux" in _as_list(guess.get("other")):
        quality = QUALITY_LABELS.get(source, source) + " REMUX"
        quality = quality.replace("REMUX REMUX", "REMUX")
    else:
        quality = QUALITY_LABELS.get(source, source) if source else "Unknown"

    codec = _first(guess.get("video_codec"))
    audio = _first(guess.get("audio_codec"))

    other = [str(tag) for tag in _as_list(guess.get("other"))]
    visual_tags = [tag for tag in other if tag in VISUAL_TAGS]

    languages = LanguageSet(
        _language_name(lang) for lang in _as_list(guess.get("language"))
    )

    return ParsedNameData(
        title=guess.get("title"),
        year=_first(guess.get("year")),
        season=_first(guess.get("season")),
        episode=_first(guess.get("episode")),
        resolution=str(guess.get("screen_size") or "Unknown"),
        quality=quality,
        codec=CODEC_LABELS.get(codec, codec) if codec else "Unknown",
        audio=str(audio) if audio else "Unknown",
        visual_tags=visual_tags,
        release_group=guess.get("release_group"),
        languages=languages.to_list(),
    )
