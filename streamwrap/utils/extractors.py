import re
from typing import List, Optional, Sequence

from streamwrap.domain.parsed_stream import ProviderInfo
from streamwrap.utils.services import SERVICE_DETAILS, KnownService


SIZE_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s?(KB|MB|GB|TB)", re.IGNORECASE)
SIZE_POWERS = {"KB": 1, "MB": 2, "GB": 3, "TB": 4}

DURATION_PATTERN = re.compile(
    r"(?P<hms_h>\d+)h[:\s]?(?P<hms_m>\d+)m[:\s]?(?P<hms_s>\d+)s"
    r"|(?P<hm_h>\d+)h[:\s]?(?P<hm_m>\d+)m(?!b)"
    r"|(?P<h>\d+)h"
    r"|(?P<m>\d+)m(?!b)"
    r"|(?P<s>\d+)s",
    re.IGNORECASE,
)

# Codepoints with the Emoji_Presentation property
EMOJI_PATTERN = (
    "[⌚⌛⏩-⏬⏰⏳◽◾☔☕"
    "♈-♓♿⚓⚡⚪⚫⚽⚾⛄⛅"
    "⛎⛔⛪⛲⛳⛵⛺⛽✅✊✋"
    "✨❌❎❓-❕❗➕-➗➰➿"
    "⬛⬜⭐⭕"
    "\U0001f004\U0001f0cf\U0001f18e\U0001f191-\U0001f19a\U0001f1e6-\U0001f1ff"
    "\U0001f201\U0001f21a\U0001f22f\U0001f232-\U0001f236\U0001f238-\U0001f23a"
    "\U0001f250\U0001f251\U0001f300-\U0001f320\U0001f32d-\U0001f335"
    "\U0001f337-\U0001f37c\U0001f37e-\U0001f393\U0001f3a0-\U0001f3ca"
    "\U0001f3cf-\U0001f3d3\U0001f3e0-\U0001f3f0\U0001f3f4\U0001f3f8-\U0001f43e"
    "\U0001f440\U0001f442-\U0001f4fc\U0001f4ff-\U0001f53d\U0001f54b-\U0001f54e"
    "\U0001f550-\U0001f567\U0001f57a\U0001f595\U0001f596\U0001f5a4"
    "\U0001f5fb-\U0001f64f\U0001f680-\U0001f6c5\U0001f6cc\U0001f6d0-\U0001f6d2"
    "\U0001f6d5-\U0001f6d7\U0001f6dc-\U0001f6df\U0001f6eb\U0001f6ec"
    "\U0001f6f4-\U0001f6fc\U0001f7e0-\U0001f7eb\U0001f7f0\U0001f90c-\U0001f93a"
    "\U0001f93c-\U0001f945\U0001f947-\U0001f9ff\U0001fa70-\U0001faff]"
)

COUNTRY_FLAG_PATTERN = re.compile(r"[\U0001F1E6-\U0001F1FF]{2}")
# two letter words that read as codes but are usually plain English or tags
AMBIGUOUS_CODES = ("AC", "DV", "IN", "NO", "ID", "MY", "AT", "BE", "HE", "HI", "US")
COUNTRY_CODE_PATTERN = re.compile(r"\b(?!" + "|".join(AMBIGUOUS_CODES) + r")[A-Z]{2}\b")
INFO_HASH_PATTERN = re.compile(
    r"(?<=[-/\[(;:&])[a-fA-F0-9]{40}(?=[-\])/:;&]|$)"
)
WEB_DL_PATTERN = re.compile(r"web-?dl", re.IGNORECASE)
INT_PATTERN = re.compile(r"^\s*([-+]?\d+)")

SEEDERS_EMOJIS = ["👥", "👤"]
INDEXER_EMOJIS = ["🌐", "⚙️", "🔗", "🔎", "☁️"]

CACHED_SYMBOLS = ["+", "⚡", "🚀", "cached"]
UNCACHED_SYMBOLS = ["⏳", "download", "UNCACHED"]


def parse_int(value) -> Optional[int]:
    """Reads the leading integer of a value, ``None`` when there is none."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    match = INT_PATTERN.match(str(value))
    return int(match.group(1)) if match else None


def extract_size_in_bytes(string: str, k: int) -> int:
    """
    Converts the first ``<number> <unit>`` size found in ``string`` to bytes.

    ``k`` is the unit base, 1000 for sources reporting decimal units and 1024
    for binary ones. Returns 0 when no size is present.
    """
    if not string:
        return 0
    match = SIZE_PATTERN.search(string)
    if not match:
        return 0

    value = float(match.group(1))
    unit = match.group(2).upper()
    return int(value * k ** SIZE_POWERS[unit])


def extract_duration_in_ms(string: str) -> int:
    if not string:
        return 0
    match = DURATION_PATTERN.search(string)
    if not match:
        return 0

    groups = match.groupdict()
    hours = groups["hms_h"] or groups["hm_h"] or groups["h"] or 0
    minutes = groups["hms_m"] or groups["hm_m"] or groups["m"] or 0
    seconds = groups["hms_s"] or groups["s"] or 0

    return (int(hours) * 3600 + int(minutes) * 60 + int(seconds)) * 1000


def extract_string_between_emojis(
    starting_emojis: Sequence[str],
    string: str,
    ending_emojis: Optional[Sequence[str]] = None,
) -> Optional[str]:
    if not string:
        return None
    start_pattern = re.compile("|".join(re.escape(e) for e in starting_emojis))
    if ending_emojis:
        end_pattern = re.compile(
            "|".join(re.escape(e) for e in ending_emojis) + r"|\n|$"
        )
    else:
        end_pattern = re.compile(EMOJI_PATTERN + r"|\n|$")

    start_match = start_pattern.search(string)
    if not start_match:
        return None

    remaining = string[start_match.end():]
    end_match = end_pattern.search(remaining)
    end_index = end_match.start() if end_match else len(remaining)
    return remaining[:end_index].strip()


def extract_string_after(
    starting_pattern: str, string: str, ending_pattern: Optional[str] = None
) -> Optional[str]:
    if not string:
        return None
    start_match = re.search(starting_pattern, string)
    if not start_match:
        return None

    remaining = string[start_match.end():]
    end_match = re.search(ending_pattern or r"$", remaining)
    end_index = end_match.start() if end_match else len(remaining)
    return remaining[:end_index].strip()


def extract_country_flags(string: str) -> List[str]:
    if not string:
        return []
    return list(dict.fromkeys(COUNTRY_FLAG_PATTERN.findall(string)))


def extract_country_codes(string: str) -> List[str]:
    if not string:
        return []
    return list(dict.fromkeys(COUNTRY_CODE_PATTERN.findall(string)))


def extract_info_hash(url: str) -> Optional[str]:
    if not url:
        return None
    match = INFO_HASH_PATTERN.search(url)
    return match.group(0) if match else None


def _service_pattern(service: KnownService):
    names = "|".join(re.escape(name) for name in service.known_names)
    return re.compile(
        r"(?:^|(?<![^ |\[(_/\-.]))(" + names + r")(?=[ ⏳⚡+/|)\]_.-]|$)",
        re.IGNORECASE,
    )


def parse_service_data(
    string: str, services: Sequence[KnownService] = SERVICE_DETAILS
) -> Optional[ProviderInfo]:
    """
    Detects which debrid service a stream name refers to and its cache state.

    Every service is tested, so when aliases overlap the last matching entry
    of ``services`` wins.
    """
    if not string:
        return None
    clean_string = WEB_DL_PATTERN.sub("", string, count=1)
    provider = None
    for service in services:
        if not _service_pattern(service).search(clean_string):
            continue

        cached = None
        if any(symbol in string for symbol in UNCACHED_SYMBOLS):
            cached = False
        elif any(symbol in string for symbol in CACHED_SYMBOLS):
            cached = True

        provider = ProviderInfo(id=service.id, cached=cached)
    return provider
