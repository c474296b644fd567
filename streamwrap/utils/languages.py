import unicodedata
from typing import Iterable, List, Optional


COUNTRY_LANGUAGES = {
    "GB": "English",
    "US": "English",
    "AU": "English",
    "CA": "English",
    "NZ": "English",
    "IE": "English",
    "UK": "English",
    "FR": "French",
    "BE": "French",
    "ES": "Spanish",
    "MX": "Latino",
    "AR": "Latino",
    "CO": "Latino",
    "CL": "Latino",
    "DE": "German",
    "AT": "German",
    "CH": "German",
    "IT": "Italian",
    "PT": "Portuguese",
    "BR": "Portuguese",
    "RU": "Russian",
    "UA": "Ukrainian",
    "JP": "Japanese",
    "KR": "Korean",
    "CN": "Chinese",
    "TW": "Chinese",
    "HK": "Chinese",
    "IN": "Hindi",
    "NL": "Dutch",
    "SE": "Swedish",
    "NO": "Norwegian",
    "DK": "Danish",
    "FI": "Finnish",
    "PL": "Polish",
    "CZ": "Czech",
    "SK": "Slovak",
    "HU": "Hungarian",
    "RO": "Romanian",
    "BG": "Bulgarian",
    "HR": "Croatian",
    "RS": "Serbian",
    "SI": "Slovenian",
    "GR": "Greek",
    "TR": "Turkish",
    "IL": "Hebrew",
    "SA": "Arabic",
    "AE": "Arabic",
    "EG": "Arabic",
    "IR": "Persian",
    "TH": "Thai",
    "VN": "Vietnamese",
    "ID": "Indonesian",
    "MY": "Malay",
    "PH": "Filipino",
    "LT": "Lithuanian",
    "LV": "Latvian",
    "EE": "Estonian",
}

# Two letter tokens seen in descriptions are either country codes or
# ISO 639-1 codes written in upper case.
CODE_LANGUAGES = {
    **COUNTRY_LANGUAGES,
    "EN": "English",
    "JA": "Japanese",
    "KO": "Korean",
    "ZH": "Chinese",
    "SV": "Swedish",
    "DA": "Danish",
    "CS": "Czech",
    "EL": "Greek",
    "HE": "Hebrew",
    "FA": "Persian",
    "HI": "Hindi",
    "TA": "Tamil",
    "TE": "Telugu",
}

MULTI_AUDIO = "multi audio"
UNKNOWN_LANGUAGE = "Unknown"


def unicode_flag_to_country_code(unicode_flag):
    if len(unicode_flag) != 2:
        return None

    try:
        first_letter = unicodedata.name(unicode_flag[0])
        second_letter = unicodedata.name(unicode_flag[1])
    except ValueError:
        return None

    prefix = "REGIONAL INDICATOR SYMBOL LETTER "
    if not (first_letter.startswith(prefix) and second_letter.startswith(prefix)):
        return None

    return first_letter.replace(prefix, "") + second_letter.replace(prefix, "")


def emoji_to_language(flag: str) -> Optional[str]:
    country_code = unicode_flag_to_country_code(flag)
    if not country_code:
        return None
    return COUNTRY_LANGUAGES.get(country_code)


def code_to_language(code: str) -> Optional[str]:
    return CODE_LANGUAGES.get(code.upper()) if code else None


def normalize_language(lang: str) -> str:
    """
    Canonicalizes a language label.

    "multi audio" in any casing becomes "Multi", everything else is
    title-cased word by word and re-joined with single spaces.
    """
    if lang.strip().lower() == MULTI_AUDIO:
        return "Multi"
    return " ".join(
        word[:1].upper() + word[1:].lower() for word in lang.split()
    )


class LanguageSet:
    """Ordered, duplicate free language list owned by a single parse."""

    def __init__(self, languages: Optional[Iterable[str]] = None):
        self._languages: List[str] = []
        for lang in languages or []:
            self.add(lang)

    def add(self, lang: Optional[str]) -> bool:
        if not lang:
            return False
        normalized = normalize_language(lang)
        if not normalized or normalized == UNKNOWN_LANGUAGE:
            return False
        if normalized in self._languages:
            return False
        self._languages.append(normalized)
        return True

    def extend(self, languages: Iterable[Optional[str]]) -> None:
        for lang in languages:
            self.add(lang)

    def to_list(self) -> List[str]:
        return list(self._languages)

    def __contains__(self, lang):
        return lang in self._languages

    def __len__(self):
        return len(self._languages)

    def __iter__(self):
        return iter(self._languages)
