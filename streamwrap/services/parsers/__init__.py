from typing import Callable, Dict, Optional, Type

from streamwrap.domain.parsed_stream import AddonInfo, ParsedNameData
from streamwrap.utils.filename_parser import parse_filename
from .base_parser import BaseStreamParser
from .torbox_parser import TorboxStreamParser

PARSERS: Dict[str, Type[BaseStreamParser]] = {
    "torbox": TorboxStreamParser,
}


def get_stream_parser(
    service_id: Optional[str],
    addon: AddonInfo,
    filename_parser: Callable[[str], ParsedNameData] = parse_filename,
) -> BaseStreamParser:
    parser_class = PARSERS.get(service_id or "", BaseStreamParser)
    return parser_class(addon, filename_parser=filename_parser)


__all__ = [
    "BaseStreamParser",
    "TorboxStreamParser",
    "get_stream_parser",
]
