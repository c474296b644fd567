import abc
from typing import Optional

from streamwrap.domain.parsed_stream import ParsedStream
from streamwrap.domain.stream import RawStream


class StreamParserInterface(abc.ABC):
    @abc.abstractmethod
    def parse(self, stream: RawStream) -> Optional[ParsedStream]:
        """Normalize a raw addon stream, None when nothing meaningful is left"""
        pass
