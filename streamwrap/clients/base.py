from abc import ABC, abstractmethod
from typing import Any, List, Optional

from requests import Session

from streamwrap.domain.parsed_stream import ParsedStream


USER_AGENT_HEADER = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124.0 Safari/537.36"
}


class WrapperException(Exception):
    def __init__(self, message, addon_name=""):
        self.message = message
        self.addon_name = addon_name
        super().__init__(message)


class TransportFailure(WrapperException):
    """Timeout, connection error or non 2xx response"""


class MalformedUpstream(WrapperException):
    """The addon answered but without a usable streams payload"""


class BaseClient(ABC):
    def __init__(self, host: Optional[str], session: Optional[Session] = None) -> None:
        self.host = host.rstrip("/") if host else ""
        self.session = session or Session()

    @abstractmethod
    def get_parsed_streams(self, request: Any) -> List[ParsedStream]:
        pass

    @abstractmethod
    def parse_response(self, res: Any) -> List[dict]:
        pass
