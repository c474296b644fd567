import logging
from datetime import timedelta
from typing import Any, List, Optional, Tuple
from urllib.parse import quote, urlparse

from requests import Session
from requests.exceptions import RequestException, Timeout

from streamwrap.clients.base import (
    USER_AGENT_HEADER,
    BaseClient,
    MalformedUpstream,
    TransportFailure,
    WrapperException,
)
from streamwrap.db.cached import cache as default_cache
from streamwrap.db.cached import text_hash
from streamwrap.domain.interface.cache_interface import CacheInterface
from streamwrap.domain.parsed_stream import AddonInfo, ParsedStream
from streamwrap.domain.stream import RawStream, StreamRequest
from streamwrap.services.parsers import get_stream_parser
from streamwrap.utils.log import streamlog
from streamwrap.utils.settings import (
    get_cache_ttl,
    get_default_timeout,
    is_cache_enabled,
    log_sensitive_info,
)


class StremioAddonWrapper(BaseClient):
    stream_path = "stream/{type}/{id}.json"

    def __init__(
        self,
        addon_name: str,
        addon_url: str,
        addon_id: str,
        service_id: Optional[str] = None,
        timeout: Optional[int] = None,
        cache: Optional[CacheInterface] = None,
        requesting_ip: Optional[str] = None,
        session: Optional[Session] = None,
        parser=None,
    ):
        self.addon_name = addon_name
        self.addon_id = addon_id
        self.addon_url = self.standardize_manifest_url(addon_url)
        super().__init__(self.addon_url.replace("/manifest.json", ""), session)
        self.timeout = timeout or get_default_timeout()  # ms
        self.cache = cache if cache is not None else default_cache
        self.requesting_ip = requesting_ip
        self.parser = parser or get_stream_parser(
            service_id, AddonInfo(name=addon_name, id=addon_id)
        )

    @staticmethod
    def standardize_manifest_url(url: str) -> str:
        manifest_url = url.replace("stremio://", "https://").rstrip("/")
        if manifest_url.endswith("/manifest.json"):
            return manifest_url
        return f"{manifest_url}/manifest.json"

    def get_stream_url(self, request: StreamRequest) -> str:
        path = self.stream_path.format(type=request.type, id=quote(request.id, safe=""))
        return f"{self.host}/{path}"

    def sanitize_url(self, url: str) -> str:
        parsed = urlparse(url)
        return f"{parsed.hostname}/****/{parsed.path.split('/')[-1]}"

    def get_headers(self) -> dict:
        headers = dict(USER_AGENT_HEADER)
        if self.requesting_ip:
            if log_sensitive_info():
                streamlog(
                    f"{self.addon_name}: Using IP: {self.requesting_ip}", logging.DEBUG
                )
            headers["X-Forwarded-For"] = self.requesting_ip
            headers["X-Real-IP"] = self.requesting_ip
        return headers

    def get_streams(self, request: StreamRequest) -> List[dict]:
        url = self.get_stream_url(request)
        sanitized_url = self.sanitize_url(url)
        cache_key = text_hash(url)

        cached_streams = self.cache.get(cache_key, hashed_key=True)
        if cached_streams:
            streamlog(
                f"{self.addon_name}: Returning cached streams for {sanitized_url}",
                logging.DEBUG,
            )
            return cached_streams

        streamlog(
            f"{self.addon_name}: Fetching with timeout {self.timeout}ms from {sanitized_url}"
        )
        try:
            res = self.session.get(
                url, headers=self.get_headers(), timeout=self.timeout / 1000
            )
        except Timeout:
            raise TransportFailure(
                f"{self.addon_name} failed to respond within {self.timeout}ms",
                self.addon_name,
            )
        except RequestException as e:
            raise TransportFailure(str(e), self.addon_name)

        if not res.ok:
            raise TransportFailure(
                f"{res.status_code} - {res.reason}: {res.text}", self.addon_name
            )

        streams = self.parse_response(res)
        if is_cache_enabled():
            self.cache.set(
                cache_key, streams, timedelta(seconds=get_cache_ttl()), hashed_key=True
            )
        return streams

    def parse_response(self, res: Any) -> List[dict]:
        try:
            results = res.json()
        except ValueError:
            raise MalformedUpstream("Failed to respond with streams", self.addon_name)
        if not isinstance(results, dict) or not isinstance(
            results.get("streams"), list
        ):
            raise MalformedUpstream("Failed to respond with streams", self.addon_name)
        return results["streams"]

    def get_parsed_streams(self, request: StreamRequest) -> List[ParsedStream]:
        parsed_streams = []
        for item in self.get_streams(request):
            parsed = self.parse_stream(item)
            if parsed is not None:
                parsed_streams.append(parsed)
        return parsed_streams

    def parse_stream(self, item: Any) -> Optional[ParsedStream]:
        try:
            stream = RawStream.from_dict(item)
        except ValueError as e:
            streamlog(f"{self.addon_name}: Skipping invalid stream: {e}", logging.DEBUG)
            return None
        return self.parser.parse(stream)


def get_addon_streams(
    wrapper: StremioAddonWrapper, request: StreamRequest
) -> Tuple[List[ParsedStream], List[str]]:
    """
    Fetches and parses one addon's streams. A failing addon contributes no
    streams and one error message instead of aborting the aggregation.
    """
    try:
        return wrapper.get_parsed_streams(request), []
    except WrapperException as e:
        streamlog(f"{wrapper.addon_name}: {e.message}", logging.ERROR)
        return [], [e.message]
