from __future__ import annotations

from typing import Any, List, Optional, Union

import logging
from urllib.parse import quote

from emojicatalog import constants

from requests import Response, Session

AnyEndpoint = Union[List[Any], str]

log = logging.getLogger(__name__)


class BaseAPI:
    def __init__(self, base_url: Optional[str], session: Optional[Session] = None) -> None:
        self.base_url = base_url

        self.session = session if session is not None else Session()
        self.timeout = 20

        # e.g. emojicatalog/1.0.0
        self.session.headers["User-Agent"] = f"emojicatalog/{constants.VERSION}"

    @staticmethod
    def quote_path_param(param: str) -> str:
        return quote(param, safe="")

    @staticmethod
    def join_base_and_list(base: str, path_segments: List[Any]) -> str:
        url = base
        for path_segment in path_segments:
            # str(path_segment) so version numbers like 15.1 can be used as path segments too
            url = BaseAPI.join_base_and_string(url, BaseAPI.quote_path_param(str(path_segment)))

        return url

    @staticmethod
    def join_base_and_string(base: str, endpoint: str) -> str:
        base = base.rstrip("/")
        endpoint = endpoint.lstrip("/")
        return base + "/" + endpoint

    @staticmethod
    def join_base_and_endpoint(base: Optional[str], endpoint: AnyEndpoint) -> str:
        # For absolute endpoint URLs
        if base is None:
            return str(endpoint)

        if isinstance(endpoint, list):
            return BaseAPI.join_base_and_list(base, endpoint)
        else:
            return BaseAPI.join_base_and_string(base, endpoint)

    def request(self, method: str, endpoint: AnyEndpoint, params: Any = None, **request_options: Any) -> Response:
        full_url = self.join_base_and_endpoint(self.base_url, endpoint)
        log.debug("%s %s", method, full_url)
        response = self.session.request(method, full_url, params=params, timeout=self.timeout, **request_options)
        response.raise_for_status()
        return response

    def get_text(self, endpoint: AnyEndpoint, params: Any = None, **request_options: Any) -> str:
        """Returns the response body decoded as UTF-8, regardless of what the server claims the charset is"""
        return self.request("GET", endpoint, params, **request_options).content.decode("utf-8")
