"""Shared request defaults and response expectations.

Both specs are built once before a run and reused, read-only, by every case.
"""
import string
from dataclasses import dataclass

import httpx

from .errors import ConfigurationError, UnexpectedContentTypeError, UnexpectedStatusError

API_BASE = "http://api.zippopotam.us"
DEFAULT_TIMEOUT = 5.0

JSON_CONTENT_TYPE = "application/json"
JSON_CONTENT_TYPES = frozenset({
    "application/json",
    "application/javascript",
    "text/javascript",
    "text/json",
})


@dataclass(frozen=True)
class RequestSpec:
    base_uri: str = API_BASE
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        try:
            url = httpx.URL(self.base_uri)
        except httpx.InvalidURL as e:
            raise ConfigurationError(f"Invalid base URI {self.base_uri!r}: {e}") from e
        if url.scheme not in ("http", "https") or not url.host:
            raise ConfigurationError(f"Base URI must be an absolute http(s) URL, got {self.base_uri!r}")
        if self.timeout <= 0:
            raise ConfigurationError(f"Timeout must be positive, got {self.timeout}")

    def url_for(self, template: str, **path_params: str) -> str:
        """Substitute ``{name}`` placeholders in ``template`` and join it to the base URI.

        Values are inserted verbatim. Every placeholder needs a value and every
        value needs a placeholder.
        """
        names = {field for _, field, _, _ in string.Formatter().parse(template) if field is not None}
        missing = names - path_params.keys()
        if missing:
            raise ConfigurationError(f"Missing path parameters for {template!r}: {sorted(missing)}")
        unused = path_params.keys() - names
        if unused:
            raise ConfigurationError(f"Unused path parameters for {template!r}: {sorted(unused)}")

        path = template.format(**path_params)
        return f"{self.base_uri.rstrip('/')}/{path.lstrip('/')}"


def media_type(content_type: str | None) -> str | None:
    if not content_type:
        return None
    return content_type.split(";", 1)[0].strip().lower() or None


def _request_url(response: httpx.Response) -> str:
    try:
        return str(response.request.url)
    except RuntimeError:
        return "<unknown>"


@dataclass(frozen=True)
class ResponseSpec:
    status_code: int = 200
    content_type: str = JSON_CONTENT_TYPE

    def validate(self, response: httpx.Response) -> None:
        """Raise if the response misses the expected status or content type.

        Status is checked before content type, so an error page served as
        HTML is reported as a status failure.
        """
        url = _request_url(response)
        if response.status_code != self.status_code:
            raise UnexpectedStatusError(url, self.status_code, response.status_code)

        actual = response.headers.get("content-type")
        if not self._content_type_matches(media_type(actual)):
            raise UnexpectedContentTypeError(url, self.content_type, actual)

    def _content_type_matches(self, actual: str | None) -> bool:
        if actual is None:
            return False
        expected = self.content_type.lower()
        if expected in JSON_CONTENT_TYPES:
            return actual in JSON_CONTENT_TYPES
        return actual == expected
