"""Turn a verb and a logical Vault path into a versioned Request."""

from __future__ import annotations

import json
from typing import Any, Iterable, Mapping, Union
from urllib.parse import ParseResult, SplitResult, urlencode, urlsplit, urlunsplit

from requests.structures import CaseInsensitiveDict

from .config import ClientConfig
from .errors import InvalidInput
from .models import Request, Verb

API_VERSION = "/v1"
TOKEN_HEADER = "X-Vault-Token"

OPTION_KEYS = frozenset({"body", "json", "query", "headers"})

PathInput = Union[str, SplitResult, ParseResult, None]


def is_absolute(path: str) -> bool:
    """Return True when ``path`` already carries a scheme and a host."""
    parts = urlsplit(path)
    return bool(parts.scheme and parts.netloc)


def validate_path(path: Any) -> None:
    if isinstance(path, (SplitResult, ParseResult)):
        if not (path.scheme and path.netloc):
            raise InvalidInput(
                f'URI path must be absolute, got "{path.geturl()}"'
            )
        return
    if path is None or isinstance(path, str):
        return
    raise InvalidInput(
        "path must be None, a string or an absolute URI, "
        f"got {type(path).__name__}"
    )


def validate_options(options: Any) -> Mapping[str, Any]:
    if options is None:
        return {}
    if not isinstance(options, Mapping):
        raise InvalidInput(
            f"options must be a mapping, got {type(options).__name__}"
        )
    unknown = set(options) - OPTION_KEYS
    if unknown:
        raise InvalidInput(
            "Unknown request option(s): "
            + ", ".join(sorted(str(key) for key in unknown))
        )
    if "body" in options and "json" in options:
        raise InvalidInput('options "body" and "json" are mutually exclusive')
    body = options.get("body")
    if body is not None and not isinstance(body, (bytes, str)):
        raise InvalidInput(
            'option "body" must be pre-serialized bytes or str; '
            'use "json" for structured payloads'
        )
    for key in ("query", "headers"):
        value = options.get(key)
        if value is not None and not isinstance(value, Mapping):
            raise InvalidInput(f'option "{key}" must be a mapping')
    if "json" in options:
        normalized = {k: v for k, v in options.items() if k != "json"}
        normalized["body"] = encode_json(options["json"])
        return normalized
    return options


def encode_json(value: Any) -> bytes:
    try:
        return json.dumps(value).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise InvalidInput(
            f'option "json" is not JSON-serializable: {exc}'
        ) from None


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _query_pairs(query: Mapping[str, Any]) -> list[tuple[str, str]]:
    pairs: list[tuple[str, str]] = []
    for key, value in query.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple, set, frozenset)):
            items: Iterable[Any] = value
        else:
            items = (value,)
        pairs.extend((key, _query_value(item)) for item in items)
    return pairs


def merge_query(url: str, query: Mapping[str, Any] | None) -> str:
    """Append ``query`` to ``url`` keeping any parameters already present."""
    if not query:
        return url
    extra = urlencode(_query_pairs(query))
    if not extra:
        return url
    parts = urlsplit(url)
    merged = f"{parts.query}&{extra}" if parts.query else extra
    return urlunsplit(parts._replace(query=merged))


class RequestBuilder:
    """Compose versioned Vault requests from a ClientConfig.

    Pure: the builder never performs I/O and never mutates its inputs.
    """

    def __init__(self, config: ClientConfig) -> None:
        self._config = config

    def url_for(self, path: PathInput) -> str:
        """Resolve ``path`` against the base URI and API version.

        Absolute URIs (follow-up links returned by Vault) are used verbatim.
        ``None`` resolves to the bare versioned root.
        """
        validate_path(path)
        if isinstance(path, (SplitResult, ParseResult)):
            return path.geturl()
        root = self._config.base_uri + API_VERSION
        if path is None or path == "":
            return root
        if is_absolute(path):
            return path
        if not path.startswith("/"):
            path = "/" + path
        return root + path

    def headers_for(
        self, overrides: Mapping[str, str] | None
    ) -> CaseInsensitiveDict:
        headers: CaseInsensitiveDict = CaseInsensitiveDict()
        if self._config.user_agent:
            headers["User-Agent"] = self._config.user_agent
        headers.update(self._config.default_headers)
        if self._config.token:
            headers[TOKEN_HEADER] = self._config.token
        if overrides:
            headers.update(overrides)
        return headers

    @staticmethod
    def _body_for(options: Mapping[str, Any]) -> bytes | None:
        body = options.get("body")
        if isinstance(body, str):
            return body.encode("utf-8")
        return body

    def build(
        self,
        verb: str | Verb,
        path: PathInput,
        options: Mapping[str, Any] | None = None,
    ) -> Request:
        resolved = Verb.parse(verb)
        opts = validate_options(options)
        url = self.url_for(path)
        method = resolved.value
        query = dict(opts.get("query") or {})
        if resolved is Verb.LIST and self._config.list_via_get:
            method = Verb.GET.value
            query.setdefault("list", True)
        return Request(
            method=method,
            url=merge_query(url, query),
            headers=self.headers_for(opts.get("headers")),
            body=self._body_for(opts),
        )
