"""Description of a single API call: method, path, JSON body and query parameters."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping
from urllib.parse import urlencode

_EMPTY_CANDIDATES = (str, bytes, list, tuple, dict, int, float)


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, _EMPTY_CANDIDATES) and not value)


def omit_empty(mapping: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of ``mapping`` without entries whose value is None or empty."""
    return {key: value for key, value in mapping.items() if not _is_empty(value)}


@dataclass(frozen=True)
class ApiRequest:
    """An HTTP call against the API, relative to the service's base URL."""

    method: str
    path: str
    body: Any = None
    model: str = ""
    content_type: str | None = None
    beta_assistants: bool = False

    def json_body(self) -> bytes | None:
        """Serialise the body as compact UTF-8 JSON, or return None without a body."""
        if self.body is None:
            return None
        return json.dumps(self.body, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


@dataclass(frozen=True)
class Pagination:
    """Cursor parameters for list endpoints."""

    limit: int | None = None
    order: str | None = None
    after: str | None = None
    before: str | None = None

    def query_string(self) -> str:
        """Encode the set parameters, sorted by key, as ``?k=v&...`` or ``""``."""
        params = {
            "limit": None if self.limit is None else str(self.limit),
            "order": self.order,
            "after": self.after,
            "before": self.before,
        }
        present = sorted((key, value) for key, value in params.items() if value is not None)
        if not present:
            return ""
        return "?" + urlencode(present)