"""Rate-limit headers returned with API responses."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta
from fractions import Fraction
from typing import Any, Mapping

_UNIT_NANOSECONDS = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,
    "μs": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}
_COMPONENT = re.compile(r"([0-9]+\.?[0-9]*|\.[0-9]+)(ns|us|µs|μs|ms|s|m|h)")
_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_duration(text: str) -> timedelta:
    """Parse a duration such as ``"1h30m"``, ``"1.5s"`` or ``"-20ms"``."""
    rest = text
    sign = 1
    if rest.startswith(("+", "-")):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    if rest == "0":
        return timedelta(0)
    if not rest:
        raise ValueError(f"invalid duration {text!r}")
    total = Fraction(0)
    position = 0
    while position < len(rest):
        match = _COMPONENT.match(rest, position)
        if match is None:
            raise ValueError(f"invalid duration {text!r}")
        whole, _, fraction = match.group(1).partition(".")
        value = Fraction(int(whole or "0"))
        if fraction:
            value += Fraction(int(fraction), 10 ** len(fraction))
        total += value * _UNIT_NANOSECONDS[match.group(2)]
        position = match.end()
    return timedelta(microseconds=round(sign * total / 1000))


class ResetTime(str):
    """A reset interval as sent by the server, e.g. ``"6m0s"``."""

    def time(self, now: datetime | None = None) -> datetime:
        """Return the moment of reset; an unparseable value means ``now``."""
        if now is None:
            now = datetime.now()
        try:
            delta = parse_duration(self)
        except ValueError:
            delta = timedelta(0)
        return now + delta


def _header(headers: Mapping[str, Any], name: str) -> str:
    for key, value in headers.items():
        if key.lower() == name:
            if isinstance(value, (list, tuple)):
                return str(value[0]) if value else ""
            return str(value)
    return ""


def _atoi(text: str) -> int:
    return int(text) if _INTEGER.fullmatch(text) else 0


@dataclass(frozen=True)
class RateLimitHeaders:
    limit_requests: int = 0
    limit_tokens: int = 0
    remaining_requests: int = 0
    remaining_tokens: int = 0
    reset_requests: ResetTime = ResetTime("")
    reset_tokens: ResetTime = ResetTime("")

    @classmethod
    def from_headers(cls, headers: Mapping[str, Any]) -> RateLimitHeaders:
        """Read the ``x-ratelimit-*`` headers; missing or bad numbers become 0."""
        return cls(
            limit_requests=_atoi(_header(headers, "x-ratelimit-limit-requests")),
            limit_tokens=_atoi(_header(headers, "x-ratelimit-limit-tokens")),
            remaining_requests=_atoi(_header(headers, "x-ratelimit-remaining-requests")),
            remaining_tokens=_atoi(_header(headers, "x-ratelimit-remaining-tokens")),
            reset_requests=ResetTime(_header(headers, "x-ratelimit-reset-requests")),
            reset_tokens=ResetTime(_header(headers, "x-ratelimit-reset-tokens")),
        )