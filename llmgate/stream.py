"""Reader for server-sent event streams of completion chunks."""

from __future__ import annotations

import json
from typing import Any, Callable, Generic, Iterable, Iterator, Mapping, TypeVar

T = TypeVar("T")

DEFAULT_EMPTY_MESSAGES_LIMIT = 300

_DATA_PREFIX = b"data:"
_ERROR_PREFIXES = (b'data: {"error":', b'data:{"error":')
_DONE = b"[DONE]"


class StreamError(Exception):
    """Base class for failures while reading a stream."""


class TooManyEmptyStreamMessagesError(StreamError):
    def __init__(self) -> None:
        super().__init__("stream has sent too many empty messages")


class StreamAPIError(StreamError):
    """An error object sent by the server inside the stream."""

    def __init__(self, error: Mapping[str, Any]) -> None:
        self.payload = dict(error)
        self.message = str(error.get("message") or "")
        self.type = error.get("type")
        self.param = error.get("param")
        self.code = error.get("code")
        super().__init__(f"error, {self.message}")


class StreamReader(Generic[T]):
    """Yields decoded ``data:`` events until ``[DONE]`` or the end of input.

    ``source`` is any iterable of byte lines, such as a binary file or an
    HTTP response body. Lines without a data prefix count as empty messages
    and are collected in case they form an error document.
    """

    def __init__(
        self,
        source: Iterable[bytes],
        empty_messages_limit: int = DEFAULT_EMPTY_MESSAGES_LIMIT,
        decode: Callable[[bytes], T] = json.loads,
    ) -> None:
        self._source = source
        self._lines = iter(source)
        self._limit = empty_messages_limit
        self._decode = decode
        self._finished = False
        self._errors = bytearray()

    def _read_line(self) -> bytes | None:
        line = next(self._lines, None)
        if isinstance(line, str):
            line = line.encode("utf-8")
        if line is None or not line.endswith(b"\n"):
            return None
        return line

    def _accumulated_error(self) -> StreamAPIError | None:
        if not self._errors:
            return None
        try:
            document = json.loads(bytes(self._errors))
        except ValueError:
            return None
        error = document.get("error") if isinstance(document, dict) else None
        if not isinstance(error, dict):
            return None
        return StreamAPIError(error)

    def recv_raw(self) -> bytes:
        """Return the next event payload; raise EOFError at the end of the stream."""
        if self._finished:
            raise EOFError("stream finished")
        empty_messages = 0
        error_seen = False
        while True:
            line = self._read_line()
            if line is None or error_seen:
                api_error = self._accumulated_error()
                if api_error is not None:
                    raise api_error
                if line is None:
                    raise EOFError("end of stream")
                raise StreamError("stream sent an unreadable error payload")

            stripped = line.strip()
            if stripped.startswith(_ERROR_PREFIXES):
                error_seen = True

            if error_seen or not stripped.startswith(_DATA_PREFIX):
                if error_seen:
                    stripped = stripped[len(_DATA_PREFIX):].strip()
                self._errors += stripped
                empty_messages += 1
                if empty_messages > self._limit:
                    raise TooManyEmptyStreamMessagesError()
                continue

            payload = stripped[len(_DATA_PREFIX):].strip()
            if payload == _DONE:
                self._finished = True
                raise EOFError("end of stream")
            return payload

    def recv(self) -> T:
        """Decode and return the next event; raise EOFError at the end."""
        return self._decode(self.recv_raw())

    def __iter__(self) -> Iterator[T]:
        while True:
            try:
                yield self.recv()
            except EOFError:
                return

    def close(self) -> None:
        closer = getattr(self._source, "close", None)
        if callable(closer):
            closer()

    def __enter__(self) -> StreamReader[T]:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()