"""Immutable HTTP request.

Frozen metadata with async body access. Prefix routes receive a copy
whose ``path`` is the sub-path below the mount point and whose
``root_path`` records the prefix that was stripped.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from dataclasses import dataclass, field, replace
from typing import Any

from switchyard._internal.asgi import Receive, Scope


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    Headers and body are carried along but never inspected by the router.
    """

    method: str
    path: str
    headers: tuple[tuple[bytes, bytes], ...]
    query_string: bytes
    http_version: str
    client: tuple[str, int] | None
    root_path: str = ""

    # Private: ASGI receive callable for body streaming
    _receive: Receive | None = field(default=None, repr=False, compare=False)

    # Private: mutable cache for the body
    # (dict contents are mutable even though the field reference is frozen)
    _cache: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    # -- Computed properties --

    @property
    def remote_addr(self) -> str:
        """``host:port`` of the peer, or ``"-"`` when the server did not say."""
        if self.client is None:
            return "-"
        host, port = self.client
        return f"{host}:{port}"

    @property
    def full_path(self) -> str:
        """The path as the client sent it, mount prefix included."""
        if not self.root_path:
            return self.path
        return self.root_path + self.path

    @property
    def url(self) -> str:
        """Request URI (full path + query string)."""
        if self.query_string:
            return f"{self.full_path}?{self.query_string.decode('latin-1')}"
        return self.full_path

    def header(self, name: str, default: str | None = None) -> str | None:
        """Return the first value of header *name* (case-insensitive)."""
        key = name.lower().encode("latin-1")
        for raw_name, raw_value in self.headers:
            if raw_name.lower() == key:
                return raw_value.decode("latin-1")
        return default

    def with_sub_path(self, prefix: str, sub_path: str) -> Request:
        """Return a copy mounted below *prefix*, seeing only *sub_path*."""
        return replace(self, path=sub_path, root_path=self.root_path + prefix)

    # -- Async body access --

    async def body(self) -> bytes:
        """Read the full request body.

        Result is cached — the ASGI receive is consumed once, then
        the same bytes are returned on subsequent calls.
        """
        if "_body" in self._cache:
            return self._cache["_body"]
        chunks = [chunk async for chunk in self.stream()]
        result = b"".join(chunks)
        self._cache["_body"] = result
        return result

    async def stream(self) -> AsyncGenerator[bytes]:
        """Stream the request body in chunks."""
        if self._receive is None:
            return
        while True:
            message = await self._receive()
            body = message.get("body", b"")
            if body:
                yield body
            if not message.get("more_body", False):
                break

    # -- Factory --

    @classmethod
    def from_asgi(cls, scope: Scope, receive: Receive | None = None) -> Request:
        """Create a Request from an ASGI scope and receive callable."""
        client = scope.get("client")
        return cls(
            method=scope["method"],
            path=scope["path"],
            headers=tuple(tuple(pair) for pair in scope.get("headers", ())),
            query_string=scope.get("query_string", b""),
            http_version=scope.get("http_version", "1.1"),
            client=tuple(client) if client else None,
            _receive=receive,
        )
