"""Bounded JSON request body reader."""

import asyncio
import json
from typing import Any

from fastapi import Request

from articles_api.errors import MalformedBodyError, PayloadTooLargeError, RequestTimeoutError


async def _read_stream(request: Request, max_bytes: int) -> bytes:
    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > max_bytes:
            raise PayloadTooLargeError(f"Request body exceeds {max_bytes} bytes")
    return bytes(body)


async def read_json_body(request: Request, max_bytes: int, timeout: float) -> Any:
    """Consume the request stream and decode it as JSON.

    Raises PayloadTooLargeError (413) past ``max_bytes``, RequestTimeoutError
    (408) when the stream is not fully received within ``timeout`` seconds and
    MalformedBodyError (400) when the bytes are not valid UTF-8 JSON. Stream
    errors such as a client disconnect are left to the caller.
    """
    content_length = request.headers.get("content-length")
    if content_length and content_length.isdigit() and int(content_length) > max_bytes:
        raise PayloadTooLargeError(f"Request body exceeds {max_bytes} bytes")

    try:
        raw = await asyncio.wait_for(_read_stream(request, max_bytes), timeout)
    except asyncio.TimeoutError:
        raise RequestTimeoutError("Timed out reading request body")

    try:
        return json.loads(raw)
    except ValueError:
        raise MalformedBodyError("Invalid JSON body")
