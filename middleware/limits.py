"""
Request size limiting middleware for the manifest API.


Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging

from starlette.responses import PlainTextResponse

logger = logging.getLogger(__name__)


class _TooLarge(Exception):
    def __init__(self, max_bytes: int) -> None:
        super().__init__(f"Request body exceeds {max_bytes} bytes")
        self.max_bytes = max_bytes


class RequestSizeLimitMiddleware:

    def __init__(self, app, max_bytes: int = 1_048_576) -> None:
        self.app = app
        self.max_bytes = int(max_bytes)

    async def _reject(self, scope, receive, send) -> None:
        resp = PlainTextResponse("Request body too large", status_code=413)
        await resp(scope, receive, send)

    async def __call__(self, scope, receive, send) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        content_length = None
        for key, value in scope.get("headers", []):
            if key.decode("latin-1").lower() == "content-length":
                content_length = value.decode("latin-1")
                break

        if content_length:
            try:
                declared = int(content_length)
            except ValueError:
                logger.warning("Invalid content-length header value: %r", content_length)
            else:
                if declared > self.max_bytes:
                    logger.warning(
                        "request_size_rejected content_length=%s max_bytes=%s",
                        declared, self.max_bytes,
                    )
                    await self._reject(scope, receive, send)
                    return

        received = 0
        response_started = False

        async def limited_receive():
            nonlocal received
            message = await receive()
            if message.get("type") == "http.request":
                received += len(message.get("body") or b"")
                if received > self.max_bytes:
                    raise _TooLarge(self.max_bytes)
            return message

        async def tracking_send(message):
            nonlocal response_started
            if message.get("type") == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, limited_receive, tracking_send)
        except _TooLarge:
            logger.warning("request_size_rejected streamed=%s max_bytes=%s", received, self.max_bytes)
            if not response_started:
                await self._reject(scope, receive, send)
