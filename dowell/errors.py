from __future__ import annotations

import json
from typing import Any, Dict, List, Tuple

import structlog

logger = structlog.get_logger(__name__)


def _first_invalid_field(body: bytes) -> str | None:
    try:
        payload = json.loads(body.decode("utf-8") or "{}")
    except (UnicodeDecodeError, ValueError):
        return None
    detail = payload.get("detail") if isinstance(payload, dict) else None
    if not isinstance(detail, list) or not detail:
        return None
    loc = detail[0].get("loc") if isinstance(detail[0], dict) else None
    if not loc:
        return None
    return str(loc[-1])


class ValidationNormalizeMiddleware:
    """Turn FastAPI 422 validation responses into 400 with a short error body.

    The body names the first offending form field so the page can highlight it.
    """

    def __init__(self, app: Any) -> None:
        self.app = app

    async def __call__(self, scope: Dict[str, Any], receive: Any, send: Any) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        status_code = 500
        headers: List[Tuple[bytes, bytes]] = []
        body_chunks: List[bytes] = []

        async def send_wrapper(message: Dict[str, Any]) -> None:
            nonlocal status_code, headers
            if message["type"] not in {"http.response.start", "http.response.body"}:
                await send(message)
                return
            if message["type"] == "http.response.start":
                status_code = message.get("status", 500)
                headers = list(message.get("headers", []))
                return
            body_chunks.append(message.get("body", b"") or b"")
            if message.get("more_body"):
                return

            body = b"".join(body_chunks)
            if status_code == 422:
                field = _first_invalid_field(body)
                logger.warning("request_rejected", path=scope.get("path"), field=field)
                payload = json.dumps({"error": "Invalid input.", "field": field}).encode(
                    "utf-8"
                )
                filtered = [
                    (key, value)
                    for key, value in headers
                    if key.lower() not in {b"content-length", b"content-type"}
                ]
                filtered.append((b"content-type", b"application/json"))
                filtered.append((b"content-length", str(len(payload)).encode("ascii")))
                await send(
                    {
                        "type": "http.response.start",
                        "status": 400,
                        "headers": filtered,
                    }
                )
                await send({"type": "http.response.body", "body": payload})
                return

            await send(
                {
                    "type": "http.response.start",
                    "status": status_code,
                    "headers": headers,
                }
            )
            await send({"type": "http.response.body", "body": body})

        await self.app(scope, receive, send_wrapper)
