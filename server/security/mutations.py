"""Read-only guard: write requests are refused until the admin portal ships."""

import json
import logging

logger = logging.getLogger(__name__)

READ_METHODS = frozenset({"GET", "HEAD", "OPTIONS"})
MUTATIONS_DISABLED_MESSAGE = "Write operations are disabled until the admin portal is live."


class DisableMutationsMiddleware:
    """Reject any non-read request with 403 unless mutations are enabled."""

    def __init__(self, app, enabled: bool = False):
        self.app = app
        self.enabled = enabled

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http" or self.enabled or scope["method"] in READ_METHODS:
            await self.app(scope, receive, send)
            return

        logger.info(f"Blocked {scope['method']} {scope['path']}: mutations disabled")
        body = json.dumps({"error": MUTATIONS_DISABLED_MESSAGE}).encode("utf-8")
        await send({
            "type": "http.response.start",
            "status": 403,
            "headers": [
                [b"content-type", b"application/json"],
                [b"content-length", str(len(body)).encode("ascii")]
            ]
        })
        await send({"type": "http.response.body", "body": body})
