"""
Webhook receiver for scmkit.

A small FastAPI application that parses webhook deliveries with a driver's
WebhookService and hands the parsed events to registered handlers.
"""

import logging
from typing import Awaitable, Callable, Dict, Optional

from fastapi import BackgroundTasks, FastAPI, HTTPException, Request

from .scm.errors import DecodeError, UnknownWebhookError
from .scm.services import WebhookService
from .scm.webhook import Webhook

logger = logging.getLogger(__name__)

# Handlers are keyed by Webhook.kind ("push", "pull_request", ...)
WebhookHandler = Callable[[Webhook], Awaitable[None]]


def create_app(
    webhooks: WebhookService,
    handlers: Optional[Dict[str, WebhookHandler]] = None
) -> FastAPI:
    """
    Create the webhook receiver application.

    Args:
        webhooks: Service used to parse deliveries
        handlers: Async handler per event kind; "*" receives every event

    Returns:
        FastAPI application
    """
    registry: Dict[str, WebhookHandler] = dict(handlers or {})

    app = FastAPI(title="scmkit webhook receiver")

    @app.post("/webhook")
    async def receive_webhook(request: Request, background_tasks: BackgroundTasks):
        """
        Webhook endpoint.

        Parses the delivery and runs the matching handler after the
        response is sent.
        """
        body = await request.body()

        try:
            hook = webhooks.parse(request.headers, body)
        except UnknownWebhookError as e:
            logger.info(f"Ignoring webhook: {e}")
            return {"status": "ignored", "reason": str(e)}
        except DecodeError as e:
            logger.warning(f"Invalid webhook payload: {e}")
            raise HTTPException(status_code=400, detail="Invalid payload")

        handler = registry.get(hook.kind) or registry.get("*")
        if handler is None:
            return {"status": "ignored", "event": hook.kind}

        logger.info(
            f"Received {hook.kind} webhook for {hook.repo.full_name or 'unknown repository'}",
            extra={"event": hook.kind, "repo": hook.repo.full_name},
        )
        background_tasks.add_task(_run_handler, handler, hook)

        return {"status": "accepted", "event": hook.kind}

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "service": "scmkit",
            "handlers": sorted(registry),
        }

    return app


async def _run_handler(handler: WebhookHandler, hook: Webhook) -> None:
    try:
        await handler(hook)
    except Exception as e:
        logger.error(f"Error handling {hook.kind} webhook: {e}", exc_info=True)
