#!/usr/bin/env python
"""
Entry point for running the scmkit webhook receiver.

Parses webhook deliveries for the configured driver and logs every event.
"""

import os
import sys
import logging
from pathlib import Path

# Add src directory to Python path
project_root = Path(__file__).parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

import uvicorn
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Configure logging before importing application modules
from scmkit.logging_config import configure_logging
configure_logging()

from scmkit import create_webhook_service
from scmkit.scm.webhook import Webhook
from scmkit.server import create_app

logger = logging.getLogger("scmkit.run")


async def log_event(hook: Webhook) -> None:
    """Log every parsed webhook event"""
    logger.info(f"{hook.kind} event from {hook.sender.login or 'unknown'} on {hook.repo.full_name}")


def main():
    """Run the webhook receiver."""
    driver = os.getenv("SCM_DRIVER", "gitea")
    host = os.getenv("SCMKIT_HOST", "127.0.0.1")
    port = int(os.getenv("SCMKIT_PORT", "8000"))

    app = create_app(create_webhook_service(driver), {"*": log_event})

    logger.info(f"Receiving {driver} webhooks on http://{host}:{port}/webhook")

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower()
    )


if __name__ == "__main__":
    main()
