"""Simple server runner for the PharmaCare API."""
import logging
import signal
import sys

import uvicorn

from pharmacare.core.config import settings


def handle_signal(sig, frame):
    logging.getLogger(__name__).info(f"Received signal {sig}, shutting down gracefully...")
    sys.exit(0)


signal.signal(signal.SIGINT, handle_signal)
signal.signal(signal.SIGTERM, handle_signal)

if __name__ == "__main__":
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )
    print("=" * 50)
    print("  Starting PharmaCare Back-Office API")
    print("=" * 50)
    uvicorn.run(
        "pharmacare.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL,
    )
