"""Entry point for running the dating API.

Starts the FastAPI application under Uvicorn.  Host and port are read
from ``API_HOST`` and ``API_PORT`` (defaults ``0.0.0.0`` and ``8000``);
every other setting comes from the environment as described in
``bliss_api/app/core/config.py``.

Usage:
    SEED_DEMO_DATA=true python run.py
"""
import logging
import os

from uvicorn import Config, Server

from bliss_api.app.main import app


def main() -> None:
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "8000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level="info")
    Server(config).run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Shutting down")
