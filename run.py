#!/usr/bin/env python3
"""
Run script for the Baby Cry Gateway.

Serverless hosts import ``babycry.main:app`` directly, so the local listener
is skipped when ENVIRONMENT=production.
"""
import logging

import uvicorn

from babycry.config.settings import settings
from babycry.main import app

if __name__ == "__main__":
    if settings.is_production:
        logging.getLogger(__name__).info("Production mode: not starting a local listener")
    else:
        logging.getLogger(__name__).info("Server ready on http://localhost:%s", settings.port)
        uvicorn.run(app, host=settings.host, port=settings.port)
