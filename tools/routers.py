import logging
from typing import Iterable
from fastapi import APIRouter, FastAPI

logger = logging.getLogger(__name__)


def gather_routers(app: FastAPI, routers: Iterable[APIRouter]) -> FastAPI:
    for router in routers:
        app.include_router(router)
        logger.debug("Mounted %s (%d routes)", router.prefix, len(router.routes))
    return app
