from contextlib import asynccontextmanager
import logging
from pymongo import MongoClient, errors
from app.database.db import ensure_indexes
from config import DATABASE_URL, DATABASE_NAME, MONGO_TIMEOUT_MS, settings

logger = logging.getLogger(__name__)


def connect(db_url: str = DATABASE_URL) -> MongoClient:
    client = None
    try:
        client = MongoClient(
            db_url,
            serverSelectionTimeoutMS=MONGO_TIMEOUT_MS,
            socketTimeoutMS=MONGO_TIMEOUT_MS,
            tz_aware=True,
        )
        client.admin.command("ping")
    except (errors.ConfigurationError, ValueError):
        if client is not None:
            client.close()
        raise RuntimeError("Invalid MongoDB configuration.")
    except errors.ConnectionFailure:
        client.close()
        raise RuntimeError("Unable to connect to the MongoDB server.")
    return client


@asynccontextmanager
async def lifespan(app):
    """MongoDB connection lifecycle"""
    settings.log_warnings()
    try:
        client = connect()
        app.state.mongo_client = client
        app.state.db = client[DATABASE_NAME]
        ensure_indexes(app.state.db)
        logger.info("MongoDB connection established: %s | DB: %s", DATABASE_URL, DATABASE_NAME)
    except Exception as e:
        logger.error("MongoDB connection failed at startup: %s", e)
        raise

    yield

    mongo_client = getattr(app.state, "mongo_client", None)
    if mongo_client:
        mongo_client.close()
        logger.info("MongoDB connection closed at shutdown.")
    logger.info("Shutting down FastAPI app.")
