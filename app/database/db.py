from fastapi import Request
from pymongo import ASCENDING, DESCENDING
from pymongo.database import Database
from config import (
    USER_COLLECTION,
    CAR_COLLECTION,
    REVIEW_COLLECTION,
)


def get_db(request: Request) -> Database:
    return request.app.state.db


def ensure_indexes(db: Database) -> None:
    db[USER_COLLECTION].create_index([("email", ASCENDING)], unique=True)
    db[CAR_COLLECTION].create_index([("createdAt", DESCENDING)])
    db[REVIEW_COLLECTION].create_index([("createdAt", DESCENDING)])
    db[REVIEW_COLLECTION].create_index([("carId", ASCENDING)])
