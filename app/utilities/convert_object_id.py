from datetime import datetime
from bson import ObjectId
from bson.errors import InvalidId as BsonInvalidId
from app.utilities.errors import InvalidId


def convert_object_ids(obj):
    if isinstance(obj, list):
        return [convert_object_ids(item) for item in obj]
    elif isinstance(obj, dict):
        return {key: convert_object_ids(value) for key, value in obj.items()}
    elif isinstance(obj, ObjectId):
        return str(obj)
    elif isinstance(obj, datetime):
        return obj.isoformat()
    else:
        return obj


def objid(id) -> ObjectId:
    if isinstance(id, ObjectId):
        return id
    try:
        return ObjectId(id)
    except (BsonInvalidId, TypeError):
        raise InvalidId()


def is_objid(id) -> bool:
    return isinstance(id, ObjectId) or (isinstance(id, str) and ObjectId.is_valid(id))
