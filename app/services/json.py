from typing import List, Optional
from fastapi.responses import JSONResponse
from fastapi import status
from app.utilities.convert_object_id import convert_object_ids


def return_json(data=None, code: int = status.HTTP_200_OK):
    return JSONResponse(
        status_code=code,
        content=convert_object_ids(data)
    )


def return_error_json(error: str = "Bad Request", details: Optional[List[str]] = None,
                      code: int = status.HTTP_400_BAD_REQUEST, headers: Optional[dict] = None):
    content = {"error": error}
    if details:
        content["details"] = details
    return JSONResponse(
        status_code=code,
        content=content,
        headers=headers,
    )
