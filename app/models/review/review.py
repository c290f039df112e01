from pydantic import BaseModel, ConfigDict
from typing import Any


# Field-level rules (presence, type, range, length, reference) live in
# ReviewService so every violation is reported together; these models only
# fix the accepted keys.
class AddReview(BaseModel):
    model_config = ConfigDict(extra="forbid")

    carId: Any = None
    rating: Any = None
    comment: Any = None


class UpdateReview(BaseModel):
    model_config = ConfigDict(extra="forbid")

    rating: Any = None
    comment: Any = None
