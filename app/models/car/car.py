from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

YEAR_MIN = 1950
YEAR_MAX = 2100


class AddCar(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    brand: str = Field(..., min_length=1)
    model: str = Field(..., min_length=1)
    year: int = Field(..., ge=YEAR_MIN, le=YEAR_MAX)
    price: float = Field(..., ge=0, allow_inf_nan=False)
    mileage: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    color: str = ""
    transmission: str = ""
    fuel: str = ""
    description: str = ""


# Every field optional: the merged record is re-validated against AddCar.
class UpdateCar(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    brand: Optional[str] = None
    model: Optional[str] = None
    year: Optional[int] = None
    price: Optional[float] = None
    mileage: Optional[float] = None
    color: Optional[str] = None
    transmission: Optional[str] = None
    fuel: Optional[str] = None
    description: Optional[str] = None
