from fastapi import APIRouter, Depends, status
from app.database.db import get_db
from app.models.car.car import AddCar, UpdateCar
from app.services.car_service import CarService
from app.services.json import return_json
from app.utilities.security import require_admin

car_router = APIRouter(
    prefix="/api/cars",
    tags=["CarAPI"],
)


def get_car_service(db=Depends(get_db)) -> CarService:
    return CarService(db)


# Public: list all cars, newest first
@car_router.get("")
def list_cars(service: CarService = Depends(get_car_service)):
    cars = service.list_cars()
    return return_json({"count": len(cars), "cars": cars})


# Public: get a car by id
@car_router.get("/{car_id}")
def get_car(car_id: str, service: CarService = Depends(get_car_service)):
    return return_json(service.get_car(car_id))


# Admin: add a car
@car_router.post("")
def add_car(
    car: AddCar,
    service: CarService = Depends(get_car_service),
    current_user: dict = Depends(require_admin),
):
    return return_json(service.create_car(car), code=status.HTTP_201_CREATED)


# Admin: update a car
@car_router.put("/{car_id}")
def update_car(
    car_id: str,
    car: UpdateCar,
    service: CarService = Depends(get_car_service),
    current_user: dict = Depends(require_admin),
):
    return return_json(service.update_car(car_id, car))


# Admin: delete a car
@car_router.delete("/{car_id}")
def delete_car(
    car_id: str,
    service: CarService = Depends(get_car_service),
    current_user: dict = Depends(require_admin),
):
    service.delete_car(car_id)
    return return_json({"message": "Deleted successfully"})
