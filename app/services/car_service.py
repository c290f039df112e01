import logging
from typing import List, Optional
from pydantic import ValidationError
from pymongo import DESCENDING, ReturnDocument
from app.models.car.car import AddCar, UpdateCar
from app.utilities.convert_object_id import objid
from app.utilities.errors import BadRequest, NotFound, format_validation_errors
from app.utilities.helper import utcnow
from config import CAR_COLLECTION

logger = logging.getLogger(__name__)

NEWEST_FIRST = [("createdAt", DESCENDING), ("_id", DESCENDING)]


class CarService:
    def __init__(self, db):
        """
        `db` is a PyMongo database instance (e.g., client["autodealer"])
        """
        self.db = db
        self.collection = db[CAR_COLLECTION]

    def list_cars(self) -> List[dict]:
        return list(self.collection.find().sort(NEWEST_FIRST))

    def find_car(self, car_id) -> Optional[dict]:
        return self.collection.find_one({"_id": objid(car_id)})

    def get_car(self, car_id) -> dict:
        car = self.find_car(car_id)
        if not car:
            raise NotFound("Car not found")
        return car

    def create_car(self, data: AddCar) -> dict:
        now = utcnow()
        car_doc = data.model_dump()
        car_doc["createdAt"] = now
        car_doc["updatedAt"] = now

        insert_result = self.collection.insert_one(car_doc)
        car_doc["_id"] = insert_result.inserted_id
        logger.info("Car %s created: %s %s %s", car_doc["_id"], data.brand, data.model, data.year)
        return car_doc

    def update_car(self, car_id, data: UpdateCar) -> dict:
        """Apply a partial update, re-validating the merged record first."""
        oid = objid(car_id)
        changes = data.model_dump(exclude_unset=True)
        if not changes:
            raise BadRequest(details=["No fields provided to update"])

        car = self.get_car(oid)
        merged = {key: value for key, value in car.items() if key in AddCar.model_fields}
        merged.update(changes)
        try:
            validated = AddCar.model_validate(merged)
        except ValidationError as e:
            raise BadRequest(details=format_validation_errors(e.errors()))

        updates = validated.model_dump(include=set(changes))
        updates["updatedAt"] = utcnow()
        updated_car = self.collection.find_one_and_update(
            {"_id": oid},
            {"$set": updates},
            return_document=ReturnDocument.AFTER,
        )
        if not updated_car:
            raise NotFound("Car not found")

        logger.info("Car %s updated: %s", oid, ", ".join(sorted(changes)))
        return updated_car

    def delete_car(self, car_id) -> None:
        # Reviews pointing at this car are left in place; they enrich to null.
        oid = objid(car_id)
        deleted = self.collection.find_one_and_delete({"_id": oid})
        if not deleted:
            raise NotFound("Car not found")
        logger.info("Car %s deleted", oid)
