import logging
from typing import List
from bson import ObjectId
from pymongo import DESCENDING, ReturnDocument
from app.models.review.review import AddReview, UpdateReview
from app.utilities.convert_object_id import is_objid, objid
from app.utilities.errors import BadRequest, NotFound
from app.utilities.helper import utcnow
from config import CAR_COLLECTION, REVIEW_COLLECTION

logger = logging.getLogger(__name__)

RATING_MIN = 1
RATING_MAX = 5
COMMENT_MIN_LENGTH = 2

RATING_ERROR = f"rating must be an integer between {RATING_MIN} and {RATING_MAX}"
COMMENT_ERROR = f"comment is required (min {COMMENT_MIN_LENGTH} chars)"

NEWEST_FIRST = [("createdAt", DESCENDING), ("_id", DESCENDING)]


def normalize_rating(rating):
    """Return the rating as an int, or None when it is not a whole number in range."""
    if isinstance(rating, bool):
        return None
    if isinstance(rating, float) and rating.is_integer():
        rating = int(rating)
    if not isinstance(rating, int):
        return None
    if rating < RATING_MIN or rating > RATING_MAX:
        return None
    return rating


def normalize_comment(comment):
    if not isinstance(comment, str):
        return None
    comment = comment.strip()
    if len(comment) < COMMENT_MIN_LENGTH:
        return None
    return comment


class ReviewService:
    """Reviews of cars in the catalog.

    A review's ``carId`` must point at an existing car when the review is
    created. It is never re-checked afterwards: deleting a car leaves its
    reviews in place and they are returned with ``carId`` set to null.
    """

    def __init__(self, db):
        self.db = db
        self.collection = db[REVIEW_COLLECTION]
        self.car_collection = db[CAR_COLLECTION]

    def enrich(self, reviews: List[dict]) -> List[dict]:
        """Replace each ``carId`` with the car's current record, or None."""
        car_ids = list({review.get("carId") for review in reviews if isinstance(review.get("carId"), ObjectId)})
        cars = {}
        if car_ids:
            cars = {car["_id"]: car for car in self.car_collection.find({"_id": {"$in": car_ids}})}

        for review in reviews:
            review["carId"] = cars.get(review.get("carId"))
        return reviews

    def list_reviews(self) -> List[dict]:
        return self.enrich(list(self.collection.find().sort(NEWEST_FIRST)))

    def get_review(self, review_id) -> dict:
        review = self.collection.find_one({"_id": objid(review_id)})
        if not review:
            raise NotFound("Review not found")
        return self.enrich([review])[0]

    def create_review(self, data: AddReview) -> dict:
        errors = []
        if not data.carId:
            errors.append("carId is required")
        elif not is_objid(data.carId):
            errors.append("carId is not a valid id")

        rating = normalize_rating(data.rating)
        if rating is None:
            errors.append(RATING_ERROR)

        comment = normalize_comment(data.comment)
        if comment is None:
            errors.append(COMMENT_ERROR)

        if errors:
            raise BadRequest(details=errors)

        car_id = objid(data.carId)
        if not self.car_collection.find_one({"_id": car_id}, {"_id": 1}):
            raise BadRequest(details=["Car with this carId not found"])

        now = utcnow()
        review_doc = {
            "carId": car_id,
            "rating": rating,
            "comment": comment,
            "createdAt": now,
            "updatedAt": now,
        }
        insert_result = self.collection.insert_one(review_doc)
        review_doc["_id"] = insert_result.inserted_id
        logger.info("Review %s created for car %s", review_doc["_id"], car_id)
        return self.enrich([review_doc])[0]

    def update_review(self, review_id, data: UpdateReview) -> dict:
        oid = objid(review_id)
        changes = data.model_dump(exclude_unset=True)
        if not changes:
            raise BadRequest(details=["No fields provided to update"])

        errors = []
        updates = {}
        if "rating" in changes:
            rating = normalize_rating(changes["rating"])
            if rating is None:
                errors.append(RATING_ERROR)
            else:
                updates["rating"] = rating

        if "comment" in changes:
            comment = normalize_comment(changes["comment"])
            if comment is None:
                errors.append(f"comment must be at least {COMMENT_MIN_LENGTH} chars")
            else:
                updates["comment"] = comment

        if errors:
            raise BadRequest(details=errors)

        updates["updatedAt"] = utcnow()
        updated_review = self.collection.find_one_and_update(
            {"_id": oid},
            {"$set": updates},
            return_document=ReturnDocument.AFTER,
        )
        if not updated_review:
            raise NotFound("Review not found")

        logger.info("Review %s updated", oid)
        return self.enrich([updated_review])[0]

    def delete_review(self, review_id) -> None:
        oid = objid(review_id)
        deleted = self.collection.find_one_and_delete({"_id": oid})
        if not deleted:
            raise NotFound("Review not found")
        logger.info("Review %s deleted", oid)
