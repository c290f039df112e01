from fastapi import APIRouter, Depends, status
from app.database.db import get_db
from app.models.review.review import AddReview, UpdateReview
from app.services.review_service import ReviewService
from app.services.json import return_json
from app.utilities.security import require_admin

review_router = APIRouter(
    prefix="/api/reviews",
    tags=["ReviewAPI"],
)


def get_review_service(db=Depends(get_db)) -> ReviewService:
    return ReviewService(db)


# Public: list all reviews with their cars
@review_router.get("")
def list_reviews(service: ReviewService = Depends(get_review_service)):
    reviews = service.list_reviews()
    return return_json({"count": len(reviews), "reviews": reviews})


# Public: get a review with its car
@review_router.get("/{review_id}")
def get_review(review_id: str, service: ReviewService = Depends(get_review_service)):
    return return_json(service.get_review(review_id))


# Admin: add a review
@review_router.post("")
def add_review(
    review: AddReview,
    service: ReviewService = Depends(get_review_service),
    current_user: dict = Depends(require_admin),
):
    return return_json(service.create_review(review), code=status.HTTP_201_CREATED)


# Admin: update rating and/or comment
@review_router.put("/{review_id}")
def update_review(
    review_id: str,
    review: UpdateReview,
    service: ReviewService = Depends(get_review_service),
    current_user: dict = Depends(require_admin),
):
    return return_json(service.update_review(review_id, review))


# Admin: delete a review
@review_router.delete("/{review_id}")
def delete_review(
    review_id: str,
    service: ReviewService = Depends(get_review_service),
    current_user: dict = Depends(require_admin),
):
    service.delete_review(review_id)
    return return_json({"message": "Deleted successfully"})
