from app.routes.user.router import auth_router as auth
from app.routes.car.router import car_router as car
from app.routes.review.router import review_router as review


def get_all_routers():
    return [
        auth,
        car,
        review,
    ]
