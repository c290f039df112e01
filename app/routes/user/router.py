import logging
from typing import Optional
from fastapi import APIRouter, Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials
from app.database.db import get_db
from app.models.user.user import MakeAdmin, UserLogin, UserRegister
from app.services.json import return_json
from app.services.user_service import UserService
from app.utilities.security import bearer_scheme, get_current_user, require_admin
import config

logger = logging.getLogger(__name__)

auth_router = APIRouter(
    prefix="/api/auth",
    tags=["Auth"],
)


def get_user_service(db=Depends(get_db)) -> UserService:
    return UserService(db)


def promotion_gate(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[dict]:
    """Role changes need an admin token unless OPEN_ADMIN_PROMOTION is set."""
    if config.OPEN_ADMIN_PROMOTION:
        logger.warning("Unauthenticated role change accepted (OPEN_ADMIN_PROMOTION)")
        return None
    return require_admin(get_current_user(request, credentials))


# Register a new user
@auth_router.post("/register")
def register(data: UserRegister, service: UserService = Depends(get_user_service)):
    user = service.register(data.email, data.password)
    return return_json(
        {"message": "User registered successfully", "email": user["email"], "role": user["role"]},
        code=status.HTTP_201_CREATED,
    )


# User login
@auth_router.post("/login")
def login(data: UserLogin, service: UserService = Depends(get_user_service)):
    return return_json(service.login(data.email, data.password))


# Change a user's role
@auth_router.post("/make-admin")
def make_admin(
    data: MakeAdmin,
    service: UserService = Depends(get_user_service),
    current_user: Optional[dict] = Depends(promotion_gate),
):
    result = service.set_role(data.email, data.role)
    return return_json({"message": f"User role set to {result['role']}", **result})


# Current identity from the bearer token
@auth_router.get("/me")
def me(current_user: dict = Depends(get_current_user)):
    return return_json(current_user)
