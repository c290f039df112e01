import logging
from typing import List
from pymongo.errors import DuplicateKeyError
from app.models.user.user import Role
from app.utilities.errors import BadRequest, Unauthorized
from app.utilities.helper import strip_private_fields, utcnow
from app.utilities.security import (
    DUMMY_PASSWORD_HASH,
    create_access_token,
    hash_password,
    verify_password,
)
from config import USER_COLLECTION

logger = logging.getLogger(__name__)

PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 128


def password_problems(password: str) -> List[str]:
    problems = []
    if len(password) < PASSWORD_MIN_LENGTH:
        problems.append(f"password must be at least {PASSWORD_MIN_LENGTH} characters")
    if len(password) > PASSWORD_MAX_LENGTH:
        problems.append(f"password must be at most {PASSWORD_MAX_LENGTH} characters")
    if password and not password.strip():
        problems.append("password must not be only whitespace")
    return problems


class UserService:
    def __init__(self, db):
        self.db = db
        self.collection = db[USER_COLLECTION]

    def register(self, email: str, password: str) -> dict:
        problems = password_problems(password)
        if problems:
            raise BadRequest(details=problems)

        if self.collection.find_one({"email": email}, {"_id": 1}):
            raise BadRequest("Email already registered")

        now = utcnow()
        user_doc = {
            "email": email,
            "password": hash_password(password),
            "role": Role.USER.value,
            "createdAt": now,
            "updatedAt": now,
        }
        try:
            insert_result = self.collection.insert_one(user_doc)
        except DuplicateKeyError:
            raise BadRequest("Email already registered")

        user_doc["_id"] = insert_result.inserted_id
        logger.info("User registered: %s", email)
        return strip_private_fields(user_doc)

    def authenticate(self, email: str, password: str) -> dict:
        """Return the user for a correct email/password pair.

        Unknown email and wrong password raise the same Unauthorized, and both
        pay for one bcrypt verification.
        """
        user = self.collection.find_one({"email": email})
        if not user or not user.get("password"):
            verify_password(password, DUMMY_PASSWORD_HASH)
            logger.info("Failed login for %s", email)
            raise Unauthorized("Invalid credentials")

        if not verify_password(password, user["password"]):
            logger.info("Failed login for %s", email)
            raise Unauthorized("Invalid credentials")

        return user

    def login(self, email: str, password: str) -> dict:
        user = self.authenticate(email, password)
        role = user.get("role") or Role.USER.value
        token = create_access_token(user_id=str(user["_id"]), email=user["email"], role=role)
        return {"token": token, "role": role, "email": user["email"]}

    def set_role(self, email: str, role: Role) -> dict:
        result = self.collection.update_one(
            {"email": email},
            {"$set": {"role": role.value, "updatedAt": utcnow()}},
        )
        if result.matched_count == 0:
            raise BadRequest("User with this email not found")

        logger.info("User %s role set to %s", email, role.value)
        return {"email": email, "role": role.value}
