import argparse
import sys

from app.database.connections import connect
from app.database.db import ensure_indexes
from app.models.user.user import Role
from app.services.user_service import UserService, password_problems
from app.utilities.errors import BadRequest
from config import DATABASE_NAME


def create_admin(email: str, password: str, role: Role = Role.ADMIN) -> int:
    client = connect()
    try:
        db = client[DATABASE_NAME]
        ensure_indexes(db)
        service = UserService(db)

        existing_user = service.collection.find_one({"email": email})
        if existing_user:
            service.set_role(email, role)
            print(f"User '{email}' already exists, role set to '{role.value}'.")
            return 0

        problems = password_problems(password)
        if problems:
            print(f"Cannot create '{email}': {'; '.join(problems)}", file=sys.stderr)
            return 1

        try:
            service.register(email, password)
        except BadRequest as e:
            print(f"Cannot create '{email}': {e.message}", file=sys.stderr)
            return 1
        service.set_role(email, role)
        print(f"Created user: {email} (role: {role.value})")
        return 0
    finally:
        client.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create a user or change an existing user's role.")
    parser.add_argument("email", help="Email")
    parser.add_argument("password", help="Password (ignored when the user already exists)")
    parser.add_argument("--role", choices=[r.value for r in Role], default=Role.ADMIN.value, help="User role")

    args = parser.parse_args()
    sys.exit(create_admin(args.email, args.password, Role(args.role)))
