"""
Create a user from the command line. Run from project root:
  python -m contactkeeper.scripts.create_user NAME EMAIL PASSWORD
Example:
  python -m contactkeeper.scripts.create_user "Ada" ada@example.com your-secure-password
"""
import argparse
import sys

from pydantic import ValidationError

from contactkeeper.core.database import SessionLocal
from contactkeeper.schemas.auth import RegisterRequest
from contactkeeper.services.users import UserAlreadyExistsError, register_user


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Contact Keeper user.")
    parser.add_argument("name", help="Display name (1-30 chars)")
    parser.add_argument("email", help="Login email")
    parser.add_argument("password", help="Password (8-128 chars)")
    args = parser.parse_args(argv)

    try:
        data = RegisterRequest(name=args.name, email=args.email, password=args.password)
    except ValidationError as e:
        for err in e.errors():
            field = ".".join(str(p) for p in err["loc"])
            print(f"{field}: {err['msg'].removeprefix('Value error, ')}", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        user = register_user(db, data.name, data.email, data.password)
    except UserAlreadyExistsError as e:
        print(f"{data.email}: {e.message}", file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{user.email}' with id {user.id}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
