"""
Register a user without going through the web form. Run from project root:
  python -m app.scripts.create_user NAME EMAIL PASSWORD
Example:
  python -m app.scripts.create_user Alice alice@example.com your-password
"""
import argparse
import logging
import sys

from app.core.config import get_settings
from app.core.errors import AppError
from app.schemas.users import UserCreate
from app.services.users import register_user
from app.store import open_store

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Register a housing user.")
    parser.add_argument("name", help="Display name")
    parser.add_argument("email", help="Email address")
    parser.add_argument("password", help="Password (at most 72 bytes)")
    args = parser.parse_args(argv)

    if not args.password:
        print("Password must not be empty.", file=sys.stderr)
        return 1

    settings = get_settings()
    payload = UserCreate(name=args.name, email=args.email, password=args.password)
    try:
        store = open_store(settings)
        identifier = register_user(store, payload, rounds=settings.BCRYPT_ROUNDS)
    except AppError as e:
        logger.error("Could not create user: %s", e.message)
        print(f"Could not create user: {e.message}", file=sys.stderr)
        return 1
    print(f"Created user {identifier}.")
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    sys.exit(main())
