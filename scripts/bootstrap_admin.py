#!/usr/bin/env python3
"""Provision the first administrator account.

Administrator accounts cannot be created through the API, so the first one is
created here. Running the script again for an existing administrator grants
catalog permissions added since the account was provisioned.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT_DIR))

from src.database import SessionLocal  # noqa: E402
from src.models import UserRole  # noqa: E402
from src.rbac.roles import template  # noqa: E402
from src.schemas.user import UserCreate  # noqa: E402
from src.services import grant_service, user_service  # noqa: E402

logger = logging.getLogger("bootstrap_admin")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("email", help="Email address of the administrator")
    parser.add_argument("--first-name", default="Admin")
    parser.add_argument("--last-name", default="User")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    db = SessionLocal()
    try:
        existing = user_service.get_user_by_email(db, args.email)
        if existing is None:
            user = user_service.provision_user(
                db,
                UserCreate(
                    email=args.email,
                    first_name=args.first_name,
                    last_name=args.last_name,
                    role=UserRole.ADMIN,
                ),
            )
            logger.info(f"Created administrator {user.email} ({user.id})")
            return 0

        if existing.role != UserRole.ADMIN:
            logger.error(f"{existing.email} exists and is not an administrator")
            return 1

        missing = template(UserRole.ADMIN) - grant_service.get_user_permissions(
            db, existing.id
        )
        if missing:
            grant_service.grant_permissions(db, existing.id, missing)
        logger.info(
            f"Administrator {existing.email} is up to date "
            f"({len(missing)} permissions added)"
        )
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
