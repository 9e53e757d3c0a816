#!/usr/bin/env python3
"""
Create a back-office staff user for the SQL backend.

Usage:
  python scripts/create_user.py --email clerk@example.com [--password SECRET] [--inactive]

When no password is given a random one is generated and printed once.
"""

import argparse
import asyncio
import secrets
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.application.errors import ConflictError
from src.config.settings import get_settings
from src.domain.models.user import User
from src.infrastructure.auth.password import PasswordHasher
from src.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
)


async def create_user(email: str, password: str | None, *, is_active: bool = True) -> int:
    settings = get_settings()
    if settings.uses_local_store:
        print("❌ STORAGE_BACKEND is 'local'; users only exist on the SQL backend")
        return 1
    engine = create_engine(settings.database_url)
    session_factory = create_session_factory(engine)
    password_hasher = PasswordHasher()
    generated = password is None
    password = password or secrets.token_urlsafe(12)

    try:
        uow = SQLAlchemyUnitOfWork(session_factory)
        async with uow:
            try:
                user = await uow.users.add(
                    User.create(email, password_hasher.hash(password), is_active=is_active)
                )
            except ConflictError:
                print(f"ℹ️  User {email} already exists")
                return 1
            await uow.commit()
    finally:
        await engine.dispose()

    print(f"✅ User created: {user.email} (ID: {user.id})")
    if generated:
        print(f"🔑 Generated password: {password}")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Create a staff user")
    parser.add_argument("--email", required=True, help="Login email")
    parser.add_argument("--password", help="Password (generated when omitted)")
    parser.add_argument("--inactive", action="store_true", help="Create the account disabled")
    args = parser.parse_args()
    return asyncio.run(create_user(args.email, args.password, is_active=not args.inactive))


if __name__ == "__main__":
    sys.exit(main())
