from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError, StoreError
from src.application.interfaces.repositories.users import UserRepository
from src.domain.models.user import User
from src.infrastructure.db.orm.user import UserORM


class UsersSQLAlchemyRepository(UserRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _execute(self, stmt):
        try:
            return await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            raise StoreError("Failed to query users") from exc

    def _to_domain(self, orm: UserORM) -> User:
        return User(
            id=orm.id,
            email=orm.email,
            hashed_password=orm.hashed_password,
            is_active=orm.is_active,
            created_at=orm.created_at,
        )

    async def add(self, user: User) -> User:
        orm = UserORM(
            id=user.id,
            email=user.email,
            hashed_password=user.hashed_password,
            is_active=user.is_active,
            created_at=user.created_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Email already registered") from exc
        except SQLAlchemyError as exc:
            raise StoreError("Failed to write user") from exc
        return self._to_domain(orm)

    async def get(self, user_id: UUID) -> User | None:
        result = await self._execute(select(UserORM).where(UserORM.id == user_id))
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def get_by_email(self, email: str) -> User | None:
        stmt = select(UserORM).where(UserORM.email == email.strip().lower())
        result = await self._execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None
