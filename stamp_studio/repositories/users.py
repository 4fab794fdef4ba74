"""SQLAlchemy-backed user store (read side of the external auth system)."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from stamp_studio.domain.lifecycle import Role
from stamp_studio.models import User


class SqlUserStore:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, *, email: str, name: str | None = None, role: Role = Role.CLIENT) -> User:
        user = User(email=email, name=name, role=role)
        self._session.add(user)
        await self._session.flush()
        return user

    async def find_by_id(self, user_id: int) -> User | None:
        return await self._session.get(User, user_id)

    async def find_by_email(self, email: str) -> User | None:
        result = await self._session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()
