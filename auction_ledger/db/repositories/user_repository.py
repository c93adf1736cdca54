"""
User repository - lookups for the identity provider (register, login, token resolution).
"""

from sqlalchemy import func, select

from auction_ledger.db.models.user import User
from auction_ledger.db.repositories.base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    def __init__(self, session):
        super().__init__(session, User)

    async def get_by_email(self, email: str) -> User | None:
        """Case-insensitive: "Bob@Example.com" and "bob@example.com" are one account."""
        result = await self.session.execute(
            select(User).where(func.lower(User.email) == email.lower())
        )
        return result.scalar_one_or_none()

    async def get_active(self, user_id: int) -> User | None:
        """The user behind a token, if it may still act as a caller."""
        user = await self.get_by_id(user_id)
        return user if user and user.is_active else None
