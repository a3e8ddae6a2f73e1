import uuid

from sqlalchemy.orm import Session

from app.auth.models.user import User
from app.core.repository import BaseRepository


class UserRepository(BaseRepository[User]):
    def __init__(self, db: Session):
        super().__init__(db, User)

    def find_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email.lower()).first()

    def find_by_id_str(self, user_id: str) -> User | None:
        """Look up a user by the string ``sub`` claim of a token."""
        try:
            parsed = uuid.UUID(user_id)
        except ValueError:
            return None
        return self.get_by_id(parsed)
