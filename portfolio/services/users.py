"""Administrator accounts."""

import logging

from sqlalchemy.orm import Session

from portfolio.exceptions import Conflict, NotFound
from portfolio.models.user import User
from portfolio.schemas.auth import UserCreate, UserUpdate
from portfolio.services.auth import get_password_hash, get_user_by_email
from portfolio.services.base import db_action
from portfolio.services.email_queue import EmailQueue

logger = logging.getLogger(__name__)


class UserService:
    """Manage the users allowed to sign in to the admin side."""

    def __init__(self, db: Session, email_queue: EmailQueue):
        self.db = db
        self.email_queue = email_queue

    def list_all(self) -> list[User]:
        with db_action(self.db, "fetch users"):
            return self.db.query(User).order_by(User.id.asc()).all()

    def get(self, user_id: int) -> User:
        with db_action(self.db, "fetch user"):
            user = self.db.query(User).filter(User.id == user_id).first()
        if user is None:
            raise NotFound(f"User with ID {user_id} not found")
        return user

    def create(self, data: UserCreate) -> User:
        """Create a user and queue the welcome email."""
        if get_user_by_email(self.db, data.email):
            raise Conflict("User with this email already exists")

        user = User(email=data.email, password_hash=get_password_hash(data.password), name=data.name)
        with db_action(self.db, "create user"):
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
        logger.info(f"Created user {user.id} ({user.email})")

        self.email_queue.send_welcome_email(user.email, user.name)
        return user

    def update(self, user_id: int, data: UserUpdate) -> User:
        user = self.get(user_id)
        values = data.model_dump(exclude_unset=True, exclude_none=True)

        if "email" in values and values["email"] != user.email:
            if get_user_by_email(self.db, values["email"]):
                raise Conflict("User with this email already exists")
        if "password" in values:
            values["password_hash"] = get_password_hash(values.pop("password"))

        for field, value in values.items():
            setattr(user, field, value)
        with db_action(self.db, "update user"):
            self.db.commit()
            self.db.refresh(user)
        return user

    def delete(self, user_id: int) -> dict:
        user = self.get(user_id)
        with db_action(self.db, "delete user"):
            self.db.delete(user)
            self.db.commit()
        logger.info(f"Deleted user {user_id}")
        return {"message": f"User with ID {user_id} has been deleted successfully"}
