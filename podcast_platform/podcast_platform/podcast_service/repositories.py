"""
Store interfaces used by the services and their SQLAlchemy adapters.

The services only depend on the ``UserStore`` / ``PodcastStore`` protocols.
The adapters wrap a synchronous SQLAlchemy ``Session`` behind coroutine
methods so that every store call is an await point for the caller. The
session work itself still runs on the calling thread, so one request blocks
the event loop for the length of its query.
"""
from typing import List, Optional, Protocol
from sqlalchemy import inspect
from sqlalchemy.orm import Session
import logging

from .auth import hash_password
from .errors import EntityNotFoundError
from .models import Podcast, User, UserRole

logger = logging.getLogger(__name__)


class UserStore(Protocol):
    async def find_by_email(self, email: str) -> Optional[User]:
        ...

    async def find_one_or_fail(self, user_id: int) -> User:
        """Raises EntityNotFoundError when no user has ``user_id``."""
        ...

    def create(self, email: str, password: str, role: Optional[UserRole] = None) -> User:
        """Builds an unsaved record."""
        ...

    async def save(self, user: User) -> User:
        ...


class PodcastStore(Protocol):
    async def find_all(self) -> List[Podcast]:
        ...

    async def find_by_id(self, podcast_id: int) -> Optional[Podcast]:
        ...

    def create(self, title: str, category: str, rating: float) -> Podcast:
        """Builds an unsaved record with no episodes."""
        ...

    async def save(self, podcast: Podcast) -> Podcast:
        ...

    async def delete(self, podcast: Podcast) -> None:
        ...


def _password_needs_hash(user: User) -> bool:
    state = inspect(user)
    if state.transient or state.pending:
        return user.password is not None
    return state.attrs.password.history.has_changes()


class SqlAlchemyUserRepository:
    def __init__(self, db: Session):
        self.db = db

    async def find_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    async def find_one_or_fail(self, user_id: int) -> User:
        user = self.db.get(User, user_id)
        if user is None:
            raise EntityNotFoundError("User", user_id)
        return user

    def create(self, email: str, password: str, role: Optional[UserRole] = None) -> User:
        return User(email=email, password=password, role=role)

    async def save(self, user: User) -> User:
        # Hash before the write whenever the password is part of it
        if _password_needs_hash(user):
            user.password = hash_password(user.password)
        try:
            self.db.add(user)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(user)
        return user


class SqlAlchemyPodcastRepository:
    def __init__(self, db: Session):
        self.db = db

    async def find_all(self) -> List[Podcast]:
        return self.db.query(Podcast).order_by(Podcast.id).all()

    async def find_by_id(self, podcast_id: int) -> Optional[Podcast]:
        return self.db.get(Podcast, podcast_id)

    def create(self, title: str, category: str, rating: float) -> Podcast:
        return Podcast(title=title, category=category, rating=rating, episodes=[])

    async def save(self, podcast: Podcast) -> Podcast:
        try:
            self.db.add(podcast)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(podcast)
        return podcast

    async def delete(self, podcast: Podcast) -> None:
        podcast_id = podcast.id
        try:
            self.db.delete(podcast)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        logger.debug(f"Deleted podcast {podcast_id}")
