from sqlalchemy import Column, Integer, String, Float, ForeignKey, DateTime, Enum
from sqlalchemy.orm import relationship
from datetime import datetime
import enum

from .auth import verify_password
from .db import Base


class UserRole(str, enum.Enum):
    host = "host"
    listener = "listener"


class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    # Only ever holds a hash once persisted; see SqlAlchemyUserRepository.save
    password = Column(String, nullable=False)
    role = Column(Enum(UserRole, name="user_role"), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def check_password(self, plain_password: str) -> bool:
        return verify_password(plain_password, self.password)

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"


class Podcast(Base):
    __tablename__ = "podcasts"
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    category = Column(String, nullable=False)
    rating = Column(Float, nullable=False, default=0)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    episodes = relationship(
        "Episode",
        back_populates="podcast",
        cascade="all, delete-orphan",
        order_by="Episode.id",
    )

    def __repr__(self):
        return f"<Podcast(id={self.id}, title={self.title}, category={self.category})>"


class Episode(Base):
    __tablename__ = "episodes"
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    category = Column(String, nullable=False)
    podcast_id = Column(Integer, ForeignKey("podcasts.id", ondelete="CASCADE"), nullable=False, index=True)

    podcast = relationship("Podcast", back_populates="episodes")

    def __repr__(self):
        return f"<Episode(id={self.id}, podcast_id={self.podcast_id}, title={self.title})>"
