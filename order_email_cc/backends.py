"""User-meta storage backends.

The host platform owns user profiles; these adapters expose its per-user
key/value storage through one small interface.  ``SqlUserMetaBackend`` is
used by the standalone admin API, ``InMemoryUserMetaBackend`` by tests and
embedding hosts that keep profiles elsewhere.
"""

from __future__ import annotations

import abc

import structlog
from sqlalchemy import Text, create_engine, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker

from .models import UserId

logger = structlog.get_logger()


class UserMetaBackend(abc.ABC):
    """Per-user string values keyed by a meta key."""

    @abc.abstractmethod
    def get(self, user_id: UserId, key: str) -> str | None:
        """Return the stored value, or None if nothing was ever stored."""
        ...

    @abc.abstractmethod
    def set(self, user_id: UserId, key: str, value: str) -> None:
        """Store *value*, replacing any previous one (last write wins)."""
        ...


class InMemoryUserMetaBackend(UserMetaBackend):
    def __init__(self) -> None:
        self._values: dict[tuple[str, str], str] = {}

    def get(self, user_id: UserId, key: str) -> str | None:
        return self._values.get((str(user_id), key))

    def set(self, user_id: UserId, key: str, value: str) -> None:
        self._values[(str(user_id), key)] = value


# ----------------------------------------------------------------------
# SQLAlchemy
# ----------------------------------------------------------------------


class Base(DeclarativeBase):
    pass


class UserMeta(Base):
    __tablename__ = "user_meta"

    user_id: Mapped[str] = mapped_column(Text, primary_key=True)
    meta_key: Mapped[str] = mapped_column(Text, primary_key=True)
    meta_value: Mapped[str] = mapped_column(Text, nullable=False, default="")


class SqlUserMetaBackend(UserMetaBackend):
    """User-meta rows in a relational database."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self._session = sessionmaker(engine, class_=Session, expire_on_commit=False)

    @classmethod
    def from_url(cls, url: str) -> SqlUserMetaBackend:
        return cls(create_engine(url, echo=False))

    def create_all(self) -> None:
        Base.metadata.create_all(self.engine)
        logger.info("user_meta_table_ready", url=self.engine.url.render_as_string(hide_password=True))

    def get(self, user_id: UserId, key: str) -> str | None:
        with self._session() as session:
            stmt = select(UserMeta.meta_value).where(
                UserMeta.user_id == str(user_id),
                UserMeta.meta_key == key,
            )
            return session.execute(stmt).scalar_one_or_none()

    def set(self, user_id: UserId, key: str, value: str) -> None:
        with self._session() as session:
            row = session.get(UserMeta, (str(user_id), key))
            if row is None:
                session.add(UserMeta(user_id=str(user_id), meta_key=key, meta_value=value))
            else:
                row.meta_value = value
            session.commit()

    def close(self) -> None:
        self.engine.dispose()
