"""Database handle: engine, session factory and schema helpers"""

from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker

from ..models import Base


class Database:
    """Connection to the bug record store.

    Built explicitly and handed to whoever needs it, so each test (or
    process) can work against its own store.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        connect_args = {}
        if make_url(url).get_backend_name() == "sqlite":
            # Requests may be served from a different thread than the one that opened the connection
            connect_args["check_same_thread"] = False
        self.engine = create_engine(url, echo=echo, connect_args=connect_args)
        self.session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Get database session with automatic cleanup"""
        session = self.session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def create_all(self):
        """Create tables straight from the models, bypassing migrations"""
        Base.metadata.create_all(bind=self.engine)

    def drop_all(self):
        Base.metadata.drop_all(bind=self.engine)

    def dispose(self):
        self.engine.dispose()

    def __repr__(self):
        return f"<Database(url='{make_url(self.url).render_as_string(hide_password=True)}')>"
