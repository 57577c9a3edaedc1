"""Process-wide application context."""

from dataclasses import dataclass

from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from src.config import Settings
from src.database import build_engine, build_session_factory


@dataclass(frozen=True)
class AppContext:
    """Resources built once at startup and shared by every request.

    Stored on ``app.state.context``; dependencies read it from the request
    rather than from module globals.
    """

    settings: Settings
    engine: Engine
    session_factory: sessionmaker[Session]

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        engine = build_engine(settings)
        return cls(
            settings=settings,
            engine=engine,
            session_factory=build_session_factory(engine),
        )

    def dispose(self) -> None:
        """Close pooled connections."""
        self.engine.dispose()
