from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool


class Base(DeclarativeBase):
    """Base ORM para todos los modelos."""
    pass


def _engine_options(url: str) -> dict[str, Any]:
    if not url.startswith("sqlite"):
        return {}
    # FastAPI ejecuta los endpoints sync en un threadpool
    options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
    if url.endswith("://") or ":memory:" in url:
        # una sola conexión compartida, si no cada sesión vería una DB vacía
        options["poolclass"] = StaticPool
    return options


class Database:
    """Engine + fábrica de sesiones para una URL dada."""

    def __init__(self, url: str, echo: bool = False) -> None:
        self.url = url
        self.engine = create_engine(
            url,
            echo=echo,               # True para ver las queries
            future=True,
            **_engine_options(url),
        )
        self.SessionLocal = sessionmaker(
            bind=self.engine,
            autoflush=False,
            expire_on_commit=False,
        )

    def create_all(self) -> None:
        """Crea las tablas si no existen."""
        # registra los modelos en el metadata
        from . import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()

    @contextmanager
    def session(self) -> Iterator[Session]:
        """
        Context manager para manejar correctamente la sesión:
        - commit si todo va bien
        - rollback ante excepciones
        - close siempre
        """
        session: Session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
