from __future__ import annotations

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config
from alembic.util import CommandError
from sqlalchemy import Engine, create_engine, text
from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from family_budget.core.config import Settings
from family_budget.core.errors import DatabaseConnectionError, MigrationError, SeedError
from family_budget.db.init_db import seed_categories

logger = logging.getLogger(__name__)

# Pool bounds: 10 idle connections kept, 100 open at most, recycled after an hour.
POOL_SIZE = 10
MAX_OPEN_CONNECTIONS = 100
POOL_RECYCLE_SECONDS = 60 * 60

MIGRATIONS_DIR = Path(__file__).resolve().parents[1] / "migrations"

DB_STATE_CONNECTED = "connected"
DB_STATE_DISCONNECTED = "disconnected"
DB_STATE_ERROR = "error"


def build_connection_url(settings: Settings) -> str:
    if settings.database_url:
        return settings.database_url

    url = URL.create(
        "mysql+pymysql",
        username=settings.db_user,
        password=settings.db_password,
        host=settings.db_host,
        port=settings.db_port,
        database=settings.db_name,
        query={"charset": "utf8mb4"},
    )
    return url.render_as_string(hide_password=False)


def _is_sqlite_memory(url: URL) -> bool:
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


def _engine_options(url: str) -> dict:
    parsed = make_url(url)
    options: dict = {"pool_pre_ping": True, "future": True}
    # In-memory SQLite runs on a per-thread pool that takes no sizing arguments.
    if not _is_sqlite_memory(parsed):
        options.update(
            pool_size=POOL_SIZE,
            max_overflow=MAX_OPEN_CONNECTIONS - POOL_SIZE,
            pool_recycle=POOL_RECYCLE_SECONDS,
        )
    if parsed.get_backend_name() == "mysql":
        # Timestamps are written as UTC; keep the session clock on UTC too.
        options["connect_args"] = {"init_command": "SET time_zone = '+00:00'"}
    return options


class Database:
    """Owns the engine and session factory for one application instance."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.engine: Engine | None = None
        self.SessionLocal: sessionmaker[Session] | None = None

    def connect(self) -> None:
        url = build_connection_url(self.settings)
        try:
            engine = create_engine(url, **_engine_options(url))
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except (SQLAlchemyError, ImportError, TypeError) as exc:
            raise DatabaseConnectionError(f"failed to connect to database: {exc}") from exc

        self.engine = engine
        self.SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
        logger.info("Database connected successfully")

    def migrate(self) -> None:
        engine = self._require_engine()

        cfg = Config()
        cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
        try:
            with engine.begin() as connection:
                cfg.attributes["connection"] = connection
                command.upgrade(cfg, "head")
        except (CommandError, SQLAlchemyError) as exc:
            raise MigrationError(f"failed to migrate database: {exc}") from exc

        logger.info("Database migration completed successfully")

    def seed(self) -> None:
        db = self.session()
        try:
            seed_categories(db)
        except SQLAlchemyError as exc:
            db.rollback()
            raise SeedError(f"failed to seed categories: {exc}") from exc
        finally:
            db.close()

    def ping(self) -> str:
        """Report database liveness as connected / disconnected / error."""

        if self.engine is None:
            return DB_STATE_ERROR
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError:
            logger.warning("Database ping failed", exc_info=True)
            return DB_STATE_DISCONNECTED
        return DB_STATE_CONNECTED

    def session(self) -> Session:
        if self.SessionLocal is None:
            raise DatabaseConnectionError("database is not connected")
        return self.SessionLocal()

    def dispose(self) -> None:
        if self.engine is not None:
            self.engine.dispose()
            self.engine = None
            self.SessionLocal = None

    def _require_engine(self) -> Engine:
        if self.engine is None:
            raise DatabaseConnectionError("database is not connected")
        return self.engine
