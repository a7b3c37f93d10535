"""
Database engine, declarative base and start-up initialization
"""

import logging
import os

from sqlalchemy import create_engine, event
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from app.core.config import settings
from app.services.record_store import RecordStore

logger = logging.getLogger(__name__)

Base = declarative_base()

DEFAULT_GRUPOS = [
    {"id": 1, "nombre": "Ceremonia Religiosa"},
]

DEFAULT_CONCEPTOS = [
    {"id": 1, "nombre": "Alimentos", "subtotal": 0},
    {"id": 2, "nombre": "Transporte", "subtotal": 0},
    {"id": 3, "nombre": "Materiales", "subtotal": 0},
]


def _is_memory_database(url) -> bool:
    return url.database in (None, "", ":memory:")


def ensure_data_directory(database_url: str) -> None:
    """Create the directory holding a file-based SQLite database"""
    url = make_url(database_url)
    if not url.drivername.startswith("sqlite") or _is_memory_database(url):
        return
    data_dir = os.path.dirname(os.path.abspath(url.database))
    if not os.path.isdir(data_dir):
        os.makedirs(data_dir, exist_ok=True)
        logger.info("Created data directory: %s", data_dir)


def build_engine(
    database_url: str = None,
    echo: bool = None,
    busy_timeout: float = None,
    foreign_keys: bool = None,
) -> Engine:
    """Create a SQLite engine with the connection pragmas applied on connect"""
    database_url = database_url or settings.DATABASE_URL
    echo = settings.SQL_ECHO if echo is None else echo
    busy_timeout = settings.DB_BUSY_TIMEOUT if busy_timeout is None else busy_timeout
    foreign_keys = settings.SQLITE_FOREIGN_KEYS if foreign_keys is None else foreign_keys

    url = make_url(database_url)
    in_memory = _is_memory_database(url)

    kwargs = {
        "echo": echo,
        "connect_args": {"check_same_thread": False, "timeout": busy_timeout},
    }
    if in_memory:
        # A single shared connection, otherwise every checkout sees an empty database
        kwargs["poolclass"] = StaticPool
    else:
        ensure_data_directory(database_url)
        kwargs["pool_pre_ping"] = True

    engine = create_engine(database_url, **kwargs)

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragmas(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute(f"PRAGMA foreign_keys = {'ON' if foreign_keys else 'OFF'}")
        cursor.execute(f"PRAGMA busy_timeout = {int(busy_timeout * 1000)}")
        if in_memory:
            cursor.execute("PRAGMA journal_mode = MEMORY")
        else:
            cursor.execute("PRAGMA journal_mode = WAL")
            cursor.execute("PRAGMA synchronous = NORMAL")
        cursor.close()

    return engine


def seed_defaults(target: Engine) -> None:
    """Insert the default grupos and conceptos, leaving existing rows untouched"""
    from app.models import Concepto, Grupo

    with target.begin() as conn:
        conn.execute(
            sqlite_insert(Grupo.__table__).values(DEFAULT_GRUPOS).on_conflict_do_nothing()
        )
        conn.execute(
            sqlite_insert(Concepto.__table__).values(DEFAULT_CONCEPTOS).on_conflict_do_nothing()
        )
    logger.info("Default grupos/conceptos data inserted/verified")


def init_db(target: Engine = None, seed: bool = None) -> None:
    """Create every table and, when enabled, the default seed rows"""
    import app.models  # noqa: F401  registers the tables on Base.metadata

    target = target or engine
    seed = settings.SEED_DEFAULTS if seed is None else seed

    Base.metadata.create_all(bind=target)
    logger.info("Database tables created/verified")
    if seed:
        seed_defaults(target)


engine = build_engine()
store = RecordStore(engine)


def get_store() -> RecordStore:
    """FastAPI dependency returning the record store bound to the shared engine"""
    return store


def log_db_path_on_startup() -> None:
    """Log which database file is in use"""
    url = engine.url
    logger.info("DB driver in use: %s", url.drivername)
    if url.drivername.startswith("sqlite"):
        db_file = url.database
        abs_path = os.path.abspath(db_file) if db_file and db_file != ":memory:" else "<memory>"
        logger.info("DB path: %s (abs=%s)", db_file, abs_path)
