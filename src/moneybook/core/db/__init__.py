"""Database utilities - engine, session, migrations."""

from src.moneybook.core.db.engine import dispose_engine, get_engine
from src.moneybook.core.db.migrations import run_migrations_async, run_migrations_sync
from src.moneybook.core.db.session import get_session

__all__ = [
    "dispose_engine",
    "get_engine",
    "get_session",
    "run_migrations_async",
    "run_migrations_sync",
]
