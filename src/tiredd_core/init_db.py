# src/tiredd_core/init_db.py
"""Create all tables and clear out expired sessions without running migrations."""

import logging

from tiredd_core.core.settings import settings
from tiredd_core.db.session import SessionLocal, create_tables
from tiredd_core.services.accounts import AccountDirectory

logger = logging.getLogger(__name__)


def init_db() -> None:
    """Initialize the database by creating all tables."""
    create_tables()


def purge_sessions() -> int:
    """Drop every expired login session; safe to run from cron."""
    with SessionLocal() as db:
        return AccountDirectory(db).purge_expired_sessions()


if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level.upper())
    init_db()
    logger.info("Database initialized, %d expired sessions purged.", purge_sessions())
