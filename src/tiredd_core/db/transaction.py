"""Transaction boundaries shared by every read and write path of the core."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from tiredd_core.core.errors import TransientStoreError

logger = logging.getLogger(__name__)

T = TypeVar("T")

MAX_ATTEMPTS = 2


def _with_retry(db: Session, operation: Callable[[], T], commit: bool) -> T:
    attempt = 0
    while True:
        attempt += 1
        try:
            result = operation()
            if commit:
                db.commit()
            return result
        except OperationalError as exc:
            db.rollback()
            if attempt >= MAX_ATTEMPTS:
                logger.error("Store operation failed after %d attempts", attempt)
                raise TransientStoreError() from exc
            logger.warning("Transient store failure, retrying once: %s", exc.orig)
        except Exception:
            if commit:
                db.rollback()
            raise


def run_transaction(db: Session, operation: Callable[[], T]) -> T:
    """Run ``operation`` and commit, retrying once on a transient store error.

    Any failure rolls the session back before propagating, so nothing from a
    failed attempt is ever committed. A second ``OperationalError`` surfaces as
    :class:`TransientStoreError`.
    """
    return _with_retry(db, operation, commit=True)


def run_read(db: Session, operation: Callable[[], T]) -> T:
    """Run a read-only ``operation`` with the same retry policy, without committing."""
    return _with_retry(db, operation, commit=False)
