"""Snapshot persistence for the resume document.

One serialized document lives under a fixed storage key.  It is read once
when the store starts, rewritten on every change and deleted on reset.  An
unreadable snapshot is treated as absent: the editor starts from the empty
document instead of failing.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from prat_resume.constants import STORAGE_KEY
from prat_resume.data.db import get_session
from prat_resume.data.models import ResumeSnapshot
from prat_resume.models.document import ResumeDocument

logger = logging.getLogger(__name__)

__all__ = ["SnapshotRepository"]


class SnapshotRepository:
    """Load, save and clear the document snapshot stored under one key."""

    def __init__(self, storage_key: str = STORAGE_KEY) -> None:
        self.storage_key = storage_key

    def load(self) -> ResumeDocument | None:
        """Return the saved document, or None if absent or unreadable."""
        try:
            with get_session() as session:
                record = session.get(ResumeSnapshot, self.storage_key)
                payload = record.payload if record else None
        except SQLAlchemyError:
            logger.exception("Failed to read resume snapshot %s", self.storage_key)
            return None

        if payload is None:
            return None

        try:
            return ResumeDocument.from_json(payload)
        except ValidationError as validation_error:
            logger.warning(
                "Discarding unreadable resume snapshot %s: %s",
                self.storage_key,
                validation_error,
            )
            return None

    def save(self, document: ResumeDocument) -> None:
        """Overwrite the snapshot with *document*."""
        payload = document.to_json()
        try:
            with get_session() as session:
                record = session.get(ResumeSnapshot, self.storage_key)
                if record is None:
                    session.add(ResumeSnapshot(storage_key=self.storage_key, payload=payload))
                else:
                    record.payload = payload
        except SQLAlchemyError:
            logger.exception("Failed to save resume snapshot %s", self.storage_key)

    def clear(self) -> None:
        """Delete the snapshot if one exists."""
        try:
            with get_session() as session:
                record = session.get(ResumeSnapshot, self.storage_key)
                if record is not None:
                    session.delete(record)
        except SQLAlchemyError:
            logger.exception("Failed to clear resume snapshot %s", self.storage_key)

    def exists(self) -> bool:
        try:
            with get_session() as session:
                return session.get(ResumeSnapshot, self.storage_key) is not None
        except SQLAlchemyError:
            logger.exception("Failed to read resume snapshot %s", self.storage_key)
            return False
