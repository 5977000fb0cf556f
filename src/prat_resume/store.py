"""The single state holder for the resume document.

``ResumeStore.replace`` is the only place the current document changes.
Higher-level edits go through ``ResumeStore.update``, which computes the
next document from the current one and replaces it while holding the store
lock, so updates are serialized even when callers run on several threads.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from prat_resume.models.demo import demo_document
from prat_resume.models.document import ResumeDocument, empty_document
from prat_resume.services.persistence import SnapshotRepository

logger = logging.getLogger(__name__)

__all__ = ["DocumentListener", "ResumeStore"]

DocumentListener = Callable[[ResumeDocument], None]


class ResumeStore:
    """Owns the current :class:`ResumeDocument` and notifies listeners on change."""

    def __init__(
        self,
        initial: ResumeDocument | None = None,
        repository: SnapshotRepository | None = None,
    ) -> None:
        """Create a store.

        Args:
            initial: Starting document.  When omitted, the snapshot from
                *repository* is used, falling back to the empty document.
            repository: Where every change is persisted.  None keeps the
                store purely in memory.
        """
        self._lock = threading.RLock()
        self._repository = repository
        self._listeners: list[DocumentListener] = []

        if initial is None and repository is not None:
            initial = repository.load()
        self._document = initial if initial is not None else empty_document()

    @property
    def document(self) -> ResumeDocument:
        return self._document

    def subscribe(self, listener: DocumentListener) -> Callable[[], None]:
        """Call *listener* after every change.  Returns an unsubscribe callable."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def replace(self, new_document: ResumeDocument) -> None:
        """Make *new_document* the current document."""
        if not isinstance(new_document, ResumeDocument):
            raise TypeError(f"Expected ResumeDocument, got {type(new_document).__name__}")
        with self._lock:
            self._document = new_document
            if self._repository is not None:
                self._repository.save(new_document)
            self._notify()

    def update(self, fn: Callable[[ResumeDocument], ResumeDocument]) -> ResumeDocument:
        """Replace the document with ``fn(current)`` and return the new value.

        If *fn* raises, the current document is left untouched.
        """
        with self._lock:
            new_document = fn(self._document)
            if new_document is not self._document:
                self.replace(new_document)
            return new_document

    def reset(self, confirmed: bool) -> bool:
        """Clear all data and the saved snapshot.

        Nothing happens unless *confirmed* is True.  Returns whether the
        reset took effect.
        """
        if not confirmed:
            return False
        with self._lock:
            self._document = empty_document()
            if self._repository is not None:
                self._repository.clear()
            self._notify()
        logger.info("Resume data reset")
        return True

    def load_demo(self, confirmed: bool) -> bool:
        """Overwrite the current document with the demo resume when confirmed."""
        if not confirmed:
            return False
        self.replace(demo_document())
        return True

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._document)
