"""ORM models package for database tables.

- ResumeSnapshot: the persisted resume document, keyed by storage key

All models inherit from the shared Base declarative class defined in data.db.
"""

from prat_resume.data.db import Base
from prat_resume.data.models.snapshot import ResumeSnapshot

__all__ = ["Base", "ResumeSnapshot"]
