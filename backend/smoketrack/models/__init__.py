"""ORM Models - SQLAlchemy declarative models for all persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every row carries user_id; ownership is checked in services, not here

Design Decisions:
    - One file per entity
    - All models imported here so string-based relationship() references resolve
      before the first query
"""

from smoketrack.models.profile import Profile  # noqa: F401
from smoketrack.models.supply import Supply  # noqa: F401
from smoketrack.models.event import Event  # noqa: F401
from smoketrack.models.violation_log import ViolationLog  # noqa: F401
