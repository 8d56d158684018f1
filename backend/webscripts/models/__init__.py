"""ORM Models — SQLAlchemy declarative models for sites and repository nodes.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from webscripts.models.site import Site  # noqa: F401
from webscripts.models.node import Node  # noqa: F401
