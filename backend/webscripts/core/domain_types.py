"""Domain Types — enums that replace raw string matching across the codebase.

Invariants:
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum


class ResolutionFailure(str, Enum):
    """Why a request could not be resolved to a node."""
    NOT_FOUND = "not_found"
    INVALID_REQUEST = "invalid_request"


class NodeType(str, Enum):
    """Node kinds stored by the repository adapter — maps to DB `node_type` column."""
    FOLDER = "folder"
    CONTENT = "content"
