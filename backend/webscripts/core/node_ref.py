"""Node References — compose and parse `store_type://store_id/id` strings.

Invariants:
    - Pure functions: no IO, no async, no DB
    - compose_node_ref(parse_node_ref(s)) == s for every string parse accepts
    - parse_node_ref never raises; malformed input returns None

Design Decisions:
    - Frozen dataclass: hashable, usable as a lookup key
    - The id part may itself contain '/' (only the first one after the store id splits)
"""

from dataclasses import dataclass

_SCHEME_SEPARATOR = "://"


@dataclass(frozen=True)
class NodeRef:
    """Store-type / store-id / identifier triple addressing a single node."""
    store_type: str
    store_id: str
    id: str

    def __str__(self) -> str:
        return compose_node_ref(self.store_type, self.store_id, self.id)


def compose_node_ref(store_type: str, store_id: str, node_id: str) -> str:
    return f"{store_type}{_SCHEME_SEPARATOR}{store_id}/{node_id}"


def parse_node_ref(reference: str) -> NodeRef | None:
    """Split a reference string into its triple, or None if malformed."""
    store_type, sep, rest = reference.partition(_SCHEME_SEPARATOR)
    if not sep:
        return None
    store_id, sep, node_id = rest.partition("/")
    if not sep or not (store_type and store_id and node_id):
        return None
    return NodeRef(store_type, store_id, node_id)
