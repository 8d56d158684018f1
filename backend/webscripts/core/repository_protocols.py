"""Boundary Protocols — contracts between the resolver and the content repository.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Every repository lookup returns None when the target does not exist (never raises for absence)
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: boundary methods are async because implementations do IO
"""

from dataclasses import dataclass
from typing import Protocol


class NodeLike(Protocol):
    """Structural contract for an addressable repository node.

    The resolver only needs node_ref and child_by_name_path; the remaining
    attributes feed the route's NodeResponse.
    """
    name: str

    @property
    def id(self) -> str: ...

    @property
    def node_ref(self) -> str: ...

    @property
    def node_type(self) -> str: ...

    @property
    def site_id(self) -> str | None: ...

    @property
    def container_name(self) -> str | None: ...

    async def child_by_name_path(self, path: str) -> "NodeLike | None": ...


class SiteLike(Protocol):
    """Structural contract for a site — owns named containers."""
    async def get_container(self, container_id: str) -> NodeLike | None: ...


class SiteService(Protocol):
    """Site lookup capability."""
    async def get_site(self, site_id: str) -> SiteLike | None: ...


class SearchService(Protocol):
    """Node-reference search capability."""
    async def find_node(self, reference: str) -> NodeLike | None: ...


class StatusReporter(Protocol):
    """Receives the status code/message for the current request."""
    def set_code(self, code: int, message: str) -> None: ...


@dataclass
class ContentServices:
    """Repository capabilities handed to the resolver for one request."""
    site_service: SiteService
    search: SearchService
