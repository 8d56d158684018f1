"""Node Schemas — typed request arguments and node response payloads.

Invariants:
    - RequestArgs fields are all optional; which ones are set selects the lookup scheme
    - Blank strings are normalised to None only for store_type (it selects the scheme)
    - NodeResponse never exposes ORM internals (parent ids, timestamps)

Design Decisions:
    - One model per boundary: RequestArgs is built by routes from path params,
      NodeResponse is what the client sees
"""

from pydantic import BaseModel, Field, field_validator


class RequestArgs(BaseModel):
    """Template arguments of a web script request."""
    site: str | None = None
    container: str | None = None
    path: str | None = None
    store_type: str | None = None
    store_id: str | None = None
    id: str | None = None

    @field_validator("store_type")
    @classmethod
    def blank_store_type_is_absent(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            return None
        return v

    @property
    def has_node_reference(self) -> bool:
        return self.store_type is not None

    @property
    def has_site(self) -> bool:
        return self.site is not None


class NodeResponse(BaseModel):
    """Public view of a resolved node."""
    node_ref: str
    id: str
    name: str
    node_type: str
    site: str | None = Field(None, description="Owning site, when the node is a site container")
    container: str | None = None
