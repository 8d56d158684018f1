"""Node Routes — web script endpoints that resolve the request node.

Invariants:
    - Both URL families funnel into get_request_node (services/request_node.py)
    - A fresh RequestStatus per request; a failed status becomes a WebScriptError
    - Routes never contain lookup logic (delegate to the resolver)

Design Decisions:
    - Node-reference routes live under /node, site routes under /site, mirroring
      the two template-argument families
    - Repository capabilities injected via get_content_services so tests can
      swap the adapter
"""

import logging

from fastapi import APIRouter, Depends

from webscripts.core.errors import ErrorContext, error_from_status
from webscripts.core.node_ref import compose_node_ref
from webscripts.core.repository_protocols import ContentServices
from webscripts.core.request_status import RequestStatus
from webscripts.infrastructure.content_repository import get_content_services
from webscripts.schemas.node import NodeResponse, RequestArgs
from webscripts.services.request_node import get_request_node

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["nodes"])


@router.get(
    "/node/{store_type}/{store_id}/{id}", response_model=NodeResponse,
)
async def get_node_by_reference(
    store_type: str,
    store_id: str,
    id: str,
    services: ContentServices = Depends(get_content_services),
):
    """Resolve a node from its store_type/store_id/id reference."""
    args = RequestArgs(store_type=store_type, store_id=store_id, id=id)
    return await _resolve(args, services)


@router.get("/site/{site}/{container}", response_model=NodeResponse)
async def get_site_container(
    site: str,
    container: str,
    services: ContentServices = Depends(get_content_services),
):
    """Resolve the container node of a site."""
    args = RequestArgs(site=site, container=container)
    return await _resolve(args, services)


@router.get(
    "/site/{site}/{container}/{path:path}", response_model=NodeResponse,
)
async def get_site_node(
    site: str,
    container: str,
    path: str,
    services: ContentServices = Depends(get_content_services),
):
    """Resolve a node by name path below a site container."""
    args = RequestArgs(site=site, container=container, path=path)
    return await _resolve(args, services)


async def _resolve(args: RequestArgs, services: ContentServices) -> NodeResponse:
    status = RequestStatus()
    node = await get_request_node(args, services, status)
    if node is None:
        raise error_from_status(status, _error_context(args))
    return NodeResponse(
        node_ref=node.node_ref,
        id=node.id,
        name=node.name,
        node_type=node.node_type,
        site=node.site_id,
        container=node.container_name,
    )


def _error_context(args: RequestArgs) -> ErrorContext:
    node_ref = None
    if args.store_type and args.store_id and args.id:
        node_ref = compose_node_ref(args.store_type, args.store_id, args.id)
    return ErrorContext(
        site_id=args.site,
        container_id=args.container,
        path=args.path,
        node_ref=node_ref,
    )
