"""Request Node Resolver — locate the node addressed by a web script request.

Invariants:
    - Two URL families supported: node reference (store_type/store_id/id)
      and site related (site/container/path); callers never see the difference
    - store_type wins when both families are present
    - On failure: status is set (404 not found, 500 misconfigured request) and
      None is returned — nothing is raised for lookup misses
    - Empty or absent path resolves to the container node itself

Design Decisions:
    - Request args, status and repository services are explicit parameters
      (no ambient request/status/service globals)
    - Async: every lookup may hit the database; the lookups run strictly in sequence
"""

import logging

from webscripts.core.node_ref import compose_node_ref
from webscripts.core.repository_protocols import (
    ContentServices, NodeLike, SearchService, SiteService, StatusReporter,
)
from webscripts.core.request_status import (
    STATUS_INTERNAL_SERVER_ERROR, STATUS_NOT_FOUND,
)
from webscripts.schemas.node import RequestArgs

logger = logging.getLogger(__name__)


async def find_node_in_site(
    args: RequestArgs, site_service: SiteService, status: StatusReporter,
) -> NodeLike | None:
    """Resolve site -> container -> optional name path."""
    site_id = args.site
    container_id = args.container or ""
    path = args.path or ""

    site = await site_service.get_site(site_id)
    if site is None:
        _not_found(status, f"Site {site_id} does not exist", site_id=site_id)
        return None

    node = await site.get_container(container_id)
    if node is None:
        _not_found(
            status,
            f"The container {container_id} could not be found in site "
            f"{site_id}. (No write permission?)",
            site_id=site_id, container_id=container_id,
        )
        return None

    if path:
        node = await node.child_by_name_path(path)
        if node is None:
            _not_found(
                status,
                f'No node found for the given path: "{path}" in container '
                f"{container_id} of site {site_id}",
                site_id=site_id, container_id=container_id, path=path,
            )
            return None

    return node


async def find_from_reference(
    args: RequestArgs, search: SearchService, status: StatusReporter,
) -> NodeLike | None:
    """Resolve a store_type://store_id/id reference through search."""
    if not args.store_id or not args.id:
        _invalid_request(
            status,
            "Incomplete node reference: store_type, store_id and id are all required",
        )
        return None

    node_ref = compose_node_ref(args.store_type, args.store_id, args.id)
    node = await search.find_node(node_ref)
    if node is None:
        _not_found(status, f"Node {node_ref} does not exist", node_ref=node_ref)
    return node


async def get_request_node(
    args: RequestArgs, services: ContentServices, status: StatusReporter,
) -> NodeLike | None:
    """Return the node referenced by the request, or None with status set."""
    if args.has_node_reference:
        node = await find_from_reference(args, services.search, status)
    elif args.has_site:
        node = await find_node_in_site(args, services.site_service, status)
    else:
        _invalid_request(
            status,
            "Unknown request parameters (webscript incorrectly configured?)",
        )
        return None

    if node is not None:
        logger.debug("Resolved request node %s", node.node_ref)
    return node


def _not_found(status: StatusReporter, message: str, **extra: str) -> None:
    status.set_code(STATUS_NOT_FOUND, message)
    logger.warning(message, extra={"status_code": STATUS_NOT_FOUND, **extra})


def _invalid_request(status: StatusReporter, message: str) -> None:
    status.set_code(STATUS_INTERNAL_SERVER_ERROR, message)
    logger.warning(message, extra={"status_code": STATUS_INTERNAL_SERVER_ERROR})
