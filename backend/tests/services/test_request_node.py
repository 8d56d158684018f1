"""Request Node Resolver — dispatch between node-reference and site lookups.

Tests cover:
    - Site + container + empty/absent path returns the container node
    - Site + container + sub-path returns the node at that path
    - Unknown site, unknown container, unknown path → 404 status, None result
    - Unresolvable node reference → 404 status, None result
    - Neither store_type nor site → 500 status, None result
    - store_type takes precedence over site
    - Incomplete node reference never reaches search
    - Failure messages carry the identifiers (and the write-permission hint)

Design Decisions:
    - Hand-written fakes for the repository Protocols: no DB, call log per fake
"""

import logging

from webscripts.core.domain_types import ResolutionFailure
from webscripts.core.repository_protocols import ContentServices
from webscripts.core.request_status import RequestStatus
from webscripts.schemas.node import RequestArgs
from webscripts.services.request_node import (
    find_from_reference, find_node_in_site, get_request_node,
)


class FakeNode:
    def __init__(self, name: str, node_ref: str, children: dict | None = None):
        self.name = name
        self.node_ref = node_ref
        self.children = children or {}
        self.paths_requested: list[str] = []

    async def child_by_name_path(self, path):
        self.paths_requested.append(path)
        node = self
        for segment in (s for s in path.split("/") if s):
            node = node.children.get(segment)
            if node is None:
                return None
        return node


class FakeSite:
    def __init__(self, containers: dict):
        self.containers = containers

    async def get_container(self, container_id):
        return self.containers.get(container_id)


class FakeSiteService:
    def __init__(self, sites: dict):
        self.sites = sites
        self.calls: list[str] = []

    async def get_site(self, site_id):
        self.calls.append(site_id)
        return self.sites.get(site_id)


class FakeSearch:
    def __init__(self, nodes: dict):
        self.nodes = nodes
        self.calls: list[str] = []

    async def find_node(self, reference):
        self.calls.append(reference)
        return self.nodes.get(reference)


def _repository():
    report = FakeNode("q3.txt", "workspace://SpacesStore/report-1")
    plans = FakeNode("Plans", "workspace://SpacesStore/plans-1", {"q3.txt": report})
    library = FakeNode(
        "documentLibrary", "workspace://SpacesStore/lib-1", {"Plans": plans},
    )
    site_service = FakeSiteService(
        {"marketing": FakeSite({"documentLibrary": library})},
    )
    search = FakeSearch({"workspace://SpacesStore/report-1": report})
    services = ContentServices(site_service=site_service, search=search)
    return services, {"library": library, "plans": plans, "report": report}


# --- site/container/path ------------------------------------------------------

async def test_empty_path_returns_container_node():
    services, nodes = _repository()
    status = RequestStatus()
    args = RequestArgs(site="marketing", container="documentLibrary", path="")

    node = await get_request_node(args, services, status)

    assert node is nodes["library"]
    assert not status.is_error
    assert nodes["library"].paths_requested == []


async def test_absent_path_returns_container_node():
    services, nodes = _repository()
    status = RequestStatus()
    args = RequestArgs(site="marketing", container="documentLibrary")

    assert await get_request_node(args, services, status) is nodes["library"]


async def test_sub_path_returns_node_at_path():
    services, nodes = _repository()
    status = RequestStatus()
    args = RequestArgs(
        site="marketing", container="documentLibrary", path="Plans/q3.txt",
    )

    node = await get_request_node(args, services, status)

    assert node is nodes["report"]
    assert status.code == 200


async def test_unknown_site_sets_not_found():
    services, _ = _repository()
    status = RequestStatus()
    args = RequestArgs(site="nowhere", container="documentLibrary")

    node = await get_request_node(args, services, status)

    assert node is None
    assert status.code == 404
    assert status.failure is ResolutionFailure.NOT_FOUND
    assert status.message == "Site nowhere does not exist"


async def test_unknown_container_sets_not_found_with_permission_hint():
    services, _ = _repository()
    status = RequestStatus()
    args = RequestArgs(site="marketing", container="wiki")

    node = await get_request_node(args, services, status)

    assert node is None
    assert status.code == 404
    assert "wiki" in status.message
    assert "marketing" in status.message
    assert "No write permission?" in status.message


async def test_missing_container_arg_sets_not_found():
    services, _ = _repository()
    status = RequestStatus()

    node = await find_node_in_site(
        RequestArgs(site="marketing"), services.site_service, status,
    )

    assert node is None
    assert status.failure is ResolutionFailure.NOT_FOUND


async def test_unknown_path_sets_not_found():
    services, _ = _repository()
    status = RequestStatus()
    args = RequestArgs(
        site="marketing", container="documentLibrary", path="Plans/missing.txt",
    )

    node = await get_request_node(args, services, status)

    assert node is None
    assert status.code == 404
    assert status.message == (
        'No node found for the given path: "Plans/missing.txt" '
        "in container documentLibrary of site marketing"
    )


# --- node reference -----------------------------------------------------------

async def test_reference_resolves_through_search():
    services, nodes = _repository()
    status = RequestStatus()
    args = RequestArgs(store_type="workspace", store_id="SpacesStore", id="report-1")

    node = await get_request_node(args, services, status)

    assert node is nodes["report"]
    assert services.search.calls == ["workspace://SpacesStore/report-1"]


async def test_unresolvable_reference_sets_not_found():
    services, _ = _repository()
    status = RequestStatus()
    args = RequestArgs(store_type="workspace", store_id="SpacesStore", id="ghost")

    node = await get_request_node(args, services, status)

    assert node is None
    assert status.code == 404
    assert status.message == "Node workspace://SpacesStore/ghost does not exist"


async def test_store_type_takes_precedence_over_site():
    services, nodes = _repository()
    status = RequestStatus()
    args = RequestArgs(
        store_type="workspace", store_id="SpacesStore", id="report-1",
        site="marketing", container="documentLibrary",
    )

    node = await get_request_node(args, services, status)

    assert node is nodes["report"]
    assert services.site_service.calls == []


async def test_blank_store_type_falls_back_to_site():
    services, nodes = _repository()
    status = RequestStatus()
    args = RequestArgs(store_type="", site="marketing", container="documentLibrary")

    assert await get_request_node(args, services, status) is nodes["library"]
    assert services.search.calls == []


async def test_incomplete_reference_is_invalid_and_skips_search():
    services, _ = _repository()
    status = RequestStatus()

    node = await find_from_reference(
        RequestArgs(store_type="workspace", store_id="SpacesStore"),
        services.search, status,
    )

    assert node is None
    assert status.code == 500
    assert status.failure is ResolutionFailure.INVALID_REQUEST
    assert services.search.calls == []


# --- misconfigured request ----------------------------------------------------

async def test_no_scheme_sets_invalid_request():
    services, _ = _repository()
    status = RequestStatus()

    node = await get_request_node(RequestArgs(), services, status)

    assert node is None
    assert status.code == 500
    assert status.failure is ResolutionFailure.INVALID_REQUEST
    assert "webscript incorrectly configured" in status.message
    assert services.site_service.calls == []
    assert services.search.calls == []


async def test_container_without_site_is_invalid_request():
    services, _ = _repository()
    status = RequestStatus()

    node = await get_request_node(
        RequestArgs(container="documentLibrary", path="Plans"), services, status,
    )

    assert node is None
    assert status.code == 500


# --- logging ------------------------------------------------------------------

async def test_not_found_logged_with_lookup_extras(caplog):
    services, _ = _repository()
    status = RequestStatus()

    with caplog.at_level(logging.WARNING, logger="webscripts.services.request_node"):
        await get_request_node(
            RequestArgs(site="marketing", container="wiki"), services, status,
        )

    record = caplog.records[-1]
    assert record.levelno == logging.WARNING
    assert record.site_id == "marketing"
    assert record.container_id == "wiki"
    assert record.status_code == 404
