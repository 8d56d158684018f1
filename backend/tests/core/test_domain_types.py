"""Domain Types — verifies enum members and values."""

from webscripts.core.domain_types import NodeType, ResolutionFailure


def test_resolution_failure_has_two_kinds():
    assert set(ResolutionFailure) == {
        ResolutionFailure.NOT_FOUND,
        ResolutionFailure.INVALID_REQUEST,
    }


def test_enums_serialize_to_string():
    assert ResolutionFailure.NOT_FOUND.value == "not_found"
    assert NodeType.FOLDER.value == "folder"
    assert NodeType.CONTENT.value == "content"
