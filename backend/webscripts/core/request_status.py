"""Request Status — per-request status record written by the resolver.

Invariants:
    - A fresh RequestStatus is OK (200, no message, no failure)
    - set_code() with a 4xx/5xx code records the matching ResolutionFailure
    - Last write wins; the resolver writes at most once per request

Design Decisions:
    - Explicit object passed into the resolver instead of an ambient global
    - Failure kind derived from the code so callers can route on either
"""

from dataclasses import dataclass

from webscripts.core.domain_types import ResolutionFailure

STATUS_OK = 200
STATUS_NOT_FOUND = 404
STATUS_INTERNAL_SERVER_ERROR = 500

_FAILURE_BY_CODE = {
    STATUS_NOT_FOUND: ResolutionFailure.NOT_FOUND,
    STATUS_INTERNAL_SERVER_ERROR: ResolutionFailure.INVALID_REQUEST,
}


@dataclass
class RequestStatus:
    """Status code and message observable after a resolution attempt."""
    code: int = STATUS_OK
    message: str | None = None
    failure: ResolutionFailure | None = None

    def set_code(self, code: int, message: str) -> None:
        self.code = code
        self.message = message
        self.failure = _FAILURE_BY_CODE.get(code)

    @property
    def is_error(self) -> bool:
        return self.code >= 400
