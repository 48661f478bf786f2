"""Error types for the project registry."""

from enum import Enum


class PrjError(Exception):
    """Base class for all prj errors."""


class ParseErrorKind(Enum):
    """Reason an identifier was rejected."""
    MALFORMED_TRANSPORT = "malformed transport"
    MALFORMED_PATH = "malformed path"


class ParseError(PrjError):
    """A raw identifier lacks the transport:owner/name structure."""

    def __init__(self, kind: ParseErrorKind, raw: str):
        self.kind = kind
        self.raw = raw
        super().__init__(f"{kind.value}: {raw}")


class InspectionErrorKind(Enum):
    """Reason an installed checkout could not be inspected."""
    BRANCH_RESOLUTION_FAILED = "branch resolution failed"
    FETCH_FAILED = "fetch failed"


class InspectionError(PrjError):
    """Inspection of a single checkout failed."""

    def __init__(self, kind: InspectionErrorKind, location: str, detail: str = ""):
        self.kind = kind
        self.location = location
        self.detail = detail
        message = f"{kind.value} for {location}"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class RegistryUnavailable(PrjError):
    """The registry file is missing or unreadable."""

    def __init__(self, path: str, reason: str = "not found"):
        self.path = path
        self.reason = reason
        super().__init__(f"Registry {path} unavailable ({reason})")
