"""Core package for prj."""

from .types import (
    UpstreamKind,
    RepoIdentifier,
    InspectionResult,
    BatchWidths,
)

from .errors import (
    PrjError,
    ParseError,
    ParseErrorKind,
    InspectionError,
    InspectionErrorKind,
    RegistryUnavailable,
)

__all__ = [
    # Types
    'UpstreamKind',
    'RepoIdentifier',
    'InspectionResult',
    'BatchWidths',
    # Errors
    'PrjError',
    'ParseError',
    'ParseErrorKind',
    'InspectionError',
    'InspectionErrorKind',
    'RegistryUnavailable',
]
