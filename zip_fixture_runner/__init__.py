from .errors import (
    ConfigurationError,
    ExtractionError,
    HarnessError,
    NetworkError,
    PlaceNameMismatchError,
    RequestTimeoutError,
    UnexpectedContentTypeError,
    UnexpectedStatusError,
)
from .fixtures import ZIP_CODES_AND_PLACES, ZipCase
from .runner import CaseResult, FixtureRunner, RunReport

__all__ = [
    "CaseResult",
    "ConfigurationError",
    "ExtractionError",
    "FixtureRunner",
    "HarnessError",
    "NetworkError",
    "PlaceNameMismatchError",
    "RequestTimeoutError",
    "RunReport",
    "UnexpectedContentTypeError",
    "UnexpectedStatusError",
    "ZIP_CODES_AND_PLACES",
    "ZipCase",
]
