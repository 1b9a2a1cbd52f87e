class HarnessError(Exception):
    """Base class for every failure the fixture runner classifies."""


class ConfigurationError(HarnessError):
    """Setup is unusable: bad base URI, fixture table or path expression."""


class NetworkError(HarnessError):
    def __init__(self, url: str, reason: str):
        super().__init__(f"GET {url} failed: {reason}")
        self.url = url
        self.reason = reason


class RequestTimeoutError(NetworkError, TimeoutError):
    pass


class UnexpectedStatusError(HarnessError):
    def __init__(self, url: str, expected: int, actual: int):
        super().__init__(f"GET {url} returned status {actual}, expected {expected}")
        self.url = url
        self.expected = expected
        self.actual = actual


class UnexpectedContentTypeError(HarnessError):
    def __init__(self, url: str, expected: str, actual: str | None):
        super().__init__(
            f"GET {url} returned content type {actual or '<none>'}, expected {expected}"
        )
        self.url = url
        self.expected = expected
        self.actual = actual


class ExtractionError(HarnessError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot extract '{path}': {reason}")
        self.path = path
        self.reason = reason


class PlaceNameMismatchError(AssertionError):
    def __init__(self, expected: str, actual: str):
        super().__init__(f"expected place name {expected!r}, got {actual!r}")
        self.expected = expected
        self.actual = actual
