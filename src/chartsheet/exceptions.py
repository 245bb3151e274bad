class ChartsheetError(Exception):
    """Base exception for chartsheet."""


class FetchError(ChartsheetError):
    """Raised when an HTTP request for a chart fails."""

    def __init__(self, url: str, status_code: int):
        self.url = url
        self.status_code = status_code
        super().__init__(f"HTTP {status_code} fetching {url}")


class ParseError(ChartsheetError):
    """Raised when chart text cannot be extracted from a fetched page."""

    def __init__(self, location: str, reason: str):
        self.location = location
        self.reason = reason
        super().__init__(f"Parse error for {location}: {reason}")


class SourceError(ChartsheetError):
    """Raised when a local chart source cannot be read."""

    def __init__(self, location: str, reason: str):
        self.location = location
        self.reason = reason
        super().__init__(f"Cannot read {location}: {reason}")


class UnsupportedSourceError(ChartsheetError):
    """Raised when no source matches the given location."""

    def __init__(self, location: str):
        self.location = location
        super().__init__(f"No source found for: {location}")


class UnsupportedRendererError(ChartsheetError):
    """Raised when no renderer is registered under the given name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No renderer named: {name}")


class ConfigError(ChartsheetError):
    """Raised when a render options file is invalid."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid config {path}: {reason}")
