from abc import ABC, abstractmethod


class ChartSource(ABC):
    """Abstract base class for places chart text can be loaded from."""

    @classmethod
    @abstractmethod
    def can_handle(cls, location: str) -> bool:
        """Return True if this source can load the given location."""

    @abstractmethod
    def load(self, location: str) -> str:
        """Return the raw chart text stored at location, unmodified.

        Raises a ChartsheetError subclass if the text cannot be loaded.
        """

    def name(self, location: str) -> str:
        """Short human-readable name for location, used for output filenames."""
        return location.rstrip("/").split("/")[-1] or "chart"
