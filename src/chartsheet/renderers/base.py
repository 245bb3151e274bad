from abc import ABC, abstractmethod
from typing import ClassVar

from ..config import RenderOptions
from ..models import Sheet


class Renderer(ABC):
    """Abstract base class for drawing surfaces that consume a :class:`Sheet`."""

    name: ClassVar[str]
    extension: ClassVar[str]  # output file extension, without the dot

    def __init__(self, options: RenderOptions | None = None, standalone: bool = False):
        self.options = options or RenderOptions()
        self.standalone = standalone

    @abstractmethod
    def render(self, sheet: Sheet, title: str | None = None) -> str:
        """Return *sheet* drawn as text.

        With ``standalone`` set, the output is a complete document carrying
        *title*; otherwise it is a fragment for embedding.
        """
