from .config import RenderOptions
from .exceptions import UnsupportedRendererError, UnsupportedSourceError
from .renderers.base import Renderer
from .renderers.plaintext import TextRenderer
from .renderers.webpage import HtmlRenderer
from .sources.base import ChartSource
from .sources.file import FileSource
from .sources.web import HttpSource

# HttpSource first: FileSource accepts anything without a scheme.
_SOURCES: list[type[ChartSource]] = [
    HttpSource,
    FileSource,
]

_RENDERERS: dict[str, type[Renderer]] = {
    TextRenderer.name: TextRenderer,
    HtmlRenderer.name: HtmlRenderer,
}


def get_source(location: str) -> ChartSource:
    """Return an instantiated source for the given location.

    Raises UnsupportedSourceError if no source matches.
    """
    for cls in _SOURCES:
        if cls.can_handle(location):
            return cls()
    raise UnsupportedSourceError(location)


def renderer_names() -> list[str]:
    return list(_RENDERERS)


def get_renderer(
    name: str, options: RenderOptions | None = None, standalone: bool = False
) -> Renderer:
    """Return an instantiated renderer registered under name.

    Raises UnsupportedRendererError if there is none.
    """
    try:
        cls = _RENDERERS[name]
    except KeyError:
        raise UnsupportedRendererError(name) from None
    return cls(options, standalone=standalone)
