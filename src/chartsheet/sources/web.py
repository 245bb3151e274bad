"""Charts published on the web.

Plain-text responses are used as-is.  For HTML pages the chart is taken
from the first ``<pre>`` block, falling back to the first ``<textarea>``
(editor pages keep their source there).
"""

import logging

import httpx
from bs4 import BeautifulSoup

from ..exceptions import FetchError, ParseError
from .base import ChartSource

logger = logging.getLogger(__name__)

_FETCH_HEADERS = {
    "User-Agent": "chartsheet (+https://pypi.org/project/chartsheet/)",
    "Accept": "text/plain,text/html;q=0.9,*/*;q=0.5",
}


class HttpSource(ChartSource):
    """Load a chart from an ``http://`` or ``https://`` URL."""

    @classmethod
    def can_handle(cls, location: str) -> bool:
        return location.startswith(("http://", "https://"))

    def load(self, location: str) -> str:
        logger.info(f"Fetching chart from {location}")
        try:
            resp = httpx.get(location, headers=_FETCH_HEADERS, follow_redirects=True, timeout=15)
        except httpx.RequestError as exc:
            raise FetchError(location, 0) from exc
        if resp.status_code != 200:
            raise FetchError(location, resp.status_code)

        content_type = resp.headers.get("content-type", "")
        if "html" not in content_type:
            return resp.text
        return extract_chart_text(resp.text, location)

    def name(self, location: str) -> str:
        path = httpx.URL(location).path.rstrip("/")
        stem = path.split("/")[-1].rsplit(".", 1)[0]
        return stem or httpx.URL(location).host


def extract_chart_text(html: str, url: str) -> str:
    """Return the chart text held in an HTML page.

    Raises ParseError if the page has neither a ``<pre>`` nor a ``<textarea>``.
    """
    soup = BeautifulSoup(html, "html.parser")
    element = soup.find("pre") or soup.find("textarea")
    if element is None:
        raise ParseError(url, "No <pre> or <textarea> chart block found")
    return element.get_text()
