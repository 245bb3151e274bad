"""Charts stored in local text files, or piped in on stdin as ``-``."""

import logging
import sys
from pathlib import Path

from ..exceptions import SourceError
from .base import ChartSource

logger = logging.getLogger(__name__)


class FileSource(ChartSource):
    """Load a chart from a local path, or from stdin when the path is ``-``."""

    @classmethod
    def can_handle(cls, location: str) -> bool:
        return "://" not in location

    def load(self, location: str) -> str:
        if location == "-":
            logger.debug("Reading chart from stdin")
            return sys.stdin.read()

        path = Path(location)
        if not path.is_file():
            raise SourceError(location, "no such file")
        logger.debug(f"Reading chart from {path}")
        try:
            # newline="" keeps \r\n line endings exactly as stored
            with path.open(encoding="utf-8", newline="") as fh:
                return fh.read()
        except UnicodeDecodeError as exc:
            raise SourceError(location, "not UTF-8 text") from exc
        except OSError as exc:
            raise SourceError(location, exc.strerror or "cannot read file") from exc

    def name(self, location: str) -> str:
        if location == "-":
            return "chart"
        return Path(location).stem
