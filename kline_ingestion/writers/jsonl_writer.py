"""JSON-lines file writer for candle data."""

import json
import logging
from datetime import datetime
from typing import Iterable, List

from ..models.candle import Candle
from ..models.results import ErrorKind, WriteResult

logger = logging.getLogger(__name__)


class JsonLinesWriter:
    """Writes candles to a file, one JSON object per line."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def _candle_to_line(self, candle: Candle) -> str:
        """Convert candle to a single JSON line (without trailing newline)."""
        return json.dumps(candle.to_dict())

    def write(self, candles: Iterable[Candle], path: str) -> WriteResult:
        """Write candles to a file, truncating existing content.

        The write is not atomic: if it fails partway, lines already written
        stay in the file.

        Args:
            candles: Candles in output order
            path: Target file path

        Returns:
            WriteResult with the number of lines written
        """
        start_time = datetime.now()
        lines_written = 0
        try:
            with open(path, "w", encoding=self.encoding) as f:
                for candle in candles:
                    f.write(self._candle_to_line(candle) + "\n")
                    lines_written += 1

            execution_time = int((datetime.now() - start_time).total_seconds() * 1000)
            logger.info(f"📄 Wrote {lines_written} candles to {path}")
            return WriteResult(
                path=str(path),
                status="success",
                lines_written=lines_written,
                execution_time_ms=execution_time,
            )
        except (OSError, ValueError) as e:
            execution_time = int((datetime.now() - start_time).total_seconds() * 1000)
            error_msg = f"Failed to write candles to {path}: {e}"
            logger.error(error_msg, exc_info=True)
            return WriteResult(
                path=str(path),
                status="error",
                lines_written=lines_written,
                execution_time_ms=execution_time,
                error_kind=ErrorKind.WRITE_FAILED,
                errors=[error_msg],
            )

    def read(self, path: str) -> List[Candle]:
        """Read candles back from a JSON-lines file.

        Raises:
            OSError: If the file cannot be read
            ValueError: If a line is not valid JSON or does not match the candle fields
        """
        candles = []
        with open(path, encoding=self.encoding) as f:
            for line_number, line in enumerate(f, start=1):
                if not line.strip():
                    continue
                try:
                    candles.append(Candle.from_dict(json.loads(line)))
                except ValueError as e:
                    raise ValueError(f"Invalid candle on line {line_number} of {path}: {e}") from e
        return candles
