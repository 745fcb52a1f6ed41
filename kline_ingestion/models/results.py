"""Result models for kline ingestion operations."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .candle import Candle


class ErrorKind(str, Enum):
    """Failure kinds reported by the pipeline."""

    FETCH_FAILED = "fetch_failed"
    PARSE_FAILED = "parse_failed"
    WRITE_FAILED = "write_failed"


@dataclass
class FetchResult:
    """Result of a kline fetch."""

    symbol: str
    interval: str
    status: str  # "success", "error"
    execution_time_ms: int
    candles: List[Candle] = field(default_factory=list)
    error_kind: Optional[ErrorKind] = None
    errors: Optional[List[str]] = None

    def __post_init__(self):
        """Initialize errors list if None."""
        if self.errors is None:
            self.errors = []

    @property
    def ok(self) -> bool:
        return self.status == "success"


@dataclass
class WriteResult:
    """Result of writing candles to a file."""

    path: str
    status: str  # "success", "error"
    lines_written: int
    execution_time_ms: int
    error_kind: Optional[ErrorKind] = None
    errors: Optional[List[str]] = None

    def __post_init__(self):
        """Initialize errors list if None."""
        if self.errors is None:
            self.errors = []

    @property
    def ok(self) -> bool:
        return self.status == "success"


@dataclass
class IngestionResult:
    """Result of a full fetch-then-write run."""

    symbol: str
    interval: str
    output_path: str
    candles_fetched: int
    lines_written: int
    status: str  # "success", "error"
    execution_time_ms: int
    error_kind: Optional[ErrorKind] = None
    errors: Optional[List[str]] = None

    def __post_init__(self):
        """Initialize errors list if None."""
        if self.errors is None:
            self.errors = []

    @property
    def ok(self) -> bool:
        return self.status == "success"
