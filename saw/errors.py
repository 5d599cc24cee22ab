from __future__ import annotations

from typing import Optional


class SAWError(Exception):
    """Base class for every failure raised while computing a SAW ranking."""


class DimensionMismatchError(SAWError, ValueError):
    def __init__(self, what: str, expected: int, actual: int, detail: Optional[str] = None) -> None:
        self.what = what
        self.expected = expected
        self.actual = actual
        message = f"{what}: expected {expected}, got {actual}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class NormalizationError(SAWError, ArithmeticError):
    def __init__(self, criterion_index: int, alternative_index: Optional[int], reason: str) -> None:
        self.criterion_index = criterion_index
        self.alternative_index = alternative_index
        location = f"criterion {criterion_index}"
        if alternative_index is not None:
            location = f"{location}, alternative {alternative_index}"
        super().__init__(f"cannot normalize {location}: {reason}")


class RecordCountMismatchError(SAWError, ValueError):
    def __init__(self, records: int, scores: int) -> None:
        self.records = records
        self.scores = scores
        super().__init__(f"{records} records but {scores} scores")


class InvalidMatrixError(SAWError, ValueError):
    pass


class PivotIndexError(SAWError, IndexError):
    def __init__(self, pivot_index: int, criteria_count: int) -> None:
        self.pivot_index = pivot_index
        self.criteria_count = criteria_count
        super().__init__(f"pivot index {pivot_index} outside 0..{criteria_count - 1}")


class MissingCriterionError(SAWError, KeyError):
    def __init__(self, record_index: int, field_name: str) -> None:
        self.record_index = record_index
        self.field_name = field_name
        super().__init__(f"record {record_index} has no field {field_name!r}")

    def __str__(self) -> str:
        return str(self.args[0])


class InvalidCriterionValueError(SAWError, ValueError):
    def __init__(self, record_index: int, field_name: str, value: object) -> None:
        self.record_index = record_index
        self.field_name = field_name
        self.value = value
        super().__init__(f"record {record_index} field {field_name!r} is not numeric: {value!r}")
