from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Sequence

import numpy as np

from saw.errors import InvalidMatrixError

DEFAULT_OUTPUT_FIELD = "final_result"
ROUND_DECIMALS = 3

Record = Mapping[str, Any]


class NormalizationRule(Enum):
    BENEFIT_STYLE = "benefit"
    COST_STYLE = "cost"


@dataclass(frozen=True)
class SAWResult:
    decision_matrix: np.ndarray
    normalized: np.ndarray
    weighted: np.ndarray
    scores: np.ndarray
    records: List[Dict[str, Any]] = field(default_factory=list)
    rules: List[NormalizationRule] = field(default_factory=list)


class MatrixBuilder(ABC):
    """Turns source records into a criterion-major decision matrix."""

    @abstractmethod
    def build(
        self,
        records: Sequence[Record],
        criteria_count: int,
        criteria_names: Sequence[str],
        pivot_index: int,
    ) -> np.ndarray:
        raise NotImplementedError


class Transposer(ABC):
    @abstractmethod
    def transpose(self, matrix: Sequence[Sequence[float]] | np.ndarray) -> np.ndarray:
        raise NotImplementedError


def as_matrix(matrix: Sequence[Sequence[float]] | np.ndarray) -> np.ndarray:
    """Return a fresh 2-D float array, rejecting empty or ragged input."""
    if isinstance(matrix, np.ndarray):
        if matrix.ndim != 2:
            raise InvalidMatrixError(f"expected a 2-D matrix, got {matrix.ndim} dimension(s)")
        if matrix.size == 0:
            raise InvalidMatrixError("matrix is empty")
        return np.array(matrix, dtype=float)

    rows = [list(row) for row in matrix]
    if not rows or not rows[0]:
        raise InvalidMatrixError("matrix is empty")
    width = len(rows[0])
    for index, row in enumerate(rows):
        if len(row) != width:
            raise InvalidMatrixError(f"row {index} has {len(row)} values, expected {width}")
    return np.array(rows, dtype=float)
