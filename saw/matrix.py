from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from saw.core import MatrixBuilder, Record, Transposer, as_matrix
from saw.errors import (
    DimensionMismatchError,
    InvalidCriterionValueError,
    InvalidMatrixError,
    MissingCriterionError,
)

logger = logging.getLogger(__name__)


class RecordMatrixBuilder(MatrixBuilder):
    """Reads one numeric field per criterion name from every record.

    Row ``i`` of the result holds ``criteria_names[i]`` for all records, in
    record order. The pivot index is not used to select values; it is only
    checked later by the normalizer.
    """

    def build(
        self,
        records: Sequence[Record],
        criteria_count: int,
        criteria_names: Sequence[str],
        pivot_index: int,
    ) -> np.ndarray:
        if len(criteria_names) != criteria_count:
            raise DimensionMismatchError("criterion names", criteria_count, len(criteria_names))
        if not records:
            raise InvalidMatrixError("no records to rank")

        rows = []
        for name in criteria_names:
            row = []
            for record_index, record in enumerate(records):
                try:
                    value = record[name]
                except KeyError:
                    raise MissingCriterionError(record_index, name) from None
                try:
                    row.append(float(value))
                except (TypeError, ValueError):
                    raise InvalidCriterionValueError(record_index, name, value) from None
            rows.append(row)

        matrix = as_matrix(rows)
        logger.debug("Built %dx%d decision matrix", matrix.shape[0], matrix.shape[1])
        return matrix


class ArrayTransposer(Transposer):
    def transpose(self, matrix: Sequence[Sequence[float]] | np.ndarray) -> np.ndarray:
        return as_matrix(matrix).T.copy()


def transpose(matrix: Sequence[Sequence[float]] | np.ndarray) -> np.ndarray:
    return ArrayTransposer().transpose(matrix)
