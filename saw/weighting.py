from __future__ import annotations

import logging
from typing import Mapping, Sequence, Union

import numpy as np

from saw.core import as_matrix
from saw.errors import DimensionMismatchError

logger = logging.getLogger(__name__)

Weights = Union[Sequence[float], Mapping[int, float]]


def weight_vector(weights: Weights, size: int) -> np.ndarray:
    """Order weights by criterion column position.

    A mapping must be keyed by the column positions ``0..size-1``.
    """
    if len(weights) != size:
        raise DimensionMismatchError("weights", size, len(weights))
    if isinstance(weights, Mapping):
        ordered = []
        for key in range(size):
            if key not in weights:
                raise DimensionMismatchError(
                    "weights", size, len(weights), detail=f"no weight for column {key}"
                )
            ordered.append(weights[key])
        return np.array(ordered, dtype=float)
    return np.array(list(weights), dtype=float)


def apply_weights(
    alternative_major: Sequence[Sequence[float]] | np.ndarray,
    weights: Weights,
) -> np.ndarray:
    matrix = as_matrix(alternative_major)
    vector = weight_vector(weights, matrix.shape[1])
    total = float(vector.sum())
    if not np.isclose(total, 1.0):
        logger.debug("Weights sum to %.4f; scores are not rescaled", total)
    return matrix * vector
