from __future__ import annotations

import logging
from typing import Callable, List, Sequence

import numpy as np

from saw.core import ROUND_DECIMALS, NormalizationRule, as_matrix
from saw.errors import DimensionMismatchError, NormalizationError, PivotIndexError

logger = logging.getLogger(__name__)

RulePolicy = Callable[[int, int], List[NormalizationRule]]


def pivot_rules(criteria_count: int, pivot_index: int) -> List[NormalizationRule]:
    """Benefit-style rule for the pivot row only, cost-style for every other row."""
    if not 0 <= pivot_index < criteria_count:
        raise PivotIndexError(pivot_index, criteria_count)
    return [
        NormalizationRule.BENEFIT_STYLE if index == pivot_index else NormalizationRule.COST_STYLE
        for index in range(criteria_count)
    ]


def normalize(
    matrix: Sequence[Sequence[float]] | np.ndarray,
    pivot_index: int,
    rule_policy: RulePolicy = pivot_rules,
) -> np.ndarray:
    decision = as_matrix(matrix)
    rules = rule_policy(decision.shape[0], pivot_index)
    return normalize_with_rules(decision, rules)


def normalize_with_rules(
    matrix: Sequence[Sequence[float]] | np.ndarray,
    rules: Sequence[NormalizationRule],
) -> np.ndarray:
    decision = as_matrix(matrix)
    if len(rules) != decision.shape[0]:
        raise DimensionMismatchError("normalization rules", decision.shape[0], len(rules))

    normalized = np.empty_like(decision)
    for index, (row, rule) in enumerate(zip(decision, rules)):
        if rule is NormalizationRule.BENEFIT_STYLE:
            normalized[index] = _benefit_style(row, index)
        else:
            normalized[index] = _cost_style(row, index)

    logger.debug("Normalized %d criteria over %d alternatives", *decision.shape)
    return round_half_away(normalized)


def round_half_away(values: np.ndarray, decimals: int = ROUND_DECIMALS) -> np.ndarray:
    """Round to `decimals` places with halves going away from zero.

    Scaled values are first cut to 15 significant digits, so a quotient such
    as 1/80 whose binary form sits just off 0.0125 still rounds as a half.
    """
    scale = 10.0 ** decimals
    scaled = np.asarray(values, dtype=float) * scale
    scaled = np.array([float(f"{value:.15g}") for value in scaled.ravel()]).reshape(scaled.shape)
    return np.sign(scaled) * np.floor(np.abs(scaled) + 0.5) / scale


def _benefit_style(row: np.ndarray, criterion_index: int) -> np.ndarray:
    highest = row.max()
    if highest == 0:
        raise NormalizationError(criterion_index, None, "maximum value is zero")
    return row / highest


def _cost_style(row: np.ndarray, criterion_index: int) -> np.ndarray:
    zeros = np.flatnonzero(row == 0)
    if zeros.size:
        raise NormalizationError(criterion_index, int(zeros[0]), "value is zero")
    return row.min() / row
