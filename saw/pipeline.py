from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence

from saw.aggregation import aggregate
from saw.core import DEFAULT_OUTPUT_FIELD, MatrixBuilder, Record, SAWResult, Transposer
from saw.errors import SAWError
from saw.matrix import ArrayTransposer, RecordMatrixBuilder
from saw.merge import merge
from saw.normalization import RulePolicy, normalize_with_rules, pivot_rules
from saw.weighting import Weights, apply_weights

logger = logging.getLogger(__name__)


class SAWPipeline:
    """Runs build, normalize, transpose, weight, aggregate and merge in order.

    The pipeline holds only its collaborators, so one instance can serve any
    number of independent rankings.
    """

    def __init__(
        self,
        builder: MatrixBuilder | None = None,
        transposer: Transposer | None = None,
        rule_policy: RulePolicy = pivot_rules,
    ) -> None:
        self.builder = builder or RecordMatrixBuilder()
        self.transposer = transposer or ArrayTransposer()
        self.rule_policy = rule_policy

    def evaluate(
        self,
        records: Sequence[Record],
        criteria_count: int,
        pivot_index: int,
        criteria_names: Sequence[str],
        weights: Weights,
        output_field: str = DEFAULT_OUTPUT_FIELD,
    ) -> SAWResult:
        try:
            decision = self.builder.build(records, criteria_count, criteria_names, pivot_index)
            rules = self.rule_policy(decision.shape[0], pivot_index)
            normalized = normalize_with_rules(decision, rules)
            weighted = apply_weights(self.transposer.transpose(normalized), weights)
            scores = aggregate(weighted)
            scored = merge(records, scores, output_field)
        except SAWError as exc:
            logger.debug("SAW ranking aborted: %s", exc)
            raise

        logger.info(
            "Ranked %d alternatives on %d criteria into %r",
            len(scored),
            criteria_count,
            output_field,
        )
        return SAWResult(
            decision_matrix=decision,
            normalized=normalized,
            weighted=weighted,
            scores=scores,
            records=scored,
            rules=rules,
        )

    def run(
        self,
        records: Sequence[Record],
        criteria_count: int,
        pivot_index: int,
        criteria_names: Sequence[str],
        weights: Weights,
        output_field: str = DEFAULT_OUTPUT_FIELD,
    ) -> List[Dict[str, Any]]:
        result = self.evaluate(
            records, criteria_count, pivot_index, criteria_names, weights, output_field
        )
        return result.records


def run_saw(
    records: Sequence[Record],
    criteria_count: int,
    pivot_index: int,
    criteria_names: Sequence[str],
    weights: Weights,
    output_field: str = DEFAULT_OUTPUT_FIELD,
) -> List[Dict[str, Any]]:
    return SAWPipeline().run(
        records, criteria_count, pivot_index, criteria_names, weights, output_field
    )
