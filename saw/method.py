from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from saw.aggregation import aggregate
from saw.matrix import transpose
from saw.normalization import normalize
from saw.weighting import Weights, apply_weights


@dataclass
class MethodContext:
    pivot_index: int = 0


class SAWMethod:
    id = "saw"
    name = "Simple Additive Weighting"

    def compute_scores(
        self,
        weights: Weights,
        option_scores: Dict[str, List[float]],
        context: MethodContext | None = None,
    ) -> List[Tuple[str, float]]:
        if not option_scores:
            return []

        pivot_index = context.pivot_index if context else 0
        options = list(option_scores.keys())
        decision = transpose([option_scores[option] for option in options])
        normalized = normalize(decision, pivot_index)
        scores = aggregate(apply_weights(transpose(normalized), weights))
        results = list(zip(options, scores.tolist()))
        results.sort(key=lambda item: item[1], reverse=True)
        return results
