from __future__ import annotations

from typing import Any, Dict, List, Sequence

import numpy as np

from saw.core import Record
from saw.errors import RecordCountMismatchError


def merge(
    records: Sequence[Record],
    scores: Sequence[float] | np.ndarray,
    field_name: str,
) -> List[Dict[str, Any]]:
    """Copy each record and set ``field_name`` to its score.

    Records keep their order; an existing ``field_name`` is overwritten.
    """
    if len(records) != len(scores):
        raise RecordCountMismatchError(len(records), len(scores))
    merged: List[Dict[str, Any]] = []
    for record, score in zip(records, scores):
        row = dict(record)
        row[field_name] = float(score)
        merged.append(row)
    return merged


def rank_records(records: Sequence[Record], field_name: str) -> List[Dict[str, Any]]:
    ranked = [dict(record) for record in records]
    ranked.sort(key=lambda item: item[field_name], reverse=True)
    return ranked
