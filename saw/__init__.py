from saw.aggregation import aggregate
from saw.core import (
    DEFAULT_OUTPUT_FIELD,
    MatrixBuilder,
    NormalizationRule,
    SAWResult,
    Transposer,
)
from saw.errors import (
    DimensionMismatchError,
    InvalidCriterionValueError,
    InvalidMatrixError,
    MissingCriterionError,
    NormalizationError,
    PivotIndexError,
    RecordCountMismatchError,
    SAWError,
)
from saw.matrix import ArrayTransposer, RecordMatrixBuilder, transpose
from saw.merge import merge, rank_records
from saw.method import MethodContext, SAWMethod
from saw.normalization import normalize, normalize_with_rules, pivot_rules, round_half_away
from saw.pipeline import SAWPipeline, run_saw
from saw.weighting import apply_weights, weight_vector

__all__ = [
    "DEFAULT_OUTPUT_FIELD",
    "ArrayTransposer",
    "DimensionMismatchError",
    "InvalidCriterionValueError",
    "InvalidMatrixError",
    "MatrixBuilder",
    "MethodContext",
    "MissingCriterionError",
    "NormalizationError",
    "NormalizationRule",
    "PivotIndexError",
    "RecordCountMismatchError",
    "RecordMatrixBuilder",
    "SAWError",
    "SAWMethod",
    "SAWPipeline",
    "SAWResult",
    "Transposer",
    "aggregate",
    "apply_weights",
    "merge",
    "normalize",
    "normalize_with_rules",
    "pivot_rules",
    "rank_records",
    "round_half_away",
    "run_saw",
    "transpose",
    "weight_vector",
]
