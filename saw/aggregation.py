from __future__ import annotations

from typing import Sequence

import numpy as np

from saw.core import as_matrix


def aggregate(weighted: Sequence[Sequence[float]] | np.ndarray) -> np.ndarray:
    return as_matrix(weighted).sum(axis=1)
