"""Float width conversions between workcell documents and URDF.

Workcell documents store single precision values, URDF descriptions double
precision ones. Narrowing simply truncates to the nearest float32.
"""

from typing import Iterable, Tuple

import numpy as np


def narrow(value: float) -> float:
    return float(np.float32(value))


def narrow_vector(values: Iterable[float]) -> Tuple[float, ...]:
    return tuple(narrow(v) for v in values)


def widen(value: float) -> float:
    return float(value)


def widen_vector(values: Iterable[float]) -> Tuple[float, ...]:
    return tuple(widen(v) for v in values)
