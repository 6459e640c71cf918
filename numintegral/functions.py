from __future__ import annotations

import logging
import math
from typing import Callable, Dict, NamedTuple, Tuple

from numintegral.errors import InvalidFunctionId

logger = logging.getLogger(__name__)

Integrand = Callable[[float, int], float]


def _spin(x: float, intensity: int) -> None:
    # busy work only, the integrand value never depends on it
    acc = x
    for _ in range(intensity):
        acc = math.sqrt(acc * acc + 1.0)


def f1(x: float, intensity: int) -> float:
    _spin(x, intensity)
    return x


def f2(x: float, intensity: int) -> float:
    _spin(x, intensity)
    return x * x


def f3(x: float, intensity: int) -> float:
    _spin(x, intensity)
    return math.sin(x)


def f4(x: float, intensity: int) -> float:
    _spin(x, intensity)
    return math.exp(-x * x)


class Integrands(NamedTuple):
    """The four integrands a function id can select."""

    f1: Integrand
    f2: Integrand
    f3: Integrand
    f4: Integrand


DEFAULT_INTEGRANDS = Integrands(f1, f2, f3, f4)

# function id -> (Integrands member, display name)
FUNCTIONS: Dict[int, Tuple[str, str]] = {
    1: ("f1", "x"),
    2: ("f2", "x^2"),
    3: ("f3", "sin(x)"),
    4: ("f4", "exp(-x^2)"),
}

FUNCTION_NAMES: Dict[int, str] = {fid: name for fid, (_, name) in FUNCTIONS.items()}


def resolve_function(function_id: int, integrands: Integrands = DEFAULT_INTEGRANDS) -> Integrand:
    """Map function id 1..4 onto the matching member of ``integrands``."""
    try:
        member, _ = FUNCTIONS[function_id]
    except (KeyError, TypeError):
        raise InvalidFunctionId(function_id) from None
    selected = getattr(integrands, member)
    logger.debug("function id %s -> %r", function_id, selected)
    return selected
