from __future__ import annotations

import logging
import math
import time
from typing import Any, Dict, Iterable, List, NamedTuple, Sequence

from numintegral.errors import (
    MalformedArgument,
    NegativeIntensity,
    NonPositiveSampleCount,
)
from numintegral.functions import (
    DEFAULT_INTEGRANDS,
    FUNCTION_NAMES,
    Integrand,
    Integrands,
    resolve_function,
)

logger = logging.getLogger(__name__)

N_VALUES = [10, 100, 1000, 10_000, 100_000, 1_000_000]


class IntegrationRequest(NamedTuple):
    function_id: int
    a: float
    b: float
    n: int
    intensity: int


class TimedResult(NamedTuple):
    value: float
    elapsed: float  # seconds


def numerical_integral_midpoint(f: Integrand, a: float, b: float, n: int, intensity: int) -> float:
    """Midpoint rectangle rule for ∫ f(x, intensity) dx over [a, b] with n samples.

    Samples are accumulated in ascending index order so repeated runs give the
    same bits. ``a`` may exceed ``b``; the step is then negative and so is the
    result. ``n`` must be positive, the caller checks that.
    """
    dx = (b - a) / n
    total = 0.0
    for i in range(n):
        total += f(a + (i + 0.5) * dx, intensity)
    return total * dx


def timed_integral(f: Integrand, a: float, b: float, n: int, intensity: int) -> TimedResult:
    start = time.perf_counter()
    value = numerical_integral_midpoint(f, a, b, n, intensity)
    elapsed = time.perf_counter() - start
    return TimedResult(value, elapsed)


def _parse_int(name: str, raw: Any) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise MalformedArgument(name, raw) from None


def _parse_float(name: str, raw: Any) -> float:
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise MalformedArgument(name, raw, "a finite number") from None
    if not math.isfinite(value):
        raise MalformedArgument(name, raw, "a finite number")
    return value


def validate_request(function_id: int, n: int, intensity: int) -> None:
    resolve_function(function_id)
    if n <= 0:
        raise NonPositiveSampleCount(n)
    if intensity < 0:
        raise NegativeIntensity(intensity)


def parse_request(raw: Sequence[Any]) -> IntegrationRequest:
    """Build a request from ``(function_id, a, b, n, intensity)`` strings."""
    raw_id, raw_a, raw_b, raw_n, raw_intensity = raw
    function_id = _parse_int("functionid", raw_id)
    a = _parse_float("a", raw_a)
    b = _parse_float("b", raw_b)
    n = _parse_int("n", raw_n)
    intensity = _parse_int("intensity", raw_intensity)
    validate_request(function_id, n, intensity)
    return IntegrationRequest(function_id, a, b, n, intensity)


def parse_sample_counts(raw_values: Iterable[Any]) -> List[int]:
    """Parse sweep sample counts; an empty input means the default ``N_VALUES``."""
    n_values = [_parse_int("n", raw) for raw in raw_values]
    for n in n_values:
        if n <= 0:
            raise NonPositiveSampleCount(n)
    return n_values or list(N_VALUES)


def run_request(request: IntegrationRequest, integrands: Integrands = DEFAULT_INTEGRANDS) -> TimedResult:
    f = resolve_function(request.function_id, integrands)
    return timed_integral(f, request.a, request.b, request.n, request.intensity)


def format_result(result: TimedResult) -> str:
    return f"{result.value:.15g} {result.elapsed:.6f}"


def compute_integrals(
    function_id: int,
    lo: float,
    up: float,
    intensity: int = 0,
    n_values: Iterable[int] = N_VALUES,
    integrands: Integrands = DEFAULT_INTEGRANDS,
) -> Dict[str, Any]:
    n_values = list(n_values)
    for n in n_values:
        validate_request(function_id, n, intensity)
    f = resolve_function(function_id, integrands)

    results: List[Dict[str, Any]] = []
    overall_start = time.perf_counter()

    for n in n_values:
        val, elapsed = timed_integral(f, lo, up, n, intensity)
        elapsed_ms = elapsed * 1000
        logger.debug("f%d n=%d value=%r time_ms=%.3f", function_id, n, val, elapsed_ms)
        results.append({"n": n, "value": val, "time_ms": elapsed_ms})

    overall_ms = (time.perf_counter() - overall_start) * 1000

    return {
        "function": FUNCTION_NAMES[function_id],
        "function_id": function_id,
        "lower": lo,
        "upper": up,
        "intensity": intensity,
        "results": results,
        "total_time_ms": overall_ms,
    }

