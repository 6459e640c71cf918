from numintegral.errors import (
    IntegralError,
    InvalidFunctionId,
    MalformedArgument,
    NegativeIntensity,
    NonPositiveSampleCount,
    UsageError,
)
from numintegral.functions import DEFAULT_INTEGRANDS, Integrands, resolve_function
from numintegral.integral_core import (
    IntegrationRequest,
    TimedResult,
    compute_integrals,
    numerical_integral_midpoint,
    run_request,
    timed_integral,
)

__version__ = "0.1.0"
