"""Validation errors raised before any integration is attempted."""


class IntegralError(ValueError):
    """Base class; every subclass aborts the run."""


class UsageError(IntegralError):
    pass


class InvalidFunctionId(IntegralError):
    def __init__(self, function_id=None):
        self.function_id = function_id
        super().__init__("Invalid function ID (must be 1, 2, 3, or 4)")


class MalformedArgument(IntegralError):
    def __init__(self, name: str, raw: str, expected: str = "a number"):
        self.name = name
        self.raw = raw
        super().__init__(f"{name} must be {expected}, got {raw!r}")


class NonPositiveSampleCount(IntegralError):
    def __init__(self, n: int):
        self.n = n
        super().__init__(f"n must be a positive integer, got {n}")


class NegativeIntensity(IntegralError):
    def __init__(self, intensity: int):
        self.intensity = intensity
        super().__init__(f"intensity must be >= 0, got {intensity}")
