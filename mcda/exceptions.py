"""Exception hierarchy for decision-method input validation."""

from __future__ import annotations


class MCDAError(Exception):
    """Base exception for all decision-method errors.

    Args:
        message: Human-readable error description, safe to show to end users.
        context: Optional dict of extra details about the failing input.
    """

    def __init__(self, message: str = "", context: dict | None = None) -> None:
        super().__init__(message)
        self.context = context or {}


class ValidationError(MCDAError):
    """Raised when evaluation input is rejected before scoring."""


class ShapeMismatchError(ValidationError):
    """Raised when weights, types and value rows disagree on the criteria count."""


class DuplicateAlternativeError(ShapeMismatchError):
    """Raised when two alternatives share a name."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Alternative names must be unique. Duplicate: {name}.",
            context={"alternative": name},
        )
        self.alternative = name


class NonPositiveValueError(ValidationError):
    """Raised when a criterion value is zero, negative, infinite or not a number."""

    def __init__(self, alternative: str, criterion_index: int, value: float) -> None:
        super().__init__(
            "Criterion values must be greater than zero. "
            f"Alternative: {alternative}, criterion {criterion_index}.",
            context={"alternative": alternative, "criterion_index": criterion_index, "value": value},
        )
        self.alternative = alternative
        self.criterion_index = criterion_index


class WeightSumError(ValidationError):
    """Raised when the weight percentages do not add up to 100."""

    def __init__(self, total: float) -> None:
        super().__init__("criterion weights must sum to 100%", context={"total": total})
        self.total = total


class WeightRangeError(ValidationError):
    """Raised when a single weight percentage falls outside [0, 100]."""

    def __init__(self, criterion_index: int, weight: float, criterion: str | None = None) -> None:
        label = f"{criterion_index} ({criterion})" if criterion else f"{criterion_index}"
        super().__init__(
            f"Criterion weights must be between 0 and 100. Criterion {label}: {weight}.",
            context={"criterion_index": criterion_index, "weight": weight, "criterion": criterion},
        )
        self.criterion = criterion
        self.criterion_index = criterion_index
        self.weight = weight
