from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
import math
from typing import Dict, List, Optional, Sequence, Tuple

from mcda.exceptions import (
    DuplicateAlternativeError,
    NonPositiveValueError,
    ShapeMismatchError,
    ValidationError,
    WeightRangeError,
    WeightSumError,
)

WEIGHT_TOTAL = 100.0
WEIGHT_TOLERANCE = 1e-9


class CriterionType(Enum):
    BENEFIT = "benefit"
    COST = "cost"

    @classmethod
    def coerce(cls, value: CriterionType | str) -> CriterionType:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValidationError(
                f"Unknown criterion type: {value!r}. Use 'benefit' or 'cost'.",
                context={"type": value},
            ) from None


@dataclass(frozen=True)
class Criterion:
    name: str
    weight: float
    type: CriterionType = CriterionType.BENEFIT


@dataclass(frozen=True)
class Alternative:
    name: str
    values: Tuple[float, ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.values, (str, bytes)):
            raise ValidationError(
                f"Alternative {self.name} values must be a sequence of numbers, not text.",
                context={"alternative": self.name},
            )
        try:
            values = tuple(float(value) for value in self.values)
        except (TypeError, ValueError):
            raise ValidationError(
                f"Alternative {self.name} has a non-numeric value.",
                context={"alternative": self.name},
            ) from None
        object.__setattr__(self, "values", values)


@dataclass
class MethodResult:
    weights: List[float]


@dataclass
class RankingOutcome:
    scores: Dict[str, float] = field(default_factory=dict)
    best: Optional[str] = None
    weights: List[float] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.scores

    def ranked(self) -> List[Tuple[str, float]]:
        results = list(self.scores.items())
        results.sort(key=lambda item: item[1], reverse=True)
        return results


def pick_best(scores: Dict[str, float]) -> Optional[str]:
    """Return the first alternative whose score beats every earlier one."""
    best_name: Optional[str] = None
    highest = -math.inf
    for name, score in scores.items():
        if score > highest:
            highest = score
            best_name = name
    return best_name


class MCDAMethod(ABC):
    id: str
    name: str

    @abstractmethod
    def compute_weights(
        self,
        criteria: Optional[Sequence[str]],
        weights: Sequence[float],
    ) -> MethodResult:
        raise NotImplementedError

    @abstractmethod
    def compute_scores(
        self,
        weights: List[float],
        alternatives: Sequence[Alternative],
        criteria_types: Sequence[CriterionType],
    ) -> Dict[str, float]:
        raise NotImplementedError

    def evaluate(
        self,
        alternatives: Sequence[Alternative],
        weights: Sequence[float],
        criteria_types: Sequence[CriterionType | str],
        criteria: Optional[Sequence[str]] = None,
    ) -> RankingOutcome:
        """Validate the input, score every alternative and pick the best one.

        Checks run in a fixed order: shape, empty input, weight sum, weight
        range, value positivity. Nothing is scored unless every check passes.
        ``criteria`` holds optional display names used in error messages.
        """
        types = self._check_shape(alternatives, weights, criteria_types, criteria)
        if not alternatives or not types:
            return RankingOutcome()

        weights_result = self.compute_weights(criteria, weights)
        self._check_values(alternatives)

        scores = self.compute_scores(weights_result.weights, alternatives, types)
        return RankingOutcome(scores=scores, best=pick_best(scores), weights=weights_result.weights)

    def evaluate_criteria(
        self,
        alternatives: Sequence[Alternative],
        criteria: Sequence[Criterion],
    ) -> RankingOutcome:
        return self.evaluate(
            alternatives,
            [criterion.weight for criterion in criteria],
            [criterion.type for criterion in criteria],
            criteria=[criterion.name for criterion in criteria],
        )

    @staticmethod
    def _check_shape(
        alternatives: Sequence[Alternative],
        weights: Sequence[float],
        criteria_types: Sequence[CriterionType | str],
        criteria: Optional[Sequence[str]] = None,
    ) -> List[CriterionType]:
        n_criteria = len(weights)
        if len(criteria_types) != n_criteria:
            raise ShapeMismatchError(
                f"Expected {n_criteria} criterion types, got {len(criteria_types)}.",
                context={"weights": n_criteria, "types": len(criteria_types)},
            )
        if criteria is not None and len(criteria) != n_criteria:
            raise ShapeMismatchError(
                f"Expected {n_criteria} criterion names, got {len(criteria)}.",
                context={"weights": n_criteria, "names": len(criteria)},
            )
        seen = set()
        for alternative in alternatives:
            if len(alternative.values) != n_criteria:
                raise ShapeMismatchError(
                    f"Alternative {alternative.name} has {len(alternative.values)} values, "
                    f"expected {n_criteria}.",
                    context={"alternative": alternative.name, "values": len(alternative.values)},
                )
            if alternative.name in seen:
                raise DuplicateAlternativeError(alternative.name)
            seen.add(alternative.name)
        return [CriterionType.coerce(value) for value in criteria_types]

    @staticmethod
    def _check_weights(weights: Sequence[float], criteria: Optional[Sequence[str]] = None) -> None:
        total = sum(float(weight) for weight in weights)
        if not abs(total - WEIGHT_TOTAL) <= WEIGHT_TOLERANCE:
            raise WeightSumError(total)
        for idx, weight in enumerate(weights, start=1):
            if not 0.0 <= float(weight) <= WEIGHT_TOTAL:
                name = criteria[idx - 1] if criteria and idx <= len(criteria) else None
                raise WeightRangeError(idx, float(weight), criterion=name)

    @staticmethod
    def _check_values(alternatives: Sequence[Alternative]) -> None:
        for alternative in alternatives:
            for idx, value in enumerate(alternative.values, start=1):
                if not (value > 0 and math.isfinite(value)):
                    raise NonPositiveValueError(alternative.name, idx, value)
