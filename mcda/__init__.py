from __future__ import annotations

from typing import Optional, Sequence

from mcda.core import Alternative, Criterion, CriterionType, MCDAMethod, MethodResult, RankingOutcome
from mcda.exceptions import ValidationError
from mcda.methods.wpm import WPMMethod

METHODS = {
    "wpm": WPMMethod(),
}


def get_method(method_id: str) -> MCDAMethod:
    return METHODS.get(method_id, METHODS["wpm"])


def list_methods() -> dict:
    return {method_id: method.name for method_id, method in METHODS.items()}


def evaluate(
    alternatives: Sequence[Alternative],
    weights: Sequence[float],
    criteria_types: Sequence[CriterionType | str],
    criteria: Optional[Sequence[str]] = None,
) -> RankingOutcome:
    return METHODS["wpm"].evaluate(alternatives, weights, criteria_types, criteria)
