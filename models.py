from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from mcda.core import Alternative, Criterion, CriterionType


@dataclass
class Result:
    option: str
    score: float


@dataclass
class Project:
    criteria: List[str] = field(default_factory=list)
    weights: List[float] = field(default_factory=list)
    criteria_types: List[CriterionType] = field(default_factory=list)
    options: List[str] = field(default_factory=list)
    scores: List[List[float]] = field(default_factory=list)
    results: List[Result] = field(default_factory=list)
    best_option: Optional[str] = None
    error: Optional[str] = None

    def to_criteria(self) -> List[Criterion]:
        return [
            Criterion(name=name, weight=weight, type=kind)
            for name, weight, kind in zip(self.criteria, self.weights, self.criteria_types)
        ]

    def to_alternatives(self) -> List[Alternative]:
        return [
            Alternative(name=option, values=tuple(self.scores[idx]) if idx < len(self.scores) else ())
            for idx, option in enumerate(self.options)
        ]

    def best_score(self) -> Optional[float]:
        for result in self.results:
            if result.option == self.best_option:
                return result.score
        return None

    def clear_results(self) -> None:
        self.results = []
        self.best_option = None
        self.error = None
