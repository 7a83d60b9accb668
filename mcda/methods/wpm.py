from __future__ import annotations

from typing import Dict, List, Optional, Sequence

import numpy as np

from mcda.core import Alternative, CriterionType, MCDAMethod, MethodResult, WEIGHT_TOTAL


class WPMMethod(MCDAMethod):
    id = "wpm"
    name = "Weighted Product Method"

    def compute_weights(
        self,
        criteria: Optional[Sequence[str]],
        weights: Sequence[float],
    ) -> MethodResult:
        self._check_weights(weights, criteria)
        return MethodResult(weights=[float(weight) / WEIGHT_TOTAL for weight in weights])

    def compute_scores(
        self,
        weights: List[float],
        alternatives: Sequence[Alternative],
        criteria_types: Sequence[CriterionType],
    ) -> Dict[str, float]:
        if not alternatives or not weights:
            return {}

        matrix = np.array([alternative.values for alternative in alternatives], dtype=float)
        processed = self._apply_directions(matrix, criteria_types)
        exponents = np.array(weights, dtype=float)
        products = np.prod(np.power(processed, exponents), axis=1)
        return {
            alternative.name: float(score)
            for alternative, score in zip(alternatives, products.tolist())
        }

    @staticmethod
    def _apply_directions(matrix: np.ndarray, criteria_types: Sequence[CriterionType]) -> np.ndarray:
        mins = matrix.min(axis=0)
        processed = matrix.copy()
        for idx, kind in enumerate(criteria_types):
            if kind is CriterionType.COST:
                processed[:, idx] = mins[idx] / matrix[:, idx]
        return processed
