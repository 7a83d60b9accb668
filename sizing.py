"""Resize the calculator form state when the alternative or criterion count changes."""

from __future__ import annotations

from typing import List

from mcda.core import CriterionType
from models import Project

DEFAULT_OPTIONS = 3
DEFAULT_CRITERIA = 4


def resize_list(values: List, size: int, default) -> List:
    resized = list(values[:size])
    while len(resized) < size:
        resized.append(default)
    return resized


def resize_scores(scores: List[List[float]], options: int, criteria: int) -> List[List[float]]:
    new_scores: List[List[float]] = []
    for i in range(options):
        row = scores[i] if i < len(scores) else []
        new_row: List[float] = []
        for j in range(criteria):
            if j < len(row):
                new_row.append(row[j])
            else:
                new_row.append(0.0)
        new_scores.append(new_row)
    return new_scores


def resize_names(names: List[str], size: int, prefix: str) -> List[str]:
    """Keep existing names; blank or missing slots get ``"<prefix> N"``."""
    resized: List[str] = []
    for idx in range(size):
        name = names[idx].strip() if idx < len(names) and names[idx] else ""
        resized.append(name or f"{prefix} {idx + 1}")
    return resized


def reconcile(project: Project, num_options: int, num_criteria: int) -> Project:
    """Return a copy of ``project`` sized to the new counts.

    The old snapshot is left untouched. Existing entries are preserved
    positionally, new value and weight slots start at 0, new criteria are
    Benefit, and stale results are dropped.
    """
    num_options = max(0, int(num_options))
    num_criteria = max(0, int(num_criteria))
    resized = Project(
        criteria=resize_names(project.criteria, num_criteria, "Criterion"),
        weights=resize_list(project.weights, num_criteria, 0.0),
        criteria_types=resize_list(project.criteria_types, num_criteria, CriterionType.BENEFIT),
        options=resize_names(project.options, num_options, "Alternative"),
        scores=resize_scores(project.scores, num_options, num_criteria),
    )
    if num_options == len(project.options) and num_criteria == len(project.criteria):
        resized.results = list(project.results)
        resized.best_option = project.best_option
        resized.error = project.error
    return resized


def new_project(num_options: int = DEFAULT_OPTIONS, num_criteria: int = DEFAULT_CRITERIA) -> Project:
    project = reconcile(Project(), num_options, num_criteria)
    if num_criteria:
        project.weights = [100.0 / num_criteria] * num_criteria
    return project
