from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path

import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from nicegui import ui

from config import load_settings
from logging_config import setup_logging
from mcda import ValidationError, get_method
from mcda.core import CriterionType
from models import Project, Result
from sizing import new_project, reconcile

settings = load_settings()
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)


@dataclass
class AppState:
    project: Project


state = AppState(project=new_project())

CRITERION_TYPES = {
    CriterionType.BENEFIT.value: "Benefit",
    CriterionType.COST.value: "Cost",
}


def refresh_all() -> None:
    criteria_view.refresh()
    options_view.refresh()
    results_view.refresh()


def update_counts(num_options: float | None, num_criteria: float | None) -> None:
    project = state.project
    options = max(1, int(num_options or 1))
    criteria = max(1, int(num_criteria or 1))
    if options == len(project.options) and criteria == len(project.criteria):
        return
    state.project = reconcile(project, options, criteria)
    logger.debug("Resized form to %d alternatives x %d criteria", options, criteria)
    refresh_all()


def update_criterion_name(index: int, value: str | None) -> None:
    state.project.criteria[index] = value or ""
    options_view.refresh()


def update_weight(index: int, value: float | None) -> None:
    state.project.weights[index] = 0.0 if value is None else float(value)


def update_criterion_type(index: int, value: str | None) -> None:
    if not value:
        return
    state.project.criteria_types[index] = CriterionType.coerce(value)


def update_option_name(index: int, value: str | None) -> None:
    state.project.options[index] = value or ""


def update_score(option_index: int, criterion_index: int, value: float | None) -> None:
    state.project.scores[option_index][criterion_index] = 0.0 if value is None else float(value)


def calculate() -> None:
    project = state.project
    project.clear_results()
    method = get_method("wpm")
    try:
        outcome = method.evaluate_criteria(project.to_alternatives(), project.to_criteria())
    except ValidationError as exc:
        project.error = str(exc)
        logger.info("Rejected WPM input: %s", exc)
        ui.notify(project.error, type="negative")
        results_view.refresh()
        return
    project.results = [Result(option=name, score=score) for name, score in outcome.scores.items()]
    project.best_option = outcome.best
    logger.info("Scored %d alternatives, best: %s", len(project.results), project.best_option)
    results_view.refresh()


ui.page_title("WPM Calculator")

with ui.column().classes("w-full max-w-6xl mx-auto p-6"):
    ui.label("WPM Calculator").classes("text-3xl font-semibold")
    ui.label("Rank alternatives with the Weighted Product Method.").classes("text-gray-500")

    with ui.card().classes("w-full"):
        ui.label("Size").classes("text-lg font-semibold")
        with ui.row().classes("items-center"):
            options_input = ui.number(
                "Number of alternatives",
                value=len(state.project.options),
                min=1,
                step=1,
                format="%d",
            )
            criteria_input = ui.number(
                "Number of criteria",
                value=len(state.project.criteria),
                min=1,
                step=1,
                format="%d",
            )
            options_input.on_value_change(lambda e: update_counts(e.value, criteria_input.value))
            criteria_input.on_value_change(lambda e: update_counts(options_input.value, e.value))

    with ui.card().classes("w-full"):
        ui.label("Criteria").classes("text-lg font-semibold")
        ui.label("Weights are percentages and must add up to 100.").classes("text-gray-500 text-sm")

        @ui.refreshable
        def criteria_view() -> None:
            project = state.project
            with ui.row().classes("gap-4"):
                for idx, criterion in enumerate(project.criteria):
                    with ui.card().classes("w-60"):
                        ui.input(
                            f"Criterion {idx + 1} name",
                            value=criterion,
                            on_change=lambda e, i=idx: update_criterion_name(i, e.value),
                        ).classes("w-full")
                        ui.number(
                            "Weight (%)",
                            value=project.weights[idx],
                            min=0,
                            max=100,
                            step=1,
                            on_change=lambda e, i=idx: update_weight(i, e.value),
                        ).classes("w-full")
                        ui.radio(
                            CRITERION_TYPES,
                            value=project.criteria_types[idx].value,
                            on_change=lambda e, i=idx: update_criterion_type(i, e.value),
                        ).props("inline")

        criteria_view()

    with ui.card().classes("w-full"):
        ui.label("Alternatives").classes("text-lg font-semibold")
        ui.label("Every value must be greater than zero.").classes("text-gray-500 text-sm")

        @ui.refreshable
        def options_view() -> None:
            project = state.project
            criteria = project.criteria
            name_col_width = 220
            value_col_width = 140
            min_width = name_col_width + (len(criteria) * value_col_width)
            grid_template = (
                f"grid-template-columns: {name_col_width}px repeat({len(criteria)}, {value_col_width}px);"
            )

            with ui.element("div").classes("w-full overflow-x-auto").style("max-width: 100%;"):
                with ui.column().classes("gap-2"):
                    with ui.element("div").style(
                        f"display: grid; {grid_template} align-items: center; gap: 12px; min-width: {min_width}px;"
                    ):
                        ui.label("Alternative")
                        for criterion in criteria:
                            ui.label(criterion).classes("text-center").style("justify-self: center;")
                    for idx, option in enumerate(project.options):
                        with ui.element("div").style(
                            f"display: grid; {grid_template} align-items: center; gap: 12px; min-width: {min_width}px;"
                        ):
                            ui.input(
                                value=option,
                                on_change=lambda e, i=idx: update_option_name(i, e.value),
                            ).props("dense")
                            for j in range(len(criteria)):
                                ui.number(
                                    value=project.scores[idx][j],
                                    on_change=lambda e, ii=idx, jj=j: update_score(ii, jj, e.value),
                                ).classes("w-full").props('input-class="text-center" dense')

        options_view()

    with ui.card().classes("w-full"):
        ui.label("Results").classes("text-lg font-semibold")
        ui.button("Calculate WPM", on_click=calculate)

        @ui.refreshable
        def results_view() -> None:
            project = state.project
            if project.error:
                ui.label(project.error).classes("text-negative font-semibold")
                return
            if not project.results:
                ui.label("No results yet.").classes("text-gray-500")
                return
            with ui.column().classes("gap-2"):
                for result in project.results:
                    label = ui.label(f"{result.option}: {result.score:.{settings.score_decimals}f}")
                    if result.option == project.best_option:
                        label.classes("font-semibold text-positive")
            if project.best_option is not None:
                best_score = project.best_score()
                ui.label(
                    f"Best alternative: {project.best_option} "
                    f"(score {best_score:.{settings.score_decimals}f})"
                ).classes("text-md font-semibold mt-2")

        results_view()


ui.run(reload=False, host=settings.host, port=settings.port)
