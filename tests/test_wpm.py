import unittest

from mcda.core import Alternative, Criterion, CriterionType
from mcda.exceptions import (
    DuplicateAlternativeError,
    NonPositiveValueError,
    ShapeMismatchError,
    ValidationError,
    WeightRangeError,
    WeightSumError,
)
from mcda.methods.wpm import WPMMethod

BENEFIT = CriterionType.BENEFIT
COST = CriterionType.COST


class TestWPMScoring(unittest.TestCase):
    def test_benefit_only_scores(self) -> None:
        method = WPMMethod()
        alternatives = [
            Alternative("Ones", (1.0, 1.0, 1.0, 1.0)),
            Alternative("Twos", (2.0, 2.0, 2.0, 2.0)),
        ]

        outcome = method.evaluate(alternatives, [25, 25, 25, 25], [BENEFIT] * 4)
        self.assertEqual(outcome.scores["Ones"], 1.0)
        self.assertAlmostEqual(outcome.scores["Twos"], 2.0, places=12)
        self.assertEqual(outcome.best, "Twos")
        self.assertEqual(outcome.weights, [0.25, 0.25, 0.25, 0.25])

    def test_cost_transform_prefers_lower_value(self) -> None:
        method = WPMMethod()
        alternatives = [Alternative("A", (10.0,)), Alternative("B", (20.0,))]

        outcome = method.evaluate(alternatives, [100], [COST])
        self.assertEqual(outcome.scores["A"], 1.0)
        self.assertEqual(outcome.scores["B"], 0.5)
        self.assertEqual(outcome.best, "A")

    def test_mixed_criteria(self) -> None:
        method = WPMMethod()
        alternatives = [
            Alternative("Cheap", (4.0, 100.0)),
            Alternative("Fancy", (9.0, 400.0)),
        ]

        outcome = method.evaluate(alternatives, [50, 50], [BENEFIT, "cost"])
        self.assertAlmostEqual(outcome.scores["Cheap"], 2.0, places=12)
        self.assertAlmostEqual(outcome.scores["Fancy"], 1.5, places=12)
        self.assertEqual(outcome.best, "Cheap")

    def test_tie_keeps_first_alternative(self) -> None:
        method = WPMMethod()
        alternatives = [Alternative("X", (4.0, 9.0)), Alternative("Y", (9.0, 4.0))]

        for _ in range(3):
            outcome = method.evaluate(alternatives, [50, 50], [BENEFIT, BENEFIT])
            self.assertEqual(outcome.scores, {"X": 6.0, "Y": 6.0})
            self.assertEqual(outcome.best, "X")

        reversed_outcome = method.evaluate(list(reversed(alternatives)), [50, 50], [BENEFIT, BENEFIT])
        self.assertEqual(reversed_outcome.best, "Y")

    def test_ranked_is_stable_for_ties(self) -> None:
        method = WPMMethod()
        alternatives = [
            Alternative("Low", (1.0,)),
            Alternative("First", (3.0,)),
            Alternative("Second", (3.0,)),
        ]

        outcome = method.evaluate(alternatives, [100], [BENEFIT])
        self.assertEqual([name for name, _ in outcome.ranked()], ["First", "Second", "Low"])

    def test_scores_keep_input_order(self) -> None:
        method = WPMMethod()
        alternatives = [Alternative("B", (1.0,)), Alternative("A", (2.0,)), Alternative("C", (3.0,))]

        outcome = method.evaluate(alternatives, [100], [BENEFIT])
        self.assertEqual(list(outcome.scores), ["B", "A", "C"])

    def test_inputs_are_not_mutated(self) -> None:
        method = WPMMethod()
        alternatives = [Alternative("A", (10.0, 2.0)), Alternative("B", (20.0, 4.0))]
        weights = [40.0, 60.0]
        types = [COST, BENEFIT]

        method.evaluate(alternatives, weights, types)
        self.assertEqual(alternatives[0].values, (10.0, 2.0))
        self.assertEqual(alternatives[1].values, (20.0, 4.0))
        self.assertEqual(weights, [40.0, 60.0])
        self.assertEqual(types, [COST, BENEFIT])


class TestWPMEmptyInput(unittest.TestCase):
    def test_no_alternatives(self) -> None:
        outcome = WPMMethod().evaluate([], [50, 50], [BENEFIT, COST])
        self.assertEqual(outcome.scores, {})
        self.assertIsNone(outcome.best)
        self.assertTrue(outcome.is_empty)

    def test_no_criteria(self) -> None:
        alternatives = [Alternative("A", ()), Alternative("B", ())]

        outcome = WPMMethod().evaluate(alternatives, [], [])
        self.assertEqual(outcome.scores, {})
        self.assertIsNone(outcome.best)


class TestWPMValidation(unittest.TestCase):
    def test_weight_sum_rejected(self) -> None:
        alternatives = [Alternative("A", (1.0, 2.0, 3.0))]

        with self.assertRaises(WeightSumError) as ctx:
            WPMMethod().evaluate(alternatives, [30, 30, 30], [BENEFIT] * 3)
        self.assertEqual(str(ctx.exception), "criterion weights must sum to 100%")
        self.assertAlmostEqual(ctx.exception.total, 90.0)

    def test_weight_sum_within_tolerance(self) -> None:
        alternatives = [Alternative("A", (1.0, 2.0, 3.0))]

        outcome = WPMMethod().evaluate(alternatives, [33.33, 33.33, 33.34], [BENEFIT] * 3)
        self.assertEqual(outcome.best, "A")

    def test_weight_out_of_range(self) -> None:
        alternatives = [Alternative("A", (1.0, 2.0))]

        with self.assertRaises(WeightRangeError) as ctx:
            WPMMethod().evaluate(alternatives, [120, -20], [BENEFIT, BENEFIT])
        self.assertEqual(ctx.exception.criterion_index, 1)

    def test_non_positive_value_named(self) -> None:
        alternatives = [
            Alternative("Good", (1.0, 2.0)),
            Alternative("Bad", (3.0, 0.0)),
        ]

        with self.assertRaises(NonPositiveValueError) as ctx:
            WPMMethod().evaluate(alternatives, [50, 50], [BENEFIT, COST])
        self.assertEqual(ctx.exception.alternative, "Bad")
        self.assertEqual(ctx.exception.criterion_index, 2)
        self.assertIn("Bad", str(ctx.exception))

    def test_negative_nan_and_infinite_values_rejected(self) -> None:
        for bad in (-1.0, float("nan"), float("inf")):
            alternatives = [Alternative("A", (bad,))]
            with self.assertRaises(NonPositiveValueError):
                WPMMethod().evaluate(alternatives, [100], [BENEFIT])

    def test_weight_sum_checked_before_values(self) -> None:
        alternatives = [Alternative("A", (0.0, -5.0))]

        with self.assertRaises(WeightSumError):
            WPMMethod().evaluate(alternatives, [10, 10], [BENEFIT, BENEFIT])

    def test_shape_mismatch_types(self) -> None:
        alternatives = [Alternative("A", (1.0, 2.0))]

        with self.assertRaises(ShapeMismatchError):
            WPMMethod().evaluate(alternatives, [50, 50], [BENEFIT])

    def test_shape_mismatch_values(self) -> None:
        alternatives = [Alternative("A", (1.0, 2.0)), Alternative("B", (1.0,))]

        with self.assertRaises(ShapeMismatchError) as ctx:
            WPMMethod().evaluate(alternatives, [50, 50], [BENEFIT, BENEFIT])
        self.assertEqual(ctx.exception.context["alternative"], "B")

    def test_duplicate_names_rejected(self) -> None:
        alternatives = [Alternative("A", (1.0,)), Alternative("A", (2.0,))]

        with self.assertRaises(DuplicateAlternativeError):
            WPMMethod().evaluate(alternatives, [100], [BENEFIT])

    def test_unknown_criterion_type(self) -> None:
        alternatives = [Alternative("A", (1.0,))]

        with self.assertRaises(ValidationError):
            WPMMethod().evaluate(alternatives, [100], ["neutral"])

    def test_non_numeric_value(self) -> None:
        with self.assertRaises(ValidationError):
            Alternative("A", ("high",))

    def test_text_values_rejected(self) -> None:
        for text in ("12", b"12"):
            with self.assertRaises(ValidationError):
                Alternative("A", text)

    def test_infinite_cost_values_rejected(self) -> None:
        alternatives = [Alternative("A", (float("inf"),)), Alternative("B", (float("inf"),))]

        with self.assertRaises(NonPositiveValueError) as ctx:
            WPMMethod().evaluate(alternatives, [100], [COST])
        self.assertEqual(ctx.exception.alternative, "A")
        self.assertEqual(ctx.exception.criterion_index, 1)

    def test_weight_range_error_names_criterion(self) -> None:
        alternatives = [Alternative("A", (1.0, 2.0))]

        with self.assertRaises(WeightRangeError) as ctx:
            WPMMethod().evaluate(
                alternatives, [120, -20], [BENEFIT, COST], criteria=["Quality", "Price"]
            )
        self.assertEqual(ctx.exception.criterion, "Quality")
        self.assertIn("Criterion 1 (Quality)", str(ctx.exception))

    def test_criterion_names_must_match_weights(self) -> None:
        alternatives = [Alternative("A", (1.0, 2.0))]

        with self.assertRaises(ShapeMismatchError):
            WPMMethod().evaluate(alternatives, [50, 50], [BENEFIT, COST], criteria=["Quality"])

    def test_compute_weights_checks_empty_weights(self) -> None:
        with self.assertRaises(WeightSumError):
            WPMMethod().compute_weights([], [])
        with self.assertRaises(WeightSumError):
            WPMMethod().compute_weights(None, [10, 20])


class TestWPMCriteria(unittest.TestCase):
    def test_evaluate_criteria(self) -> None:
        criteria = [
            Criterion(name="Quality", weight=50, type=BENEFIT),
            Criterion(name="Price", weight=50, type=COST),
        ]
        alternatives = [Alternative("Cheap", (4.0, 100.0)), Alternative("Fancy", (9.0, 400.0))]

        outcome = WPMMethod().evaluate_criteria(alternatives, criteria)
        self.assertAlmostEqual(outcome.scores["Cheap"], 2.0, places=12)
        self.assertAlmostEqual(outcome.scores["Fancy"], 1.5, places=12)
        self.assertEqual(outcome.best, "Cheap")

    def test_evaluate_criteria_reports_names(self) -> None:
        criteria = [Criterion(name="Speed", weight=150), Criterion(name="Range", weight=-50)]

        with self.assertRaises(WeightRangeError) as ctx:
            WPMMethod().evaluate_criteria([Alternative("A", (1.0, 1.0))], criteria)
        self.assertEqual(ctx.exception.criterion, "Speed")
