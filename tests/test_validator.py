import unittest

from picross.core.constants import Axis
from picross.core.exceptions import (HintOverflowError, HintShapeError, HintSumMismatchError,
                                     HintValueError)
from picross.core.models import ErrorTarget
from picross.engine.validator import HintValidator, validate_hints


class HintValidatorTests(unittest.TestCase):
    def test_valid_hints(self) -> None:
        result = validate_hints([[1], [1]], [[1], [1]])
        self.assertTrue(result.ok)
        self.assertEqual(result.errors, [])
        self.assertEqual(result.error_targets, [])

    def test_empty_hint_is_rejected(self) -> None:
        result = validate_hints([[1], []], [[1], [1]])
        self.assertFalse(result.ok)
        self.assertIsInstance(result.issues[0], HintValueError)
        self.assertEqual(result.error_targets, [ErrorTarget(Axis.ROW, 1)])
        self.assertEqual(result.errors[0], "Row 2 hint is empty")

    def test_empty_hint_allowed_when_configured(self) -> None:
        result = HintValidator(allow_empty_lines=True).validate([[1], []], [[1], []])
        self.assertTrue(result.ok)

    def test_non_list_hint_is_invalid_not_empty(self) -> None:
        result = validate_hints([3], [[3]])
        self.assertIsInstance(result.issues[0], HintValueError)
        self.assertEqual(result.errors[0], "Row 1 hint has invalid values")
        self.assertNotIn("Row 1 hint is empty", result.errors)

    def test_non_positive_and_non_integer_values(self) -> None:
        for bad in ([0], [-1], [1.5], ["2"], [True]):
            with self.subTest(bad=bad):
                result = validate_hints([[1]], [bad])
                self.assertTrue(any(isinstance(i, HintValueError) for i in result.issues))
                self.assertIn(ErrorTarget(Axis.COL, 0), result.error_targets)

    def test_overflow_is_tagged_to_the_line(self) -> None:
        result = validate_hints([[2, 2]], [[1], [1], [1], [1]])
        overflow = [i for i in result.issues if isinstance(i, HintOverflowError)]
        self.assertEqual(len(overflow), 1)
        self.assertEqual(overflow[0].target, ErrorTarget(Axis.ROW, 0))
        self.assertEqual(str(overflow[0]), "Row 1 hint has too many blocks")

    def test_column_overflow_checked_against_height(self) -> None:
        result = validate_hints([[1]], [[2]])
        self.assertIn(ErrorTarget(Axis.COL, 0), result.error_targets)

    def test_sum_mismatch_has_no_target(self) -> None:
        result = validate_hints([[1]], [[1], [1]])
        self.assertEqual(len(result.issues), 1)
        self.assertIsInstance(result.issues[0], HintSumMismatchError)
        self.assertIsNone(result.issues[0].target)
        self.assertEqual(result.error_targets, [])

    def test_sum_mismatch_iff_totals_differ(self) -> None:
        cases = [
            ([[1], [1]], [[1], [1]], False),
            ([[2], [1]], [[1], [2]], False),
            ([[1, 1], [1]], [[2], [1], [1]], True),
            ([[3]], [[1]], True),
        ]
        for rows, cols, mismatched in cases:
            with self.subTest(rows=rows, cols=cols):
                result = validate_hints(rows, cols)
                found = any(isinstance(i, HintSumMismatchError) for i in result.issues)
                self.assertEqual(found, mismatched)

    def test_multiple_errors_collected(self) -> None:
        # 1x3 grid declared via one column hint; row [3] overflows and totals differ.
        result = validate_hints([[3]], [[1]])
        kinds = {type(issue) for issue in result.issues}
        self.assertEqual(kinds, {HintOverflowError, HintSumMismatchError})

    def test_shape_mismatch_short_circuits(self) -> None:
        result = validate_hints([[1]], [[1]], height=2, width=1)
        self.assertEqual(len(result.issues), 1)
        self.assertIsInstance(result.issues[0], HintShapeError)

    def test_raise_first(self) -> None:
        with self.assertRaises(HintSumMismatchError):
            validate_hints([[1]], [[1], [1]]).raise_first()
        validate_hints([[1]], [[1]]).raise_first()


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
