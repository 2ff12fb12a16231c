"""
Unit tests for the calculator state container.
"""
import unittest
from unittest.mock import Mock

from werkzeug.datastructures import MultiDict

from tuitility.core.calculator import Calculator
from tuitility.core.errors import MediaResolutionError
from tuitility.core.state import (
    CALCULATED, GENERIC_ERROR, IDLE, INVALID, OUT_OF_RANGE_ERROR, CalculatorState, is_finite,
)
from tuitility.tools.finance import roi
from tuitility.tools.health import bmi
from tuitility.tools.mathematics import percentage
from tuitility.tools.science import wave_speed


def _calculator(formula):
    return Calculator(
        tool_id="test-tool",
        form_class=bmi.BMIForm,
        defaults=bmi.DEFAULTS,
        formula=formula,
    )


class TestCalculate(unittest.TestCase):

    def setUp(self):
        self.state = CalculatorState(bmi.CALCULATOR)

    def test_starts_idle_with_defaults(self):
        self.assertEqual(self.state.status, IDLE)
        self.assertEqual(self.state.form, bmi.DEFAULTS)
        self.assertIsNot(self.state.form, bmi.DEFAULTS)
        self.assertIsNone(self.state.result)
        self.assertEqual(self.state.errors, [])

    def test_valid_input_produces_result(self):
        self.state.update({"weight": "70", "height": "175"})
        self.assertEqual(self.state.calculate(), CALCULATED)
        self.assertEqual(self.state.result["bmi"], 22.86)
        self.assertEqual(self.state.result["category"], "Normal")
        self.assertEqual(self.state.errors, [])

    def test_same_input_same_result(self):
        self.state.update({"weight": "82.5", "height": "181"})
        self.state.calculate()
        first = self.state.result
        self.state.calculate()
        self.assertEqual(self.state.result, first)

    def test_invalid_input_clears_previous_result(self):
        self.state.update({"weight": "70", "height": "175"})
        self.state.calculate()
        self.state.set_field("height", "")
        self.assertEqual(self.state.calculate(), INVALID)
        self.assertIsNone(self.state.result)
        self.assertEqual(self.state.errors, ["Height is required."])

    def test_set_field_clears_errors_without_recomputing(self):
        self.state.calculate()
        self.assertTrue(self.state.errors)
        self.state.set_field("weight", "70")
        self.assertEqual(self.state.errors, [])
        self.assertIsNone(self.state.result)

    def test_set_unknown_field_raises(self):
        with self.assertRaises(KeyError):
            self.state.set_field("shoe_size", "9")

    def test_update_ignores_undeclared_fields(self):
        self.state.update(MultiDict([("weight", "70"), ("action", "calculate")]))
        self.assertEqual(self.state.form["weight"], "70")
        self.assertNotIn("action", self.state.form)


class TestFormulaBoundary(unittest.TestCase):
    """Failures inside a formula never escape calculate()."""

    def test_invalid_input_never_calls_formula(self):
        formula = Mock(return_value={"x": 1})
        state = CalculatorState(_calculator(formula))
        state.update({"weight": "abc", "height": "175"})
        state.calculate()
        formula.assert_not_called()
        self.assertTrue(state.errors)

    def test_unexpected_exception_becomes_generic_message(self):
        state = CalculatorState(_calculator(Mock(side_effect=ZeroDivisionError("boom"))))
        state.update({"weight": "70", "height": "175"})
        with self.assertLogs("tuitility.core.state", level="ERROR"):
            status = state.calculate()
        self.assertEqual(status, INVALID)
        self.assertEqual(state.errors, [GENERIC_ERROR])
        self.assertIsNone(state.result)

    def test_collaborator_failure_becomes_one_line_status(self):
        failure = MediaResolutionError("Failed to fetch video. Please try again later.")
        state = CalculatorState(_calculator(Mock(side_effect=failure)))
        state.update({"weight": "70", "height": "175"})
        state.calculate()
        self.assertEqual(state.errors, ["Failed to fetch video. Please try again later."])
        self.assertIsNone(state.result)


class TestOutOfRangeResults(unittest.TestCase):
    """A formula that overflows or produces infinity never shows a result."""

    def test_infinite_result_rejected(self):
        state = CalculatorState(_calculator(Mock(return_value={"value": float("inf"), "display": "inf"})))
        state.update({"weight": "70", "height": "175"})
        self.assertEqual(state.calculate(), INVALID)
        self.assertIsNone(state.result)
        self.assertEqual(state.errors, [OUT_OF_RANGE_ERROR])

    def test_nested_nan_rejected(self):
        result = {"summary": {"rows": [1.0, float("nan")]}}
        state = CalculatorState(_calculator(Mock(return_value=result)))
        state.update({"weight": "70", "height": "175"})
        state.calculate()
        self.assertEqual(state.errors, [OUT_OF_RANGE_ERROR])

    def test_overflow_error_reported_as_out_of_range(self):
        state = CalculatorState(_calculator(Mock(side_effect=OverflowError("math range error"))))
        state.update({"weight": "70", "height": "175"})
        state.calculate()
        self.assertEqual(state.errors, [OUT_OF_RANGE_ERROR])
        self.assertIsNone(state.result)

    def test_percentage_overflow(self):
        state = CalculatorState(percentage.CALCULATOR)
        state.update({"calculation_type": "y-is-p-of-what", "y": "1000000000000", "p": "1e-300"})
        self.assertEqual(state.calculate(), INVALID)
        self.assertEqual(state.errors, [OUT_OF_RANGE_ERROR])

    def test_roi_overflow(self):
        state = CalculatorState(roi.CALCULATOR)
        state.update({"initial_investment": "1e-300", "final_value": "1000000000000", "investment_period": "1"})
        self.assertEqual(state.calculate(), INVALID)
        self.assertEqual(state.errors, [OUT_OF_RANGE_ERROR])

    def test_wave_speed_inputs_bounded(self):
        state = CalculatorState(wave_speed.CALCULATOR)
        state.update({"solve_for": "speed", "frequency": "1e-320", "wavelength": "1"})
        state.calculate()
        self.assertEqual(state.errors, ["Frequency (Hz) must be between 1e-15 and 1e30."])
        self.assertIsNone(state.result)

    def test_is_finite(self):
        self.assertTrue(is_finite({"a": 1, "b": [2.5, "text", None], "c": {"d": True}}))
        self.assertFalse(is_finite([1.0, float("-inf")]))


class TestReset(unittest.TestCase):

    def test_reset_restores_defaults_from_any_state(self):
        state = CalculatorState(bmi.CALCULATOR)
        state.update({"unit_system": "imperial", "weight": "150", "height": "65"})
        state.calculate()
        state.reset()
        self.assertEqual(state.form, bmi.DEFAULTS)
        self.assertIsNone(state.result)
        self.assertEqual(state.errors, [])
        self.assertEqual(state.status, IDLE)

        state.calculate()
        state.reset()
        state.reset()
        self.assertEqual(state.status, IDLE)
        self.assertEqual(state.form, bmi.DEFAULTS)

    def test_fail_replaces_result(self):
        state = CalculatorState(bmi.CALCULATOR)
        state.update({"weight": "70", "height": "175"})
        state.calculate()
        state.fail("The PDF file could not be read.")
        self.assertIsNone(state.result)
        self.assertEqual(state.errors, ["The PDF file could not be read."])


if __name__ == "__main__":
    unittest.main()
