"""
Tests for the math calculators: percentage and LCM.
"""
import unittest

from tuitility.core.state import CalculatorState
from tuitility.tools.mathematics import lcm, percentage


def _run(module, **fields):
    state = CalculatorState(module.CALCULATOR)
    state.update(fields)
    state.calculate()
    return state


class TestPercentage(unittest.TestCase):

    def test_percent_of(self):
        result = _run(percentage, calculation_type="percent-of", p="20", x="50").result
        self.assertEqual(result["value"], 10.0)
        self.assertEqual(result["display"], "10.00")
        self.assertEqual(result["steps"], "20% of 50 = (20 / 100) × 50")

    def test_what_percent(self):
        result = _run(percentage, calculation_type="y-percent-of-x", y="25", x="200").result
        self.assertEqual(result["value"], 12.5)
        self.assertEqual(result["display"], "12.50%")

    def test_increase_and_decrease(self):
        self.assertEqual(_run(percentage, calculation_type="x-plus-p-is-what", x="100", p="10").result["value"], 110.0)
        self.assertEqual(_run(percentage, calculation_type="x-minus-p-is-what", x="80", p="25").result["value"], 60.0)
        self.assertEqual(_run(percentage, calculation_type="x-plus-what-is-y", x="50", y="75").result["value"], 50.0)

    def test_reverse_questions(self):
        self.assertEqual(_run(percentage, calculation_type="y-is-p-of-what", y="30", p="15").result["value"], 200.0)
        self.assertEqual(_run(percentage, calculation_type="what-minus-p-is-y", p="20", y="80").result["value"], 100.0)

    def test_every_type_answers_with_its_inputs(self):
        values = {"p": "10", "x": "40", "y": "20"}
        for calc in percentage.CALCULATION_TYPES:
            with self.subTest(calculation=calc.key):
                fields = {name: values[name] for name in calc.inputs}
                state = _run(percentage, calculation_type=calc.key, **fields)
                self.assertEqual(state.errors, [])
                self.assertEqual(state.result["question"], calc.label)

    def test_missing_input(self):
        state = _run(percentage, calculation_type="percent-of", p="20")
        self.assertEqual(state.errors, ["Please enter valid numbers for both P and X."])

    def test_division_by_zero_rejected(self):
        state = _run(percentage, calculation_type="y-percent-of-x", y="5", x="0")
        self.assertEqual(state.errors, ["X cannot be zero (division by zero)."])
        state = _run(percentage, calculation_type="y-is-p-of-what", y="5", p="0")
        self.assertEqual(state.errors, ["P cannot be zero (division by zero)."])

    def test_degenerate_denominators_rejected(self):
        state = _run(percentage, calculation_type="what-plus-p-is-y", p="-100", y="5")
        self.assertEqual(state.errors, ["Invalid calculation: 1 + P%/100 cannot equal zero."])
        state = _run(percentage, calculation_type="what-minus-p-is-y", p="100", y="5")
        self.assertEqual(state.errors, ["Invalid calculation: 1 - P%/100 cannot equal zero."])
        state = _run(percentage, calculation_type="what-minus-p-is-y", p="150", y="5")
        self.assertIn("cannot be greater than 100%", state.errors[0])

    def test_inputs_bounded(self):
        state = _run(percentage, calculation_type="percent-of", p="1e200", x="1e200")
        self.assertIsNone(state.result)
        self.assertEqual(state.errors, [
            "P must be between -1,000,000,000,000 and 1,000,000,000,000.",
            "X must be between -1,000,000,000,000 and 1,000,000,000,000.",
        ])


class TestLCM(unittest.TestCase):

    def test_defaults(self):
        result = _run(lcm).result
        self.assertEqual(result["numbers"], [12, 18, 24])
        self.assertEqual(result["lcm"], 72)
        self.assertEqual(result["gcd"], 6)
        self.assertEqual(result["steps"][-1], "Therefore, LCM of (12, 18, 24) = 72")

    def test_coprime(self):
        result = _run(lcm, numbers="7, 9").result
        self.assertEqual((result["lcm"], result["gcd"]), (63, 1))

    def test_prime_method_steps(self):
        result = _run(lcm, numbers="12, 18", method="prime").result
        self.assertEqual(result["steps"][0], "Prime factors of 12 = 2 × 2 × 3")
        self.assertEqual(result["steps"][2], "Highest power of each prime: 2^2 × 3^2")
        self.assertEqual(result["lcm"], 36)

    def test_same_answer_for_both_methods(self):
        direct = _run(lcm, numbers="4, 6, 10", method="direct").result
        prime = _run(lcm, numbers="4, 6, 10", method="prime").result
        self.assertEqual(direct["lcm"], prime["lcm"])
        self.assertEqual(direct["lcm"], 60)

    def test_prime_factors(self):
        self.assertEqual(lcm.prime_factors(360), [2, 2, 2, 3, 3, 5])
        self.assertEqual(lcm.prime_factors(97), [97])
        self.assertEqual(lcm.prime_factors(1), [])

    def test_rejected_inputs(self):
        cases = {
            "": "Please enter numbers.",
            "12": "Please enter at least two valid positive numbers.",
            "4, x": "'x' is not a whole number.",
            "4, -2": "All numbers must be positive.",
            "4, 0": "All numbers must be positive.",
            ", ".join(["2"] * 11): "Please enter at most 10 numbers.",
            "4, 2000000": "Numbers must be less than 1,000,000.",
        }
        for text, message in cases.items():
            with self.subTest(numbers=text):
                state = _run(lcm, numbers=text)
                self.assertIsNone(state.result)
                self.assertEqual(state.errors, [message])

    def test_only_plain_digits_accepted(self):
        for part in ("1_000", "\u0663", "1.5", "0x10"):
            with self.subTest(part=part):
                with self.assertRaises(ValueError):
                    lcm.parse_numbers(f"4, {part}")
        self.assertEqual(lcm.parse_numbers(" +4 , 6,"), [4, 6])


if __name__ == "__main__":
    unittest.main()
