"""
Percentage Calculator.

Every question the calculator answers is a row in CALCULATION_TYPES: which
of P, X and Y it needs, how to combine them, and which input must not be zero.
"""
from collections import namedtuple

from wtforms import Form, SelectField

from tuitility.core.calculator import Calculator, ContentSection, FAQItem, ToolContent
from tuitility.core.validation import Between, NumberField, is_blank, is_usable

CalculationType = namedtuple("CalculationType", "key label inputs formula percent nonzero steps")

CALCULATION_TYPES = (
    CalculationType("percent-of", "What is P% of X?", ("p", "x"),
                    lambda p, x, y: p / 100 * x, False, None,
                    "{p}% of {x} = ({p} / 100) × {x}"),
    CalculationType("y-percent-of-x", "Y is what % of X?", ("y", "x"),
                    lambda p, x, y: y / x * 100, True, "x",
                    "{y} / {x} × 100"),
    CalculationType("y-is-p-of-what", "Y is P% of what?", ("y", "p"),
                    lambda p, x, y: y / (p / 100), False, "p",
                    "{y} / ({p} / 100)"),
    CalculationType("what-percent-of-x-is-y", "What % of X is Y?", ("x", "y"),
                    lambda p, x, y: y / x * 100, True, "x",
                    "{y} / {x} × 100"),
    CalculationType("p-of-what-is-y", "P% of what is Y?", ("p", "y"),
                    lambda p, x, y: y / (p / 100), False, "p",
                    "{y} / ({p} / 100)"),
    CalculationType("y-out-of-what-is-p", "Y out of what is P%?", ("y", "p"),
                    lambda p, x, y: y * 100 / p, False, "p",
                    "{y} × 100 / {p}"),
    CalculationType("what-out-of-x-is-p", "What out of X is P%?", ("x", "p"),
                    lambda p, x, y: x * p / 100, False, None,
                    "{x} × {p} / 100"),
    CalculationType("y-out-of-x-is-what", "Y out of X is what %?", ("y", "x"),
                    lambda p, x, y: y / x * 100, True, "x",
                    "{y} / {x} × 100"),
    CalculationType("x-plus-p-is-what", "X plus P% is what?", ("x", "p"),
                    lambda p, x, y: x + x * p / 100, False, None,
                    "{x} + {x} × {p} / 100"),
    CalculationType("x-plus-what-is-y", "X plus what % is Y?", ("x", "y"),
                    lambda p, x, y: (y - x) / x * 100, True, "x",
                    "({y} - {x}) / {x} × 100"),
    CalculationType("what-plus-p-is-y", "What plus P% is Y?", ("p", "y"),
                    lambda p, x, y: y / (1 + p / 100), False, "1+p",
                    "{y} / (1 + {p} / 100)"),
    CalculationType("x-minus-p-is-what", "X minus P% is what?", ("x", "p"),
                    lambda p, x, y: x - x * p / 100, False, None,
                    "{x} - {x} × {p} / 100"),
    CalculationType("x-minus-what-is-y", "X minus what % is Y?", ("x", "y"),
                    lambda p, x, y: (x - y) / x * 100, True, "x",
                    "({x} - {y}) / {x} × 100"),
    CalculationType("what-minus-p-is-y", "What minus P% is Y?", ("p", "y"),
                    lambda p, x, y: y / (1 - p / 100), False, "1-p",
                    "{y} / (1 - {p} / 100)"),
)

TYPES_BY_KEY = {t.key: t for t in CALCULATION_TYPES}

INPUT_NAMES = {"p": "P", "x": "X", "y": "Y"}

MAX_INPUT = 1e12


def _input(label):
    return NumberField(label, validators=[
        Between(-MAX_INPUT, MAX_INPUT,
                message=f"{label} must be between -1,000,000,000,000 and 1,000,000,000,000."),
    ])


class PercentageForm(Form):
    calculation_type = SelectField("Calculation", choices=[(t.key, t.label) for t in CALCULATION_TYPES])
    p = _input("P")
    x = _input("X")
    y = _input("Y")

    def rules(self):
        if self.calculation_type.errors:
            return []
        calc = TYPES_BY_KEY[self.calculation_type.data]
        inputs = [self[name] for name in calc.inputs]

        if any(is_blank(field) for field in inputs):
            first, second = (INPUT_NAMES[name] for name in calc.inputs)
            return [f"Please enter valid numbers for both {first} and {second}."]
        if not all(is_usable(field) for field in inputs):
            return []

        values = {name: self[name].data for name in calc.inputs}

        if calc.nonzero in ("p", "x") and values[calc.nonzero] == 0:
            label = INPUT_NAMES[calc.nonzero]
            return [f"{label} cannot be zero (division by zero)."]
        if calc.nonzero == "1+p" and 1 + values["p"] / 100 == 0:
            return ["Invalid calculation: 1 + P%/100 cannot equal zero."]
        if calc.nonzero == "1-p":
            if values["p"] > 100:
                return ["Invalid calculation: P% cannot be greater than 100% for this operation."]
            if 1 - values["p"] / 100 == 0:
                return ["Invalid calculation: 1 - P%/100 cannot equal zero."]
        return []


DEFAULTS = {
    "calculation_type": "percent-of",
    "p": "",
    "x": "",
    "y": "",
}


def _fmt(value):
    return f"{value:g}"


def calculate(data):
    calc = TYPES_BY_KEY[data["calculation_type"]]
    p, x, y = data.get("p"), data.get("x"), data.get("y")
    value = calc.formula(p, x, y)
    shown = {name: _fmt(data[name]) for name in calc.inputs}
    return {
        "calculation_type": calc.key,
        "question": calc.label,
        "value": round(value, 2),
        "display": f"{value:.2f}%" if calc.percent else f"{value:.2f}",
        "steps": calc.steps.format(**{k: shown.get(k, "") for k in ("p", "x", "y")}),
    }


def result_rows(result):
    return [
        ("Question", result["question"]),
        ("Answer", result["display"]),
        ("Working", result["steps"]),
    ]


CONTENT = ToolContent(
    sections=(
        ContentSection("introduction", "Introduction", (
            "A percentage is a number expressed as a fraction of 100. This calculator answers the "
            "fourteen common percentage questions, from \"what is 15% of 80?\" to percentage "
            "increase and decrease."
        )),
        ContentSection("formulas", "Core Formulas", (
            "| Question | Formula |\n|---|---|\n"
            "| What is P% of X? | `P / 100 × X` |\n"
            "| Y is what % of X? | `Y / X × 100` |\n"
            "| Y is P% of what? | `Y / (P / 100)` |\n"
            "| X plus what % is Y? | `(Y - X) / X × 100` |\n"
            "| X minus P% is what? | `X - X × P / 100` |"
        )),
        ContentSection("examples", "Examples", (
            "- 20% of 150 is **30**.\n"
            "- 45 is **30%** of 150.\n"
            "- A price rising from 80 to 100 is a **25%** increase."
        )),
    ),
    faqs=(
        FAQItem("Is a 50% increase followed by a 50% decrease back to the start?",
                "No. 100 becomes 150, and 50% off 150 is 75. Each percentage applies to a different base."),
        FAQItem("Why can't X be zero?",
                "Several questions divide by X. A percentage of nothing is undefined."),
    ),
)

CALCULATOR = Calculator(
    tool_id="percentage-calculator",
    form_class=PercentageForm,
    defaults=DEFAULTS,
    formula=calculate,
    content=CONTENT,
    title="Percentage Calculator",
    button_text="Calculate",
    result_rows=result_rows,
)
