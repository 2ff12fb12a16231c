"""LCM Calculator: least common multiple and greatest common divisor of 2 to 10 whole numbers."""
import math
import re
from collections import Counter
from functools import reduce

from wtforms import Form, SelectField, StringField

from tuitility.core.calculator import Calculator, ContentSection, FAQItem, ToolContent
from tuitility.core.validation import Required

MIN_NUMBERS = 2
MAX_NUMBERS = 10
MAX_VALUE = 1000000

METHOD_DIRECT = "direct"
METHOD_PRIME = "prime"

# Plain ASCII digits with an optional sign
WHOLE_NUMBER_PATTERN = re.compile(r"^[+-]?[0-9]+$")


def parse_numbers(text):
    """
    Split a comma separated list into whole numbers.

    Raises:
        ValueError: naming the first entry that is not a positive whole number
    """
    numbers = []
    for part in (text or "").split(","):
        part = part.strip()
        if not part:
            continue
        if not WHOLE_NUMBER_PATTERN.match(part):
            raise ValueError(f"'{part}' is not a whole number.")
        value = int(part)
        if value <= 0:
            raise ValueError("All numbers must be positive.")
        numbers.append(value)
    return numbers


class LCMForm(Form):
    numbers = StringField("Numbers", validators=[Required(message="Please enter numbers.")])
    method = SelectField("Method", choices=[(METHOD_DIRECT, "Direct Method"), (METHOD_PRIME, "Prime Factorization")])

    def rules(self):
        if self.numbers.errors:
            return []
        try:
            numbers = parse_numbers(self.numbers.data)
        except ValueError as e:
            return [str(e)]
        if len(numbers) < MIN_NUMBERS:
            return ["Please enter at least two valid positive numbers."]
        if len(numbers) > MAX_NUMBERS:
            return [f"Please enter at most {MAX_NUMBERS} numbers."]
        if any(n > MAX_VALUE for n in numbers):
            return ["Numbers must be less than 1,000,000."]
        return []


DEFAULTS = {
    "numbers": "12, 18, 24",
    "method": METHOD_DIRECT,
}


def lcm(a, b):
    return a * b // math.gcd(a, b)


def prime_factors(n):
    factors = []
    divisor = 2
    while divisor * divisor <= n:
        while n % divisor == 0:
            factors.append(divisor)
            n //= divisor
        divisor += 1
    if n > 1:
        factors.append(n)
    return factors


def direct_steps(numbers):
    steps = []
    result = numbers[0]
    for n in numbers[1:]:
        previous = result
        result = lcm(result, n)
        steps.append(f"LCM({previous}, {n}) = {previous} × {n} / GCD({previous}, {n}) = {result}")
    return steps


def prime_steps(numbers):
    steps = []
    highest = Counter()
    for n in numbers:
        factors = prime_factors(n)
        steps.append(f"Prime factors of {n} = {' × '.join(map(str, factors)) or '1'}")
        for prime, count in Counter(factors).items():
            highest[prime] = max(highest[prime], count)
    powers = [f"{p}^{c}" if c > 1 else str(p) for p, c in sorted(highest.items())]
    steps.append(f"Highest power of each prime: {' × '.join(powers)}")
    return steps


def calculate(data):
    numbers = parse_numbers(data["numbers"])
    result = reduce(lcm, numbers)
    gcd = reduce(math.gcd, numbers)
    steps = prime_steps(numbers) if data["method"] == METHOD_PRIME else direct_steps(numbers)
    steps.append(f"Therefore, LCM of ({', '.join(map(str, numbers))}) = {result}")
    return {
        "numbers": numbers,
        "lcm": result,
        "gcd": gcd,
        "steps": steps,
    }


def result_rows(result):
    return [
        ("Numbers", ", ".join(map(str, result["numbers"]))),
        ("LCM", result["lcm"]),
        ("GCD", result["gcd"]),
        ("Steps", "; ".join(result["steps"])),
    ]


CONTENT = ToolContent(
    sections=(
        ContentSection("introduction", "Introduction", (
            "The least common multiple (LCM) is the smallest positive number that every number "
            "in a list divides evenly. It is what you need to add fractions with different "
            "denominators."
        )),
        ContentSection("methods", "Methods", (
            "**Direct method.** Fold the list pairwise with `LCM(a, b) = a × b / GCD(a, b)`.\n\n"
            "**Prime factorization.** Factor each number and multiply the highest power of every "
            "prime that appears."
        )),
        ContentSection("example", "Example", (
            "For 12, 18 and 24: 12 = 2² × 3, 18 = 2 × 3², 24 = 2³ × 3, so the LCM is "
            "2³ × 3² = **72** and the GCD is **6**."
        )),
    ),
    faqs=(
        FAQItem("How are LCM and GCD related?",
                "For two numbers, LCM(a, b) × GCD(a, b) = a × b."),
        FAQItem("How many numbers can I enter?",
                "Between 2 and 10 positive whole numbers, each below 1,000,000."),
    ),
)

CALCULATOR = Calculator(
    tool_id="lcm-calculator",
    form_class=LCMForm,
    defaults=DEFAULTS,
    formula=calculate,
    content=CONTENT,
    title="LCM Calculator",
    button_text="Calculate LCM",
    result_rows=result_rows,
)
