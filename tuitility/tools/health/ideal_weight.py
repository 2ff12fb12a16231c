"""Ideal Weight Calculator: Devine, Robinson, Miller and Hamwi formulas."""
from wtforms import Form, SelectField
from wtforms.validators import Optional

from tuitility.core.calculator import Calculator, ContentSection, FAQItem, ToolContent
from tuitility.core.validation import Between, NumberField, Positive, Required

CM_PER_INCH = 2.54

FRAME_ADJUSTMENTS = {
    "small": 0.9,
    "medium": 1.0,
    "large": 1.1,
}

# 0.3% reduction per year after 50
AGE_THRESHOLD = 50
AGE_FACTOR_PER_YEAR = 0.003

# (base kg at 60 in, kg per inch over 60 in) per gender
FORMULAS = {
    "devine": {"male": (50, 2.3), "female": (45.5, 2.3)},
    "robinson": {"male": (52, 1.9), "female": (49, 1.7)},
    "miller": {"male": (56.2, 1.41), "female": (53.1, 1.36)},
    "hamwi": {"male": (48, 2.7), "female": (45.5, 2.2)},
}


class IdealWeightForm(Form):
    gender = SelectField("Gender", choices=[("male", "Male"), ("female", "Female")])
    age = NumberField("Age", validators=[Required(), Between(18, 120)])
    height = NumberField("Height (cm)", validators=[Required(), Between(100, 250)])
    body_frame = SelectField("Body frame", choices=[("small", "Small"), ("medium", "Medium"), ("large", "Large")])
    current_weight = NumberField("Current weight (kg)", validators=[Optional(), Positive()])


DEFAULTS = {
    "gender": "male",
    "age": "",
    "height": "",
    "body_frame": "medium",
    "current_weight": "",
}


def formula_weight(name, height_in, gender):
    base, per_inch = FORMULAS[name][gender]
    return base + per_inch * (height_in - 60)


def bmi_range(height_m):
    return {
        "min": round(18.5 * height_m * height_m, 1),
        "max": round(24.9 * height_m * height_m, 1),
    }


def calculate(data):
    height_cm = data["height"]
    height_in = height_cm / CM_PER_INCH
    frame = FRAME_ADJUSTMENTS[data["body_frame"]]
    age = data["age"]

    age_factor = 1.0
    if age > AGE_THRESHOLD:
        age_factor = 1 - (age - AGE_THRESHOLD) * AGE_FACTOR_PER_YEAR

    weights = {
        name: formula_weight(name, height_in, data["gender"]) * frame * age_factor
        for name in FORMULAS
    }
    average = sum(weights.values()) / len(weights)

    result = {name: round(value, 1) for name, value in weights.items()}
    result["average"] = round(average, 1)
    result["bmi_range"] = bmi_range(height_cm / 100)

    current = data.get("current_weight")
    if current:
        height_m = height_cm / 100
        difference = current - average
        result["bmi"] = round(current / (height_m * height_m), 1)
        result["difference"] = round(difference, 1)
        result["difference_percent"] = round(difference / average * 100, 1)
    return result


def result_rows(result):
    rows = [
        ("Devine", f"{result['devine']} kg"),
        ("Robinson", f"{result['robinson']} kg"),
        ("Miller", f"{result['miller']} kg"),
        ("Hamwi", f"{result['hamwi']} kg"),
        ("Average ideal weight", f"{result['average']} kg"),
        ("Healthy BMI range", f"{result['bmi_range']['min']} to {result['bmi_range']['max']} kg"),
    ]
    if "bmi" in result:
        direction = "above" if result["difference"] > 0 else "below"
        rows.append(("Your BMI", result["bmi"]))
        rows.append(("Compared to average", f"{abs(result['difference'])} kg {direction} ({abs(result['difference_percent'])}%)"))
    return rows


CONTENT = ToolContent(
    sections=(
        ContentSection("introduction", "Introduction", (
            "Ideal body weight (IBW) formulas were created to dose medication, but they are widely "
            "used as a rough weight goal. This calculator runs the four best-known formulas and "
            "averages them."
        )),
        ContentSection("formulas", "The Formulas", (
            "All four formulas start from a base weight at 5 feet (60 inches) and add a fixed "
            "amount per inch above that:\n\n"
            "| Formula | Men | Women |\n|---|---|---|\n"
            "| Devine (1974) | 50 + 2.3 kg/in | 45.5 + 2.3 kg/in |\n"
            "| Robinson (1983) | 52 + 1.9 kg/in | 49 + 1.7 kg/in |\n"
            "| Miller (1983) | 56.2 + 1.41 kg/in | 53.1 + 1.36 kg/in |\n"
            "| Hamwi (1964) | 48 + 2.7 kg/in | 45.5 + 2.2 kg/in |"
        )),
        ContentSection("adjustments", "Frame and Age Adjustments", (
            "A small frame lowers the result by 10% and a large frame raises it by 10%. After "
            "age 50 the estimate is reduced by 0.3% for every additional year."
        )),
    ),
    faqs=(
        FAQItem("Which formula is the most accurate?",
                "None is universally best. Averaging them smooths out the differences between studies."),
        FAQItem("Why is the age limited to 18-120?",
                "The formulas were developed for adults and are not meant for children or teenagers."),
    ),
)

CALCULATOR = Calculator(
    tool_id="ideal-body-weight-calculator",
    form_class=IdealWeightForm,
    defaults=DEFAULTS,
    formula=calculate,
    content=CONTENT,
    title="Find Your Ideal Weight",
    button_text="Calculate Ideal Weight",
    result_rows=result_rows,
)
