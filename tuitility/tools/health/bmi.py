"""BMI Calculator: weight / height² with WHO weight categories."""
from wtforms import Form, SelectField

from tuitility.core.calculator import Calculator, ContentSection, FAQItem, ToolContent
from tuitility.core.validation import AtMost, NumberField, Positive, Required

LB_TO_KG = 0.453592
IN_TO_CM = 2.54

HEALTHY_BMI_MIN = 18.5
HEALTHY_BMI_MAX = 24.9


class BMIForm(Form):
    unit_system = SelectField("Units", choices=[("metric", "Metric (kg, cm)"), ("imperial", "Imperial (lb, in)")])
    weight = NumberField("Weight", validators=[Required(), Positive(), AtMost(1000)])
    height = NumberField("Height", validators=[Required(), Positive(), AtMost(300)])


DEFAULTS = {
    "unit_system": "metric",
    "weight": "",
    "height": "",
}


def bmi_value(weight_kg, height_m):
    return weight_kg / (height_m * height_m)


def weight_category(bmi):
    if bmi < 18.5:
        return "Underweight"
    if bmi < 25:
        return "Normal"
    if bmi < 30:
        return "Overweight"
    return "Obese"


def interpretation(bmi):
    if bmi < 18.5:
        return ("Your BMI indicates you are underweight. Consider consulting with a healthcare "
                "provider to ensure you're getting adequate nutrition.")
    if bmi < 25:
        return ("Your BMI is in the healthy range. Maintain your current lifestyle with balanced "
                "nutrition and regular exercise.")
    if bmi < 30:
        return ("Your BMI indicates you are overweight. Consider a balanced diet and regular "
                "physical activity to reach a healthier weight.")
    return ("Your BMI indicates obesity. Consult a healthcare provider for a personalized plan "
            "to improve your health.")


def calculate(data):
    if data["unit_system"] == "imperial":
        weight_kg = data["weight"] * LB_TO_KG
        height_m = data["height"] * IN_TO_CM / 100
    else:
        weight_kg = data["weight"]
        height_m = data["height"] / 100

    bmi = bmi_value(weight_kg, height_m)
    return {
        "bmi": round(bmi, 2),
        "category": weight_category(bmi),
        "healthy_min_kg": round(HEALTHY_BMI_MIN * height_m * height_m, 1),
        "healthy_max_kg": round(HEALTHY_BMI_MAX * height_m * height_m, 1),
        "interpretation": interpretation(bmi),
    }


def result_rows(result):
    return [
        ("BMI", f"{result['bmi']:.2f}"),
        ("Category", result["category"]),
        ("Healthy weight range", f"{result['healthy_min_kg']:.1f} to {result['healthy_max_kg']:.1f} kg"),
        ("What it means", result["interpretation"]),
    ]


CONTENT = ToolContent(
    sections=(
        ContentSection("introduction", "Introduction", (
            "Body Mass Index (BMI) relates your weight to your height. It is a quick screening "
            "number used by clinicians worldwide to place adults into weight categories."
        )),
        ContentSection("formula", "The BMI Formula", (
            "BMI is your weight in kilograms divided by the square of your height in meters:\n\n"
            "`BMI = weight (kg) / height (m)²`\n\n"
            "For imperial units the calculator converts pounds and inches first "
            "(1 lb = 0.453592 kg, 1 in = 2.54 cm)."
        )),
        ContentSection("categories", "BMI Categories", (
            "| BMI | Category |\n|---|---|\n"
            "| below 18.5 | Underweight |\n| 18.5 to 24.9 | Normal |\n"
            "| 25 to 29.9 | Overweight |\n| 30 and above | Obese |"
        )),
        ContentSection("example", "Worked Example", (
            "A person weighing 70 kg who is 175 cm tall has a BMI of "
            "70 / 1.75² = **22.86**, which is in the Normal range."
        )),
        ContentSection("limitations", "Limitations", (
            "BMI does not distinguish muscle from fat and does not account for where fat is "
            "stored. Athletes, older adults and pregnant women may get misleading results."
        )),
    ),
    faqs=(
        FAQItem("Is BMI accurate for athletes?",
                "Not always. Muscle is dense, so very muscular people can have a high BMI without excess fat."),
        FAQItem("What is a healthy BMI?",
                "For most adults a BMI between 18.5 and 24.9 is considered healthy."),
        FAQItem("Does BMI apply to children?",
                "Children and teens use age- and sex-specific BMI percentiles rather than the adult categories."),
    ),
)

CALCULATOR = Calculator(
    tool_id="bmi-calculator",
    form_class=BMIForm,
    defaults=DEFAULTS,
    formula=calculate,
    content=CONTENT,
    title="Calculate Your BMI",
    subtitle="Enter your weight and height",
    button_text="Calculate BMI",
    result_rows=result_rows,
)
