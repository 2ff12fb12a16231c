"""Water Intake Calculator."""
from wtforms import Form, SelectField

from tuitility.core.calculator import Calculator, ContentSection, FAQItem, ToolContent
from tuitility.core.validation import AtMost, NumberField, Positive, Required

LB_TO_KG = 0.453592
LITERS_PER_KG = 0.033
MIN_LITERS = 0.5
CUPS_PER_LITER = 4.227
OUNCES_PER_LITER = 33.814

ACTIVITY_MULTIPLIERS = {
    "sedentary": 1.0,
    "light": 1.1,
    "moderate": 1.2,
    "very": 1.3,
    "extra": 1.4,
}

CLIMATE_MULTIPLIERS = {
    "moderate": 1.0,
    "hot": 1.2,
    "humid": 1.3,
    "cold": 0.95,
}

SCHEDULE_SPLIT = (("morning", 0.35), ("afternoon", 0.40), ("evening", 0.25))


class WaterIntakeForm(Form):
    weight = NumberField("Weight", validators=[
        Required(message="Please enter a valid weight greater than 0."),
        Positive(message="Please enter a valid weight greater than 0."),
        AtMost(500, message="Please enter a realistic weight value."),
    ])
    weight_unit = SelectField("Weight unit", choices=[("kg", "kg"), ("lb", "lb")])
    activity_level = SelectField("Activity level", choices=[
        ("sedentary", "Sedentary - little to no exercise"),
        ("light", "Light - exercise 1-3 days per week"),
        ("moderate", "Moderate - exercise 3-5 days per week"),
        ("very", "Very active - hard exercise 6-7 days per week"),
        ("extra", "Extra active - very hard exercise, physical job"),
    ])
    climate = SelectField("Climate", choices=[
        ("moderate", "Moderate"),
        ("hot", "Hot and dry"),
        ("humid", "Hot and humid"),
        ("cold", "Cold"),
    ])


DEFAULTS = {
    "weight": "",
    "weight_unit": "kg",
    "activity_level": "light",
    "climate": "moderate",
}


def daily_liters(weight_kg, activity_level, climate):
    liters = weight_kg * LITERS_PER_KG
    liters *= ACTIVITY_MULTIPLIERS.get(activity_level, 1.0)
    liters *= CLIMATE_MULTIPLIERS.get(climate, 1.0)
    return max(MIN_LITERS, liters)


def calculate(data):
    weight_kg = data["weight"] * LB_TO_KG if data["weight_unit"] == "lb" else data["weight"]
    liters = daily_liters(weight_kg, data["activity_level"], data["climate"])
    cups = round(liters * CUPS_PER_LITER)
    return {
        "liters": round(liters, 2),
        "cups": cups,
        "ounces": round(liters * OUNCES_PER_LITER),
        "schedule": {period: round(cups * share) for period, share in SCHEDULE_SPLIT},
    }


def result_rows(result):
    schedule = result["schedule"]
    return [
        ("Daily water", f"{result['liters']:.2f} L"),
        ("Cups", result["cups"]),
        ("Fluid ounces", result["ounces"]),
        ("Schedule", f"{schedule['morning']} cups morning, {schedule['afternoon']} afternoon, {schedule['evening']} evening"),
    ]


CONTENT = ToolContent(
    sections=(
        ContentSection("introduction", "Introduction", (
            "Your body is about 60% water and loses some of it every hour. This calculator "
            "estimates how much you should drink each day from your weight, how active you are "
            "and the climate you live in."
        )),
        ContentSection("method", "How It Is Calculated", (
            "The base amount is 33 ml per kilogram of body weight. It is multiplied by an "
            "activity factor (1.0 to 1.4) and a climate factor (0.95 for cold up to 1.3 for hot "
            "and humid). The result never drops below 0.5 liters."
        )),
        ContentSection("schedule", "Spreading It Through the Day", (
            "Aim for about 35% of your cups in the morning, 40% in the afternoon and 25% in the evening."
        )),
    ),
    faqs=(
        FAQItem("Does coffee count toward my water intake?",
                "Moderate amounts do, although caffeine has a mild diuretic effect."),
        FAQItem("Can I drink too much water?",
                "Yes. Very large amounts in a short time can dilute blood sodium. Spread your intake over the day."),
    ),
)

CALCULATOR = Calculator(
    tool_id="water-intake-calculator",
    form_class=WaterIntakeForm,
    defaults=DEFAULTS,
    formula=calculate,
    content=CONTENT,
    title="Daily Water Intake",
    button_text="Calculate Water Intake",
    result_rows=result_rows,
)
