"""
Carbon Footprint Calculator.

Annual emissions in metric tons of CO2e across transportation, home energy,
food and waste. Every factor is a fixed constant below; weekly and monthly
inputs are scaled to a year before the factors are applied.
"""
from wtforms import Form, SelectField
from wtforms.validators import Optional

from tuitility.core.calculator import Calculator, ContentSection, FAQItem, ToolContent
from tuitility.core.validation import Between, NonNegative, NumberField, Positive

WEEKS_PER_YEAR = 52
MONTHS_PER_YEAR = 12

EMISSION_FACTORS = {
    "car": 0.404,             # kg CO2e per mile, average car
    "public_transit": 0.14,   # kg CO2e per mile, bus/train
    "short_flight": 223,      # kg CO2e per flight
    "long_flight": 986,       # kg CO2e per flight
    "electricity": 0.42,      # kg CO2e per kWh
    "natural_gas": 5.3,       # kg CO2e per therm
    "waste": 0.57,            # kg CO2e per pound
}

DIET_EMISSIONS = {
    "meat-heavy": 2500,
    "average": 1800,
    "vegetarian": 1300,
    "vegan": 1000,
}

LOCAL_FOOD_MAX_REDUCTION = 0.2
FOOD_WASTE_FACTOR = 2.5
RECYCLING_WEIGHT = 0.7
COMPOSTING_REDUCTION = 0.3

# Tons per person per year
AVERAGE_FOOTPRINT = 16

# (upper bound % of average, label)
COMPARISON_BANDS = (
    (50, "Much Lower than Average"),
    (80, "Lower than Average"),
    (120, "Average"),
    (150, "Higher than Average"),
)


def _amount(label):
    return NumberField(label, validators=[Optional(), NonNegative()])


def _percent(label):
    return NumberField(label, validators=[Optional(), Between(0, 100)])


class CarbonFootprintForm(Form):
    car_miles = _amount("Car miles per week")
    car_efficiency = NumberField("Car fuel efficiency (MPG)", validators=[Optional(), Positive()])
    public_transit = _amount("Public transit miles per week")
    flights_short = _amount("Short flights per year")
    flights_long = _amount("Long flights per year")
    electricity = _amount("Electricity (kWh per month)")
    natural_gas = _amount("Natural gas (therms per month)")
    renewable_energy = _percent("Renewable energy (%)")
    household_size = NumberField("Household size", validators=[Optional(), Positive()])
    diet = SelectField("Diet", choices=[
        ("meat-heavy", "Meat-heavy"),
        ("average", "Average"),
        ("vegetarian", "Vegetarian"),
        ("vegan", "Vegan"),
    ])
    local_food = _percent("Locally produced food (%)")
    food_waste = _amount("Food waste (pounds per week)")
    waste_generated = _amount("Household waste (pounds per week)")
    recycling_rate = _percent("Recycling rate (%)")
    compost = SelectField("Composting", choices=[("no", "No"), ("yes", "Yes")])


DEFAULTS = {
    "car_miles": "",
    "car_efficiency": "25",
    "public_transit": "",
    "flights_short": "",
    "flights_long": "",
    "electricity": "",
    "natural_gas": "",
    "renewable_energy": "",
    "household_size": "1",
    "diet": "average",
    "local_food": "",
    "food_waste": "",
    "waste_generated": "",
    "recycling_rate": "",
    "compost": "no",
}


def _value(data, name, default=0):
    value = data.get(name)
    return default if value is None else value


def transportation_tons(data):
    car_miles = _value(data, "car_miles") * WEEKS_PER_YEAR
    transit_miles = _value(data, "public_transit") * WEEKS_PER_YEAR
    car = car_miles / _value(data, "car_efficiency", 25) * EMISSION_FACTORS["car"] * 1000
    transit = transit_miles * EMISSION_FACTORS["public_transit"]
    flights = (_value(data, "flights_short") * EMISSION_FACTORS["short_flight"]
               + _value(data, "flights_long") * EMISSION_FACTORS["long_flight"])
    return (car + transit + flights) / 1000


def energy_tons(data):
    kwh = _value(data, "electricity") * MONTHS_PER_YEAR
    therms = _value(data, "natural_gas") * MONTHS_PER_YEAR
    renewable = _value(data, "renewable_energy") / 100
    electricity = kwh * EMISSION_FACTORS["electricity"] * (1 - renewable)
    gas = therms * EMISSION_FACTORS["natural_gas"]
    return (electricity + gas) / 1000 / _value(data, "household_size", 1)


def food_tons(data):
    diet = DIET_EMISSIONS[data.get("diet") or "average"]
    local_reduction = diet * LOCAL_FOOD_MAX_REDUCTION * _value(data, "local_food") / 100
    waste = _value(data, "food_waste") * WEEKS_PER_YEAR * FOOD_WASTE_FACTOR / 1000
    return (diet - local_reduction + waste) / 1000


def waste_tons(data):
    pounds = _value(data, "waste_generated") * WEEKS_PER_YEAR
    reduction = _value(data, "recycling_rate") / 100 * RECYCLING_WEIGHT
    if data.get("compost") == "yes":
        reduction += COMPOSTING_REDUCTION
    return pounds * EMISSION_FACTORS["waste"] * (1 - reduction) / 1000


def comparison(total):
    percent = total / AVERAGE_FOOTPRINT * 100
    for bound, label in COMPARISON_BANDS:
        if percent < bound:
            return label
    return "Much Higher than Average"


def reduction_tips(data, breakdown):
    tips = []
    if breakdown["transportation"] > 4:
        if _value(data, "car_miles") * WEEKS_PER_YEAR > 5000:
            tips.append("Consider carpooling or using public transportation to reduce your car emissions.")
            tips.append("If possible, try working from home a few days a week to reduce commuting.")
        if _value(data, "flights_short") + _value(data, "flights_long") > 3:
            tips.append("Try to combine trips or use video conferencing instead of flying for business.")
            tips.append("Consider carbon offsets when flying to mitigate your flight emissions.")
    if breakdown["energy"] > 3:
        tips.append("Switch to LED light bulbs and energy-efficient appliances.")
        tips.append("Consider increasing your use of renewable energy through home solar panels or green energy programs.")
        tips.append("Improve home insulation to reduce heating and cooling needs.")
    if breakdown["food"] > 2:
        if data.get("diet") == "meat-heavy":
            tips.append("Try having one or more meatless days per week to reduce your dietary carbon footprint.")
        tips.append("Buy more locally produced and seasonal foods to reduce transportation emissions.")
        tips.append("Plan meals to reduce food waste and save money while lowering emissions.")
    if breakdown["waste"] > 1:
        if _value(data, "recycling_rate") < 50:
            tips.append("Increase your recycling efforts - aim for recycling at least 50% of your waste.")
        if data.get("compost") != "yes":
            tips.append("Start composting food scraps to reduce methane emissions from landfills.")
        tips.append("Choose products with less packaging or bring reusable bags and containers when shopping.")
    return tips


def calculate(data):
    breakdown = {
        "transportation": transportation_tons(data),
        "energy": energy_tons(data),
        "food": food_tons(data),
        "waste": waste_tons(data),
    }
    total = sum(breakdown.values())
    return {
        "total": round(total, 2),
        "breakdown": {name: round(value, 2) for name, value in breakdown.items()},
        "percent_of_average": round(total / AVERAGE_FOOTPRINT * 100, 1),
        "comparison": comparison(total),
        "tips": reduction_tips(data, breakdown),
    }


def result_rows(result):
    breakdown = result["breakdown"]
    rows = [
        ("Total footprint", f"{result['total']:.2f} tons CO2e per year"),
        ("Compared to average", f"{result['comparison']} ({result['percent_of_average']}% of {AVERAGE_FOOTPRINT} t)"),
        ("Transportation", f"{breakdown['transportation']:.2f} t"),
        ("Home energy", f"{breakdown['energy']:.2f} t"),
        ("Food", f"{breakdown['food']:.2f} t"),
        ("Waste", f"{breakdown['waste']:.2f} t"),
    ]
    if result["tips"]:
        rows.append(("Ways to reduce", " ".join(result["tips"])))
    return rows


CONTENT = ToolContent(
    sections=(
        ContentSection("introduction", "Introduction", (
            "Your carbon footprint is the total greenhouse gas released by your activities in a "
            "year, expressed as tons of CO2 equivalent. The average American produces about "
            "16 tons."
        )),
        ContentSection("factors", "Emission Factors", (
            "| Activity | Factor |\n|---|---|\n"
            "| Car travel | 0.404 kg per mile |\n"
            "| Public transit | 0.14 kg per mile |\n"
            "| Short flight | 223 kg each |\n"
            "| Long flight | 986 kg each |\n"
            "| Electricity | 0.42 kg per kWh |\n"
            "| Natural gas | 5.3 kg per therm |\n"
            "| Household waste | 0.57 kg per pound |"
        )),
        ContentSection("food", "Diet", (
            "Diet contributes a fixed yearly amount: 2.5 t for a meat-heavy diet, 1.8 t average, "
            "1.3 t vegetarian and 1.0 t vegan. Eating local food lowers it by up to 20%."
        )),
    ),
    faqs=(
        FAQItem("Why is home energy divided by household size?",
                "Electricity and heating are shared, so each person is responsible for their share."),
        FAQItem("How accurate is this estimate?",
                "It uses national averages. Your utility bills and vehicle data give the most accurate inputs."),
    ),
)

CALCULATOR = Calculator(
    tool_id="carbon-footprint-calculator",
    form_class=CarbonFootprintForm,
    defaults=DEFAULTS,
    formula=calculate,
    content=CONTENT,
    title="Carbon Footprint Calculator",
    button_text="Calculate Footprint",
    result_rows=result_rows,
)
