"""Fuel Cost Calculator."""
from wtforms import BooleanField, Form, SelectField

from tuitility.core.calculator import Calculator, ContentSection, FAQItem, ToolContent
from tuitility.core.validation import AtLeast, IntegerNumberField, NumberField, Positive, Required

KM_TO_MILES = 0.621371
KPL_TO_MPG = 2.35215

CURRENCY_SYMBOLS = {
    "usd": "$",
    "eur": "€",
    "gbp": "£",
}


class FuelForm(Form):
    distance = NumberField("Distance", validators=[
        Required(message="Please enter a valid distance."),
        Positive(message="Please enter a valid distance."),
    ])
    distance_unit = SelectField("Distance unit", choices=[("miles", "Miles"), ("kilometers", "Kilometers")])
    fuel_efficiency = NumberField("Fuel efficiency", validators=[
        Required(message="Please enter a valid fuel efficiency."),
        Positive(message="Please enter a valid fuel efficiency."),
    ])
    efficiency_unit = SelectField("Efficiency unit", choices=[("mpg", "Miles per gallon"), ("kpl", "Kilometers per liter")])
    fuel_price = NumberField("Fuel price (per gallon)", validators=[
        Required(message="Please enter a valid fuel price."),
        Positive(message="Please enter a valid fuel price."),
    ])
    currency = SelectField("Currency", choices=[("usd", "USD ($)"), ("eur", "EUR (€)"), ("gbp", "GBP (£)")])
    round_trip = BooleanField("Round trip")
    passengers = IntegerNumberField("Passengers", validators=[Required(), AtLeast(1)])


DEFAULTS = {
    "distance": "",
    "distance_unit": "miles",
    "fuel_efficiency": "",
    "efficiency_unit": "mpg",
    "fuel_price": "",
    "currency": "usd",
    "round_trip": "",
    "passengers": "1",
}


def calculate(data):
    miles = data["distance"]
    if data["distance_unit"] == "kilometers":
        miles = miles * KM_TO_MILES

    mpg = data["fuel_efficiency"]
    if data["efficiency_unit"] == "kpl":
        mpg = mpg * KPL_TO_MPG

    total_miles = miles * 2 if data["round_trip"] else miles
    gallons = total_miles / mpg
    total_cost = gallons * data["fuel_price"]
    passengers = max(1, data["passengers"])

    return {
        "total_distance": round(total_miles, 2),
        "fuel_needed": round(gallons, 2),
        "mpg": round(mpg, 2),
        "total_cost": round(total_cost, 2),
        "cost_per_person": round(total_cost / passengers, 2),
        "passengers": passengers,
        "round_trip": bool(data["round_trip"]),
        "currency": CURRENCY_SYMBOLS.get(data["currency"], "$"),
    }


def result_rows(result):
    symbol = result["currency"]
    rows = [("Total fuel cost", f"{symbol}{result['total_cost']:.2f}")]
    if result["passengers"] > 1:
        rows.append(("Cost per person", f"{symbol}{result['cost_per_person']:.2f}"))
    suffix = " (round trip)" if result["round_trip"] else ""
    rows.extend([
        ("Distance", f"{result['total_distance']:.2f} miles{suffix}"),
        ("Fuel required", f"{result['fuel_needed']:.2f} gallons"),
        ("Fuel efficiency", f"{result['mpg']:.2f} MPG"),
    ])
    return rows


CONTENT = ToolContent(
    sections=(
        ContentSection("introduction", "Introduction", (
            "Planning a road trip? Enter the distance, your vehicle's fuel economy and the local "
            "fuel price to see what the drive will cost, and how much each passenger owes."
        )),
        ContentSection("formula", "How It Is Calculated", (
            "`Fuel needed = Distance / Fuel efficiency`\n\n"
            "`Total cost = Fuel needed × Fuel price`\n\n"
            "Kilometers are converted to miles (× 0.621371) and km/L to MPG (× 2.35215) first. "
            "A round trip doubles the distance."
        )),
        ContentSection("example", "Example", (
            "A 300 mile round trip in a 30 MPG car with fuel at $3.50: 600 / 30 = 20 gallons, "
            "20 × $3.50 = **$70.00**, or $17.50 each for four passengers."
        )),
    ),
    faqs=(
        FAQItem("How can I lower my fuel cost?",
                "Keep tires inflated, drive at steady speeds and remove roof racks you are not using."),
        FAQItem("Does the calculator include tolls or parking?",
                "No, it covers fuel only."),
    ),
)

CALCULATOR = Calculator(
    tool_id="fuel-calculator",
    form_class=FuelForm,
    defaults=DEFAULTS,
    formula=calculate,
    content=CONTENT,
    title="Fuel Cost Calculator",
    button_text="Calculate Cost",
    result_rows=result_rows,
)
