"""RGB to Pantone: nearest Pantone Matching System color by RGB distance."""
from wtforms import Form, SelectField, StringField
from wtforms.validators import Optional

from tuitility.core.calculator import Calculator, ContentSection, FAQItem, ToolContent
from tuitility.core.colors import HEX_PATTERN, hex_to_rgb, load_palette, nearest_colors, rgb_to_hex
from tuitility.core.validation import Between, IntegerNumberField, is_blank

INPUT_RGB = "rgb"
INPUT_HEX = "hex"

ALTERNATIVES = 5


def _channel(label):
    return IntegerNumberField(label, validators=[Optional(), Between(0, 255)])


class RgbToPantoneForm(Form):
    input_mode = SelectField("Input", choices=[(INPUT_RGB, "RGB values"), (INPUT_HEX, "HEX code")])
    r = _channel("Red")
    g = _channel("Green")
    b = _channel("Blue")
    hex = StringField("HEX code")

    def rules(self):
        if self.input_mode.data == INPUT_HEX:
            if not HEX_PATTERN.match((self.hex.data or "").strip()):
                return ["Please enter a valid HEX code such as 0085CA."]
            return []
        return [f"{field.label.text} is required." for field in (self.r, self.g, self.b) if is_blank(field)]


DEFAULTS = {
    "input_mode": INPUT_RGB,
    "r": "0",
    "g": "133",
    "b": "202",
    "hex": "",
}


def _swatch(entry, distance):
    return {
        "code": entry["code"],
        "name": entry["name"],
        "hex": entry["hex"],
        "distance": round(distance, 2),
    }


def calculate(data):
    if data["input_mode"] == INPUT_HEX:
        target = hex_to_rgb(data["hex"])
    else:
        target = (data["r"], data["g"], data["b"])

    match = nearest_colors(target, load_palette("pantone"), alternatives=ALTERNATIVES)
    return {
        "input_hex": rgb_to_hex(*target, prefix="#"),
        "input_rgb": target,
        "closest": _swatch(match["closest"], match["distance"]),
        "accuracy": round(match["accuracy"], 1),
        "alternatives": [_swatch(entry, distance) for entry, distance in match["alternatives"]],
    }


def result_rows(result):
    closest = result["closest"]
    return [
        ("Your color", result["input_hex"]),
        ("Closest Pantone", f"{closest['code']} ({closest['name']}) #{closest['hex'].lstrip('#')}"),
        ("Match accuracy", f"{result['accuracy']}%"),
        ("Alternatives", ", ".join(alt["code"] for alt in result["alternatives"])),
    ]


CONTENT = ToolContent(
    sections=(
        ContentSection("introduction", "Introduction", (
            "Pantone Matching System (PMS) colors are standardized spot inks used in print. "
            "Screens work in RGB, so moving a design to print means finding the closest PMS ink."
        )),
        ContentSection("method", "How Matching Works", (
            "Your color is compared against every color in the reference list using the "
            "straight-line distance in RGB space:\n\n"
            "`distance = √((R1 - R2)² + (G1 - G2)² + (B1 - B2)²)`\n\n"
            "The smallest distance wins. Accuracy is `max(0, 100 - distance / 4.41)`, where "
            "441 is the largest possible distance between two colors."
        )),
        ContentSection("limitations", "Limitations", (
            "RGB distance does not match human perception perfectly, and printed ink looks "
            "different on every paper. Always check a physical swatch book before printing."
        )),
    ),
    faqs=(
        FAQItem("Why doesn't my color match exactly?",
                "RGB can show millions of colors while the reference list has a few hundred, so most colors land between two inks."),
        FAQItem("Are these official Pantone values?",
                "They are published RGB approximations of Pantone colors, good enough for a starting point."),
    ),
)

CALCULATOR = Calculator(
    tool_id="rgb-to-pantone-converter",
    form_class=RgbToPantoneForm,
    defaults=DEFAULTS,
    formula=calculate,
    content=CONTENT,
    title="RGB to Pantone Converter",
    button_text="Find Pantone",
    result_rows=result_rows,
    result_template="results/pantone.html",
)
