"""RGB to HEX Converter, both directions."""
from wtforms import Form, SelectField, StringField
from wtforms.validators import Optional

from tuitility.core.calculator import Calculator, ContentSection, FAQItem, ToolContent
from tuitility.core.colors import HEX_PATTERN, hex_to_rgb, rgb_to_hex
from tuitility.core.validation import Between, IntegerNumberField, is_blank

RGB_TO_HEX = "rgb-to-hex"
HEX_TO_RGB = "hex-to-rgb"


def _channel(label):
    return IntegerNumberField(label, validators=[Optional(), Between(0, 255)])


class RgbToHexForm(Form):
    mode = SelectField("Convert", choices=[(RGB_TO_HEX, "RGB to HEX"), (HEX_TO_RGB, "HEX to RGB")])
    r = _channel("Red")
    g = _channel("Green")
    b = _channel("Blue")
    hex = StringField("HEX code")

    def rules(self):
        if self.mode.data == HEX_TO_RGB:
            if not HEX_PATTERN.match((self.hex.data or "").strip()):
                return ["Please enter a valid HEX code such as FF5733 or #F53."]
            return []
        return [f"{field.label.text} is required." for field in (self.r, self.g, self.b) if is_blank(field)]


DEFAULTS = {
    "mode": RGB_TO_HEX,
    "r": "",
    "g": "",
    "b": "",
    "hex": "",
}


def calculate(data):
    if data["mode"] == HEX_TO_RGB:
        r, g, b = hex_to_rgb(data["hex"])
    else:
        r, g, b = data["r"], data["g"], data["b"]
    hex_code = rgb_to_hex(r, g, b)
    return {
        "r": r,
        "g": g,
        "b": b,
        "hex": hex_code,
        "css_hex": f"#{hex_code}",
        "css_rgb": f"rgb({r}, {g}, {b})",
    }


def result_rows(result):
    return [
        ("HEX", result["css_hex"]),
        ("RGB", result["css_rgb"]),
        ("Red", result["r"]),
        ("Green", result["g"]),
        ("Blue", result["b"]),
    ]


CONTENT = ToolContent(
    sections=(
        ContentSection("introduction", "Introduction", (
            "Screens mix red, green and blue light, each channel from 0 to 255. Web pages and "
            "design tools usually write the same color as a six digit hexadecimal code."
        )),
        ContentSection("how", "How the Conversion Works", (
            "Each channel becomes two hex digits: 255 is `FF`, 128 is `80`, 0 is `00`. "
            "`rgb(255, 87, 51)` is therefore `#FF5733`. Going back, every pair of hex digits is "
            "read as a number from 0 to 255. Three digit codes like `#F53` double each digit."
        )),
    ),
    faqs=(
        FAQItem("Is the conversion exact?",
                "Yes. Every RGB color has exactly one six digit hex code and converting back returns the same values."),
        FAQItem("Are hex codes case sensitive?",
                "No. #ff5733 and #FF5733 are the same color; this tool shows upper case."),
    ),
)

CALCULATOR = Calculator(
    tool_id="rgb-to-hex-converter",
    form_class=RgbToHexForm,
    defaults=DEFAULTS,
    formula=calculate,
    content=CONTENT,
    title="RGB to HEX Converter",
    button_text="Convert",
    result_rows=result_rows,
    result_template="results/color.html",
)
