"""dBm to Watts Calculator."""
import math

from wtforms import Form, SelectField

from tuitility.core.calculator import Calculator, ContentSection, FAQItem, ToolContent
from tuitility.core.validation import NumberField, Required, is_usable

DBM_TO_WATTS = "dbm-to-watts"
WATTS_TO_DBM = "watts-to-dbm"

# (label, dBm) reference points shown beside the result
REFERENCE_LEVELS = (
    ("Bluetooth (class 2)", 4),
    ("Wi-Fi router", 18),
    ("Cell phone", 23),
)


class DbmWattsForm(Form):
    conversion_type = SelectField("Conversion", choices=[
        (DBM_TO_WATTS, "dBm to Watts"),
        (WATTS_TO_DBM, "Watts to dBm"),
    ])
    input_value = NumberField("Power", validators=[Required(message="Please fill in all fields.")])

    def rules(self):
        if not is_usable(self.input_value):
            return []
        if self.conversion_type.data == WATTS_TO_DBM and self.input_value.data <= 0:
            return ["Power in Watts must be greater than zero."]
        return []


DEFAULTS = {
    "conversion_type": DBM_TO_WATTS,
    "input_value": "",
}


def dbm_to_milliwatts(dbm):
    return 10 ** (dbm / 10)


def dbm_to_watts(dbm):
    return 10 ** ((dbm - 30) / 10)


def milliwatts_to_dbm(milliwatts):
    return 10 * math.log10(milliwatts)


def watts_to_dbm(watts):
    return milliwatts_to_dbm(watts * 1000)


def format_power(value):
    if value != 0 and (abs(value) < 0.001 or abs(value) >= 10000):
        return f"{value:.6e}"
    return f"{round(value, 6):g}"


def calculate(data):
    value = data["input_value"]
    if data["conversion_type"] == WATTS_TO_DBM:
        dbm = watts_to_dbm(value)
        return {
            "conversion_type": WATTS_TO_DBM,
            "watts": value,
            "milliwatts": value * 1000,
            "dbm": dbm,
            "display": f"{dbm:.2f} dBm",
        }
    watts = dbm_to_watts(value)
    return {
        "conversion_type": DBM_TO_WATTS,
        "dbm": value,
        "milliwatts": dbm_to_milliwatts(value),
        "watts": watts,
        "display": f"{format_power(watts)} W",
    }


def result_rows(result):
    return [
        ("Result", result["display"]),
        ("dBm", f"{result['dbm']:.2f}"),
        ("Milliwatts", format_power(result["milliwatts"])),
        ("Watts", format_power(result["watts"])),
    ]


CONTENT = ToolContent(
    sections=(
        ContentSection("introduction", "Introduction", (
            "dBm expresses power on a logarithmic scale relative to one milliwatt. It is the "
            "standard unit for RF transmit power and received signal strength."
        )),
        ContentSection("formulas", "Formulas", (
            "`P(W) = 10^((P(dBm) - 30) / 10)`\n\n"
            "`P(mW) = 10^(P(dBm) / 10)`\n\n"
            "`P(dBm) = 10 × log10(P(mW))`"
        )),
        ContentSection("reference", "Reference Levels", "\n".join(
            [f"- {label}: {dbm} dBm ({format_power(dbm_to_watts(dbm))} W)" for label, dbm in REFERENCE_LEVELS]
        )),
    ),
    faqs=(
        FAQItem("What does 0 dBm mean?", "Exactly 1 milliwatt."),
        FAQItem("Why can dBm be negative?",
                "Any power below 1 mW has a negative dBm value. Received Wi-Fi signals are often around -60 dBm."),
        FAQItem("Why must watts be greater than zero?",
                "The logarithm of zero or a negative number is undefined."),
    ),
)

CALCULATOR = Calculator(
    tool_id="dbm-watts-calculator",
    form_class=DbmWattsForm,
    defaults=DEFAULTS,
    formula=calculate,
    content=CONTENT,
    title="dBm to Watts Converter",
    button_text="Convert",
    result_rows=result_rows,
)
