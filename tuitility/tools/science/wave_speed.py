"""Wave Speed Calculator: v = f × λ, solved for whichever value is unknown."""
import math

from wtforms import Form, SelectField
from wtforms.validators import Optional

from tuitility.core.calculator import Calculator, ContentSection, FAQItem, ToolContent
from tuitility.core.validation import Between, NumberField, Positive, is_blank

SPEED_OF_LIGHT = 299792458
SPEED_OF_SOUND = 343
PLANCK_CONSTANT = 6.626e-34
MEDIUM_TOLERANCE = 0.1

# Input range, wide enough for infrasound through gamma rays
MIN_INPUT = 1e-15
MAX_INPUT = 1e30

SOLVE_SPEED = "speed"
SOLVE_FREQUENCY = "frequency"
SOLVE_WAVELENGTH = "wavelength"

# Inputs each unknown needs
REQUIRED_INPUTS = {
    SOLVE_SPEED: ("frequency", "wavelength"),
    SOLVE_FREQUENCY: ("speed", "wavelength"),
    SOLVE_WAVELENGTH: ("speed", "frequency"),
}


def _wave_input(label):
    return NumberField(label, validators=[
        Optional(),
        Positive(),
        Between(MIN_INPUT, MAX_INPUT, message=f"{label} must be between 1e-15 and 1e30."),
    ])


class WaveSpeedForm(Form):
    solve_for = SelectField("Solve for", choices=[
        (SOLVE_SPEED, "Wave speed (v)"),
        (SOLVE_FREQUENCY, "Frequency (f)"),
        (SOLVE_WAVELENGTH, "Wavelength (λ)"),
    ])
    speed = _wave_input("Wave speed (m/s)")
    frequency = _wave_input("Frequency (Hz)")
    wavelength = _wave_input("Wavelength (m)")

    def rules(self):
        if self.solve_for.errors:
            return []
        errors = []
        for name in REQUIRED_INPUTS[self.solve_for.data]:
            if is_blank(self[name]):
                errors.append(f"{self[name].label.text} is required.")
        return errors


DEFAULTS = {
    "solve_for": SOLVE_SPEED,
    "speed": "",
    "frequency": "",
    "wavelength": "",
}


def wave_type(frequency):
    if frequency < 20:
        return "Infrasound"
    if frequency <= 20000:
        return "Audible Sound"
    if frequency < 1e9:
        return "Ultrasound"
    if frequency < 1e12:
        return "Microwave"
    if frequency < 4.3e14:
        return "Infrared"
    if frequency < 7.5e14:
        return "Visible Light"
    if frequency < 1e16:
        return "Ultraviolet"
    if frequency < 1e19:
        return "X-ray"
    return "Gamma Ray"


def medium(speed):
    if abs(speed - SPEED_OF_LIGHT) / SPEED_OF_LIGHT < MEDIUM_TOLERANCE:
        return "Vacuum (Electromagnetic Wave)"
    if abs(speed - SPEED_OF_SOUND) / SPEED_OF_SOUND < MEDIUM_TOLERANCE:
        return "Air (Sound Wave)"
    if speed < 1000:
        return "Liquid or Gas"
    if speed < 10000:
        return "Solid Material"
    if speed > 0.5 * SPEED_OF_LIGHT:
        return "Dense Optical Medium"
    return "Unknown Medium"


def calculate(data):
    solve_for = data["solve_for"]
    speed, frequency, wavelength = data.get("speed"), data.get("frequency"), data.get("wavelength")

    if solve_for == SOLVE_SPEED:
        speed = frequency * wavelength
    elif solve_for == SOLVE_FREQUENCY:
        frequency = speed / wavelength
    else:
        wavelength = speed / frequency

    return {
        "solve_for": solve_for,
        "speed": speed,
        "frequency": frequency,
        "wavelength": wavelength,
        "period": 1 / frequency,
        "angular_frequency": 2 * math.pi * frequency,
        "wave_number": 2 * math.pi / wavelength,
        "photon_energy": PLANCK_CONSTANT * frequency,
        "wave_type": wave_type(frequency),
        "medium": medium(speed),
    }


def _sig(value):
    return f"{value:.6g}"


def result_rows(result):
    return [
        ("Wave speed", f"{_sig(result['speed'])} m/s"),
        ("Frequency", f"{_sig(result['frequency'])} Hz"),
        ("Wavelength", f"{_sig(result['wavelength'])} m"),
        ("Period", f"{_sig(result['period'])} s"),
        ("Angular frequency", f"{_sig(result['angular_frequency'])} rad/s"),
        ("Wave number", f"{_sig(result['wave_number'])} rad/m"),
        ("Photon energy", f"{_sig(result['photon_energy'])} J"),
        ("Wave type", result["wave_type"]),
        ("Likely medium", result["medium"]),
    ]


CONTENT = ToolContent(
    sections=(
        ContentSection("introduction", "Introduction", (
            "Every periodic wave, from sound to light, obeys the same relation between how fast "
            "it travels, how often it oscillates and how long each cycle is."
        )),
        ContentSection("formula", "The Wave Equation", (
            "`v = f × λ`\n\n"
            "Rearranged: `f = v / λ` and `λ = v / f`. The period is `T = 1 / f`."
        )),
        ContentSection("examples", "Examples", (
            "- A 440 Hz tuning fork in air (343 m/s) has a wavelength of about 0.78 m.\n"
            "- An FM station at 100 MHz has a wavelength of about 3 m."
        )),
    ),
    faqs=(
        FAQItem("Does frequency change when a wave enters a new medium?",
                "No. The frequency stays the same while speed and wavelength change together."),
        FAQItem("Why must every value be positive?",
                "Speed, frequency and wavelength are magnitudes, and zero would divide by zero."),
    ),
)

CALCULATOR = Calculator(
    tool_id="wave-speed-calculator",
    form_class=WaveSpeedForm,
    defaults=DEFAULTS,
    formula=calculate,
    content=CONTENT,
    title="Wave Speed Calculator",
    button_text="Calculate",
    result_rows=result_rows,
)
