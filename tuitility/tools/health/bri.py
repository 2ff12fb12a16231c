"""
BRI Calculator.

Body Roundness Index models the body as an ellipse: the waist is the
circumference and the height the long axis. The risk thresholds and score
weights below are the ones the site has always used and must stay as-is.
"""
import math

from wtforms import Form, SelectField

from tuitility.core.calculator import Calculator, ContentSection, FAQItem, ToolContent
from tuitility.core.validation import Between, NumberField, Positive, Required, is_usable

BRI_INTERCEPT = 364.2
BRI_SLOPE = 365.5

# (key, label, lower bound inclusive, upper bound exclusive)
RISK_CATEGORIES = (
    ("very_low", "Very Low", 0, 1),
    ("low", "Low", 1, 2),
    ("moderate", "Moderate", 2, 3),
    ("high", "High", 3, 4),
    ("very_high", "Very High", 4, math.inf),
)

RISK_LEVELS = (
    (1, "Excellent health profile"),
    (2, "Good health profile"),
    (3, "Increased health risk"),
    (4, "High health risk"),
)

BODY_SHAPE_THRESHOLDS = {
    "male": {"pear": 0.85, "avocado": 0.95},
    "female": {"pear": 0.75, "avocado": 0.85},
}

WHTR_RISK_THRESHOLD = 0.6
BMI_OBESITY_THRESHOLD = 30
AGE_RISK_THRESHOLD = 50

LB_TO_KG = 0.453592
IN_TO_CM = 2.54

HEALTHY_BMI_MIN = 18.5
HEALTHY_BMI_MAX = 24.9

METABOLIC_AGE_MIN = 18
METABOLIC_AGE_MAX = 80

# Accepted ranges in metric units. The imperial ranges in the messages are rounded inwards.
# Waist tops out below 2π × the shortest height, so the square root stays real
MEASUREMENT_RANGES = (
    ("height", 100, 250, "Height must be between 100 and 250 cm (40 to 98 in)."),
    ("weight", 20, 500, "Weight must be between 20 and 500 kg (45 to 1102 lb)."),
    ("waist", 30, 300, "Waist must be between 30 and 300 cm (12 to 118 in)."),
    ("hip", 30, 300, "Hip must be between 30 and 300 cm (12 to 118 in)."),
)


def to_metric(unit_system, height, weight, waist, hip):
    """Height, weight, waist and hip as (cm, kg, cm, cm)."""
    if unit_system == "imperial":
        return height * IN_TO_CM, weight * LB_TO_KG, waist * IN_TO_CM, hip * IN_TO_CM
    return height, weight, waist, hip


class BRIForm(Form):
    gender = SelectField("Gender", choices=[("male", "Male"), ("female", "Female")])
    unit_system = SelectField("Units", choices=[("metric", "Metric (kg, cm)"), ("imperial", "Imperial (lb, in)")])
    age = NumberField("Age", validators=[Required(), Between(18, 120)])
    height = NumberField("Height", validators=[Required(), Positive()])
    weight = NumberField("Weight", validators=[Required(), Positive()])
    waist = NumberField("Waist", validators=[Required(), Positive()])
    hip = NumberField("Hip", validators=[Required(), Positive()])

    def rules(self):
        if self.unit_system.errors:
            return []
        errors = []
        for name, low, high, message in MEASUREMENT_RANGES:
            if not is_usable(self[name]):
                continue
            value = self[name].data
            if self.unit_system.data == "imperial":
                value *= LB_TO_KG if name == "weight" else IN_TO_CM
            if not low <= value <= high:
                errors.append(message)
        return errors


DEFAULTS = {
    "gender": "male",
    "unit_system": "metric",
    "age": "",
    "height": "",
    "weight": "",
    "waist": "",
    "hip": "",
}


def body_roundness_index(height_cm, waist_cm):
    ratio = (waist_cm / 100) / (2 * math.pi * (height_cm / 100))
    eccentricity = math.sqrt(1 - ratio ** 2)
    return max(0.0, BRI_INTERCEPT - BRI_SLOPE * eccentricity)


def risk_category(bri):
    for key, label, low, high in RISK_CATEGORIES:
        if low <= bri < high:
            return {"key": key, "label": label}
    key, label, _, _ = RISK_CATEGORIES[-1]
    return {"key": key, "label": label}


def risk_level(bri):
    for bound, text in RISK_LEVELS:
        if bri < bound:
            return text
    return "Very high health risk"


def body_shape(gender, whr):
    thresholds = BODY_SHAPE_THRESHOLDS[gender]
    if whr < thresholds["pear"]:
        return "Pear"
    if whr < thresholds["avocado"]:
        return "Avocado"
    return "Apple"


def risk_score(bri, bmi, whtr, whr, age):
    score = min(bri * 10, 40)

    if bmi >= 30:
        score += 25
    elif bmi >= 25:
        score += 15
    elif bmi >= 18.5:
        score += 5

    if whtr > 0.6:
        score += 20
    elif whtr > 0.5:
        score += 10

    if age >= 65:
        score += 10
    elif age >= 50:
        score += 5

    if whr > 0.9:
        score += 5

    return min(round(score), 100)


def health_risk(bri, bmi, whtr, whr, gender, age):
    risk = risk_category(bri)["label"]
    factors = []

    if whtr > WHTR_RISK_THRESHOLD:
        factors.append("High waist-to-height ratio")
        if risk == "Low":
            risk = "Moderate"
        elif risk == "Very Low":
            risk = "Low"

    if bmi >= BMI_OBESITY_THRESHOLD:
        factors.append("Obesity (BMI ≥ 30)")
        if risk == "Low":
            risk = "Moderate"
        elif risk == "Moderate":
            risk = "High"

    if age >= AGE_RISK_THRESHOLD:
        factors.append("Age-related risk factors")

    if gender == "male" and whr > 0.95:
        factors.append("High waist-to-hip ratio (male)")
    elif gender == "female" and whr > 0.85:
        factors.append("High waist-to-hip ratio (female)")

    return {
        "risk": risk,
        "level": risk_level(bri),
        "factors": factors,
        "score": risk_score(bri, bmi, whtr, whr, age),
    }


def metabolic_age(bmi, waist_cm, height_cm, age, gender):
    """Rough estimate: the real age nudged up or down by BMI and waist size, clamped to 18-80."""
    estimate = age

    if bmi < 18.5:
        estimate += 2
    elif bmi > 30:
        estimate += 5
    elif bmi > 25:
        estimate += 2

    whtr = waist_cm / height_cm
    if whtr > 0.6:
        estimate += 3
    elif whtr < 0.4:
        estimate -= 2

    if gender == "female" and waist_cm > 88:
        estimate += 2
    elif gender == "male" and waist_cm > 102:
        estimate += 2

    return max(METABOLIC_AGE_MIN, min(estimate, METABOLIC_AGE_MAX))


def ideal_weight_range(height_cm):
    height_m = height_cm / 100
    return HEALTHY_BMI_MIN * height_m * height_m, HEALTHY_BMI_MAX * height_m * height_m


def _recommendation(category, title, *items):
    return {"category": category, "title": title, "items": list(items)}


def recommendations(bri, bmi, whtr, age):
    tips = []

    if bri < 1:
        tips.append(_recommendation(
            "Maintenance", "Excellent Body Composition",
            "Maintain your current healthy lifestyle",
            "Continue regular physical activity (150+ min/week)",
            "Keep following a balanced, nutrient-rich diet",
            "Regular health check-ups for monitoring",
        ))
    elif bri < 2:
        tips.append(_recommendation(
            "Optimization", "Good Body Composition",
            "Aim for 150-300 minutes of moderate exercise weekly",
            "Include both cardio and strength training",
            "Focus on whole foods, lean proteins, fruits, and vegetables",
            "Monitor waist circumference regularly",
            "Limit processed foods and added sugars",
        ))
    elif bri < 3:
        tips.append(_recommendation(
            "Improvement", "Moderate Health Risk",
            "Consult with a healthcare provider about your body composition",
            "Target waist reduction through diet and exercise",
            "Increase physical activity to 300+ minutes per week",
            "Consider working with a nutritionist",
            "Monitor blood pressure and blood sugar levels",
        ))
    else:
        tips.append(_recommendation(
            "Action Required", "High Health Risk",
            "Schedule an appointment with your healthcare provider immediately",
            "Request screening for diabetes and cardiovascular disease",
            "Work with a healthcare team (doctor, nutritionist, trainer)",
            "Start with gentle, regular physical activity",
            "Focus on sustainable dietary changes",
            "Set realistic, gradual weight loss goals",
        ))

    if bmi >= BMI_OBESITY_THRESHOLD:
        tips.append(_recommendation(
            "Weight Management", "BMI Consideration",
            "Your BMI indicates obesity, consider comprehensive weight management",
            "Focus on sustainable lifestyle changes rather than quick fixes",
            "Consider medical supervision for weight loss",
        ))

    if whtr > WHTR_RISK_THRESHOLD:
        tips.append(_recommendation(
            "Waist Reduction", "Waist Circumference Focus",
            "High waist-to-height ratio increases health risks",
            "Focus on abdominal fat reduction through targeted exercises",
            "Consider stress management techniques",
            "Limit alcohol consumption",
        ))

    if age >= AGE_RISK_THRESHOLD:
        tips.append(_recommendation(
            "Age-Specific", "Age-Related Considerations",
            "Focus on maintaining muscle mass through strength training",
            "Ensure adequate calcium and vitamin D intake for bone health",
            "Consider regular health screenings",
            "Maintain social connections and mental health",
        ))

    tips.append(_recommendation(
        "General Health", "General Recommendations",
        "Stay hydrated throughout the day",
        "Get adequate sleep (7-9 hours per night)",
        "Manage stress through relaxation techniques",
        "Avoid smoking and limit alcohol consumption",
        "Regular health check-ups and screenings",
    ))
    return tips


def calculate(data):
    gender, age = data["gender"], data["age"]
    height, weight, waist, hip = to_metric(
        data["unit_system"], data["height"], data["weight"], data["waist"], data["hip"])
    height_m = height / 100

    bri = body_roundness_index(height, waist)
    bmi = weight / (height_m * height_m)
    whtr = waist / height
    whr = waist / hip
    ideal_min, ideal_max = ideal_weight_range(height)

    return {
        "bri": round(bri, 2),
        "bmi": round(bmi, 1),
        "whtr": round(whtr, 2),
        "whr": round(whr, 2),
        "body_shape": body_shape(gender, whr),
        "risk_category": risk_category(bri)["label"],
        "health_risk": health_risk(bri, bmi, whtr, whr, gender, age),
        "bsa": round(math.sqrt(height * weight / 3600), 2),
        "ideal_weight_range": {"min": round(ideal_min, 1), "max": round(ideal_max, 1)},
        "weight_difference": round(weight - (ideal_min + ideal_max) / 2, 1),
        "metabolic_age": round(metabolic_age(bmi, waist, height, age, gender)),
        "recommendations": recommendations(bri, bmi, whtr, age),
    }


def result_rows(result):
    risk = result["health_risk"]
    ideal = result["ideal_weight_range"]
    return [
        ("Body Roundness Index", result["bri"]),
        ("Risk category", result["risk_category"]),
        ("Overall risk", f"{risk['risk']} ({risk['level']})"),
        ("Risk score", f"{risk['score']} / 100"),
        ("Risk factors", ", ".join(risk["factors"]) or "None identified"),
        ("BMI", result["bmi"]),
        ("Waist-to-height ratio", result["whtr"]),
        ("Waist-to-hip ratio", result["whr"]),
        ("Body shape", result["body_shape"]),
        ("Body surface area", f"{result['bsa']} m²"),
        ("Healthy weight range", f"{ideal['min']} - {ideal['max']} kg"),
        ("Difference from mid-range", f"{result['weight_difference']:+} kg"),
        ("Metabolic age", result["metabolic_age"]),
    ]


CONTENT = ToolContent(
    sections=(
        ContentSection("introduction", "Introduction", (
            "The Body Roundness Index (BRI), introduced by Thomas et al. in 2013, estimates body "
            "fat and visceral fat from height and waist circumference."
        )),
        ContentSection("formula", "The BRI Formula", (
            "`BRI = 364.2 − 365.5 × √(1 − (waist / (2π × height))²)`\n\n"
            "Both measurements are in meters and the result never drops below zero. Lower values "
            "mean a leaner, less rounded body."
        )),
        ContentSection("body-shape", "Body Shape", (
            "The waist-to-hip ratio places you in one of three shapes: **Pear** (fat stored in "
            "the hips and thighs), **Avocado** (balanced) or **Apple** (fat stored around the abdomen)."
        )),
    ),
    faqs=(
        FAQItem("How is BRI different from BMI?",
                "BMI uses weight and height only. BRI uses waist circumference, which tracks abdominal fat more closely."),
        FAQItem("Where should I measure my waist?",
                "Midway between the lowest rib and the top of the hip bone, after breathing out normally."),
    ),
)

CALCULATOR = Calculator(
    tool_id="bri-calculator",
    form_class=BRIForm,
    defaults=DEFAULTS,
    formula=calculate,
    content=CONTENT,
    title="Body Roundness Index",
    button_text="Calculate BRI",
    result_rows=result_rows,
    result_template="results/recommendations.html",
)
