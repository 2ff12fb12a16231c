"""ROI Calculator."""
from wtforms import Form, SelectField
from wtforms.validators import Optional

from tuitility.core.calculator import Calculator, ContentSection, FAQItem, ToolContent
from tuitility.core.validation import AtMost, NonNegative, NumberField, Positive, Required

CONTRIBUTIONS_PER_YEAR = {
    "monthly": 12,
    "quarterly": 4,
    "annually": 1,
}

# Upper bounds for amounts and the holding period
MAX_AMOUNT = 1e12
MAX_YEARS = 100


class ROIForm(Form):
    initial_investment = NumberField("Initial investment", validators=[
        Required(), Positive(), AtMost(MAX_AMOUNT, message="Initial investment must be at most 1,000,000,000,000."),
    ])
    final_value = NumberField("Final value", validators=[
        Required(), Positive(), AtMost(MAX_AMOUNT, message="Final value must be at most 1,000,000,000,000."),
    ])
    investment_period = NumberField("Investment period (years)", validators=[
        Required(), Positive(), AtMost(MAX_YEARS),
    ])
    additional_contributions = NumberField("Additional contributions", validators=[
        Optional(), NonNegative(), AtMost(MAX_AMOUNT, message="Additional contributions must be at most 1,000,000,000,000."),
    ])
    contribution_frequency = SelectField("Contribution frequency", choices=[
        ("monthly", "Monthly"),
        ("quarterly", "Quarterly"),
        ("annually", "Annually"),
    ])


DEFAULTS = {
    "initial_investment": "",
    "final_value": "",
    "investment_period": "",
    "additional_contributions": "",
    "contribution_frequency": "monthly",
}


def calculate(data):
    initial = data["initial_investment"]
    final = data["final_value"]
    years = data["investment_period"]
    contributions = data.get("additional_contributions") or 0
    per_year = CONTRIBUTIONS_PER_YEAR.get(data["contribution_frequency"], 12)

    total_investment = initial + contributions * per_year * years
    total_return = final - total_investment
    roi = total_return / total_investment * 100
    annualized = ((final / initial) ** (1 / years) - 1) * 100

    return {
        "total_investment": round(total_investment, 2),
        "total_return": round(total_return, 2),
        "roi": round(roi, 2),
        "annualized_roi": round(annualized, 2),
        "final_value": round(final, 2),
    }


def result_rows(result):
    return [
        ("Total investment", f"${result['total_investment']:,.2f}"),
        ("Total return", f"${result['total_return']:,.2f}"),
        ("ROI", f"{result['roi']:.2f}%"),
        ("Annualized ROI", f"{result['annualized_roi']:.2f}%"),
        ("Final value", f"${result['final_value']:,.2f}"),
    ]


CONTENT = ToolContent(
    sections=(
        ContentSection("introduction", "Introduction", (
            "Return on Investment (ROI) measures how much an investment gained or lost relative "
            "to what you put in. It lets you compare very different investments on one scale."
        )),
        ContentSection("formula", "The ROI Formula", (
            "`ROI = (Final Value - Total Investment) / Total Investment × 100%`\n\n"
            "`Annualized ROI = ((Final Value / Initial Investment)^(1 / Years) - 1) × 100%`\n\n"
            "Total investment includes every regular contribution: "
            "contribution × payments per year × years."
        )),
        ContentSection("examples", "Examples", (
            "**No contributions.** $10,000 grows to $15,000 in 5 years: "
            "ROI = $5,000 / $10,000 × 100% = 50%, annualized about 8.45%.\n\n"
            "**With contributions.** $5,000 plus $100 a month for 10 years ends at $25,000: "
            "total investment $17,000, ROI = $8,000 / $17,000 × 100% = 47.06%."
        )),
    ),
    faqs=(
        FAQItem("What is a good ROI?",
                "It depends on the risk and time frame. Broad stock indexes have historically returned around 7-10% a year."),
        FAQItem("Why is annualized ROI lower than total ROI?",
                "Annualized ROI spreads the gain over each year with compounding, so it is the yearly rate that produces the total."),
    ),
)

CALCULATOR = Calculator(
    tool_id="roi-calculator",
    form_class=ROIForm,
    defaults=DEFAULTS,
    formula=calculate,
    content=CONTENT,
    title="Calculate Your ROI",
    button_text="Calculate ROI",
    result_rows=result_rows,
)
