"""Sales Tax Calculator: add tax to a price, or back it out of a tax-inclusive total."""
from wtforms import Form, SelectField
from wtforms.validators import Optional

from tuitility.core.calculator import Calculator, ContentSection, FAQItem, ToolContent
from tuitility.core.validation import Between, IntegerNumberField, NumberField, Positive, Required, is_blank

MAX_TAX_RATE = 50

MODE_ADD = "add"
MODE_REVERSE = "reverse"


class SalesTaxForm(Form):
    mode = SelectField("Mode", choices=[(MODE_ADD, "Add tax to price"), (MODE_REVERSE, "Remove tax from total")])
    item_price = NumberField("Item price", validators=[
        Optional(), Positive(message="Please enter a valid positive item price."),
    ])
    quantity = IntegerNumberField("Quantity", validators=[
        Optional(), Between(min=1, message="Please enter a valid quantity of at least 1."),
    ])
    total_with_tax = NumberField("Total with tax", validators=[
        Optional(), Positive(message="Please enter a valid positive total."),
    ])
    tax_rate = NumberField("Tax rate (%)", validators=[
        Required(message=f"Please enter a valid tax rate between 0% and {MAX_TAX_RATE}%."),
        Between(0, MAX_TAX_RATE, message=f"Please enter a valid tax rate between 0% and {MAX_TAX_RATE}%."),
    ])

    def rules(self):
        errors = []
        if self.mode.data == MODE_REVERSE:
            if is_blank(self.total_with_tax):
                errors.append("Please enter a valid positive total.")
        else:
            if is_blank(self.item_price):
                errors.append("Please enter a valid positive item price.")
            if is_blank(self.quantity):
                errors.append("Please enter a valid quantity of at least 1.")
        return errors


DEFAULTS = {
    "mode": MODE_ADD,
    "item_price": "",
    "quantity": "1",
    "total_with_tax": "",
    "tax_rate": "",
}


def add_tax(item_price, quantity, tax_rate):
    subtotal = item_price * quantity
    tax_amount = subtotal * tax_rate / 100
    total = subtotal + tax_amount
    return {
        "mode": MODE_ADD,
        "subtotal": round(subtotal, 2),
        "tax_amount": round(tax_amount, 2),
        "total": round(total, 2),
        "tax_percentage_of_total": round(tax_amount / total * 100, 2),
        "average_tax_per_item": round(tax_amount / quantity, 2),
    }


def remove_tax(total_with_tax, tax_rate):
    original_price = total_with_tax / (1 + tax_rate / 100)
    tax_amount = total_with_tax - original_price
    return {
        "mode": MODE_REVERSE,
        "original_price": round(original_price, 2),
        "tax_amount": round(tax_amount, 2),
        "total": round(total_with_tax, 2),
        "tax_percentage_of_total": round(tax_amount / total_with_tax * 100, 2),
    }


def calculate(data):
    if data["mode"] == MODE_REVERSE:
        return remove_tax(data["total_with_tax"], data["tax_rate"])
    return add_tax(data["item_price"], data["quantity"], data["tax_rate"])


def result_rows(result):
    if result["mode"] == MODE_REVERSE:
        return [
            ("Price before tax", f"${result['original_price']:,.2f}"),
            ("Tax amount", f"${result['tax_amount']:,.2f}"),
            ("Total with tax", f"${result['total']:,.2f}"),
            ("Tax share of total", f"{result['tax_percentage_of_total']:.2f}%"),
        ]
    return [
        ("Subtotal", f"${result['subtotal']:,.2f}"),
        ("Tax amount", f"${result['tax_amount']:,.2f}"),
        ("Total", f"${result['total']:,.2f}"),
        ("Tax share of total", f"{result['tax_percentage_of_total']:.2f}%"),
        ("Average tax per item", f"${result['average_tax_per_item']:,.2f}"),
    ]


CONTENT = ToolContent(
    sections=(
        ContentSection("introduction", "Introduction", (
            "Sales tax is added at the register as a percentage of the purchase price. This "
            "calculator finds the tax and total for any number of items, or works backwards "
            "from a receipt total to the pre-tax price."
        )),
        ContentSection("formula", "Formulas", (
            "`Subtotal = Item Price × Quantity`\n\n"
            "`Tax = Subtotal × Tax Rate / 100`\n\n"
            "`Price before tax = Total / (1 + Tax Rate / 100)`"
        )),
        ContentSection("example", "Example", (
            "Three items at $19.99 with 8.25% tax: subtotal $59.97, tax $4.95, total $64.92."
        )),
    ),
    faqs=(
        FAQItem("Is sales tax the same as VAT?",
                "Both are consumption taxes. VAT is collected at each stage of production, sales tax only at the final sale."),
        FAQItem("Why is the rate capped at 50%?",
                "No general sales tax comes close to that, so anything higher is almost certainly a typo."),
    ),
)

CALCULATOR = Calculator(
    tool_id="sales-tax-calculator",
    form_class=SalesTaxForm,
    defaults=DEFAULTS,
    formula=calculate,
    content=CONTENT,
    title="Calculate Sales Tax",
    button_text="Calculate Tax",
    result_rows=result_rows,
)
