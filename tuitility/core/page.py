"""
Tool page composition.

A tool page is always laid out from the same regions in the same order:
breadcrumb/header, calculator (form + result), table of contents with the
feedback widget, the static content sections and finally the FAQ list.
``compose_page`` gathers everything those regions need into one object so
templates render purely from it.
"""
from dataclasses import dataclass, field

from tuitility.catalog.registry import get_categories, get_category, get_related_tools
from tuitility.core.validation import to_formdata

REGIONS = ("breadcrumb", "calculator", "toc", "feedback", "sections", "faq")


@dataclass(frozen=True)
class Breadcrumb:
    label: str
    url: str = None


@dataclass
class CalculatorRegion:
    title: str
    subtitle: str
    button_text: str
    form: object
    form_state: dict
    status: str
    errors: list
    result: dict = None
    rows: list = field(default_factory=list)
    result_template: str = None
    multipart: bool = False
    notice: str = None


@dataclass
class ToolPage:
    tool: object
    category: object
    breadcrumbs: list
    calculator: CalculatorRegion
    toc: list
    sections: tuple
    faqs: tuple
    related_tools: list
    categories: list
    feedback_form: object = None
    regions: tuple = REGIONS


def build_breadcrumbs(tool, category):
    crumbs = [Breadcrumb("Home", "/")]
    if category is not None:
        crumbs.append(Breadcrumb(category.name, category.url_path))
    crumbs.append(Breadcrumb(tool.name))
    return crumbs


def compose_page(tool, calculator, state, feedback_form=None, notice=None, related_limit=5):
    """
    Assemble a ToolPage from a catalog entry, its calculator and the current state.

    Args:
        tool (ToolDescriptor): Catalog entry for the page
        calculator (Calculator): Form, formula and content for the tool
        state (CalculatorState): Current form values, result and errors
        feedback_form: Form instance for the feedback widget
        notice (str): Optional one-line status (e.g. a file was loaded)

    Returns:
        ToolPage
    """
    category = get_category(tool.category)
    form = calculator.form_class(to_formdata(state.form))

    region = CalculatorRegion(
        title=calculator.title,
        subtitle=calculator.subtitle,
        button_text=calculator.button_text,
        form=form,
        form_state=dict(state.form),
        status=state.status,
        errors=list(state.errors),
        result=state.result,
        rows=calculator.rows(state.result),
        result_template=calculator.result_template,
        multipart=calculator.multipart,
        notice=notice,
    )

    return ToolPage(
        tool=tool,
        category=category,
        breadcrumbs=build_breadcrumbs(tool, category),
        calculator=region,
        toc=calculator.content.toc(),
        sections=calculator.content.sections,
        faqs=calculator.content.faqs,
        related_tools=get_related_tools(tool.id, limit=related_limit),
        categories=get_categories(),
        feedback_form=feedback_form,
    )

