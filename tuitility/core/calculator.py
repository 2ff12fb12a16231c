from dataclasses import dataclass, field
from typing import Callable, Optional


@dataclass(frozen=True)
class ContentSection:
    id: str
    title: str
    body: str  # Markdown


@dataclass(frozen=True)
class FAQItem:
    question: str
    answer: str


@dataclass(frozen=True)
class ToolContent:
    sections: tuple = ()
    faqs: tuple = ()
    table_of_contents: Optional[tuple] = None

    def toc(self):
        """(anchor, title) pairs; derived from the sections when not declared."""
        if self.table_of_contents is not None:
            return list(self.table_of_contents)
        items = [(section.id, section.title) for section in self.sections]
        if self.faqs:
            items.append(("faqs", "FAQ"))
        return items


@dataclass(frozen=True)
class Calculator:
    """
    Everything a tool page needs beyond its catalog entry: the validation
    form, the declared defaults, the formula and the static content.
    """
    tool_id: str
    form_class: type
    defaults: dict
    formula: Callable[[dict], dict]
    content: ToolContent = field(default_factory=ToolContent)
    title: str = "Calculator"
    subtitle: str = ""
    button_text: str = "Calculate"
    result_rows: Optional[Callable[[dict], list]] = None
    result_template: Optional[str] = None
    multipart: bool = False

    def rows(self, result):
        if result is None:
            return []
        if self.result_rows is not None:
            return self.result_rows(result)
        return [(key.replace("_", " ").capitalize(), value) for key, value in result.items()]
