"""Word Counter. Text can be typed or loaded from a PDF/DOCX upload."""
import math
import re

from wtforms import Form, TextAreaField

from tuitility.core.calculator import Calculator, ContentSection, FAQItem, ToolContent

WORDS_PER_MINUTE = 200

SENTENCE_SPLIT = re.compile(r"[.!?]+")
PARAGRAPH_SPLIT = re.compile(r"\n\s*\n")


class WordCounterForm(Form):
    text = TextAreaField("Text")


DEFAULTS = {
    "text": "",
}


def count_words(text):
    return len(text.split())


def count_characters(text):
    return len(text)


def count_characters_no_spaces(text):
    return len(re.sub(r"\s+", "", text))


def count_sentences(text):
    return len([s for s in SENTENCE_SPLIT.split(text) if s.strip()])


def count_paragraphs(text):
    return len([p for p in PARAGRAPH_SPLIT.split(text) if p.strip()])


def reading_time_minutes(words):
    return math.ceil(words / WORDS_PER_MINUTE) if words else 0


def calculate(data):
    text = data.get("text") or ""
    words = count_words(text)
    return {
        "words": words,
        "characters": count_characters(text),
        "characters_no_spaces": count_characters_no_spaces(text),
        "sentences": count_sentences(text),
        "paragraphs": count_paragraphs(text),
        "reading_time": reading_time_minutes(words),
    }


def result_rows(result):
    minutes = result["reading_time"]
    return [
        ("Words", result["words"]),
        ("Characters", result["characters"]),
        ("Characters (no spaces)", result["characters_no_spaces"]),
        ("Sentences", result["sentences"]),
        ("Paragraphs", result["paragraphs"]),
        ("Reading time", f"{minutes} min" if minutes else "Less than a minute"),
    ]


CONTENT = ToolContent(
    sections=(
        ContentSection("introduction", "Introduction", (
            "Paste text or upload a PDF or Word (DOCX) document to count its words, characters, "
            "sentences and paragraphs."
        )),
        ContentSection("rules", "How Things Are Counted", (
            "- **Words** are runs of characters separated by whitespace.\n"
            "- **Sentences** end with `.`, `!` or `?`.\n"
            "- **Paragraphs** are separated by a blank line.\n"
            "- **Reading time** assumes 200 words per minute."
        )),
    ),
    faqs=(
        FAQItem("Which files can I upload?",
                "PDF and DOCX files up to 50 MB. Scanned PDFs without a text layer will come out empty."),
        FAQItem("Is my text stored?",
                "No. The text is counted for this page view only."),
    ),
)

CALCULATOR = Calculator(
    tool_id="word-counter",
    form_class=WordCounterForm,
    defaults=DEFAULTS,
    formula=calculate,
    content=CONTENT,
    title="Word Counter",
    subtitle="Type, paste or upload a document",
    button_text="Count Words",
    result_rows=result_rows,
    multipart=True,
)
