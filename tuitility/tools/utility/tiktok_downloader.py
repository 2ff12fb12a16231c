"""
TikTok Downloader.

The formula only checks and normalises the post link. The route looks up the
direct video URL through the media service and adds it as ``media_url``.
"""
from urllib.parse import urlparse

from wtforms import Form, StringField
from wtforms.validators import URL

from tuitility.core.calculator import Calculator, ContentSection, FAQItem, ToolContent
from tuitility.core.validation import Required


class TikTokForm(Form):
    url = StringField("TikTok URL", validators=[
        Required(message="Please enter a valid TikTok URL"),
        URL(message="Please enter a valid TikTok URL"),
    ])


DEFAULTS = {
    "url": "",
}


def normalise_url(url):
    """Trim the link and lower-case its scheme and host; path and query are kept as typed."""
    parts = urlparse(url.strip())
    return parts._replace(scheme=parts.scheme.lower(), netloc=parts.netloc.lower()).geturl()


def calculate(data):
    return {
        "source_url": normalise_url(data["url"]),
    }


def result_rows(result):
    rows = [("Post link", result["source_url"])]
    if result.get("media_url"):
        rows.append(("Video link", result["media_url"]))
    return rows


CONTENT = ToolContent(
    sections=(
        ContentSection("how-to", "How to Download", (
            "1. Open the video in the TikTok app or website and copy its link.\n"
            "2. Paste the link above and press **Get Video**.\n"
            "3. Open the returned link and save the video."
        )),
        ContentSection("fair-use", "Fair Use", (
            "Only download videos you own or have permission to reuse. Respect the creator's "
            "rights and TikTok's terms of service."
        )),
    ),
    faqs=(
        FAQItem("Why did my link fail?",
                "Private videos and deleted posts cannot be resolved. Check that the link opens in a browser."),
        FAQItem("Is there a watermark?",
                "That depends on what the media service returns for the post."),
    ),
)

CALCULATOR = Calculator(
    tool_id="tiktok-downloader",
    form_class=TikTokForm,
    defaults=DEFAULTS,
    formula=calculate,
    content=CONTENT,
    title="TikTok Video Downloader",
    button_text="Get Video",
    result_rows=result_rows,
    result_template="results/media.html",
)
