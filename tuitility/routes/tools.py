"""
Tool pages.

Every catalog entry with a formula module gets three rules built from its
url_path: the page itself (GET/POST), ``<path>/feedback`` and, for the word
counter, ``<path>/upload``. A POST carries an ``action``:

- calculate: copy the posted fields into a fresh state and run the formula;
  for the video downloader, then look up the direct media URL
- reset: render the declared defaults
- download_json / download_csv: calculate, then send the result as a file
"""
import csv
import io
import json
import logging

from flask import Blueprint, Response, abort, current_app, flash, redirect, render_template, request

from tuitility.catalog.registry import get_all_tools, get_tool_by_id
from tuitility.core.errors import ExternalCollaboratorError, MediaResolutionError
from tuitility.core.page import compose_page
from tuitility.core.state import CalculatorState
from tuitility.forms import FeedbackForm
from tuitility.services.documents import extract_text
from tuitility.services.media import MediaResolver
from tuitility.tools import get_calculator
from tuitility.utils.logging import log_calculation, log_feedback, log_tool_visit

logger = logging.getLogger(__name__)

tools_bp = Blueprint('tools', __name__)

ACTION_CALCULATE = 'calculate'
ACTION_RESET = 'reset'
ACTION_DOWNLOAD_JSON = 'download_json'
ACTION_DOWNLOAD_CSV = 'download_csv'

WORD_COUNTER_ID = 'word-counter'
MEDIA_TOOL_IDS = ('tiktok-downloader',)


def _lookup(tool_id):
    tool = get_tool_by_id(tool_id)
    calculator = get_calculator(tool_id)
    if tool is None or calculator is None:
        abort(404)
    return tool, calculator


def _render(tool, calculator, state, notice=None):
    page = compose_page(tool, calculator, state, feedback_form=FeedbackForm(), notice=notice)
    return render_template('tool.html', page=page)


def _media_resolver():
    config = current_app.config
    return MediaResolver(
        api_key=config.get('RAPIDAPI_KEY'),
        api_url=config.get('MEDIA_API_URL'),
        timeout=config.get('MEDIA_API_TIMEOUT', 15),
    )


def _resolve_media(tool, state):
    """Add the direct video URL to a validated downloader result, or show why it failed."""
    try:
        media_url = _media_resolver().resolve_or_raise(state.result['source_url'])
    except MediaResolutionError as e:
        logger.warning(f"{tool.id}: media lookup failed: {e}")
        state.fail(str(e))
        return
    state.result = dict(state.result, media_url=media_url)


def _download(tool, calculator, result, action):
    if action == ACTION_DOWNLOAD_JSON:
        body = json.dumps(result, indent=2, default=str)
        mimetype = 'application/json'
        filename = f"{tool.id}.json"
    else:
        buffer = io.StringIO()
        writer = csv.writer(buffer)
        writer.writerow(['Field', 'Value'])
        for label, value in calculator.rows(result):
            writer.writerow([label, value])
        body = buffer.getvalue()
        mimetype = 'text/csv'
        filename = f"{tool.id}.csv"

    return Response(
        body,
        mimetype=mimetype,
        headers={'Content-Disposition': f'attachment; filename={filename}'},
    )


def tool_page(tool_id):
    tool, calculator = _lookup(tool_id)
    state = CalculatorState(calculator)

    if request.method == 'GET':
        log_tool_visit(tool)
        return _render(tool, calculator, state)

    action = request.form.get('action', ACTION_CALCULATE)
    if action == ACTION_RESET:
        state.reset()
        return _render(tool, calculator, state)

    if action not in (ACTION_CALCULATE, ACTION_DOWNLOAD_JSON, ACTION_DOWNLOAD_CSV):
        abort(400)

    state.update(request.form)
    status = state.calculate()
    if tool.id in MEDIA_TOOL_IDS and state.result is not None:
        _resolve_media(tool, state)
        status = state.status
    log_calculation(tool, status, len(state.errors))

    if action != ACTION_CALCULATE and state.result is not None:
        return _download(tool, calculator, state.result, action)
    return _render(tool, calculator, state)


def feedback(tool_id):
    tool, _ = _lookup(tool_id)
    form = FeedbackForm()

    if form.validate_on_submit():
        log_feedback(tool, form)
        flash("Thank you for your feedback!", "success")
    else:
        for field, errors in form.errors.items():
            for error in errors:
                flash(f"{form[field].label.text}: {error}", "error")

    return redirect(f"{tool.url_path}#feedback")


def word_counter_upload():
    tool, calculator = _lookup(WORD_COUNTER_ID)
    state = CalculatorState(calculator)
    upload = request.files.get('document')

    if upload is None or not upload.filename:
        state.fail("Please choose a PDF or DOCX file.")
        return _render(tool, calculator, state)

    try:
        text = extract_text(upload.filename, upload.stream, max_bytes=current_app.config['MAX_DOCUMENT_BYTES'])
    except ExternalCollaboratorError as e:
        logger.warning(f"Upload of {upload.filename} rejected: {e}")
        state.fail(str(e))
        return _render(tool, calculator, state)

    state.set_field('text', text)
    state.calculate()
    return _render(tool, calculator, state, notice=f"Loaded text from {upload.filename}")


for _tool in get_all_tools():
    if get_calculator(_tool.id) is None:
        continue
    tools_bp.add_url_rule(
        _tool.url_path, 'tool_page', tool_page,
        defaults={'tool_id': _tool.id}, methods=['GET', 'POST'],
    )
    tools_bp.add_url_rule(
        f"{_tool.url_path}/feedback", 'feedback', feedback,
        defaults={'tool_id': _tool.id}, methods=['POST'],
    )
    if _tool.id == WORD_COUNTER_ID:
        tools_bp.add_url_rule(
            f"{_tool.url_path}/upload", 'word_counter_upload', word_counter_upload, methods=['POST'],
        )
