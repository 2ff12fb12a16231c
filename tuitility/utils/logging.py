"""
Logging utilities for tracking tool usage across the site.
"""
import logging

logger = logging.getLogger(__name__)


def log_tool_visit(tool):
    """
    Log a visit to a tool page.

    Args:
        tool (ToolDescriptor): The tool that was opened
    """
    logger.info(f"Anonymous user visited {tool.name} ({tool.url_path})")


def log_calculation(tool, status, error_count=0):
    """
    Log the outcome of a calculate action.

    Args:
        tool (ToolDescriptor): The tool that was used
        status (str): Resulting state status (calculated, invalid, idle)
        error_count (int): Number of messages shown to the user
    """
    if error_count:
        logger.info(f"{tool.id}: calculation {status} with {error_count} error(s)")
    else:
        logger.info(f"{tool.id}: calculation {status}")


def log_feedback(tool, form):
    logger.info(
        f"Feedback for {tool.id}: rating={form.rating.data} "
        f"from {form.email.data or 'anonymous'}: {form.message.data.strip()}"
    )
