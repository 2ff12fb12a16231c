import logging

import click
from flask.cli import with_appcontext

from tuitility.catalog.registry import CATEGORIES, TOOLS, get_category, search_tools
from tuitility.tools import CALCULATORS

logger = logging.getLogger(__name__)

# Paths served by the main blueprint; catalog pages must not shadow them
SITE_PATHS = ('/', '/search', '/api/search', '/healthz')


@click.group(name='catalog')
def catalog_cli():
    """Tool catalog commands."""
    pass


@catalog_cli.command('list')
@click.option('--category', default=None, help='Only list tools in this category id (e.g. health)')
@with_appcontext
def list_command(category):
    """List every tool with its category and URL."""
    if category and get_category(category) is None:
        raise click.BadParameter(f"Unknown category: {category}", param_hint='--category')

    tools = [t for t in TOOLS if category is None or t.category == category]
    for tool in tools:
        click.echo(f"{tool.id:<32} {tool.category:<10} {tool.url_path}")
    click.echo(f"{len(tools)} tool(s)")


@catalog_cli.command('check')
@with_appcontext
def check_command():
    """Verify ids, paths and formula modules line up."""
    problems = []

    ids = [t.id for t in TOOLS]
    paths = [t.url_path for t in TOOLS]
    for value in sorted({i for i in ids if ids.count(i) > 1}):
        problems.append(f"Duplicate tool id: {value}")
    for value in sorted({p for p in paths if paths.count(p) > 1}):
        problems.append(f"Duplicate url_path: {value}")

    category_ids = {c.id for c in CATEGORIES}
    category_paths = {c.url_path for c in CATEGORIES}
    for tool in TOOLS:
        if tool.category not in category_ids:
            problems.append(f"{tool.id}: unknown category {tool.category}")
        if tool.id not in CALCULATORS:
            problems.append(f"{tool.id}: no formula module")
        if tool.url_path in category_paths:
            problems.append(f"{tool.id}: url_path collides with a category page")
        if tool.url_path in SITE_PATHS:
            problems.append(f"{tool.id}: url_path collides with a site page")

    for category in CATEGORIES:
        if category.url_path in SITE_PATHS:
            problems.append(f"{category.id}: url_path collides with a site page")

    for tool_id in CALCULATORS:
        if tool_id not in ids:
            problems.append(f"{tool_id}: formula module has no catalog entry")

    if problems:
        for problem in problems:
            click.echo(f"  - {problem}", err=True)
        logger.error(f"Catalog check failed with {len(problems)} problem(s)")
        raise SystemExit(1)

    click.echo(f"Catalog OK: {len(TOOLS)} tools in {len(CATEGORIES)} categories.")


@catalog_cli.command('search')
@click.argument('query')
@with_appcontext
def search_command(query):
    """Print tools matching QUERY in catalog order."""
    results = search_tools(query, mode='strict')
    if not results:
        click.echo(f"No tools match '{query}'.")
        return
    for tool in results:
        click.echo(f"{tool.name} ({tool.url_path})")


def init_app(app):
    """Register catalog commands with the Flask app."""
    app.cli.add_command(catalog_cli)
