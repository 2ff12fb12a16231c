from flask import Blueprint, abort, current_app, jsonify, render_template, request

from tuitility.catalog.registry import (
    CATEGORIES,
    SEARCH_ALL,
    SEARCH_STRICT,
    get_categories,
    get_category,
    get_category_counts,
    get_popular_tools,
    get_tools_by_category,
    paginate,
    search_tools,
)
from tuitility.services.capabilities import capability_report
from tuitility.tools import CALCULATORS

main_bp = Blueprint('main', __name__)


@main_bp.route('/')
def index():
    return render_template(
        'index.html',
        categories=get_categories(),
        counts=get_category_counts(),
        popular=get_popular_tools(),
    )


def category_page(category_id):
    category = get_category(category_id)
    if category is None:
        abort(404)
    return render_template(
        'category.html',
        category=category,
        tools=get_tools_by_category(category_id),
        categories=get_categories(),
    )


for _category in CATEGORIES:
    main_bp.add_url_rule(_category.url_path, 'category', category_page, defaults={'category_id': _category.id})


@main_bp.route('/search')
def search():
    query = request.args.get('q', '')
    page = request.args.get('page', 1, type=int)
    results = search_tools(query, mode=SEARCH_STRICT)
    items, page, total_pages = paginate(results, page, current_app.config['SEARCH_PAGE_SIZE'])
    return render_template(
        'search.html',
        query=query,
        results=items,
        total=len(results),
        page=page,
        total_pages=total_pages,
        categories=get_categories(),
    )


@main_bp.route('/api/search')
def api_search():
    query = request.args.get('q', '')
    mode = request.args.get('mode', SEARCH_ALL)
    if mode not in (SEARCH_ALL, SEARCH_STRICT):
        return jsonify({"error": f"Unknown search mode: {mode}"}), 400

    results = search_tools(query, mode=mode)
    return jsonify({
        "query": query,
        "mode": mode,
        "count": len(results),
        "results": [
            {
                "id": tool.id,
                "name": tool.name,
                "description": tool.description,
                "icon": tool.icon,
                "category": tool.category,
                "url": tool.url_path,
            }
            for tool in results
        ],
    })


@main_bp.route('/healthz')
def health():
    return jsonify({
        "status": "ok",
        "tools": len(CALCULATORS),
        "capabilities": capability_report(),
    })
