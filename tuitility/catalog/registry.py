"""
Tool Catalog - the single registry of every tool on the site.

To add a new tool:
1. Create the formula module under tuitility/tools/<category>/
2. Add it to CALCULATORS in tuitility/tools/__init__.py
3. Add a ToolDescriptor to TOOLS below

Navigation, search, breadcrumbs and "related tools" lists are all queries
over TOOLS; no other module keeps its own tool list.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Category:
    id: str
    name: str
    description: str
    icon: str
    url_path: str
    order: int


@dataclass(frozen=True)
class ToolDescriptor:
    id: str
    name: str
    description: str
    icon: str
    category: str
    url_path: str
    tags: tuple = ()


CATEGORIES = (
    Category('math', 'Math', 'Fractions, percentages, multiples and everyday arithmetic',
             'fas fa-calculator', '/math', 1),
    Category('finance', 'Finance', 'Investments, taxes and money decisions',
             'fas fa-chart-line', '/finance', 2),
    Category('science', 'Science', 'Physics and electronics formulas',
             'fas fa-atom', '/science', 3),
    Category('health', 'Health', 'Body measurements, hydration and fitness',
             'fas fa-heartbeat', '/health', 4),
    Category('knowledge', 'Knowledge', 'Travel, environment and everyday estimates',
             'fas fa-lightbulb', '/knowledge', 5),
    Category('utility', 'Utility', 'Converters, text tools and downloaders',
             'fas fa-tools', '/utility-tools', 6),
)

TOOLS = (
    ToolDescriptor(
        'percentage-calculator', 'Percentage Calculator',
        'Find a percentage of a number, the percent one number is of another, or the percent change between two values',
        'fas fa-percent', 'math', '/math/calculators/percentage-calculator',
        ('percent', 'percentage', 'ratio', 'change'),
    ),
    ToolDescriptor(
        'lcm-calculator', 'LCM Calculator',
        'Least common multiple and greatest common divisor of a list of whole numbers',
        'fas fa-sort-numeric-up', 'math', '/math/calculators/lcm-calculator',
        ('lcm', 'gcd', 'multiple', 'divisor'),
    ),
    ToolDescriptor(
        'roi-calculator', 'ROI Calculator',
        'Return on investment, total return and annualized ROI including regular contributions',
        'fas fa-chart-line', 'finance', '/finance/calculators/roi-calculator',
        ('roi', 'return', 'investment', 'annualized'),
    ),
    ToolDescriptor(
        'sales-tax-calculator', 'Sales Tax Calculator',
        'Add sales tax to a price or pull the tax back out of a tax-inclusive total',
        'fas fa-receipt', 'finance', '/finance/calculators/sales-tax-calculator',
        ('tax', 'sales', 'vat', 'price'),
    ),
    ToolDescriptor(
        'wave-speed-calculator', 'Wave Speed Calculator',
        'Solve v = f x wavelength for speed, frequency or wavelength',
        'fas fa-wave-square', 'science', '/science/calculators/wave-speed-calculator',
        ('wave', 'frequency', 'wavelength', 'physics'),
    ),
    ToolDescriptor(
        'dbm-watts-calculator', 'dBm to Watts Calculator',
        'Convert power levels between dBm, milliwatts and watts',
        'fas fa-bolt', 'science', '/science/calculators/dbm-watts-calculator',
        ('dbm', 'watts', 'milliwatts', 'rf', 'power'),
    ),
    ToolDescriptor(
        'bmi-calculator', 'BMI Calculator',
        'Body Mass Index with weight category and healthy weight range',
        'fas fa-weight', 'health', '/health/calculators/bmi-calculator',
        ('bmi', 'body mass index', 'weight', 'health'),
    ),
    ToolDescriptor(
        'ideal-body-weight-calculator', 'Ideal Weight Calculator',
        'Ideal body weight from the Devine, Robinson, Miller and Hamwi formulas',
        'fas fa-balance-scale', 'health', '/health/calculators/ideal-body-weight-calculator',
        ('ideal weight', 'devine', 'robinson', 'miller', 'hamwi'),
    ),
    ToolDescriptor(
        'water-intake-calculator', 'Water Intake Calculator',
        'Daily water needs from body weight, activity level and climate',
        'fas fa-tint', 'health', '/health/calculators/water-intake-calculator',
        ('water', 'hydration', 'intake'),
    ),
    ToolDescriptor(
        'bri-calculator', 'BRI Calculator',
        'Body Roundness Index with waist ratios, body shape and risk category',
        'fas fa-circle-notch', 'health', '/health/calculators/bri-calculator',
        ('bri', 'body roundness', 'waist', 'whtr', 'whr'),
    ),
    ToolDescriptor(
        'fuel-calculator', 'Fuel Cost Calculator',
        'Trip fuel cost and cost per passenger for one-way or round trips',
        'fas fa-gas-pump', 'knowledge', '/knowledge/calculators/fuel-calculator',
        ('fuel', 'gas', 'trip', 'mpg'),
    ),
    ToolDescriptor(
        'carbon-footprint-calculator', 'Carbon Footprint Calculator',
        'Annual CO2 emissions from transportation, home energy, food and waste',
        'fas fa-leaf', 'knowledge', '/knowledge/calculators/carbon-footprint-calculator',
        ('carbon', 'co2', 'emissions', 'environment'),
    ),
    ToolDescriptor(
        'rgb-to-hex-converter', 'RGB to HEX Converter',
        'Convert RGB color values to hexadecimal codes and back',
        'fas fa-palette', 'utility', '/utility-tools/converter-tools/rgb-to-hex-converter',
        ('rgb', 'hex', 'color', 'converter'),
    ),
    ToolDescriptor(
        'rgb-to-pantone-converter', 'RGB to Pantone',
        'Find the closest Pantone Matching System (PMS) color to an RGB or hex value',
        'fas fa-swatchbook', 'utility', '/utility-tools/converter-tools/rgb-to-pantone-converter',
        ('rgb', 'pantone', 'pms', 'color', 'print'),
    ),
    ToolDescriptor(
        'word-counter', 'Word Counter',
        'Count words, characters, sentences and paragraphs in text, PDF or DOCX files',
        'fas fa-font', 'utility', '/utility-tools/word-counter',
        ('words', 'characters', 'text', 'pdf', 'docx'),
    ),
    ToolDescriptor(
        'tiktok-downloader', 'TikTok Downloader',
        'Get a direct download link for a TikTok video',
        'fab fa-tiktok', 'utility', '/utility-tools/converter-tools/tiktok-downloader',
        ('tiktok', 'video', 'downloader'),
    ),
)

SEARCH_ALL = 'all'
SEARCH_STRICT = 'strict'


def _check_unique(tools):
    seen_ids = set()
    seen_paths = set()
    for tool in tools:
        if tool.id in seen_ids:
            raise ValueError(f"Duplicate tool id in catalog: {tool.id}")
        if tool.url_path in seen_paths:
            raise ValueError(f"Duplicate url_path in catalog: {tool.url_path}")
        seen_ids.add(tool.id)
        seen_paths.add(tool.url_path)


_check_unique(TOOLS)

_CATEGORY_BY_ID = {c.id: c for c in CATEGORIES}
_TOOL_BY_ID = {t.id: t for t in TOOLS}
_TOOL_BY_PATH = {t.url_path: t for t in TOOLS}


def get_all_tools():
    """
    Get every tool in catalog order.

    Returns:
        list: ToolDescriptor entries
    """
    return list(TOOLS)


def get_categories():
    """
    Get all categories sorted by their display order.

    Returns:
        list: Category entries
    """
    return sorted(CATEGORIES, key=lambda c: c.order)


def get_category(category_id):
    return _CATEGORY_BY_ID.get(category_id)


def get_tool_by_id(tool_id):
    """
    Get a specific tool by its ID.

    Args:
        tool_id (str): The tool ID to look up

    Returns:
        ToolDescriptor: Tool data or None if not found
    """
    return _TOOL_BY_ID.get(tool_id)


def get_tool_by_path(url_path):
    return _TOOL_BY_PATH.get(url_path.rstrip('/') or '/')


def get_tools_by_category(category_id):
    """
    Get the tools belonging to a category, in catalog order.

    Args:
        category_id (str): The category ID

    Returns:
        list: ToolDescriptor entries
    """
    return [t for t in TOOLS if t.category == category_id]


def get_related_tools(tool_id, limit=5):
    """
    Get other tools from the same category as ``tool_id``.

    Args:
        tool_id (str): The current tool
        limit (int): Maximum number of entries returned

    Returns:
        list: ToolDescriptor entries, current tool excluded
    """
    tool = get_tool_by_id(tool_id)
    if tool is None:
        return []
    related = [t for t in get_tools_by_category(tool.category) if t.id != tool.id]
    return related[:limit]


def search_tools(query, mode=SEARCH_ALL):
    """
    Case-insensitive substring search over name, description and category name.

    The result keeps catalog order and is not capped; callers paginate.
    An empty query returns the whole catalog in 'all' mode and nothing in
    'strict' mode.

    Args:
        query (str): Text typed by the user
        mode (str): 'all' or 'strict'

    Returns:
        list: Matching ToolDescriptor entries
    """
    needle = (query or '').strip().lower()
    if not needle:
        return list(TOOLS) if mode == SEARCH_ALL else []

    results = []
    for tool in TOOLS:
        category = _CATEGORY_BY_ID.get(tool.category)
        haystacks = (
            tool.name,
            tool.description,
            tool.category,
            category.name if category else '',
        )
        if any(needle in h.lower() for h in haystacks):
            results.append(tool)
    return results


def paginate(items, page, per_page):
    """
    Slice a result list for display.

    Returns:
        tuple: (page_items, page, total_pages) with page clamped to range
    """
    total_pages = max(1, -(-len(items) // per_page))
    page = min(max(1, page), total_pages)
    start = (page - 1) * per_page
    return items[start:start + per_page], page, total_pages


POPULAR_TOOL_IDS = (
    'bmi-calculator',
    'percentage-calculator',
    'roi-calculator',
    'word-counter',
    'rgb-to-hex-converter',
    'fuel-calculator',
)


def get_popular_tools(limit=6):
    """
    Get the tools featured on the homepage.

    Returns:
        list: ToolDescriptor entries in featured order
    """
    tools = [_TOOL_BY_ID[tool_id] for tool_id in POPULAR_TOOL_IDS if tool_id in _TOOL_BY_ID]
    return tools[:limit]


def get_category_counts():
    """Number of tools in each category, keyed by category id."""
    counts = {c.id: 0 for c in CATEGORIES}
    for tool in TOOLS:
        counts[tool.category] = counts.get(tool.category, 0) + 1
    return counts
