"""
Formula modules, one per tool, keyed by catalog id.

Each module exposes a ``CALCULATOR`` describing its form, defaults, formula
and static content. The catalog in ``tuitility.catalog.registry`` decides
where a tool lives; this map only says how to compute it.
"""
from tuitility.tools.finance import roi, sales_tax
from tuitility.tools.health import bmi, bri, ideal_weight, water_intake
from tuitility.tools.knowledge import carbon_footprint, fuel
from tuitility.tools.mathematics import lcm, percentage
from tuitility.tools.science import dbm_watts, wave_speed
from tuitility.tools.utility import rgb_to_hex, rgb_to_pantone, tiktok_downloader, word_counter

_MODULES = (
    percentage, lcm,
    roi, sales_tax,
    wave_speed, dbm_watts,
    bmi, ideal_weight, water_intake, bri,
    fuel, carbon_footprint,
    rgb_to_hex, rgb_to_pantone, word_counter, tiktok_downloader,
)

CALCULATORS = {module.CALCULATOR.tool_id: module.CALCULATOR for module in _MODULES}


def get_calculator(tool_id):
    return CALCULATORS.get(tool_id)
