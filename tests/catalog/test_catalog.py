"""
Tests for the tool catalog: lookups, search and related-tool queries.
"""
import unittest

from tuitility.catalog.registry import (
    CATEGORIES,
    SEARCH_ALL,
    SEARCH_STRICT,
    TOOLS,
    ToolDescriptor,
    _check_unique,
    get_categories,
    get_category_counts,
    get_popular_tools,
    get_related_tools,
    get_tool_by_id,
    get_tool_by_path,
    get_tools_by_category,
    paginate,
    search_tools,
)
from tuitility.tools import CALCULATORS


class TestCatalogIntegrity(unittest.TestCase):

    def test_every_tool_has_a_formula_and_a_category(self):
        category_ids = {c.id for c in CATEGORIES}
        for tool in TOOLS:
            with self.subTest(tool=tool.id):
                self.assertIn(tool.id, CALCULATORS)
                self.assertIn(tool.category, category_ids)

    def test_duplicate_id_rejected(self):
        tool = TOOLS[0]
        copy = ToolDescriptor(tool.id, 'Other', 'Other', 'fas fa-x', tool.category, '/other')
        with self.assertRaisesRegex(ValueError, 'Duplicate tool id'):
            _check_unique([tool, copy])

    def test_duplicate_path_rejected(self):
        tool = TOOLS[0]
        copy = ToolDescriptor('other-tool', 'Other', 'Other', 'fas fa-x', tool.category, tool.url_path)
        with self.assertRaisesRegex(ValueError, 'Duplicate url_path'):
            _check_unique([tool, copy])

    def test_categories_in_display_order(self):
        orders = [c.order for c in get_categories()]
        self.assertEqual(orders, sorted(orders))

    def test_category_counts_cover_catalog(self):
        counts = get_category_counts()
        self.assertEqual(sum(counts.values()), len(TOOLS))
        self.assertEqual(counts['health'], 4)


class TestLookups(unittest.TestCase):

    def test_get_tool_by_id(self):
        self.assertEqual(get_tool_by_id('bmi-calculator').name, 'BMI Calculator')
        self.assertIsNone(get_tool_by_id('no-such-tool'))

    def test_get_tool_by_path_ignores_trailing_slash(self):
        tool = get_tool_by_path('/health/calculators/bmi-calculator/')
        self.assertEqual(tool.id, 'bmi-calculator')
        self.assertIsNone(get_tool_by_path('/health/calculators/unknown'))

    def test_tools_by_category_keep_catalog_order(self):
        ids = [t.id for t in get_tools_by_category('math')]
        self.assertEqual(ids, ['percentage-calculator', 'lcm-calculator'])

    def test_related_tools_exclude_current(self):
        related = get_related_tools('bmi-calculator')
        self.assertNotIn('bmi-calculator', [t.id for t in related])
        self.assertTrue(all(t.category == 'health' for t in related))
        self.assertEqual(len(related), 3)

    def test_related_tools_unknown_id(self):
        self.assertEqual(get_related_tools('no-such-tool'), [])

    def test_popular_tools_limit(self):
        self.assertEqual(len(get_popular_tools(limit=3)), 3)
        self.assertEqual(get_popular_tools()[0].id, 'bmi-calculator')


class TestSearch(unittest.TestCase):

    def test_bmi_matches_only_bmi_calculator(self):
        results = search_tools('bmi')
        self.assertEqual([t.id for t in results], ['bmi-calculator'])

    def test_search_is_case_insensitive(self):
        self.assertEqual(search_tools('PANTONE'), search_tools('pantone'))

    def test_every_match_contains_query(self):
        for query in ('calculator', 'color', 'tax', 'health'):
            with self.subTest(query=query):
                for tool in search_tools(query):
                    category = next(c for c in CATEGORIES if c.id == tool.category)
                    text = ' '.join((tool.name, tool.description, tool.category, category.name)).lower()
                    self.assertIn(query, text)

    def test_results_keep_catalog_order(self):
        results = search_tools('calculator')
        positions = [TOOLS.index(t) for t in results]
        self.assertEqual(positions, sorted(positions))

    def test_category_name_matches(self):
        ids = [t.id for t in search_tools('knowledge')]
        self.assertEqual(ids, ['fuel-calculator', 'carbon-footprint-calculator'])

    def test_empty_query_by_mode(self):
        self.assertEqual(search_tools('', mode=SEARCH_ALL), list(TOOLS))
        self.assertEqual(search_tools('   ', mode=SEARCH_STRICT), [])

    def test_no_match(self):
        self.assertEqual(search_tools('zzzz'), [])


class TestPaginate(unittest.TestCase):

    def test_slices_and_counts_pages(self):
        items, page, total = paginate(list(range(20)), 2, 8)
        self.assertEqual(items, list(range(8, 16)))
        self.assertEqual((page, total), (2, 3))

    def test_page_clamped(self):
        self.assertEqual(paginate(list(range(5)), 9, 8), ([0, 1, 2, 3, 4], 1, 1))
        self.assertEqual(paginate([], 0, 8), ([], 1, 1))


if __name__ == '__main__':
    unittest.main()
