"""
Tests for the site-wide pages: home, categories, search and the health check.
"""
import os
import unittest
from unittest.mock import patch

from tuitility import create_app
from tuitility.catalog.registry import TOOLS


def _create_test_app():
    return create_app({
        "TESTING": True,
        "WTF_CSRF_ENABLED": False,
        "SECRET_KEY": "test",
        "SEARCH_PAGE_SIZE": 8,
    })


class TestPages(unittest.TestCase):

    def setUp(self):
        self.app = _create_test_app()
        self.client = self.app.test_client()

    def test_home_lists_categories_and_popular_tools(self):
        r = self.client.get("/")
        self.assertEqual(r.status_code, 200)
        body = r.get_data(as_text=True)
        self.assertIn("/utility-tools", body)
        self.assertIn("BMI Calculator", body)

    def test_category_pages(self):
        r = self.client.get("/math")
        self.assertEqual(r.status_code, 200)
        body = r.get_data(as_text=True)
        self.assertIn("Percentage Calculator", body)
        self.assertIn("LCM Calculator", body)
        self.assertNotIn("BMI Calculator</h3>", body)

    def test_health_category_is_a_page(self):
        r = self.client.get("/health")
        self.assertEqual(r.status_code, 200)
        self.assertIn("Water Intake Calculator", r.get_data(as_text=True))

    def test_unknown_path_404(self):
        r = self.client.get("/math/calculators/no-such-tool")
        self.assertEqual(r.status_code, 404)
        self.assertIn("404", r.get_data(as_text=True))


class TestSearch(unittest.TestCase):

    def setUp(self):
        self.app = _create_test_app()
        self.client = self.app.test_client()

    def test_html_search(self):
        r = self.client.get("/search?q=bmi")
        self.assertEqual(r.status_code, 200)
        body = r.get_data(as_text=True)
        self.assertIn("1 result for", body)
        self.assertIn("/health/calculators/bmi-calculator", body)

    def test_html_search_empty_query_shows_nothing(self):
        r = self.client.get("/search")
        self.assertEqual(r.status_code, 200)
        self.assertNotIn("tool-card", r.get_data(as_text=True))

    def test_html_search_paginates(self):
        r = self.client.get("/search?q=calculator&page=2")
        self.assertEqual(r.status_code, 200)
        self.assertIn("Page 2 of", r.get_data(as_text=True))

    def test_api_search(self):
        r = self.client.get("/api/search?q=pantone")
        self.assertEqual(r.status_code, 200)
        data = r.get_json()
        self.assertEqual(data["mode"], "all")
        self.assertEqual(data["count"], 1)
        self.assertEqual(data["results"][0], {
            "id": "rgb-to-pantone-converter",
            "name": "RGB to Pantone",
            "description": "Find the closest Pantone Matching System (PMS) color to an RGB or hex value",
            "icon": "fas fa-swatchbook",
            "category": "utility",
            "url": "/utility-tools/converter-tools/rgb-to-pantone-converter",
        })

    def test_api_search_empty_query_modes(self):
        self.assertEqual(self.client.get("/api/search").get_json()["count"], len(TOOLS))
        self.assertEqual(self.client.get("/api/search?mode=strict").get_json()["count"], 0)

    def test_api_search_bad_mode(self):
        r = self.client.get("/api/search?q=bmi&mode=fuzzy")
        self.assertEqual(r.status_code, 400)
        self.assertIn("error", r.get_json())


class TestHealthCheck(unittest.TestCase):

    def test_reports_tools_and_capabilities(self):
        client = _create_test_app().test_client()
        r = client.get("/healthz")
        self.assertEqual(r.status_code, 200)
        data = r.get_json()
        self.assertEqual(data["status"], "ok")
        self.assertEqual(data["tools"], len(TOOLS))
        self.assertEqual(set(data["capabilities"]), {"pdf", "docx", "markdown"})


class TestAppFactory(unittest.TestCase):

    def test_secret_key_required(self):
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(ValueError):
                create_app({"TESTING": True})


if __name__ == "__main__":
    unittest.main()
