"""
Unit tests for the media lookup client. requests.get is patched; no network.
"""
import unittest
from unittest.mock import Mock, patch

import requests

from tuitility.core.errors import MediaResolutionError
from tuitility.services.media import MediaResolver

POST_URL = "https://www.tiktok.com/@user/video/123"


def _response(payload=None, status_error=None, json_error=None):
    response = Mock()
    response.raise_for_status.side_effect = status_error
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


class TestResolve(unittest.TestCase):

    def setUp(self):
        self.resolver = MediaResolver(api_key="key", api_url="https://media.example.com/info", timeout=5)

    def test_missing_key_skips_request(self):
        with patch("tuitility.services.media.requests.get") as mock_get:
            outcome = MediaResolver(api_key=None).resolve(POST_URL)
        self.assertEqual(outcome, {"error": "API key not configured."})
        mock_get.assert_not_called()

    @patch("tuitility.services.media.requests.get")
    def test_request_shape(self, mock_get):
        mock_get.return_value = _response({"url": "https://cdn.example.com/a.mp4"})
        self.resolver.resolve(POST_URL)
        mock_get.assert_called_once_with(
            "https://media.example.com/info",
            params={"url": POST_URL},
            headers={"x-rapidapi-key": "key", "x-rapidapi-host": "media.example.com"},
            timeout=5,
        )

    @patch("tuitility.services.media.requests.get")
    def test_url_found_in_any_known_field(self, mock_get):
        payloads = (
            {"url": "https://cdn.example.com/a.mp4"},
            {"video_url": "https://cdn.example.com/a.mp4"},
            {"download_url": "https://cdn.example.com/a.mp4"},
            {"media": {"url": "https://cdn.example.com/a.mp4"}},
            {"items": [{"video_url": "https://cdn.example.com/a.mp4"}]},
            {"items": [{"url": "https://cdn.example.com/a.mp4"}]},
        )
        for payload in payloads:
            with self.subTest(payload=payload):
                mock_get.return_value = _response(payload)
                self.assertEqual(self.resolver.resolve(POST_URL), {"media_url": "https://cdn.example.com/a.mp4"})

    @patch("tuitility.services.media.requests.get")
    def test_no_url_in_response(self, mock_get):
        mock_get.return_value = _response({"items": []})
        self.assertEqual(
            self.resolver.resolve(POST_URL),
            {"error": "Video URL not found. Please check if the link is correct."},
        )

    @patch("tuitility.services.media.requests.get")
    def test_http_and_network_errors(self, mock_get):
        failures = (
            requests.exceptions.ConnectionError("down"),
            requests.exceptions.Timeout("slow"),
        )
        for failure in failures:
            with self.subTest(failure=failure):
                mock_get.side_effect = failure
                self.assertEqual(
                    self.resolver.resolve(POST_URL),
                    {"error": "Failed to fetch video. Please try again later."},
                )

        mock_get.side_effect = None
        mock_get.return_value = _response(status_error=requests.exceptions.HTTPError("500"))
        self.assertIn("error", self.resolver.resolve(POST_URL))

    @patch("tuitility.services.media.requests.get")
    def test_invalid_json(self, mock_get):
        mock_get.return_value = _response(json_error=ValueError("bad json"))
        self.assertEqual(
            self.resolver.resolve(POST_URL),
            {"error": "Failed to fetch video. Please try again later."},
        )

    @patch("tuitility.services.media.requests.get")
    def test_resolve_or_raise(self, mock_get):
        mock_get.return_value = _response({"video_url": "https://cdn.example.com/a.mp4"})
        self.assertEqual(self.resolver.resolve_or_raise(POST_URL), "https://cdn.example.com/a.mp4")

        mock_get.return_value = _response({})
        with self.assertRaises(MediaResolutionError):
            self.resolver.resolve_or_raise(POST_URL)


if __name__ == "__main__":
    unittest.main()
