"""
Tests for the utility tools: color converters, word counter and the TikTok downloader.
"""
import unittest

from tuitility.core.colors import load_palette
from tuitility.core.state import CalculatorState
from tuitility.tools.utility import rgb_to_hex, rgb_to_pantone, tiktok_downloader, word_counter


def _run(module, **fields):
    state = CalculatorState(module.CALCULATOR)
    state.update(fields)
    state.calculate()
    return state


class TestRgbToHex(unittest.TestCase):

    def test_rgb_to_hex(self):
        result = _run(rgb_to_hex, r="255", g="0", b="0").result
        self.assertEqual(result["hex"], "FF0000")
        self.assertEqual(result["css_hex"], "#FF0000")
        self.assertEqual(result["css_rgb"], "rgb(255, 0, 0)")

    def test_hex_to_rgb(self):
        result = _run(rgb_to_hex, mode="hex-to-rgb", hex="#00ff00").result
        self.assertEqual((result["r"], result["g"], result["b"]), (0, 255, 0))
        self.assertEqual(result["hex"], "00FF00")

    def test_shorthand_hex(self):
        result = _run(rgb_to_hex, mode="hex-to-rgb", hex="F53").result
        self.assertEqual((result["r"], result["g"], result["b"]), (255, 85, 51))

    def test_invalid_hex(self):
        state = _run(rgb_to_hex, mode="hex-to-rgb", hex="GGGGGG")
        self.assertEqual(state.errors, ["Please enter a valid HEX code such as FF5733 or #F53."])

    def test_channel_rules(self):
        self.assertEqual(_run(rgb_to_hex, r="10", g="20").errors, ["Blue is required."])
        self.assertEqual(_run(rgb_to_hex, r="256", g="0", b="0").errors, ["Red must be between 0 and 255."])
        self.assertEqual(_run(rgb_to_hex, r="1.5", g="0", b="0").errors, ["Red must be a whole number."])


class TestRgbToPantone(unittest.TestCase):

    def test_defaults(self):
        result = _run(rgb_to_pantone).result
        self.assertEqual(result["input_hex"], "#0085CA")
        self.assertEqual(len(result["alternatives"]), rgb_to_pantone.ALTERNATIVES)
        self.assertLessEqual(result["closest"]["distance"], result["alternatives"][0]["distance"])

    def test_exact_palette_color(self):
        entry = load_palette("pantone")[0]
        result = _run(rgb_to_pantone, input_mode="hex", hex=entry["hex"]).result
        self.assertEqual(result["closest"]["code"], entry["code"])
        self.assertEqual(result["closest"]["distance"], 0)
        self.assertEqual(result["accuracy"], 100.0)

    def test_invalid_hex(self):
        state = _run(rgb_to_pantone, input_mode="hex", hex="12")
        self.assertEqual(state.errors, ["Please enter a valid HEX code such as 0085CA."])


class TestWordCounter(unittest.TestCase):

    TEXT = "Hello world. This is a test!\n\nSecond paragraph here?"

    def test_counts(self):
        result = _run(word_counter, text=self.TEXT).result
        self.assertEqual(result["words"], 9)
        self.assertEqual(result["characters"], len(self.TEXT))
        self.assertEqual(result["characters_no_spaces"], len(self.TEXT.replace(" ", "").replace("\n", "")))
        self.assertEqual(result["sentences"], 3)
        self.assertEqual(result["paragraphs"], 2)
        self.assertEqual(result["reading_time"], 1)

    def test_empty_text(self):
        result = _run(word_counter, text="").result
        self.assertEqual(result["words"], 0)
        self.assertEqual(result["sentences"], 0)
        self.assertEqual(result["paragraphs"], 0)
        self.assertEqual(dict(word_counter.result_rows(result))["Reading time"], "Less than a minute")

    def test_reading_time_rounds_up(self):
        self.assertEqual(word_counter.reading_time_minutes(200), 1)
        self.assertEqual(word_counter.reading_time_minutes(201), 2)


class TestTikTokDownloader(unittest.TestCase):

    def test_link_normalised_without_lookup(self):
        state = _run(tiktok_downloader, url="https://www.TikTok.com/@User/video/123?lang=en")
        self.assertEqual(state.errors, [])
        self.assertEqual(state.result, {
            "source_url": "https://www.tiktok.com/@User/video/123?lang=en",
        })

    def test_invalid_url_rejected(self):
        state = _run(tiktok_downloader, url="not a link")
        self.assertEqual(state.errors, ["Please enter a valid TikTok URL"])
        self.assertIsNone(state.result)

    def test_rows_include_video_link_once_resolved(self):
        result = {"source_url": "https://www.tiktok.com/@user/video/123"}
        self.assertEqual(tiktok_downloader.result_rows(result), [
            ("Post link", "https://www.tiktok.com/@user/video/123"),
        ])
        result["media_url"] = "https://cdn.example.com/v.mp4"
        self.assertEqual(dict(tiktok_downloader.result_rows(result))["Video link"], "https://cdn.example.com/v.mp4")


if __name__ == "__main__":
    unittest.main()
