"""
Unit tests for optional library capabilities.
"""
import unittest
from unittest.mock import patch

from tuitility.core.errors import ExternalCollaboratorError
from tuitility.services.capabilities import READY, UNAVAILABLE, Capability, capability_report


class TestCapability(unittest.TestCase):

    def test_installed_module_is_ready(self):
        capability = Capability("json", "json")
        self.assertEqual(capability.status, READY)
        self.assertTrue(capability.ready)
        capability.require()

    def test_missing_module_unavailable(self):
        capability = Capability("ghost", "tuitility_no_such_module", "Ghost rendering")
        with self.assertLogs("tuitility.services.capabilities", level="WARNING"):
            self.assertEqual(capability.status, UNAVAILABLE)
        with self.assertRaises(ExternalCollaboratorError) as ctx:
            capability.require()
        self.assertEqual(str(ctx.exception), "Ghost rendering is not available right now.")

    def test_status_checked_once(self):
        capability = Capability("json", "json")
        with patch("tuitility.services.capabilities.importlib.util.find_spec", return_value=object()) as mock_find:
            capability.status
            capability.status
        mock_find.assert_called_once_with("json")

    def test_report(self):
        report = capability_report()
        self.assertEqual(set(report), {"pdf", "docx", "markdown"})
        self.assertEqual(report["markdown"], READY)


if __name__ == "__main__":
    unittest.main()
