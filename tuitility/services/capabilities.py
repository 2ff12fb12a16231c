"""
Optional library capabilities.

Libraries that only a few tools need are described here once and checked
before use, instead of probing for a module at call time in every tool.
"""
import importlib.util
import logging

from tuitility.core.errors import ExternalCollaboratorError

logger = logging.getLogger(__name__)

READY = "ready"
UNAVAILABLE = "unavailable"


class Capability:
    def __init__(self, name, module, description=""):
        self.name = name
        self.module = module
        self.description = description
        self._status = None

    @property
    def status(self):
        if self._status is None:
            found = importlib.util.find_spec(self.module) is not None
            self._status = READY if found else UNAVAILABLE
            if not found:
                logger.warning(f"Capability {self.name} unavailable: module {self.module} not installed")
        return self._status

    @property
    def ready(self):
        return self.status == READY

    def require(self):
        if not self.ready:
            raise ExternalCollaboratorError(f"{self.description or self.name} is not available right now.")


PDF = Capability("pdf", "pypdf", "PDF text extraction")
DOCX = Capability("docx", "docx", "DOCX text extraction")
MARKDOWN = Capability("markdown", "markdown", "Content rendering")

ALL_CAPABILITIES = (PDF, DOCX, MARKDOWN)


def capability_report():
    return {c.name: c.status for c in ALL_CAPABILITIES}
