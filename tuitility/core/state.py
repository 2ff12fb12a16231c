"""
Calculator state container.

One instance holds a single tool's interaction state: the raw form values,
the last result and the last error list. It is scoped to one page render and
never shared between requests.
"""
import copy
import logging
import math

from tuitility.core.errors import ExternalCollaboratorError
from tuitility.core.validation import validate

logger = logging.getLogger(__name__)

GENERIC_ERROR = "An error occurred during calculation. Please check your inputs and try again."
OUT_OF_RANGE_ERROR = "Inputs are too large or too small to calculate."

IDLE = "idle"
CALCULATED = "calculated"
INVALID = "invalid"


def is_finite(value):
    """True when every float in a (possibly nested) result is a real number."""
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, dict):
        return all(is_finite(item) for item in value.values())
    if isinstance(value, (list, tuple)):
        return all(is_finite(item) for item in value)
    return True


class CalculatorState:
    def __init__(self, calculator):
        self.calculator = calculator
        self.form = copy.deepcopy(calculator.defaults)
        self.result = None
        self.errors = []

    @property
    def status(self):
        if self.errors:
            return INVALID
        if self.result is not None:
            return CALCULATED
        return IDLE

    def set_field(self, name, value):
        """Update one field and clear any displayed error. Does not recompute."""
        if name not in self.calculator.defaults:
            raise KeyError(f"{self.calculator.tool_id} has no field {name!r}")
        self.form[name] = value
        self.errors = []

    def update(self, values):
        """Copy every declared field present in ``values`` (a dict or MultiDict)."""
        for name, default in self.calculator.defaults.items():
            if name not in values:
                continue
            if isinstance(default, (list, tuple)) and hasattr(values, "getlist"):
                self.set_field(name, values.getlist(name))
            else:
                self.set_field(name, values[name])

    def calculate(self):
        """
        Validate the current form and, when it passes, run the formula.

        A failed validation clears the previous result so it is never shown
        beside the new errors. Collaborator failures become a one-line error.
        A result holding infinity or NaN, or a formula that overflows, is
        reported as out of range. Anything else raised by the formula becomes
        the generic message.

        Returns:
            str: the resulting status
        """
        validation = validate(self.calculator.form_class, self.form)
        if not validation.is_valid:
            self.result = None
            self.errors = list(validation.errors)
            return self.status

        try:
            result = self.calculator.formula(validation.data)
        except ExternalCollaboratorError as e:
            logger.warning(f"{self.calculator.tool_id}: collaborator failure: {e}")
            self.result = None
            self.errors = [str(e)]
            return self.status
        except OverflowError:
            logger.info(f"{self.calculator.tool_id}: result out of range")
            self.result = None
            self.errors = [OUT_OF_RANGE_ERROR]
            return self.status
        except Exception:
            logger.exception(f"{self.calculator.tool_id}: formula raised")
            self.result = None
            self.errors = [GENERIC_ERROR]
            return self.status

        if not is_finite(result):
            logger.info(f"{self.calculator.tool_id}: result out of range")
            self.result = None
            self.errors = [OUT_OF_RANGE_ERROR]
            return self.status

        self.result = result
        self.errors = []
        return self.status

    def reset(self):
        self.form = copy.deepcopy(self.calculator.defaults)
        self.result = None
        self.errors = []

    def fail(self, message):
        """Show a one-line status in place of a result (e.g. an upload that could not be read)."""
        self.result = None
        self.errors = [message]
