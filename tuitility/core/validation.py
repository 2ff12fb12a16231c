"""
Validation rules for calculator forms.

Every tool declares a plain ``wtforms.Form`` whose fields are listed in the
order errors should be reported. ``validate()`` turns a raw FormState into a
ValidationResult without raising, collecting every violated rule in one pass.
"""
import math
from dataclasses import dataclass, field

from werkzeug.datastructures import MultiDict
from wtforms import FloatField, IntegerField
from wtforms.validators import StopValidation, ValidationError


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    errors: tuple = ()
    data: dict = field(default_factory=dict)


def _label(field):
    return field.label.text if field.label else field.name


def _format_bound(value):
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class NumberField(FloatField):
    """FloatField that reports parse failures, NaN and infinity with the field label."""

    def process_formdata(self, valuelist):
        if not valuelist or not str(valuelist[0]).strip():
            self.data = None
            return
        try:
            value = float(str(valuelist[0]).strip())
        except ValueError:
            self.data = None
            raise ValueError(f"{_label(self)} must be a number.")
        if not math.isfinite(value):
            self.data = None
            raise ValueError(f"{_label(self)} must be a number.")
        self.data = value


class IntegerNumberField(IntegerField):
    def process_formdata(self, valuelist):
        if not valuelist or not str(valuelist[0]).strip():
            self.data = None
            return
        try:
            self.data = int(str(valuelist[0]).strip())
        except ValueError:
            self.data = None
            raise ValueError(f"{_label(self)} must be a whole number.")


class Required:
    """Stops the chain when the raw input is blank."""

    def __init__(self, message=None):
        self.message = message
        self.field_flags = {"required": True}

    def __call__(self, form, field):
        if field.raw_data and str(field.raw_data[0]).strip():
            return
        # A parse error already explains the problem
        if field.process_errors:
            raise StopValidation()
        raise StopValidation(self.message or f"{_label(field)} is required.")


class Between:
    def __init__(self, min=None, max=None, message=None):
        self.min = min
        self.max = max
        self.message = message

    def __call__(self, form, field):
        value = field.data
        if value is None:
            return
        if (self.min is not None and value < self.min) or (self.max is not None and value > self.max):
            raise ValidationError(self.message or self._default_message(field))

    def _default_message(self, field):
        label = _label(field)
        if self.min is not None and self.max is not None:
            return f"{label} must be between {_format_bound(self.min)} and {_format_bound(self.max)}."
        if self.min is not None:
            return f"{label} must be at least {_format_bound(self.min)}."
        return f"{label} must be at most {_format_bound(self.max)}."


def AtLeast(min, message=None):
    return Between(min=min, message=message)


def AtMost(max, message=None):
    return Between(max=max, message=message)


class Positive:
    """Rejects zero and negatives so the value is safe to divide by. Later range checks are skipped."""

    def __init__(self, message=None):
        self.message = message

    def __call__(self, form, field):
        if field.data is not None and field.data <= 0:
            raise StopValidation(self.message or f"{_label(field)} must be greater than zero.")


class NonNegative:
    def __init__(self, message=None):
        self.message = message

    def __call__(self, form, field):
        if field.data is not None and field.data < 0:
            raise ValidationError(self.message or f"{_label(field)} cannot be negative.")


def is_blank(field):
    """True when a field was left empty, as opposed to filled in with something invalid."""
    return field.data is None and not field.errors


def is_usable(field):
    return field.data is not None and not field.errors


def to_formdata(form_state):
    """Raw FormState as the MultiDict WTForms expects."""
    formdata = MultiDict()
    for name, value in (form_state or {}).items():
        if isinstance(value, (list, tuple)):
            for item in value:
                formdata.add(name, "" if item is None else str(item))
        else:
            formdata.add(name, "" if value is None else str(value))
    return formdata


def validate(form_class, form_state):
    """
    Run a tool's rules against its FormState.

    Field errors come first, in field declaration order, followed by any
    cross-field messages returned by the form's ``rules()`` method. The
    cross-field rules always run, so a form's ``rules()`` must leave alone
    any field that already failed (see ``is_blank`` and ``is_usable``).

    Returns:
        ValidationResult: ``data`` holds the coerced values when valid
    """
    form = form_class(to_formdata(form_state))
    form.validate()

    errors = []
    for field_obj in form:
        for message in field_obj.errors:
            if message not in errors:
                errors.append(message)

    rules = getattr(form, "rules", None)
    if rules is not None:
        for message in rules():
            if message not in errors:
                errors.append(message)

    if errors:
        return ValidationResult(is_valid=False, errors=tuple(errors))
    return ValidationResult(is_valid=True, data=dict(form.data))
