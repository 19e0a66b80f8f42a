# catalog/utils/validators.py
"""
Shared pieces of the WTForms-based catalog forms.

Fields are stripped by a filter before any validator runs. Length and
presence checks look at the text as typed. Fields listed in
``escaped_fields`` are HTML-escaped only when ``values()`` hands them to a
service for storage, so stored text is escaped once. Column limits are
checked against the escaped length by ``EscapedLength``.
"""

from flask_wtf import FlaskForm
from markupsafe import escape
from wtforms import DateField
from wtforms.validators import ValidationError


def strip(value):
    return value.strip() if isinstance(value, str) else value


def escape_html(value):
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return [escape_html(v) for v in value]
    return str(escape(value))


class EscapedLength:
    """Fails when the field would not fit a ``String(max)`` column once escaped."""

    def __init__(self, max: int, message: str):
        self.max = max
        self.message = message

    def __call__(self, form, field):
        if field.data and len(escape_html(field.data)) > self.max:
            raise ValidationError(self.message)


class IsoDateField(DateField):
    """``YYYY-MM-DD`` only; an unparseable value reports ``message``."""

    def __init__(self, label=None, validators=None, message="Invalid date", **kwargs):
        super().__init__(label, validators, format="%Y-%m-%d", **kwargs)
        self.invalid_message = message

    def process_formdata(self, valuelist):
        try:
            super().process_formdata([v.strip() for v in valuelist])
        except ValueError as e:
            raise ValueError(self.invalid_message) from e


class CatalogForm(FlaskForm):
    escaped_fields = ()

    def add_error(self, name: str, message: str):
        # field.errors is a list once validate() has run
        self[name].errors.append(message)

    def field_errors(self) -> list:
        """Every error as ``{"field", "message"}``, in field order."""
        return [{"field": field.name, "message": message} for field in self for message in field.errors]

    @property
    def is_valid(self) -> bool:
        return not self.field_errors()

    def values(self) -> dict:
        data = {name: field.data for name, field in self._fields.items() if name != "csrf_token"}
        for name in self.escaped_fields:
            data[name] = escape_html(data.get(name))
        return data


def parse_id(value):
    """Form values arrive as text; anything that is not a positive integer is no id."""
    try:
        entity_id = int(str(value).strip())
    except (TypeError, ValueError):
        return None
    return entity_id if entity_id > 0 else None
