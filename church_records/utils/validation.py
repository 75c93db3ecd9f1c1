import math
import re
from datetime import date

from church_records.exceptions import ValidationError

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,10}$")


def is_email_valid(email: str) -> bool:
    return bool(EMAIL_PATTERN.match(email))


class FieldValidator:
    """Collects per-field errors while cleaning an input payload."""

    def __init__(self, data):
        self.data = data if isinstance(data, dict) else {}
        self.errors = {}
        self.cleaned = {}

    def _raw(self, field):
        value = self.data.get(field)
        if isinstance(value, str):
            value = value.strip()
            if value == "":
                return None
        return value

    def text(self, field, required=False, min_length=None, label=None):
        label = label or field.replace("_", " ").capitalize()
        value = self._raw(field)
        if value is None:
            if required:
                self.errors[field] = f"{label} is required"
            self.cleaned[field] = None
            return None
        if not isinstance(value, str):
            self.errors[field] = f"{label} must be text"
            return None
        if min_length and len(value) < min_length:
            self.errors[field] = f"{label} must be at least {min_length} characters"
            return None
        self.cleaned[field] = value
        return value

    def email(self, field="email"):
        value = self.text(field, label="Email")
        if value is not None and not is_email_valid(value):
            self.errors[field] = "Invalid email"
            self.cleaned.pop(field, None)
        return value

    def reference(self, field, label):
        value = self._raw(field)
        if value is None:
            self.errors[field] = f"{label} is required"
            return None
        if isinstance(value, str):
            try:
                value = int(value)
            except ValueError:
                self.errors[field] = f"{label} must be a positive integer"
                return None
        if not isinstance(value, int) or isinstance(value, bool) or value < 1:
            self.errors[field] = f"{label} must be a positive integer"
            return None
        self.cleaned[field] = value
        return value

    def amount(self, field="amount"):
        value = self._raw(field)
        if value is None:
            self.errors[field] = "Amount is required"
            return None
        if isinstance(value, bool):
            self.errors[field] = "Invalid number provided"
            return None
        try:
            value = float(value)
        except (TypeError, ValueError):
            self.errors[field] = "Invalid number provided"
            return None
        if not math.isfinite(value):
            self.errors[field] = "Invalid number provided"
            return None
        if value <= 0:
            self.errors[field] = "Amount must be greater than 0"
            return None
        self.cleaned[field] = value
        return value

    def iso_date(self, field, default=None):
        value = self._raw(field)
        if value is None:
            self.cleaned[field] = default
            return default
        if isinstance(value, date):
            value = value.isoformat()
        try:
            value = date.fromisoformat(value).isoformat()
        except (TypeError, ValueError):
            self.errors[field] = "Must be a date in YYYY-MM-DD format"
            return None
        self.cleaned[field] = value
        return value

    def timestamps(self):
        """Optional caller-supplied created_at/modified_at."""
        for field in ("created_at", "modified_at"):
            value = self.data.get(field)
            if value is None:
                continue
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                self.errors[field] = "Must be a non-negative integer timestamp"
                continue
            self.cleaned[field] = value
        created_at = self.cleaned.get("created_at")
        modified_at = self.cleaned.get("modified_at")
        if created_at is not None and modified_at is not None and created_at > modified_at:
            self.errors["modified_at"] = "Must not be earlier than created_at"

    def identifier(self, field="id"):
        """Optional caller-supplied primary key."""
        value = self.data.get(field)
        if value is None:
            return None
        if not isinstance(value, int) or isinstance(value, bool) or value < 1:
            self.errors[field] = "Must be a positive integer"
            return None
        self.cleaned[field] = value
        return value

    def raise_if_invalid(self):
        if self.errors:
            raise ValidationError(self.errors)
        return self.cleaned
