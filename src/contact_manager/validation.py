import re
from dataclasses import dataclass
from typing import Dict, Mapping, Optional


# digits, spaces, dots, dashes and parentheses, optional "+" and extension
PHONE_PATTERN = re.compile(
    r"^\+?[0-9().\-\s]*[0-9][0-9().\-\s]*(\s*(x|ext\.?)\s*[0-9]+)?$",
    re.IGNORECASE,
)
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass(frozen=True)
class FieldRule:
    field: str
    label: str
    max_length: int
    required: bool = False
    pattern: Optional[re.Pattern] = None
    required_message: str = ""
    pattern_message: str = ""

    @property
    def length_message(self) -> str:
        return f"{self.label} must be {self.max_length} characters or fewer."

    def check(self, value: Optional[str]) -> Optional[str]:
        """Return the first error for ``value``, or None when it passes."""
        value = (value or "").strip()
        if not value:
            return self.required_message if self.required else None
        if len(value) > self.max_length:
            return self.length_message
        if self.pattern is not None and not self.pattern.match(value):
            return self.pattern_message
        return None


CONTACT_RULES = (
    FieldRule("first_name", "First name", 50, required=True,
              required_message="Please enter a first name."),
    FieldRule("last_name", "Last name", 50, required=True,
              required_message="Please enter a last name."),
    FieldRule("phone", "Phone", 20, required=True, pattern=PHONE_PATTERN,
              required_message="Please enter a phone number.",
              pattern_message="Please enter a valid phone number."),
    FieldRule("email", "Email", 100, required=True, pattern=EMAIL_PATTERN,
              required_message="Please enter an email address.",
              pattern_message="Please enter a valid email address."),
    FieldRule("organization", "Organization", 50),
)


def validate_contact(values: Mapping[str, Optional[str]]) -> Dict[str, str]:
    """Check submitted contact fields against CONTACT_RULES.

    Returns a mapping of field name to error message, empty when every field
    passes. Only the first failing rule of a field is reported.
    """
    errors: Dict[str, str] = {}
    for rule in CONTACT_RULES:
        message = rule.check(values.get(rule.field))
        if message:
            errors[rule.field] = message
    return errors


def clean_contact_values(values: Mapping[str, Optional[str]]) -> Dict[str, Optional[str]]:
    """Strip submitted values; a blank organization becomes None."""
    cleaned: Dict[str, Optional[str]] = {}
    for rule in CONTACT_RULES:
        cleaned[rule.field] = (values.get(rule.field) or "").strip()
    cleaned["organization"] = cleaned["organization"] or None
    return cleaned
