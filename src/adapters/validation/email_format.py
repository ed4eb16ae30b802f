"""
Email validator adapter - Implements EmailValidator protocol.

Backed by the email-validator library (the same one pydantic's EmailStr
uses). Deliverability checks are disabled: no DNS lookups, so the check
is purely syntactic and side-effect free.
"""

from email_validator import EmailNotValidError, validate_email


class EmailValidatorAdapter:
    """Implements EmailValidator protocol via email-validator."""

    def is_valid(self, email: str) -> bool:
        if not isinstance(email, str):
            return False
        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError:
            return False
        return True
