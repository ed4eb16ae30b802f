"""
Sign-up controller - validates the request and maps outcomes to envelopes.

Validation order (first failure short-circuits):
1. Required fields present and non-empty, in REQUIRED_FIELDS order
2. password == passwordConfirmation
3. Email format accepted by the EmailValidator port

Any exception raised along the way, including from the use case, is
caught here once and returned as a 500 ServerError.
"""

import logging
from dataclasses import dataclass

from src.domain.ports import AddAccountInput, EmailValidator
from src.domain.registration import RegistrationUseCase

from .errors import InvalidParamError, MissingParamError
from .http import HttpRequest, HttpResponse, bad_request, ok, server_error

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "email", "password", "passwordConfirmation")


@dataclass
class SignUpController:
    """Stateless per-request handler for account sign-up."""

    email_validator: EmailValidator
    registration: RegistrationUseCase

    async def handle(self, request: HttpRequest) -> HttpResponse:
        """
        Validate a sign-up request and register the account.

        Returns:
            200 with the AccountRecord, 400 with a MissingParamError or
            InvalidParamError, or 500 with a ServerError
        """
        try:
            body = request.body
            for field_name in REQUIRED_FIELDS:
                if not body.get(field_name):
                    return bad_request(MissingParamError(field_name))

            name = body["name"]
            email = body["email"]
            password = body["password"]

            if password != body["passwordConfirmation"]:
                return bad_request(InvalidParamError("passwordConfirmation"))

            if not self.email_validator.is_valid(email):
                return bad_request(InvalidParamError("email"))

            record = await self.registration.register(
                AddAccountInput(name=name, email=email, password=password)
            )
            return ok(record)
        except Exception:
            logger.exception("Sign-up request failed")
            return server_error()
