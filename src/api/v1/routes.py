"""
API v1 routes.

Defines the REST endpoint for account sign-up and serializes the
controller's response envelope to HTTP.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from src.api.dependencies import get_signup_controller
from src.api.models import AccountResponse, ErrorResponse, SignUpRequest
from src.domain.ports import AccountRecord
from src.presentation.http import HttpRequest, HttpResponse
from src.presentation.signup import SignUpController

router = APIRouter(tags=["v1"])


def to_json_response(response: HttpResponse) -> JSONResponse:
    """Serialize an envelope: account without its hash, or the error payload."""
    body = response.body
    if isinstance(body, AccountRecord):
        content = AccountResponse(id=body.id, name=body.name, email=body.email).model_dump()
    else:
        content = body.to_dict()
    return JSONResponse(status_code=response.status_code, content=content)


@router.post(
    "/signup",
    response_model=AccountResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid parameter"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Sign up a new account",
    description="Submit name, email, password and passwordConfirmation. "
    "The password is stored as a bcrypt hash.",
)
async def signup(
    request_data: SignUpRequest,
    controller: SignUpController = Depends(get_signup_controller),
) -> JSONResponse:
    """
    Create an account.

    - **name**: Display name
    - **email**: Valid email address
    - **password**: Plaintext password
    - **passwordConfirmation**: Must equal password
    """
    response = await controller.handle(HttpRequest(body=request_data.to_body()))
    return to_json_response(response)
