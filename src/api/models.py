"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from pydantic import BaseModel, ConfigDict, Field


class SignUpRequest(BaseModel):
    """
    Request model for account sign-up.

    Every field is optional here so that absent fields reach the
    controller and produce a MissingParamError instead of a 422.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    email: str | None = None
    password: str | None = None
    password_confirmation: str | None = Field(
        default=None,
        alias="passwordConfirmation",
        description="Must equal password",
    )

    def to_body(self) -> dict[str, str]:
        """Wire-named fields that were actually sent."""
        return self.model_dump(by_alias=True, exclude_none=True)


class AccountResponse(BaseModel):
    """Response model for a created account. The password hash is not exposed."""

    id: str
    name: str
    email: str


class ErrorResponse(BaseModel):
    """Standard error response model."""

    name: str
    message: str
