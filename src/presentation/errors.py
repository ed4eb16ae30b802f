"""
Presentation errors - Semantic error types returned by controllers.

Each error is identifiable by its class name, which is also the "name"
field of the serialized payload sent back to the client.
"""


class PresentationError(Exception):
    """Base class for errors returned in a response envelope."""

    def to_dict(self) -> dict[str, str]:
        """Serializable payload: error kind plus a stable message."""
        return {"name": type(self).__name__, "message": str(self)}


class MissingParamError(PresentationError):
    """A required request field is absent or empty."""

    def __init__(self, param_name: str) -> None:
        super().__init__(f"Missing param: {param_name}")
        self.param_name = param_name


class InvalidParamError(PresentationError):
    """A request field is present but semantically wrong."""

    def __init__(self, param_name: str) -> None:
        super().__init__(f"Invalid param: {param_name}")
        self.param_name = param_name


class ServerError(PresentationError):
    """Unexpected fault. Carries no detail about the underlying cause."""

    def __init__(self) -> None:
        super().__init__("Internal server error")
