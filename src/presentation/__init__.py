"""
Presentation layer - controllers and the response envelope.

Controllers here know nothing about FastAPI; the api package adapts
them to HTTP.
"""

from .errors import InvalidParamError, MissingParamError, PresentationError, ServerError
from .http import HttpRequest, HttpResponse
from .signup import SignUpController

__all__ = [
    "HttpRequest",
    "HttpResponse",
    "InvalidParamError",
    "MissingParamError",
    "PresentationError",
    "ServerError",
    "SignUpController",
]
