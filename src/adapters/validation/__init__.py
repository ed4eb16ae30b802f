"""Validation adapters."""

from .email_format import EmailValidatorAdapter

__all__ = ["EmailValidatorAdapter"]
