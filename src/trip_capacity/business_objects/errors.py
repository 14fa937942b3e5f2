# -*- coding: utf-8 -*-
"""
Common exceptions for the business objects layer.
"""


class SchemaError(ValueError):
    """Raised when problem input (text stream/JSON) violates the expected format."""


class StateValidationError(ValueError):
    """Raised when the in-memory state violates domain constraints."""
