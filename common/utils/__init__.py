"""
Utilities module - Common helpers for API responses, exceptions, and model output parsing.
"""

from common.utils.responses import success_response, error_response
from common.utils.exceptions import (
    APIException,
    ValidationException,
    InternalServerException,
)
from common.utils.json_parsing import parse_json_object

__all__ = [
    "success_response",
    "error_response",
    "APIException",
    "ValidationException",
    "InternalServerException",
    "parse_json_object",
]
