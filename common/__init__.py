"""
Common library for reusable infrastructure components.

This package provides generic modules that can be used across projects:

- ai: Pluggable AI providers (Claude, OpenAI)
- utils: Standard responses, exceptions, model output parsing
- config: Base settings class
"""

from common.ai import AIProvider, AIProviderError, ClaudeProvider, OpenAIProvider
from common.utils import (
    success_response,
    error_response,
    APIException,
    ValidationException,
    InternalServerException,
    parse_json_object,
)
from common.config import BaseAppSettings

__all__ = [
    # AI
    "AIProvider",
    "AIProviderError",
    "ClaudeProvider",
    "OpenAIProvider",
    # Utils
    "success_response",
    "error_response",
    "APIException",
    "ValidationException",
    "InternalServerException",
    "parse_json_object",
    # Config
    "BaseAppSettings",
]
