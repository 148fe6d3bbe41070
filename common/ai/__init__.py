"""
AI module - Pluggable AI providers (Claude, OpenAI).
"""

from common.ai.base import AIProvider, AIProviderError
from common.ai.claude import ClaudeProvider
from common.ai.openai import OpenAIProvider

__all__ = ["AIProvider", "AIProviderError", "ClaudeProvider", "OpenAIProvider"]
