"""
Abstract AI provider interface.

Defines the contract that text-generation providers must implement.
Callers treat everything a provider returns as untrusted text: structured
output is requested through the prompt and parsed afterwards.

Example:
    from common.ai import AIProvider, ClaudeProvider, OpenAIProvider

    def get_ai_provider(settings) -> AIProvider:
        if settings.AI_PROVIDER == "openai":
            return OpenAIProvider(api_key=settings.OPENAI_API_KEY)
        return ClaudeProvider(api_key=settings.CLAUDE_API_KEY)
"""

from abc import ABC, abstractmethod
from typing import Optional, List, Dict, Any


class AIProviderError(Exception):
    """Raised when the upstream text-generation service fails at transport level."""

    def __init__(self, message: str, provider: Optional[str] = None):
        super().__init__(message)
        self.provider = provider


class AIProvider(ABC):
    """
    Abstract AI provider interface.

    Implement this for different LLM services.
    """

    name: str = "ai"

    @abstractmethod
    async def chat(
        self,
        message: str,
        system_prompt: Optional[str] = None,
        conversation_history: Optional[List[Dict[str, str]]] = None,
        max_tokens: int = 1024,
        temperature: float = 0.7,
        json_mode: bool = False,
        **kwargs: Any,
    ) -> str:
        """
        Send a message and get a response.

        Args:
            message: The user's message
            system_prompt: Optional system instructions
            conversation_history: Previous messages in the conversation
                Format: [{"role": "user"|"assistant", "content": "..."}]
            max_tokens: Maximum tokens in the response
            temperature: Sampling temperature (0-1)
            json_mode: Ask the provider for a JSON object when it supports it
            **kwargs: Provider-specific options

        Returns:
            The AI's response text (may be empty)

        Raises:
            AIProviderError: If the service cannot be reached or errors out
        """
        pass

    async def health_check(self) -> bool:
        """
        Check if the AI service is available.

        Returns:
            True if the service is healthy and responding
        """
        try:
            await self.chat("ping", max_tokens=5)
            return True
        except AIProviderError:
            return False
