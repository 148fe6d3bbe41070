"""
OpenAI GPT provider implementation.

Provides chat completions using the OpenAI API, with optional JSON
response format for structured replies.

Example:
    from common.ai import OpenAIProvider

    openai = OpenAIProvider(api_key="your-api-key", model="gpt-4.1-mini")
    response = await openai.chat(
        message='{"latestUserMessage": "slept 8h"}',
        system_prompt="Return valid JSON only.",
        json_mode=True,
    )
"""

from typing import Optional, List, Dict, Any

from common.ai.base import AIProvider, AIProviderError


class OpenAIProvider(AIProvider):
    """
    OpenAI GPT provider.

    Uses the OpenAI async client for API calls.
    """

    name = "openai"

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4.1-mini",
        max_retries: int = 2,
        timeout: float = 60.0,
        organization: Optional[str] = None,
    ):
        """
        Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key
            model: Chat model to use (default: gpt-4.1-mini)
            max_retries: Transport-level retries done by the SDK
            timeout: Request timeout in seconds
            organization: Optional OpenAI organization ID
        """
        from openai import AsyncOpenAI

        self.client = AsyncOpenAI(
            api_key=api_key,
            max_retries=max_retries,
            timeout=timeout,
            organization=organization,
        )
        self.model = model

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
        """Send message and get response from OpenAI."""
        from openai import OpenAIError

        messages: List[Dict[str, str]] = []

        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})

        if conversation_history:
            messages.extend(conversation_history)

        messages.append({"role": "user", "content": message})

        params: Dict[str, Any] = {
            "model": kwargs.get("model", self.model),
            "messages": messages,
            "max_tokens": max_tokens,
            "temperature": temperature,
        }

        if json_mode:
            params["response_format"] = {"type": "json_object"}

        # Add optional parameters
        for key in ["stop", "top_p", "seed"]:
            if key in kwargs:
                params[key] = kwargs[key]

        try:
            response = await self.client.chat.completions.create(**params)
        except OpenAIError as e:
            raise AIProviderError(f"OpenAI request failed: {e}", provider=self.name) from e

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""
