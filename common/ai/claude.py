"""
Anthropic Claude AI provider implementation.

Provides chat completions using the Anthropic API.

Example:
    from common.ai import ClaudeProvider

    claude = ClaudeProvider(api_key="your-api-key")
    response = await claude.chat(
        message="Hello, how are you?",
        system_prompt="You are a helpful assistant."
    )
    print(response)
"""

from typing import Optional, List, Dict, Any

from common.ai.base import AIProvider, AIProviderError


class ClaudeProvider(AIProvider):
    """
    Anthropic Claude AI provider.

    Claude has no JSON response mode, so ``json_mode`` only adds an
    instruction to the system prompt. Callers still parse the reply
    defensively.
    """

    name = "claude"

    JSON_INSTRUCTION = "Respond with a single JSON object and nothing else."

    def __init__(
        self,
        api_key: str,
        model: str = "claude-sonnet-4-5-20250929",
        max_retries: int = 2,
        timeout: float = 60.0,
    ):
        """
        Initialize Claude provider.

        Args:
            api_key: Anthropic API key
            model: Model to use (default: claude-sonnet-4-5-20250929)
            max_retries: Transport-level retries done by the SDK
            timeout: Request timeout in seconds
        """
        from anthropic import AsyncAnthropic

        self.client = AsyncAnthropic(
            api_key=api_key,
            max_retries=max_retries,
            timeout=timeout,
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
        """Send message and get response from Claude."""
        from anthropic import AnthropicError

        messages = list(conversation_history) if conversation_history else []
        messages.append({"role": "user", "content": message})

        params: Dict[str, Any] = {
            "model": kwargs.get("model", self.model),
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": messages,
        }

        system = system_prompt or ""
        if json_mode:
            system = f"{system}\n\n{self.JSON_INSTRUCTION}".strip()
        if system:
            params["system"] = system

        # Add any extra parameters
        for key in ["stop_sequences", "top_p", "top_k", "metadata"]:
            if key in kwargs:
                params[key] = kwargs[key]

        try:
            response = await self.client.messages.create(**params)
        except AnthropicError as e:
            raise AIProviderError(f"Claude request failed: {e}", provider=self.name) from e

        return "".join(
            block.text for block in response.content if getattr(block, "type", None) == "text"
        )
