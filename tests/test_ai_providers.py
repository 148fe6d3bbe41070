"""Unit tests for the text-generation providers."""

import pytest
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

from common.ai import AIProviderError, ClaudeProvider, OpenAIProvider


def _openai_response(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


class TestOpenAIProvider:
    @pytest.fixture
    def provider(self):
        provider = OpenAIProvider(api_key="test-key")
        provider.client = MagicMock()
        provider.client.chat.completions.create = AsyncMock(return_value=_openai_response('{"ok": true}'))
        return provider

    @pytest.mark.asyncio
    async def test_json_mode_requests_json_object(self, provider):
        reply = await provider.chat("hi", system_prompt="Be brief.", json_mode=True, temperature=0.2)

        params = provider.client.chat.completions.create.call_args.kwargs
        assert reply == '{"ok": true}'
        assert params["response_format"] == {"type": "json_object"}
        assert params["temperature"] == 0.2
        assert params["messages"] == [
            {"role": "system", "content": "Be brief."},
            {"role": "user", "content": "hi"},
        ]

    @pytest.mark.asyncio
    async def test_empty_choices_returns_empty_string(self, provider):
        provider.client.chat.completions.create.return_value = SimpleNamespace(choices=[])
        assert await provider.chat("hi") == ""

    @pytest.mark.asyncio
    async def test_sdk_error_wrapped(self, provider):
        from openai import OpenAIError

        provider.client.chat.completions.create.side_effect = OpenAIError("boom")

        with pytest.raises(AIProviderError) as exc_info:
            await provider.chat("hi")

        assert exc_info.value.provider == "openai"

    @pytest.mark.asyncio
    async def test_health_check_reports_failure(self, provider):
        from openai import OpenAIError

        assert await provider.health_check() is True

        provider.client.chat.completions.create.side_effect = OpenAIError("down")
        assert await provider.health_check() is False


class TestClaudeProvider:
    @pytest.fixture
    def provider(self):
        provider = ClaudeProvider(api_key="test-key")
        provider.client = MagicMock()
        provider.client.messages.create = AsyncMock(return_value=SimpleNamespace(content=[
            SimpleNamespace(type="text", text='{"ok": '),
            SimpleNamespace(type="text", text="true}"),
        ]))
        return provider

    @pytest.mark.asyncio
    async def test_text_blocks_joined(self, provider):
        assert await provider.chat("hi") == '{"ok": true}'

    @pytest.mark.asyncio
    async def test_json_mode_adds_system_instruction(self, provider):
        await provider.chat("hi", system_prompt="Be brief.", json_mode=True)

        params = provider.client.messages.create.call_args.kwargs
        assert params["system"] == f"Be brief.\n\n{ClaudeProvider.JSON_INSTRUCTION}"
        assert params["messages"] == [{"role": "user", "content": "hi"}]

    @pytest.mark.asyncio
    async def test_sdk_error_wrapped(self, provider):
        from anthropic import AnthropicError

        provider.client.messages.create.side_effect = AnthropicError("boom")

        with pytest.raises(AIProviderError) as exc_info:
            await provider.chat("hi")

        assert exc_info.value.provider == "claude"
