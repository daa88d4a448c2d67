# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Text generation through OpenAI, Gemini or Anthropic.

Provider choice: the one requested by the node, otherwise the first of
openai, gemini, anthropic whose API key is set. Without a key for the
chosen provider a mock response is returned.
"""

from typing import Any, Dict, Optional

from anthropic import AsyncAnthropic, AnthropicError
from openai import AsyncOpenAI, OpenAIError

from nodeflow.core.logging import get_engine_logger
from nodeflow.engine.exceptions import ConnectorError
from .base import Connector

logger = get_engine_logger("connectors.ai")

PROVIDERS = ("openai", "gemini", "anthropic")


class AIConnector(Connector):
    name = "ai"
    label = "AI provider"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._openai: Optional[AsyncOpenAI] = None
        self._anthropic: Optional[AsyncAnthropic] = None

    def _api_key(self, provider: str) -> Optional[str]:
        return {
            "openai": self.credentials.openai_api_key,
            "gemini": self.credentials.gemini_api_key,
            "anthropic": self.credentials.anthropic_api_key,
        }.get(provider)

    def _default_model(self, provider: str) -> str:
        return {
            "openai": self.config.openai_model,
            "gemini": self.config.gemini_model,
            "anthropic": self.config.anthropic_model,
        }[provider]

    def select_provider(self, requested: Optional[str] = None) -> str:
        if requested in PROVIDERS:
            return requested
        for provider in PROVIDERS:
            if self._api_key(provider):
                return provider
        return "openai"

    @property
    def configured(self) -> bool:
        return any(self._api_key(provider) for provider in PROVIDERS)

    async def generate(
        self,
        prompt: str,
        provider: Optional[str] = None,
        model: Optional[str] = None,
        mock_prompt: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Generate a completion for prompt.

        Args:
            prompt: Full prompt sent to the provider
            provider: Requested provider (openai, gemini, anthropic)
            model: Model override; provider default when omitted
            mock_prompt: Text echoed in the mock response (defaults to prompt)
        """
        provider = self.select_provider(provider)

        if not self._api_key(provider):
            logger.warning(f"{provider} API key not configured, returning mock response")
            return {
                "response": f"AI-generated response for: {mock_prompt if mock_prompt is not None else prompt}",
                "mock": True,
                "simulated": True,
                "provider": provider,
            }

        model = model or self._default_model(provider)

        if provider == "gemini":
            text = await self._generate_gemini(prompt, model)
        elif provider == "anthropic":
            text = await self._generate_anthropic(prompt, model)
        else:
            text = await self._generate_openai(prompt, model)

        return {"response": text, "model": model, "provider": provider}

    async def _generate_openai(self, prompt: str, model: str) -> str:
        if self._openai is None:
            self._openai = AsyncOpenAI(api_key=self.credentials.openai_api_key)

        try:
            completion = await self._openai.chat.completions.create(
                model=model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=self.config.ai_max_tokens,
            )
        except OpenAIError as e:
            raise ConnectorError(self.name, f"OpenAI API error: {e}") from e

        if not completion.choices:
            return ""
        return completion.choices[0].message.content or ""

    async def _generate_anthropic(self, prompt: str, model: str) -> str:
        if self._anthropic is None:
            self._anthropic = AsyncAnthropic(api_key=self.credentials.anthropic_api_key)

        try:
            message = await self._anthropic.messages.create(
                model=model,
                max_tokens=self.config.ai_max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except AnthropicError as e:
            raise ConnectorError(self.name, f"Anthropic API error: {e}") from e

        return "".join(block.text for block in message.content if getattr(block, "type", None) == "text")

    async def _generate_gemini(self, prompt: str, model: str) -> str:
        response = await self._request(
            "POST",
            f"{self.config.gemini_api_url}/models/{model}:generateContent",
            params={"key": self.credentials.gemini_api_key},
            json={"contents": [{"parts": [{"text": prompt}]}]},
        )
        data = response.json()

        candidates = data.get("candidates") or []
        if not candidates:
            return ""
        parts = candidates[0].get("content", {}).get("parts") or []
        return "".join(part.get("text", "") for part in parts)
