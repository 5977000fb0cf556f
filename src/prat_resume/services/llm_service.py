from __future__ import annotations

import json
import os
from typing import Any

from prat_resume.services.llm_providers import (
    GeminiProvider,
    LLMError,
    LLMProvider,
)

"""LLM service with pluggable providers (Gemini by default)."""


def llm_configured() -> bool:
    """Return whether credentials for the configured provider are present."""
    provider_name = os.environ.get("LLM_PROVIDER", "gemini").lower()
    if provider_name == "gemini":
        return bool(os.environ.get("GEMINI_API_KEY"))
    return False


class LLMService:
    def __init__(self, provider: LLMProvider | None = None) -> None:
        """Initialize LLM service with a specific provider.
        Args:
            provider: LLM provider instance
        """
        self.provider = provider or LLMService._get_default_llm_provider_from_env()

    @staticmethod
    def _get_default_llm_provider_from_env() -> LLMProvider:
        """Get the configured LLM provider.

        Returns:
            An instance of the configured LLM provider.
        """
        provider_name = os.environ.get("LLM_PROVIDER", "gemini").lower()

        if provider_name == "gemini":
            return GeminiProvider()
        raise LLMError(f"Unknown LLM provider: {provider_name}.")

    def build_prompt(self, system_instructions: str, user_content: str) -> str:
        """Construct a full prompt with system and user parts.

        Args:
            system_instructions: System-level instructions
            user_content: User-provided content

        Returns:
            The complete formatted prompt.
        """
        return f"System instruction:\n{system_instructions}\n\nUser content:\n{user_content}"

    def generate_llm_response(
        self,
        system_instructions: str,
        user_content: str,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        seed: int | None = None,
        response_schema: dict[str, Any] | None = None,
    ) -> str:
        """Build a prompt and send it to the LLM in one step.

        Args:
            system_instructions: System-level instructions.
            user_content: User content.
            temperature: Controls randomness (0.0-2.0). Lower = more deterministic.
            max_tokens: Maximum response length. None = provider default.
            seed: Random seed for reproducibility (if supported by provider).
            response_schema: JSON schema for structured output, if any.

        Returns:
            The text response from the LLM.
        """
        prompt = self.build_prompt(system_instructions, user_content)
        config = self.provider.generate_llm_config(
            temperature, max_tokens, seed, response_schema
        )
        return self.provider.send_prompt(prompt, config)

    def generate_json_response(
        self,
        system_instructions: str,
        user_content: str,
        response_schema: dict[str, Any],
        temperature: float = 0.7,
    ) -> Any:
        """Request structured output and return the decoded JSON value.

        Raises:
            LLMError: If the provider fails, or the response is empty or not JSON.
        """
        text = self.generate_llm_response(
            system_instructions=system_instructions,
            user_content=user_content,
            temperature=temperature,
            response_schema=response_schema,
        )
        if not text:
            raise LLMError("LLM returned an empty response")
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise LLMError(f"LLM returned malformed JSON: {e}") from e
