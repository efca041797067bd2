"""LLM client abstractions used by intelligence features."""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from typing import Protocol
from urllib.parse import urljoin

import httpx

from inbox_triage.core.config import LlmSettings

LOGGER = logging.getLogger(__name__)


class LLMError(RuntimeError):
    """Raised when the LLM provider fails to respond as expected."""


# Failures a delegate call may surface; services fall back on any of them.
DELEGATE_ERRORS: tuple[type[Exception], ...] = (
    LLMError,
    ValueError,
    TimeoutError,
    OSError,
)


class LLMClient(Protocol):
    """Protocol describing the minimal LLM client behaviour."""

    @property
    def provider_id(self) -> str:
        """Identifier describing the backing model/provider."""
        raise NotImplementedError

    def generate(self, prompt: str, *, system: str | None = None) -> str:
        """Return the raw text completion for ``prompt``."""
        raise NotImplementedError

    def is_available(self) -> bool:
        """Return ``True`` when the provider answers a health check."""
        raise NotImplementedError


@dataclass(slots=True)
class OllamaClient:
    """Thin synchronous client for the Ollama HTTP API."""

    settings: LlmSettings
    http_client: httpx.Client | None = None

    def generate(self, prompt: str, *, system: str | None = None) -> str:
        """Send a completion request to the Ollama server."""
        endpoint = _resolve_endpoint(self.settings.base_url, "api/generate")
        options: dict[str, object] = {"temperature": self.settings.temperature}
        if self.settings.max_output_tokens is not None:
            options["num_predict"] = self.settings.max_output_tokens
        payload: dict[str, object] = {
            "model": self.settings.model,
            "prompt": prompt,
            "stream": False,
            "options": options,
        }
        if system:
            payload["system"] = system

        data: object = None
        last_error: Exception | None = None
        attempts = self.settings.max_attempts
        for attempt in range(1, attempts + 1):
            try:
                response = self._post(endpoint, payload)
                response.raise_for_status()
                data = response.json()
                break
            except httpx.HTTPError as exc:
                last_error = exc
                LOGGER.debug(
                    "Ollama request attempt %s/%s failed: %s", attempt, attempts, exc
                )
            except json.JSONDecodeError as exc:
                raise LLMError("LLM returned invalid JSON") from exc
            except httpx.InvalidURL as exc:
                raise LLMError(f"Invalid LLM endpoint {endpoint!r}") from exc

            if attempt < attempts:
                delay = min(2**attempt, 8)
                time.sleep(delay)

        if data is None:
            raise LLMError("LLM request failed after retries") from last_error
        if not isinstance(data, dict):
            raise LLMError("LLM response was not a JSON object")

        result = data.get("response")
        if not isinstance(result, str):
            raise LLMError("LLM response missing 'response' field")
        return result

    def is_available(self) -> bool:
        """Check the model listing endpoint without raising."""
        try:
            endpoint = _resolve_endpoint(self.settings.base_url, "api/tags")
            response = self._get(endpoint)
        except (httpx.HTTPError, httpx.InvalidURL, LLMError) as exc:
            LOGGER.info("Ollama server check failed: %s", exc)
            return False
        return response.is_success

    @property
    def provider_id(self) -> str:
        """Return a human readable identifier for the configured model."""
        return f"ollama:{self.settings.model}"

    def _post(self, endpoint: str, payload: dict[str, object]) -> httpx.Response:
        timeout = self.settings.timeout_seconds
        if self.http_client is not None:
            return self.http_client.post(endpoint, json=payload, timeout=timeout)
        return httpx.post(endpoint, json=payload, timeout=timeout)

    def _get(self, endpoint: str) -> httpx.Response:
        timeout = self.settings.timeout_seconds
        if self.http_client is not None:
            return self.http_client.get(endpoint, timeout=timeout)
        return httpx.get(endpoint, timeout=timeout)


def _resolve_endpoint(base_url: str, path: str) -> str:
    trimmed = base_url.rstrip("/") + "/"
    try:
        return urljoin(trimmed, path)
    except ValueError as exc:
        raise LLMError(f"Invalid LLM base URL {base_url!r}") from exc


__all__ = ["LLMClient", "OllamaClient", "LLMError", "DELEGATE_ERRORS"]
