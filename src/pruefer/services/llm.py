"""Model backends: one interface, one adapter per provider.

Each adapter turns (system instruction, user prompt) into reply text or raises
``BackendError``. Adapters never retry; SDK retries are switched off so a
failure reaches the caller, who may pick another backend.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator

import anthropic
import httpx
import openai

from pruefer.config import Settings
from pruefer.exceptions import BackendError

logger = logging.getLogger(__name__)


def _build_http_client(settings: Settings) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=httpx.Timeout(
            connect=10.0,
            read=settings.llm_timeout,
            write=30.0,
            pool=10.0,
        )
    )


class ChatBackend(ABC):
    """A text-generation provider."""

    name: str = ""

    @abstractmethod
    async def generate(self, system_prompt: str, user_prompt: str) -> str:
        """Return the model's reply text, or raise ``BackendError``."""

    @property
    def is_configured(self) -> bool:
        return True

    async def close(self) -> None:
        return None


class OpenAIChatBackend(ChatBackend):
    """Chat Completions API; the instruction goes in a system message."""

    name = "openai"

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient | None = None) -> None:
        self._api_key = settings.openai_api_key
        self._model = settings.openai_model
        self._max_tokens = settings.llm_max_tokens
        self._temperature = settings.llm_temperature
        self._client = openai.AsyncOpenAI(
            api_key=self._api_key,
            base_url=settings.openai_base_url,
            max_retries=0,
            http_client=http_client or _build_http_client(settings),
        )

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    async def generate(self, system_prompt: str, user_prompt: str) -> str:
        if not self.is_configured:
            raise BackendError("OpenAI API key not configured")
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                max_tokens=self._max_tokens,
                temperature=self._temperature,
            )
        except openai.OpenAIError as e:
            raise BackendError(f"OpenAI request failed: {e}") from e

        if not response.choices:
            raise BackendError("OpenAI returned no choices")
        content = response.choices[0].message.content or ""
        logger.debug("OpenAI response (first 200 chars): %s", content[:200])
        return content

    async def close(self) -> None:
        await self._client.close()


class AnthropicChatBackend(ChatBackend):
    """Messages API; the instruction is prepended to the user message."""

    name = "anthropic"

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient | None = None) -> None:
        self._api_key = settings.anthropic_api_key
        self._model = settings.anthropic_model
        self._max_tokens = settings.llm_max_tokens
        self._client = anthropic.AsyncAnthropic(
            api_key=self._api_key,
            base_url=settings.anthropic_base_url,
            max_retries=0,
            http_client=http_client or _build_http_client(settings),
        )

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    async def generate(self, system_prompt: str, user_prompt: str) -> str:
        if not self.is_configured:
            raise BackendError("Anthropic API key not configured")
        try:
            response = await self._client.messages.create(
                model=self._model,
                max_tokens=self._max_tokens,
                messages=[
                    {"role": "user", "content": f"{system_prompt}\n\n{user_prompt}"},
                ],
            )
        except anthropic.AnthropicError as e:
            raise BackendError(f"Anthropic request failed: {e}") from e

        content = "".join(
            block.text for block in response.content if block.type == "text"
        )
        logger.debug("Anthropic response (first 200 chars): %s", content[:200])
        return content

    async def close(self) -> None:
        await self._client.close()


BackendFactory = Callable[[Settings], ChatBackend]

BACKEND_FACTORIES: dict[str, BackendFactory] = {
    OpenAIChatBackend.name: OpenAIChatBackend,
    AnthropicChatBackend.name: AnthropicChatBackend,
}


class BackendRegistry:
    """Backends keyed by the selector string a caller sends."""

    def __init__(self) -> None:
        self._backends: dict[str, ChatBackend] = {}

    def register(self, name: str, backend: ChatBackend) -> None:
        if name in self._backends:
            raise ValueError(f"Backend already registered: {name}")
        self._backends[name] = backend

    def get(self, name: str) -> ChatBackend | None:
        return self._backends.get(name)

    def names(self) -> list[str]:
        return list(self._backends)

    def alternative_to(self, name: str) -> str | None:
        """The first other registered backend, suggested after ``name`` fails."""
        for other in self._backends:
            if other != name:
                return other
        return None

    def items(self) -> Iterator[tuple[str, ChatBackend]]:
        return iter(self._backends.items())

    def __contains__(self, name: object) -> bool:
        return name in self._backends

    async def close(self) -> None:
        for name, backend in self._backends.items():
            try:
                await backend.close()
            except Exception:
                logger.exception("Failed to close backend %s", name)


def create_backends(
    settings: Settings,
    factories: dict[str, BackendFactory] | None = None,
) -> BackendRegistry:
    """Build the backends listed in ``settings.enabled_backends``."""
    factories = factories or BACKEND_FACTORIES
    registry = BackendRegistry()
    for name in settings.enabled_backends:
        factory = factories.get(name)
        if factory is None:
            raise ValueError(
                f"Unknown backend {name!r}; available: {', '.join(factories)}"
            )
        registry.register(name, factory(settings))

    if settings.default_backend not in registry:
        raise ValueError(
            f"Default backend {settings.default_backend!r} is not enabled"
        )
    logger.info(
        "Backends registered: %s (default=%s)",
        ", ".join(registry.names()),
        settings.default_backend,
    )
    return registry
