import json

import pytest
from fastapi.testclient import TestClient

from pruefer.config import Settings
from pruefer.services.evaluator import EvaluatorService
from pruefer.services.llm import BackendRegistry, ChatBackend
from pruefer.services.task_catalog import TaskCatalog

SAMPLE_EVALUATION_JSON = {
    "bewertung": {"K": 2, "T": 2, "L": 4, "F": 3, "gesamt": 11},
    "feedback": {
        "positiv": ["Klare Meinung", "Alle vier Punkte behandelt"],
        "verbesserungen": ["Mehr Konnektoren verwenden, z. B. 'außerdem', 'jedoch'"],
    },
    "korrekturen": [
        {
            "original": "wegen dem Druck",
            "korrigiert": "wegen des Drucks",
            "erklaerung": "'wegen' verlangt im Standarddeutschen den Genitiv.",
        }
    ],
    "tipps": ["Schluss mit Zusammenfassung", "Beispiele aus dem Alltag nennen"],
}

_SENTENCE = (
    "Ich finde dass Eltern heute mehr Unterstützung brauchen weil Beruf und "
    "Familie oft schwer zu vereinbaren sind"
).split()


def make_text(word_count: int) -> str:
    """German filler text with exactly ``word_count`` words."""
    return " ".join(_SENTENCE[i % len(_SENTENCE)] for i in range(word_count))


class FakeBackend(ChatBackend):
    """Test double that records calls and returns a canned reply or raises."""

    def __init__(
        self,
        name: str,
        reply: str = "",
        error: Exception | None = None,
        configured: bool = True,
    ) -> None:
        self.name = name
        self.reply = reply
        self.error = error
        self.configured = configured
        self.calls: list[tuple[str, str]] = []
        self.closed = False

    @property
    def is_configured(self) -> bool:
        return self.configured

    async def generate(self, system_prompt: str, user_prompt: str) -> str:
        self.calls.append((system_prompt, user_prompt))
        if self.error is not None:
            raise self.error
        return self.reply

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def settings() -> Settings:
    return Settings(
        openai_api_key="test-openai-key",
        anthropic_api_key="test-anthropic-key",
        default_backend="openai",
        enabled_backends=["openai", "anthropic"],
    )


@pytest.fixture
def catalog() -> TaskCatalog:
    return TaskCatalog.default()


@pytest.fixture
def openai_backend() -> FakeBackend:
    return FakeBackend(
        "openai",
        reply="Hier ist die Bewertung:\n" + json.dumps(SAMPLE_EVALUATION_JSON, ensure_ascii=False),
    )


@pytest.fixture
def anthropic_backend() -> FakeBackend:
    return FakeBackend("anthropic", reply=json.dumps(SAMPLE_EVALUATION_JSON, ensure_ascii=False))


@pytest.fixture
def backends(openai_backend: FakeBackend, anthropic_backend: FakeBackend) -> BackendRegistry:
    registry = BackendRegistry()
    registry.register("openai", openai_backend)
    registry.register("anthropic", anthropic_backend)
    return registry


@pytest.fixture
def evaluator(catalog: TaskCatalog, backends: BackendRegistry, settings: Settings) -> EvaluatorService:
    return EvaluatorService(catalog, backends, settings)


@pytest.fixture
def test_app(catalog: TaskCatalog, backends: BackendRegistry, evaluator: EvaluatorService):
    """Create a test FastAPI app with fake backends."""
    from fastapi import FastAPI

    from pruefer.exceptions import PrueferError
    from pruefer.main import pruefer_error_handler
    from pruefer.routers.evaluation import router as evaluation_router
    from pruefer.routers.health import router as health_router
    from pruefer.routers.task import router as task_router

    app = FastAPI()
    app.state.task_catalog = catalog
    app.state.backends = backends
    app.state.evaluator = evaluator
    app.include_router(task_router)
    app.include_router(evaluation_router)
    app.include_router(health_router)
    app.add_exception_handler(PrueferError, pruefer_error_handler)
    return app


@pytest.fixture
def client(test_app) -> TestClient:
    return TestClient(test_app)
