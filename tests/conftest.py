"""Shared fixtures: a fake registration service behind a patched ``requests.get``."""

import json
import threading
from pathlib import Path
from typing import Any, Callable, Dict, Generator, List, Optional, Tuple
from unittest.mock import patch

import pytest

from custom_model_browser import ApiContext, BrowserConfig, PreferenceStore, RegistryClient

ENDPOINT = "http://registry.test"
BASE = f"{ENDPOINT}/v1/model_registrations"


class FakeResponse:
    """The slice of ``requests.Response`` the client uses."""

    def __init__(self, status_code: int, payload: Any = None, text: Optional[str] = None) -> None:
        self.status_code = status_code
        self._payload = payload
        self._text = text
        self.closed = False

    def json(self) -> Any:
        if self._text is not None:
            return json.loads(self._text)
        return self._payload

    def close(self) -> None:
        self.closed = True


class FakeRegistry:
    """Routes GET URLs to canned responses and records every call."""

    def __init__(self) -> None:
        self.routes: Dict[str, Tuple[int, Any, Optional[str]]] = {}
        self.hooks: Dict[str, Callable[[], None]] = {}
        self.calls: List[str] = []
        self._lock = threading.Lock()
        for category in ("LLM", "embedding", "rerank"):
            self.routes[f"{BASE}/{category}"] = (200, [], None)

    def add(self, category: str, summary: Dict[str, Any], descriptor: Optional[Dict[str, Any]] = None) -> None:
        """Register a summary in the list endpoint and its descriptor in the detail endpoint."""
        list_url = f"{BASE}/{category}"
        self.routes[list_url][1].append(summary)
        if descriptor is not None:
            self.routes[f"{list_url}/{summary['model_name']}"] = (200, descriptor, None)

    def respond(self, url: str, status_code: int, payload: Any = None, text: Optional[str] = None) -> None:
        self.routes[url] = (status_code, payload, text)

    def count(self, url: str) -> int:
        return self.calls.count(url)

    def __call__(self, url: str, timeout: Optional[float] = None) -> FakeResponse:
        with self._lock:
            self.calls.append(url)
        hook = self.hooks.get(url)
        if hook is not None:
            hook()
        status_code, payload, text = self.routes.get(url, (404, {"detail": "not found"}, None))
        return FakeResponse(status_code, payload, text)


@pytest.fixture(autouse=True)
def preferences_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep every test's preferences out of the real user state directory."""
    path = tmp_path / "state" / "preferences.yml"
    monkeypatch.setenv("CMB_PREFERENCES_PATH", str(path))
    for name in ("CMB_ENDPOINT", "CMB_TIMEOUT", "CMB_MAX_WORKERS"):
        monkeypatch.delenv(name, raising=False)
    return path


@pytest.fixture
def fake_registry() -> Generator[FakeRegistry, None, None]:
    """Patch ``requests.get`` in the client module with a fake service."""
    registry = FakeRegistry()
    with patch("custom_model_browser.client.requests.get", side_effect=registry):
        yield registry


@pytest.fixture
def client() -> RegistryClient:
    return RegistryClient(BrowserConfig(endpoint=ENDPOINT, timeout=5, max_workers=4))


@pytest.fixture
def api_context() -> ApiContext:
    return ApiContext()


@pytest.fixture
def preferences(preferences_path: Path) -> PreferenceStore:
    return PreferenceStore(str(preferences_path))


def llm(name: str, **extra: Any) -> Dict[str, Any]:
    return {"model_name": name, "model_lang": ["en"], "model_ability": ["chat"], "context_length": 4096, **extra}


def embedding(name: str, **extra: Any) -> Dict[str, Any]:
    return {"model_name": name, "dimensions": 768, "max_tokens": 512, "language": ["en"], **extra}


def rerank(name: str, **extra: Any) -> Dict[str, Any]:
    return {"model_name": name, "model_type": "rerank", "language": ["en"], **extra}
