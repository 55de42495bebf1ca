"""Pytest configuration for the providers test suite.

Fixtures:
- ``isolated_env`` (autouse): strips provider credentials and config-file
  variables from the environment and resets the cached config, so tests
  never depend on the developer's shell or a local ``.env``.
- ``log_events``: parsed JSON payloads emitted on the ``unified_providers``
  logger during the test.
- ``sse``: builds an SSE byte body from payload strings.
- ``mock_client``: builds an ``httpx.Client`` backed by ``MockTransport``.
"""

from __future__ import annotations

import json
import logging
from typing import Callable, Iterator, List

import httpx
import pytest

from unified_providers.base.http import close_all_clients
from unified_providers.base.logging import get_logger
from unified_providers.config import reset_config_cache

_ENV_VARS = (
    "OPENAI_API_KEY",
    "OPENAI_MODEL",
    "OPENAI_BASE_URL",
    "OPENAI_API_VERSION",
    "ANTHROPIC_API_KEY",
    "ANTHROPIC_MODEL",
    "ANTHROPIC_BASE_URL",
    "ANTHROPIC_API_VERSION",
    "UNIFIED_PROVIDERS_CONFIG_FILE",
)


class _ListHandler(logging.Handler):
    """Collect structured log payloads for assertions."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.events: List[dict] = []

    def emit(self, record: logging.LogRecord) -> None:
        try:
            payload = json.loads(record.getMessage())
        except ValueError:
            payload = {"event": None, "msg": record.getMessage()}
        payload["_level"] = record.levelname
        self.events.append(payload)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "missing.env"))
    reset_config_cache()
    yield
    reset_config_cache()
    close_all_clients()


@pytest.fixture()
def log_events() -> Iterator[List[dict]]:
    logger = get_logger()
    handler = _ListHandler()
    previous = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    yield handler.events
    logger.removeHandler(handler)
    logger.setLevel(previous)


@pytest.fixture()
def sse() -> Callable[..., bytes]:
    def _build(*payloads: str) -> bytes:
        return "".join(f"data: {p}\n\n" for p in payloads).encode("utf-8")

    return _build


@pytest.fixture()
def mock_client() -> Callable[..., httpx.Client]:
    def _build(handler: Callable[[httpx.Request], httpx.Response], base_url: str = "https://api.test/v1") -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(handler), base_url=base_url)

    return _build
