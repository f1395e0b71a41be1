from __future__ import annotations

import asyncio

import pytest

from ai3 import (
    AI3Settings,
    CacheExpirySweeper,
    InMemoryQueryCache,
    RequestOrchestrator,
    SessionStore,
    create_cache_sweeper_from_env,
    create_orchestrator_from_env,
    create_query_cache_from_env,
    create_session_store_from_env,
)
from ai3.compute import LiteLLMCompute, OpenAICompute
from ai3.errors import ConfigurationError

_ENV_KEYS = [
    "AI3_MAX_SESSIONS",
    "AI3_EVICTION_STRATEGY",
    "AI3_CACHE_TTL_S",
    "AI3_CACHE_MAX_SIZE",
    "AI3_CACHE_SWEEP_INTERVAL_S",
    "AI3_COMPUTE_PROVIDER",
    "AI3_COMPUTE_MODEL",
    "AI3_COMPUTE_API_KEY",
    "AI3_COMPUTE_API_BASE_URL",
    "AI3_COMPUTE_TIMEOUT_S",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


class _Echo:
    provider_id = "echo"

    async def compute(self, prompt: str) -> str:
        return prompt.upper()


def test_settings_defaults_without_env():
    settings = AI3Settings.from_env()
    assert settings == AI3Settings()
    assert settings.max_sessions == 10
    assert settings.eviction_strategy == "oldest"
    assert settings.cache_sweep_interval_s is None


def test_settings_read_env_values(monkeypatch):
    monkeypatch.setenv("AI3_MAX_SESSIONS", "3")
    monkeypatch.setenv("AI3_EVICTION_STRATEGY", "least_recently_used")
    monkeypatch.setenv("AI3_CACHE_TTL_S", "1.5")
    monkeypatch.setenv("AI3_CACHE_MAX_SIZE", "0")
    monkeypatch.setenv("AI3_CACHE_SWEEP_INTERVAL_S", "60")
    monkeypatch.setenv("AI3_COMPUTE_PROVIDER", "openai")
    monkeypatch.setenv("AI3_COMPUTE_API_KEY", "  sk-test  ")

    settings = AI3Settings.from_env()

    assert settings.max_sessions == 3
    assert settings.eviction_strategy == "least_recently_used"
    assert settings.cache_ttl_s == 1.5
    assert settings.cache_max_size == 0
    assert settings.cache_sweep_interval_s == 60.0
    assert settings.compute_provider == "openai"
    assert settings.compute_api_key == "sk-test"


def test_settings_reject_unparseable_numbers(monkeypatch):
    monkeypatch.setenv("AI3_MAX_SESSIONS", "many")
    with pytest.raises(ConfigurationError, match="AI3_MAX_SESSIONS"):
        AI3Settings.from_env()


def test_store_factories_follow_env(monkeypatch):
    monkeypatch.setenv("AI3_MAX_SESSIONS", "2")
    monkeypatch.setenv("AI3_CACHE_TTL_S", "9")
    monkeypatch.setenv("AI3_CACHE_MAX_SIZE", "4")

    store = create_session_store_from_env()
    cache = create_query_cache_from_env()

    assert isinstance(store, SessionStore)
    assert store.max_sessions == 2
    assert isinstance(cache, InMemoryQueryCache)
    assert cache.ttl_s == 9.0
    assert cache.max_size == 4


def test_unknown_eviction_strategy_from_env_fails(monkeypatch):
    monkeypatch.setenv("AI3_EVICTION_STRATEGY", "random")
    with pytest.raises(ConfigurationError, match="Unknown eviction strategy"):
        create_session_store_from_env()


def test_sweeper_factory_is_opt_in(monkeypatch):
    cache = InMemoryQueryCache()
    assert create_cache_sweeper_from_env(cache) is None

    monkeypatch.setenv("AI3_CACHE_SWEEP_INTERVAL_S", "30")
    sweeper = create_cache_sweeper_from_env(cache)
    assert isinstance(sweeper, CacheExpirySweeper)
    assert not sweeper.is_running


def test_orchestrator_factory_with_injected_compute():
    orchestrator = create_orchestrator_from_env(compute=_Echo())

    assert isinstance(orchestrator, RequestOrchestrator)
    result = asyncio.run(
        orchestrator.process_request({"action": "cached-compute", "payload": "hey"})
    )
    assert result == "HEY"
    assert orchestrator.stats()["cache_stats"]["count"] == 1


def test_orchestrator_factory_resolves_provider_from_env(monkeypatch):
    monkeypatch.setenv("AI3_COMPUTE_PROVIDER", "openai")
    orchestrator = create_orchestrator_from_env()
    assert isinstance(orchestrator._compute, OpenAICompute)  # noqa: SLF001

    monkeypatch.delenv("AI3_COMPUTE_PROVIDER")
    orchestrator = create_orchestrator_from_env()
    assert isinstance(orchestrator._compute, LiteLLMCompute)  # noqa: SLF001


def test_orchestrator_factory_unknown_provider(monkeypatch):
    monkeypatch.setenv("AI3_COMPUTE_PROVIDER", "bad-provider")
    with pytest.raises(ConfigurationError, match="Unknown compute provider"):
        create_orchestrator_from_env()
