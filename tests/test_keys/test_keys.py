"""Tests for scope key generation and configuration."""

import threading
from dataclasses import FrozenInstanceError

import pytest

from scopecss.config import CLASS_ALPHABET, ScopeConfig
from scopecss.keys import KeyFactory, next_scope_key


class TestKeyFactory:
    def test_shortest_keys_first(self) -> None:
        factory = KeyFactory("ab")
        assert [factory() for _ in range(7)] == ["a", "b", "aa", "ab", "ba", "bb", "aaa"]

    def test_prefix(self) -> None:
        factory = KeyFactory("xy", prefix="_")
        assert [factory() for _ in range(3)] == ["_x", "_y", "_xx"]

    def test_default_config_stream(self) -> None:
        factory = KeyFactory.from_config(ScopeConfig())
        keys = [factory() for _ in range(len(CLASS_ALPHABET) + 1)]
        assert keys[:3] == ["__", "_-", "_a"]
        assert keys[len(CLASS_ALPHABET) - 1] == "_9"
        assert keys[-1] == "___"

    def test_generates_unique_keys(self) -> None:
        factory = KeyFactory.from_config(ScopeConfig())
        seen = set()
        for _ in range(1000):
            key = factory()
            assert key not in seen
            seen.add(key)

    def test_keys_use_class_alphabet(self) -> None:
        factory = KeyFactory.from_config(ScopeConfig())
        for _ in range(2000):
            key = factory()
            assert key.startswith("_")
            assert set(key) <= set(CLASS_ALPHABET)

    def test_iterates(self) -> None:
        factory = KeyFactory("ab")
        stream = iter(factory)
        assert [next(stream) for _ in range(3)] == ["a", "b", "aa"]

    def test_rejects_repeated_alphabet(self) -> None:
        with pytest.raises(ValueError):
            KeyFactory("aab")

    def test_rejects_empty_alphabet(self) -> None:
        with pytest.raises(ValueError):
            KeyFactory("")

    def test_thread_safe(self) -> None:
        factory = KeyFactory.from_config(ScopeConfig())
        results: list[list[str]] = [[] for _ in range(8)]

        def draw(bucket: list[str]) -> None:
            for _ in range(500):
                bucket.append(factory())

        threads = [threading.Thread(target=draw, args=(bucket,)) for bucket in results]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        keys = [key for bucket in results for key in bucket]
        assert len(keys) == 4000
        assert len(set(keys)) == 4000


class TestNextScopeKey:
    def test_returns_distinct_keys(self) -> None:
        assert next_scope_key() != next_scope_key()

    def test_valid_class_name(self) -> None:
        key = next_scope_key()
        assert key.startswith("_")
        assert set(key) <= set(CLASS_ALPHABET)


class TestScopeConfig:
    def test_defaults(self) -> None:
        config = ScopeConfig()
        assert config.class_alphabet == CLASS_ALPHABET
        assert config.class_prefix == "_"
        assert config.log_level == "WARNING"

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCOPECSS_PREFIX", "s-")
        monkeypatch.setenv("SCOPECSS_LOG_LEVEL", "debug")
        config = ScopeConfig.from_env()
        assert config.class_prefix == "s-"
        assert config.log_level == "DEBUG"

    def test_from_env_unknown_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCOPECSS_LOG_LEVEL", "bogus")
        assert ScopeConfig.from_env().log_level == "WARNING"

    def test_from_env_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SCOPECSS_PREFIX", raising=False)
        monkeypatch.delenv("SCOPECSS_LOG_LEVEL", raising=False)
        assert ScopeConfig.from_env() == ScopeConfig()

    def test_frozen(self) -> None:
        config = ScopeConfig()
        with pytest.raises(FrozenInstanceError):
            config.class_prefix = "x"  # type: ignore[misc]
