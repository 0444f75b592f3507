"""Scope key generation: short, unique CSS class names."""

from __future__ import annotations

import itertools
import threading

from scopecss.config import ScopeConfig

__all__ = ["KeyFactory", "next_scope_key"]


class KeyFactory:
    """Callable producing an infinite stream of minimal-length class names.

    Suffixes are emitted shortest first and in alphabet order within one
    length, each joined to *prefix*: with the default config the stream is
    ``__``, ``_-``, ``_a`` ... ``_9``, ``___``, ``__-`` and so on. Safe to
    call from several threads.
    """

    def __init__(self, alphabet: str, prefix: str = ""):
        if len(set(alphabet)) != len(alphabet) or not alphabet:
            raise ValueError("alphabet must be non-empty with no repeated characters")
        self.alphabet = alphabet
        self.prefix = prefix
        self._counter = itertools.count()
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: ScopeConfig) -> KeyFactory:
        return cls(config.class_alphabet, config.class_prefix)

    def _encode(self, index: int) -> str:
        # bijective base-N: 0 -> a, N-1 -> last, N -> aa, ...
        base = len(self.alphabet)
        chars: list[str] = []
        index += 1
        while index > 0:
            index, rem = divmod(index - 1, base)
            chars.append(self.alphabet[rem])
        return "".join(reversed(chars))

    def __call__(self) -> str:
        with self._lock:
            index = next(self._counter)
        return self.prefix + self._encode(index)

    def __iter__(self):
        while True:
            yield self()


_default_factory = KeyFactory.from_config(ScopeConfig())


def next_scope_key() -> str:
    """Return the next key from the process-wide factory."""
    return _default_factory()
