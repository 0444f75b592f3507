from __future__ import annotations

import logging
import os
from dataclasses import dataclass

# Characters that are allowed in generated class names.
CLASS_ALPHABET = "_-abcdefghijklmnopqrstuvwxyz0123456789"


@dataclass(frozen=True)
class ScopeConfig:
    class_alphabet: str = CLASS_ALPHABET
    class_prefix: str = "_"  # keeps every key a valid class identifier
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> ScopeConfig:
        """Build a config from ``SCOPECSS_*`` environment variables."""
        log_level = os.environ.get("SCOPECSS_LOG_LEVEL", cls.log_level).upper()
        # unknown level names fall back to the default
        if not isinstance(logging.getLevelName(log_level), int):
            log_level = cls.log_level
        return cls(
            class_prefix=os.environ.get("SCOPECSS_PREFIX", cls.class_prefix),
            log_level=log_level,
        )
