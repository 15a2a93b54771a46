"""Read fallback settings from the workspace ``.env.defaults`` file.

Values here apply only when the variable is absent from the process
environment, so CI can override anything without editing the file.
Keys the suite does not read are reported once, since a typo such as
``HEADLES=false`` would otherwise be silently ignored.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, FrozenSet, List, Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULTS_FILE = Path(__file__).resolve().parents[1] / ".env.defaults"

KNOWN_KEYS: FrozenSet[str] = frozenset(
    {
        "TEST_ENV",
        "BASE_URL",
        "API_URL",
        "TEST_TIMEOUT",
        "EXPECT_TIMEOUT",
        "RETRY_COUNT",
        "VALIDATION_RETRIES",
        "SEED",
        "HEADLESS",
        "SLOW_MO",
        "BROWSER",
        "CI",
        "DEBUG",
        "UI_LIVE",
        "TEST_WORKER_INDEX",
    }
)


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def parse_env_file(text: str) -> Dict[str, str]:
    """``KEY=value`` pairs; blank lines, comments and lines without ``=`` are skipped."""
    pairs = (line.strip() for line in text.splitlines())
    defaults: Dict[str, str] = {}
    for line in pairs:
        if line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if sep:
            defaults[key.strip()] = _unquote(value.strip())
    return defaults


def unknown_keys(defaults: Mapping[str, str]) -> List[str]:
    return sorted(key for key in defaults if key not in KNOWN_KEYS)


@lru_cache(maxsize=1)
def _load_env_defaults() -> Dict[str, str]:
    if not DEFAULTS_FILE.exists():
        return {}
    defaults = parse_env_file(DEFAULTS_FILE.read_text(encoding="utf-8"))
    unknown = unknown_keys(defaults)
    if unknown:
        logger.warning(f"Ignoring unknown keys in {DEFAULTS_FILE.name}: {', '.join(unknown)}")
    return defaults


def get_env_default(key: str) -> Optional[str]:
    return _load_env_defaults().get(key)
