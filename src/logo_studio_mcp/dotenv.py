"""Auto-load environment variables from a shared config file.

Loads vars from ``~/.config/logo-studio-mcp/.env`` when they aren't
already set in the process environment, so the API key can live outside
whatever workspace launches the server. No external dependencies.
"""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_ENV_PATH = Path.home() / ".config" / "logo-studio-mcp" / ".env"


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
        return value[1:-1]
    return value


def _is_unset_or_placeholder(key: str, value: str | None) -> bool:
    """Return True when the current env value should be treated as unset.

    Blank values and unresolved self-placeholders such as ``${GEMINI_API_KEY}``
    (passed through verbatim by some MCP hosts) count as unset.
    """
    if value is None:
        return True

    normalized = _strip_quotes(value.strip()).strip()
    if not normalized:
        return True

    if normalized in {f"${key}", f"${{{key}}}"}:
        return True
    return normalized.startswith(f"${{{key}:-") and normalized.endswith("}")


def parse_dotenv(path: Path) -> dict[str, str]:
    """Parse a ``.env`` file into a dict of key-value pairs.

    Supports ``KEY=VALUE``, quoted values, ``export KEY=VALUE``, blank lines
    and ``#`` comments. No variable expansion.
    """
    result: dict[str, str] = {}
    if not path.is_file():
        return result

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[len("export ") :]
        if "=" not in line:
            continue
        key, _, value = line.partition("=")
        key = key.strip()
        if key:
            result[key] = _strip_quotes(value.strip())
    return result


def load_dotenv(path: Path | None = None) -> dict[str, str]:
    """Load vars from *path* into ``os.environ`` when existing values are unset.

    Args:
        path: Path to the ``.env`` file. Defaults to :data:`DEFAULT_ENV_PATH`.

    Returns:
        Dict of vars that were actually injected.
    """
    if path is None:
        path = DEFAULT_ENV_PATH
    injected: dict[str, str] = {}
    for key, value in parse_dotenv(path).items():
        if _is_unset_or_placeholder(key, os.environ.get(key)):
            os.environ[key] = value
            injected[key] = value
    return injected
