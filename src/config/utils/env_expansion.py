"""Environment variable expansion for configuration values.

Supported forms inside strings:
- $VAR
- ${VAR}
- ${VAR:default}

Variables that are not set and carry no default are left untouched.
"""
import os
import re
from typing import Any, Dict

_ENV_PATTERN = re.compile(
    r"\$\{(?P<braced>[A-Za-z_][A-Za-z0-9_]*)(?::(?P<default>[^}]*))?\}"
    r"|\$(?P<bare>[A-Za-z_][A-Za-z0-9_]*)"
)


def _replace(match: "re.Match[str]") -> str:
    name = match.group("braced") or match.group("bare")
    if name in os.environ:
        return os.environ[name]
    default = match.group("default")
    if default is not None:
        return default
    return match.group(0)


def expand_env_vars(value: Any) -> Any:
    """Expand environment variables in strings, recursing into dicts and lists."""
    if isinstance(value, str):
        return _ENV_PATTERN.sub(_replace, value)
    if isinstance(value, dict):
        return {k: expand_env_vars(v) for k, v in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(v) for v in value]
    return value


def expand_config_env_vars(config: Dict[str, Any]) -> Dict[str, Any]:
    """Expand environment variables across a whole configuration dictionary."""
    return expand_env_vars(config)
