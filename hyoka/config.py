from __future__ import annotations
import os
from typing import Iterable, List


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


# Defaults
DEFAULT_MAX_DEPTH = 100
DEFAULT_PROMPT = 'hyoka> '
DEFAULT_EXIT_COMMANDS = ('exit', 'quit')
DEFAULT_CLEAR_COMMANDS = ('clear',)
DEFAULT_LOG_LEVEL = 'WARNING'

_TRUTHY = {'1', 'true', 'yes', 'on'}


def words_from_env(var: str, defaults: Iterable[str]) -> List[str]:
    raw = os.environ.get(var)
    if not raw:
        return list(defaults)
    return [w.strip() for w in raw.split(_sep()) if w.strip()]


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def get_max_depth() -> int:
    return int_from_env('HYOKA_MAX_DEPTH', DEFAULT_MAX_DEPTH)


def get_prompt() -> str:
    return os.environ.get('HYOKA_PROMPT', DEFAULT_PROMPT)


def get_exit_commands() -> List[str]:
    return words_from_env('HYOKA_EXIT_COMMANDS', DEFAULT_EXIT_COMMANDS)


def get_color() -> bool:
    return os.environ.get('HYOKA_COLOR', '').strip().lower() in _TRUTHY


def get_log_level() -> str:
    return os.environ.get('HYOKA_LOG_LEVEL', DEFAULT_LOG_LEVEL).upper()
