from __future__ import annotations
import os


# Defaults
DEFAULT_MAX_DEPTH = 256
DEFAULT_MAX_TOKEN_LENGTH = 31
DEFAULT_PROMPT = "-> "
DEFAULT_BANNER = "ListScript ready."

# Python frames consumed per nested user-function call, with headroom
FRAMES_PER_CALL = 16


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{var} must be positive, got {value}")
    return value


def get_max_depth() -> int:
    return int_from_env('LISTSCRIPT_MAX_DEPTH', DEFAULT_MAX_DEPTH)


def get_max_token_length() -> int:
    return int_from_env('LISTSCRIPT_MAX_TOKEN_LENGTH', DEFAULT_MAX_TOKEN_LENGTH)


def color_enabled() -> bool:
    # https://no-color.org: any non-empty value disables colour
    return not os.environ.get('NO_COLOR')
