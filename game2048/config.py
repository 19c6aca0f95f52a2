"""Environment-driven settings for the tilt engine."""

import os

DEFAULT_MAX_PIECE = 2048
DEFAULT_SIZE = 4
DEFAULT_LANG = "en"

OVER_MARKERS = {
    "en": ("over", "not over"),
    "zh": ("游戏结束", "游戏未结束"),
}

STATUS_TRAILERS = {
    "en": "(max: {max_score}) (game is {marker})",
    "zh": "(最高分: {max_score}) (游戏状态: {marker})",
}


def _int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, received {raw!r}") from exc


def resolve_max_piece() -> int:
    """Winning tile value, from ``G2048_MAX_PIECE``."""
    value = _int_from_env("G2048_MAX_PIECE", DEFAULT_MAX_PIECE)
    if value < 4 or value & (value - 1):
        raise ValueError(f"G2048_MAX_PIECE must be a power of two >= 4, received {value}")
    return value


def resolve_size() -> int:
    """Default board side length, from ``G2048_SIZE``."""
    value = _int_from_env("G2048_SIZE", DEFAULT_SIZE)
    if value < 2:
        raise ValueError(f"G2048_SIZE must be at least 2, received {value}")
    return value


def resolve_lang() -> str:
    lang = os.environ.get("G2048_LANG", DEFAULT_LANG).strip().lower() or DEFAULT_LANG
    if lang not in OVER_MARKERS:
        raise ValueError(
            f"G2048_LANG must be one of {sorted(OVER_MARKERS)}, received {lang!r}"
        )
    return lang


def over_marker(over: bool) -> str:
    done, running = OVER_MARKERS[resolve_lang()]
    return done if over else running


def status_trailer(max_score: int, over: bool) -> str:
    """Localised "(max) (state)" suffix of the debug board dump."""
    return STATUS_TRAILERS[resolve_lang()].format(max_score=max_score, marker=over_marker(over))


__all__ = [
    "DEFAULT_LANG",
    "DEFAULT_MAX_PIECE",
    "DEFAULT_SIZE",
    "OVER_MARKERS",
    "STATUS_TRAILERS",
    "over_marker",
    "resolve_lang",
    "resolve_max_piece",
    "resolve_size",
    "status_trailer",
]
