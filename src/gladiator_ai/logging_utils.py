"""Logging and runtime utility helpers."""

from __future__ import annotations

from collections import OrderedDict
import logging
from typing import Any

from pyglet.math import Vec3


def configure_logging(level: str = "INFO") -> None:
    """Configure process-wide logging once."""

    if logging.getLogger().handlers:
        return
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

def format_vector(vector: Vec3) -> str:
    return f"({vector.x:.2f}, {vector.y:.2f}, {vector.z:.2f})"

def _format_context_value(value: Any) -> str:
    if isinstance(value, bool):
        return "on" if value else "off"
    if isinstance(value, float):
        return f"{value:.3f}"
    if isinstance(value, Vec3):
        return format_vector(value)
    if hasattr(value, "name") and hasattr(value, "value"):
        return str(value.name).lower()
    return str(value)

def _format_mode_label(mode: str) -> str:
    words = mode.replace("-", " ").split()
    formatted: list[str] = []
    for word in words:
        formatted.append("AI" if word.lower() == "ai" else word.title())
    return " ".join(formatted)

def log_key_values(
    logger_name: str,
    values: dict[str, Any],
    *,
    prefix: str | None = None,
    key_value_separator: str = "=",
    level: int = logging.INFO,
) -> None:
    logger = logging.getLogger(logger_name)
    if not logger.isEnabledFor(level):
        return

    ordered = OrderedDict((key, value) for key, value in values.items() if value is not None)
    segments: list[str] = []
    if prefix:
        segments.append(str(prefix))

    for key, value in ordered.items():
        value_text = _format_context_value(value)
        if key_value_separator == ":":
            segments.append(f"{key}: {value_text}")
        else:
            segments.append(f"{key}{key_value_separator}{value_text}")

    logger.log(level, "\t".join(segments))

def log_run_context(mode: str, context: dict[str, Any]) -> None:
    mode_label = _format_mode_label(mode)
    titled_context = OrderedDict(
        (key.replace("_", " ").title(), value) for key, value in context.items() if value is not None
    )
    log_key_values(
        "gladiator_ai.run",
        dict(titled_context),
        prefix=mode_label,
        key_value_separator=":",
    )
