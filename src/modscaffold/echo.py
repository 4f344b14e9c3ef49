"""The function hosted by the scaffolded ``lib`` module."""

from __future__ import annotations

__all__ = ["echo_message"]


def echo_message(message: str) -> str:
    """Return ``message`` unchanged."""

    return message
