"""Order domain exceptions."""

from __future__ import annotations


class OrderNotFound(Exception):
    """The requested order does not exist."""
