"""Signing backends supported by the SDK."""
from __future__ import annotations

from enum import Enum


class SigningBackend(str, Enum):
    """Which party signs state-changing transactions."""

    CUSTODIAL = "internal"
    EXTERNAL = "external"
