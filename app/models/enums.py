"""Enum types shared by the models and services."""

from enum import Enum


class CodeValidity(str, Enum):
    """Position of a reference instant relative to a code's validity window."""
    valid = "valid"
    not_yet_effective = "not_yet_effective"
    expired = "expired"
