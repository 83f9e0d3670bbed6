"""Entities owned by aggregates."""

from .consultation import Consultation

__all__ = ["Consultation"]
