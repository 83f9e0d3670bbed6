"""Collections of entities held by aggregates."""

from .consultation_list import ConsultationList

__all__ = ["ConsultationList"]
