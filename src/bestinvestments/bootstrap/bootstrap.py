"""Assemble a workspace from the in-memory adapters and the configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bestinvestments import config
from bestinvestments.adapters.id_generators import (
    SequentialConsultationIds,
    UlidConsultationIds,
    Uuid4ConsultationIds,
)
from bestinvestments.adapters.repositories import (
    InMemoryPackageRepository,
    InMemoryProjectRepository,
)
from bestinvestments.service_layer.workspace import Workspace

if TYPE_CHECKING:
    from bestinvestments.interfaces.id_generator import ConsultationIdGenerator


def build_consultation_ids(kind: str) -> ConsultationIdGenerator:
    """Build the generator named by `kind` (see `config.ID_GENERATOR_CHOICES`)."""
    match kind:
        case "ulid":
            return UlidConsultationIds()
        case "uuid4":
            return Uuid4ConsultationIds()
        case "sequential":
            return SequentialConsultationIds()
        case _:
            raise config.InvalidIdGeneratorError(kind)


def bootstrap(consultation_ids: ConsultationIdGenerator | None = None) -> Workspace:
    """Build an empty in-memory workspace.

    Args:
        consultation_ids: Generator for consultations scheduled without an id.
            Defaults to the one named by `BESTINVESTMENTS_ID_GENERATOR`.

    Raises:
        InvalidIdGeneratorError: If no generator is given and the environment
            names an unknown one.
    """
    if consultation_ids is None:
        consultation_ids = build_consultation_ids(config.get_id_generator_kind())

    return Workspace(
        projects=InMemoryProjectRepository(),
        packages=InMemoryPackageRepository(),
        consultation_ids=consultation_ids,
    )
