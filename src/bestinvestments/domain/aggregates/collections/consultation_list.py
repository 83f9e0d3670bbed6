"""Ordered collection of the consultations held by a project."""

from collections.abc import Iterator

from bestinvestments.domain.entities.consultation import Consultation
from bestinvestments.domain.value_objects import (
    ConsultationIdentifier,
    SpecialistIdentifier,
)


class ConsultationList:
    """Insertion-ordered list of consultations.

    Entries are never removed; closing a consultation is a state change on the
    entity itself. Identifiers are not required to be unique, so every lookup
    returns the earliest matching entry.
    """

    def __init__(self) -> None:
        self._consultations: list[Consultation] = []

    def __len__(self) -> int:
        return len(self._consultations)

    def __iter__(self) -> Iterator[Consultation]:
        return iter(self._consultations)

    def add(self, consultation: Consultation) -> None:
        """Append a consultation to the end of the list."""
        self._consultations.append(consultation)

    def has_open_consultations(self) -> bool:
        """Return True if at least one consultation is still open."""
        return any(consultation.is_open() for consultation in self._consultations)

    def open_consultations(self) -> Iterator[Consultation]:
        """Iterate over the open consultations in insertion order."""
        return (c for c in self._consultations if c.is_open())

    def get_open_consultation_for_specialist(
        self, specialist_id: SpecialistIdentifier
    ) -> Consultation | None:
        """Return the first open consultation with the given specialist, if any."""
        return next(
            (c for c in self.open_consultations() if c.specialist_id == specialist_id),
            None,
        )

    def get(self, consultation_id: ConsultationIdentifier) -> Consultation | None:
        """Return the first consultation with the given identifier, open or not."""
        return next(
            (c for c in self._consultations if c.id == consultation_id),
            None,
        )
