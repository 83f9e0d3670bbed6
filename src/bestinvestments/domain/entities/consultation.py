"""Consultation entity."""

from datetime import datetime

from bestinvestments.domain.value_objects import (
    ConsultationIdentifier,
    ConsultationStatus,
    SpecialistIdentifier,
)


class Consultation:
    """A consultation session between a specialist and the business.

    Consultations start out open and can only move to discarded. They are owned
    by the `ConsultationList` they are added to; discarding a consultation changes
    its state but never removes it from that list.

    Args:
        created_at: When the consultation was created.
        specialist_id: The specialist being consulted.
        consultation_id: Identifier to use; a fresh one is generated when omitted.
    """

    def __init__(
        self,
        created_at: datetime,
        specialist_id: SpecialistIdentifier,
        consultation_id: ConsultationIdentifier | None = None,
    ) -> None:
        self._id = (
            consultation_id
            if consultation_id is not None
            else ConsultationIdentifier.generate()
        )
        self._created_at = created_at
        self._specialist_id = specialist_id
        self._status = ConsultationStatus.OPEN

    def __repr__(self) -> str:
        return (
            f"Consultation(id={self._id.value!r}, "
            f"specialist_id={self._specialist_id.value!r}, "
            f"status={self._status.value!r})"
        )

    # --- State Transitions ---

    def discard(self) -> None:
        """Mark the consultation as discarded (no-op when already discarded)."""
        self._status = ConsultationStatus.DISCARDED

    # --- Queries ---

    def is_open(self) -> bool:
        """Return True while the consultation has not been discarded."""
        return self._status is ConsultationStatus.OPEN

    @property
    def id(self) -> ConsultationIdentifier:  # pylint: disable=invalid-name
        """The identifier of this consultation."""
        return self._id

    @property
    def specialist_id(self) -> SpecialistIdentifier:
        """The specialist being consulted."""
        return self._specialist_id

    @property
    def created_at(self) -> datetime:
        """When the consultation was created."""
        return self._created_at

    @property
    def status(self) -> ConsultationStatus:
        """The current lifecycle state."""
        return self._status

    def get_id(self) -> ConsultationIdentifier:
        """Return the identifier of this consultation."""
        return self._id

    def get_specialist_identifier(self) -> SpecialistIdentifier:
        """Return the specialist being consulted."""
        return self._specialist_id
