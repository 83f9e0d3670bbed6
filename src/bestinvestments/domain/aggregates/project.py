"""Project Aggregate"""

from datetime import date, datetime

from bestinvestments.domain import errors, events
from bestinvestments.domain.entities.consultation import Consultation
from bestinvestments.domain.value_objects import (
    ClientIdentifier,
    ConsultationIdentifier,
    ProjectReference,
    ProjectStatus,
    SpecialistIdentifier,
)

from .base import Aggregate
from .collections import ConsultationList


class Project(Aggregate):
    """Aggregate root representing a research project.

    A project is drafted for a client, started, and then consults specialists.
    Each specialist may have at most one open consultation on the project at a
    time, and the project can only be closed once every consultation has been
    discarded.
    """

    def __init__(self, aggregate_id: str) -> None:
        super().__init__(aggregate_id)
        self.reference = ProjectReference(aggregate_id)
        self.client_id: ClientIdentifier | None = None
        self.name: str | None = None
        self.deadline: date | None = None
        self.status: ProjectStatus = ProjectStatus.DRAFT
        self.consultations = ConsultationList()

    # --- Construction Paths ---

    @classmethod
    def draft(
        cls,
        reference: ProjectReference,
        client_id: ClientIdentifier,
        name: str,
        deadline: date,
    ) -> "Project":
        """Draft a new research project for a client."""
        project = cls(reference.value)
        project._enqueue(
            events.ProjectDrafted(
                project_reference=reference.value,
                client_id=client_id.value,
                name=name,
                deadline=deadline.isoformat(),
            )
        )
        return project

    # --- State Transitions ---

    def start(self) -> None:
        """Open the project for consultations.

        Raises:
            InvalidTransitionError: If the project has already been closed.
        """
        if self.status is ProjectStatus.ACTIVE:
            return  # Idempotent
        if self.status is ProjectStatus.CLOSED:
            raise errors.InvalidTransitionError(
                f"Project {self.aggregate_id} is closed and cannot be started."
            )
        self._enqueue(events.ProjectStarted(project_reference=self.aggregate_id))

    def schedule_consultation(
        self,
        consultation_id: ConsultationIdentifier,
        specialist_id: SpecialistIdentifier,
        scheduled_at: datetime,
    ) -> None:
        """Schedule a consultation with a specialist.

        Raises:
            ProjectNotActiveError: If the project is not active.
            SpecialistAlreadyScheduledError: If the specialist already has an open
                consultation on this project.
        """
        self._require_active()
        if existing := self.consultations.get_open_consultation_for_specialist(
            specialist_id
        ):
            raise errors.SpecialistAlreadyScheduledError(
                self.aggregate_id, specialist_id.value, existing.id.value
            )
        self._enqueue(
            events.ConsultationScheduled(
                project_reference=self.aggregate_id,
                consultation_id=consultation_id.value,
                specialist_id=specialist_id.value,
                scheduled_at=scheduled_at.isoformat(),
            )
        )

    def discard_consultation(self, consultation_id: ConsultationIdentifier) -> None:
        """Discard one of the project's consultations.

        Discarding a consultation that is already discarded does nothing.

        Raises:
            ConsultationNotFoundError: If the project has no such consultation.
        """
        consultation = self.consultations.get(consultation_id)
        if consultation is None:
            raise errors.ConsultationNotFoundError(
                self.aggregate_id, consultation_id.value
            )
        if not consultation.is_open():
            return  # Idempotent
        self._enqueue(
            events.ConsultationDiscarded(
                project_reference=self.aggregate_id,
                consultation_id=consultation_id.value,
            )
        )

    def close(self) -> None:
        """Close the project.

        Raises:
            OpenConsultationsRemainError: If any consultation is still open.
        """
        if self.status is ProjectStatus.CLOSED:
            return  # Idempotent
        if self.consultations.has_open_consultations():
            raise errors.OpenConsultationsRemainError(self.aggregate_id)
        self._enqueue(events.ProjectClosed(project_reference=self.aggregate_id))

    # --- Event Application ---

    def _apply(self, event: events.DomainEvent) -> None:
        match event:
            case events.ProjectDrafted():
                self.client_id = ClientIdentifier(event.client_id)
                self.name = event.name
                self.deadline = date.fromisoformat(event.deadline)
                self.status = ProjectStatus.DRAFT
            case events.ProjectStarted():
                self.status = ProjectStatus.ACTIVE
            case events.ConsultationScheduled():
                self.consultations.add(
                    Consultation(
                        created_at=datetime.fromisoformat(event.scheduled_at),
                        specialist_id=SpecialistIdentifier(event.specialist_id),
                        consultation_id=ConsultationIdentifier(event.consultation_id),
                    )
                )
            case events.ConsultationDiscarded():
                consultation = self.consultations.get(
                    ConsultationIdentifier(event.consultation_id)
                )
                if consultation is not None:
                    consultation.discard()
            case events.ProjectClosed():
                self.status = ProjectStatus.CLOSED
            case _:
                raise ValueError(f"Unhandled event type: {type(event).__name__}")

    # --- Internal Helpers ---

    def _require_active(self) -> None:
        if self.status is not ProjectStatus.ACTIVE:
            raise errors.ProjectNotActiveError(self.aggregate_id, self.status.value)
