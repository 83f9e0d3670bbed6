"""Events"""

import abc
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DomainEvent(abc.ABC):
    """Base class for all domain events.
    Requires a way to determine the owning aggregate ID.
    """

    @property
    @abc.abstractmethod
    def aggregate_id(self) -> str:
        """Return the ID of the aggregate this event belongs to."""


# --- Research ---


@dataclass(frozen=True, slots=True)
class ProjectDrafted(DomainEvent):
    """Event indicating that a research project has been drafted."""

    project_reference: str
    client_id: str
    name: str
    deadline: str  # ISO date

    @property
    def aggregate_id(self) -> str:
        return self.project_reference


@dataclass(frozen=True, slots=True)
class ProjectStarted(DomainEvent):
    """Event indicating that a project is open for consultations."""

    project_reference: str

    @property
    def aggregate_id(self) -> str:
        return self.project_reference


@dataclass(frozen=True, slots=True)
class ConsultationScheduled(DomainEvent):
    """Event indicating that a consultation has been scheduled on a project."""

    project_reference: str
    consultation_id: str
    specialist_id: str
    scheduled_at: str  # ISO datetime

    @property
    def aggregate_id(self) -> str:
        return self.project_reference


@dataclass(frozen=True, slots=True)
class ConsultationDiscarded(DomainEvent):
    """Event indicating that a consultation has been discarded."""

    project_reference: str
    consultation_id: str

    @property
    def aggregate_id(self) -> str:
        return self.project_reference


@dataclass(frozen=True, slots=True)
class ProjectClosed(DomainEvent):
    """Event indicating that a project has been closed."""

    project_reference: str

    @property
    def aggregate_id(self) -> str:
        return self.project_reference


# --- Invoicing ---


@dataclass(frozen=True, slots=True)
class PackageRegistered(DomainEvent):
    """Event indicating that a prepaid package has been registered."""

    package_reference: str
    client_id: str
    start_date: str  # ISO date
    duration_months: int
    nominal_hours: int

    @property
    def aggregate_id(self) -> str:
        return self.package_reference


@dataclass(frozen=True, slots=True)
class ConsultationBooked(DomainEvent):
    """Event indicating that consultation time has been booked on a package."""

    package_reference: str
    consultation_id: str
    minutes: int

    @property
    def aggregate_id(self) -> str:
        return self.package_reference
