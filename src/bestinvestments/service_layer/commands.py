"""Module defining Commands."""

from dataclasses import dataclass
from datetime import date, datetime

# pylint: disable=too-many-instance-attributes


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


# --- Research ---


@dataclass(frozen=True)
class DraftProject(Command):
    """Command to draft a new research project for a client."""

    project_reference: str
    client_id: str
    name: str
    deadline: date


@dataclass(frozen=True)
class StartProject(Command):
    """Command to open a drafted project for consultations."""

    project_reference: str


@dataclass(frozen=True)
class ScheduleConsultation(Command):
    """Command to schedule a consultation with a specialist on a project.

    When `consultation_id` is omitted a fresh identifier is generated.
    """

    project_reference: str
    specialist_id: str
    scheduled_at: datetime
    consultation_id: str | None = None


@dataclass(frozen=True)
class DiscardConsultation(Command):
    """Command to discard a consultation on a project."""

    project_reference: str
    consultation_id: str


@dataclass(frozen=True)
class CloseProject(Command):
    """Command to close a project once no consultation is open."""

    project_reference: str


# --- Invoicing ---


@dataclass(frozen=True)
class RegisterPackage(Command):
    """Command to register a prepaid package of consultation hours."""

    package_reference: str
    client_id: str
    start_date: date
    duration_months: int
    nominal_hours: int


@dataclass(frozen=True)
class BookConsultation(Command):
    """Command to book consultation time against a package."""

    package_reference: str
    consultation_id: str
    minutes: int


COMMAND_REGISTRY: dict[str, type[Command]] = {
    "DraftProject": DraftProject,
    "StartProject": StartProject,
    "ScheduleConsultation": ScheduleConsultation,
    "DiscardConsultation": DiscardConsultation,
    "CloseProject": CloseProject,
    "RegisterPackage": RegisterPackage,
    "BookConsultation": BookConsultation,
}
