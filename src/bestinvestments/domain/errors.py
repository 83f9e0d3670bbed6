"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class InvalidIdentifierError(DomainError, ValueError):
    """Raised when an identifier value object is built from a blank value."""

    def __init__(self, identifier_type: str, value: object) -> None:
        super().__init__(f"{identifier_type} requires a non-empty value, got {value!r}.")
        self.identifier_type = identifier_type
        self.value = value


class AggregateIdMismatchError(DomainError):
    """Raised when an event targets a different aggregate_id than the receiver."""

    def __init__(self, aggregate_id: str, event_aggregate_id: str) -> None:
        super().__init__(
            f"Event aggregate ID '{event_aggregate_id}' does not match "
            f"aggregate ID '{aggregate_id}'."
        )
        self.aggregate_id = aggregate_id
        self.event_aggregate_id = event_aggregate_id


class InvalidTransitionError(DomainError):
    """Raised when an aggregate is in an invalid state for the attempted action."""


# ============================================================================
#                       Project related errors
# ============================================================================


class ProjectNotActiveError(InvalidTransitionError):
    """Raised when consultations are changed on a project that is not active."""

    def __init__(self, project_reference: str, status: str) -> None:
        super().__init__(
            f"Project {project_reference} is {status}; consultations require an "
            "active project."
        )
        self.project_reference = project_reference
        self.status = status


class SpecialistAlreadyScheduledError(InvalidTransitionError):
    """Raised when a specialist already has an open consultation on a project."""

    def __init__(
        self, project_reference: str, specialist_id: str, consultation_id: str
    ) -> None:
        super().__init__(
            f"Specialist {specialist_id} already has open consultation "
            f"{consultation_id} on project {project_reference}."
        )
        self.project_reference = project_reference
        self.specialist_id = specialist_id
        self.consultation_id = consultation_id


class ConsultationNotFoundError(DomainError):
    """Raised when a project does not hold the requested consultation."""

    def __init__(self, project_reference: str, consultation_id: str) -> None:
        super().__init__(
            f"Consultation {consultation_id} not found on project {project_reference}."
        )
        self.project_reference = project_reference
        self.consultation_id = consultation_id


class OpenConsultationsRemainError(InvalidTransitionError):
    """Raised when closing a project that still has open consultations."""

    def __init__(self, project_reference: str) -> None:
        super().__init__(
            f"Project {project_reference} cannot be closed while consultations are open."
        )
        self.project_reference = project_reference


# ============================================================================
#                       Package related errors
# ============================================================================


class ConsultationAlreadyBookedError(InvalidTransitionError):
    """Raised when a consultation is booked twice against the same package."""

    def __init__(self, package_reference: str, consultation_id: str) -> None:
        super().__init__(
            f"Consultation {consultation_id} is already booked on package "
            f"{package_reference}."
        )
        self.package_reference = package_reference
        self.consultation_id = consultation_id


class PackageHoursExceededError(InvalidTransitionError):
    """Raised when a booking would exceed the nominal hours of a package."""

    def __init__(
        self, package_reference: str, requested_minutes: int, remaining_minutes: int
    ) -> None:
        super().__init__(
            f"Package {package_reference} has {remaining_minutes} minutes remaining; "
            f"cannot book {requested_minutes}."
        )
        self.package_reference = package_reference
        self.requested_minutes = requested_minutes
        self.remaining_minutes = remaining_minutes
