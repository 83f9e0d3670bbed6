"""Module including value objects used across the domain layer."""

from dataclasses import dataclass
from enum import Enum

from ulid import monotonic

from bestinvestments.domain.errors import InvalidIdentifierError


@dataclass(frozen=True)
class Identifier:
    """Base value object for opaque string identifiers.

    Equality is by value and by concrete type, so a `SpecialistIdentifier`
    never equals a `ConsultationIdentifier` wrapping the same string.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidIdentifierError(type(self).__name__, self.value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ConsultationIdentifier(Identifier):
    """Identifies a consultation within a project."""

    @classmethod
    def generate(cls) -> "ConsultationIdentifier":
        """Return a fresh identifier backed by a monotonic ULID."""
        return cls(str(monotonic.new()))


@dataclass(frozen=True)
class SpecialistIdentifier(Identifier):
    """Identifies a specialist."""


@dataclass(frozen=True)
class ClientIdentifier(Identifier):
    """Identifies a client of the business."""


@dataclass(frozen=True)
class ProjectReference(Identifier):
    """Reference of a research project."""


@dataclass(frozen=True)
class PackageReference(Identifier):
    """Reference of an invoicing package."""


class ConsultationStatus(Enum):
    """Enumeration of possible consultation states"""

    OPEN = "open"
    DISCARDED = "discarded"


class ProjectStatus(Enum):
    """Enumeration of possible project states"""

    DRAFT = "draft"
    ACTIVE = "active"
    CLOSED = "closed"
