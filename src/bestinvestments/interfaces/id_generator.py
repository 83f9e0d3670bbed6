"""Port handing out identifiers for newly scheduled consultations."""

import abc

from bestinvestments.domain.value_objects import ConsultationIdentifier

# pylint: disable=too-few-public-methods


class ConsultationIdGenerator(abc.ABC):
    """Source of identifiers for consultations scheduled without one."""

    @abc.abstractmethod
    def next_id(self) -> ConsultationIdentifier:
        """Return an identifier that no earlier call has returned."""
