"""Consultation identifier generators, selected by `BESTINVESTMENTS_ID_GENERATOR`."""

import itertools
import threading
import uuid

from bestinvestments.domain.value_objects import ConsultationIdentifier
from bestinvestments.interfaces.id_generator import ConsultationIdGenerator

# pylint: disable=too-few-public-methods


class UlidConsultationIds(ConsultationIdGenerator):
    """Monotonic ULIDs, so consultation ids sort in scheduling order."""

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def next_id(self) -> ConsultationIdentifier:
        with self._lock:
            return ConsultationIdentifier.generate()


class Uuid4ConsultationIds(ConsultationIdGenerator):
    """Random version-4 UUIDs."""

    def next_id(self) -> ConsultationIdentifier:
        return ConsultationIdentifier(str(uuid.uuid4()))


class SequentialConsultationIds(ConsultationIdGenerator):
    """Numbered ids such as ``consultation-1``, ``consultation-2``.

    Readable and reproducible, which suits demos and scripted replays. The
    numbering restarts with every instance.
    """

    def __init__(self, prefix: str = "consultation-", start: int = 1) -> None:
        self._prefix = prefix
        self._numbers = itertools.count(start)

    def next_id(self) -> ConsultationIdentifier:
        return ConsultationIdentifier(f"{self._prefix}{next(self._numbers)}")
