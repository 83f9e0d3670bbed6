"""In-memory repositories for projects and packages.

Each repository keeps the events raised by its own aggregate type, grouped by
reference, and rebuilds a fresh aggregate from them on every lookup. Callers
never share an instance, so a command that fails before `add` leaves the
repository as it was.
"""

import logging
from collections.abc import Iterator
from typing import Generic, TypeVar

from bestinvestments.domain.aggregates import Package, Project
from bestinvestments.domain.aggregates.base import Aggregate
from bestinvestments.domain.events import DomainEvent
from bestinvestments.domain.value_objects import (
    Identifier,
    PackageReference,
    ProjectReference,
)
from bestinvestments.interfaces.package_repository import PackageRepository
from bestinvestments.interfaces.project_repository import ProjectRepository

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Identifier)
A = TypeVar("A", bound=Aggregate)


class _History(Generic[R, A]):
    """Event histories of one aggregate type, in the order references appeared."""

    def __init__(self, aggregate_cls: type[A]) -> None:
        self._aggregate_cls = aggregate_cls
        self._events: dict[R, list[DomainEvent]] = {}

    def load(self, reference: R) -> A | None:
        if (events := self._events.get(reference)) is None:
            return None
        return self._aggregate_cls.rehydrate(reference.value, events)

    def append(self, reference: R, aggregate: A) -> None:
        if not (pending := aggregate.dequeue_uncommitted()):
            logger.debug(
                "Nothing to keep for %s %s", self._aggregate_cls.__name__, reference
            )
            return
        self._events.setdefault(reference, []).extend(pending)
        aggregate.mark_committed(len(pending))
        logger.debug(
            "Kept %d event(s) for %s %s",
            len(pending),
            self._aggregate_cls.__name__,
            reference,
        )

    def references(self) -> Iterator[R]:
        return iter(list(self._events))


class InMemoryProjectRepository(ProjectRepository):
    """Projects held in process memory for the lifetime of the repository."""

    def __init__(self) -> None:
        self._history: _History[ProjectReference, Project] = _History(Project)

    def get_by_reference(self, project_reference: ProjectReference) -> Project | None:
        return self._history.load(project_reference)

    def add(self, project: Project) -> None:
        self._history.append(project.reference, project)

    def references(self) -> Iterator[ProjectReference]:
        return self._history.references()


class InMemoryPackageRepository(PackageRepository):
    """Packages held in process memory for the lifetime of the repository."""

    def __init__(self) -> None:
        self._history: _History[PackageReference, Package] = _History(Package)

    def get_by_reference(self, package_reference: PackageReference) -> Package | None:
        return self._history.load(package_reference)

    def add(self, package: Package) -> None:
        self._history.append(package.reference, package)

    def references(self) -> Iterator[PackageReference]:
        return self._history.references()
