"""Defines the port used by research flows to look up projects."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from bestinvestments.domain.aggregates import Project
    from bestinvestments.domain.value_objects import ProjectReference


class ProjectRepository(abc.ABC):
    """Read and write access to `Project` aggregates keyed by their reference."""

    @abc.abstractmethod
    def get_by_reference(self, project_reference: ProjectReference) -> Project | None:
        """Return the project with the given reference, or `None` if unknown."""

    @abc.abstractmethod
    def add(self, project: Project) -> None:
        """Keep the changes made to a project since it was fetched or drafted."""

    @abc.abstractmethod
    def references(self) -> Iterator[ProjectReference]:
        """Yield the reference of every known project, in drafting order."""
