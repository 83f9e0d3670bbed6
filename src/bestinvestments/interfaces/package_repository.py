"""Defines the port used by billing flows to look up prepaid packages."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from bestinvestments.domain.aggregates import Package
    from bestinvestments.domain.value_objects import PackageReference


class PackageRepository(abc.ABC):
    """Read and write access to `Package` aggregates keyed by their reference."""

    @abc.abstractmethod
    def get_by_reference(self, package_reference: PackageReference) -> Package | None:
        """Return the package with the given reference.

        Args:
            package_reference: Reference of the package to fetch.

        Returns:
            The package, or `None` if no package has that reference.
        """

    @abc.abstractmethod
    def add(self, package: Package) -> None:
        """Keep the changes made to a package since it was fetched or created."""

    @abc.abstractmethod
    def references(self) -> Iterator[PackageReference]:
        """Yield the reference of every known package, in registration order."""
