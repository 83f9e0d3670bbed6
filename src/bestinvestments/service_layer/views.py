"""Read-side views over the project and package repositories."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import TYPE_CHECKING

from bestinvestments.domain.value_objects import ConsultationStatus, PackageReference

if TYPE_CHECKING:
    from bestinvestments.domain.aggregates import Package, Project
    from bestinvestments.interfaces.package_repository import PackageRepository
    from bestinvestments.interfaces.project_repository import ProjectRepository


@dataclass(frozen=True)
class ConsultationView:
    """Flat, presentation-friendly view of a consultation."""

    consultation_id: str
    specialist_id: str
    created_at: datetime
    status: str


@dataclass(frozen=True)
class ProjectView:
    """Flat view of a project and its consultations, in scheduling order."""

    project_reference: str
    client_id: str | None
    name: str | None
    deadline: date | None
    status: str
    consultations: tuple[ConsultationView, ...]

    @property
    def has_open_consultations(self) -> bool:
        """True if any consultation in the view is open."""
        return any(
            c.status == ConsultationStatus.OPEN.value for c in self.consultations
        )


@dataclass(frozen=True)
class PackageView:
    """Flat view of a package's balance."""

    package_reference: str
    client_id: str | None
    start_date: date | None
    end_date: date | None
    nominal_hours: int
    booked_minutes: int
    remaining_minutes: int


# ============================================================================
#                               Queries
# ============================================================================


def project_views(projects: ProjectRepository) -> list[ProjectView]:
    """Return a view of every project, in drafting order."""

    return [
        _to_project_view(project)
        for reference in projects.references()
        if (project := projects.get_by_reference(reference)) is not None
    ]


def package_views(packages: PackageRepository) -> list[PackageView]:
    """Return a view of every package, in registration order."""

    return [
        _to_package_view(package)
        for reference in packages.references()
        if (package := packages.get_by_reference(reference)) is not None
    ]


def package_view(
    packages: PackageRepository, package_reference: str
) -> PackageView | None:
    """Return a view of a package's balance, or None if it does not exist."""

    package = packages.get_by_reference(PackageReference(package_reference))
    return None if package is None else _to_package_view(package)


# ============================================================================
#                               Helpers
# ============================================================================


def _to_package_view(package: Package) -> PackageView:
    return PackageView(
        package_reference=package.aggregate_id,
        client_id=package.client_id.value if package.client_id else None,
        start_date=package.start_date,
        end_date=package.end_date,
        nominal_hours=package.nominal_hours,
        booked_minutes=package.booked_minutes,
        remaining_minutes=package.remaining_minutes,
    )


def _to_project_view(project: Project) -> ProjectView:
    return ProjectView(
        project_reference=project.aggregate_id,
        client_id=project.client_id.value if project.client_id else None,
        name=project.name,
        deadline=project.deadline,
        status=project.status.value,
        consultations=tuple(
            ConsultationView(
                consultation_id=c.id.value,
                specialist_id=c.specialist_id.value,
                created_at=c.created_at,
                status=c.status.value,
            )
            for c in project.consultations
        ),
    )
