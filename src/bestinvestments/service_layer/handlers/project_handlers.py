"""Use cases of the research context: projects and their consultations."""

import logging

from bestinvestments.domain.aggregates import Project
from bestinvestments.domain.value_objects import (
    ClientIdentifier,
    ConsultationIdentifier,
    ProjectReference,
    SpecialistIdentifier,
)
from bestinvestments.interfaces.id_generator import ConsultationIdGenerator
from bestinvestments.interfaces.project_repository import ProjectRepository
from bestinvestments.service_layer import commands
from bestinvestments.service_layer.errors import (
    DuplicateProjectError,
    ProjectNotFoundError,
)

logger = logging.getLogger(__name__)


def draft_project(cmd: commands.DraftProject, projects: ProjectRepository) -> None:
    """Draft a new research project."""

    reference = ProjectReference(cmd.project_reference)
    if projects.get_by_reference(reference) is not None:
        raise DuplicateProjectError(reference)

    projects.add(
        Project.draft(
            reference=reference,
            client_id=ClientIdentifier(cmd.client_id),
            name=cmd.name,
            deadline=cmd.deadline,
        )
    )


def start_project(cmd: commands.StartProject, projects: ProjectRepository) -> None:
    """Open a project for consultations."""

    project = _fetch(projects, cmd.project_reference)
    project.start()
    projects.add(project)


def schedule_consultation(
    cmd: commands.ScheduleConsultation,
    projects: ProjectRepository,
    consultation_ids: ConsultationIdGenerator,
) -> None:
    """Schedule a consultation with a specialist.

    The consultation keeps the identifier given in the command; without one a
    fresh identifier is drawn from `consultation_ids`.
    """

    project = _fetch(projects, cmd.project_reference)
    consultation_id = (
        ConsultationIdentifier(cmd.consultation_id)
        if cmd.consultation_id is not None
        else consultation_ids.next_id()
    )
    project.schedule_consultation(
        consultation_id=consultation_id,
        specialist_id=SpecialistIdentifier(cmd.specialist_id),
        scheduled_at=cmd.scheduled_at,
    )
    projects.add(project)

    logger.info(
        "Scheduled consultation %s with %s on project %s",
        consultation_id,
        cmd.specialist_id,
        cmd.project_reference,
    )


def discard_consultation(
    cmd: commands.DiscardConsultation, projects: ProjectRepository
) -> None:
    """Discard a consultation on a project."""

    project = _fetch(projects, cmd.project_reference)
    project.discard_consultation(ConsultationIdentifier(cmd.consultation_id))
    projects.add(project)


def close_project(cmd: commands.CloseProject, projects: ProjectRepository) -> None:
    """Close a project once all its consultations are discarded."""

    project = _fetch(projects, cmd.project_reference)
    project.close()
    projects.add(project)


def _fetch(projects: ProjectRepository, reference: str) -> Project:
    project_reference = ProjectReference(reference)
    if (project := projects.get_by_reference(project_reference)) is None:
        raise ProjectNotFoundError(project_reference)
    return project
