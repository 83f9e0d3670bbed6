"""The workspace commands are applied to."""

import logging

from bestinvestments.interfaces.id_generator import ConsultationIdGenerator
from bestinvestments.interfaces.package_repository import PackageRepository
from bestinvestments.interfaces.project_repository import ProjectRepository

from . import commands
from .errors import UnknownCommandError
from .handlers import package_handlers, project_handlers

logger = logging.getLogger(__name__)


class Workspace:
    """Routes each command to its use case over one set of repositories.

    Args:
        projects: Where projects are looked up and kept.
        packages: Where packages are looked up and kept.
        consultation_ids: Source of identifiers for consultations scheduled
            without one.
    """

    def __init__(
        self,
        projects: ProjectRepository,
        packages: PackageRepository,
        consultation_ids: ConsultationIdGenerator,
    ) -> None:
        self.projects = projects
        self.packages = packages
        self.consultation_ids = consultation_ids

    def handle(self, cmd: commands.Command) -> None:
        """Apply a command.

        Raises:
            UnknownCommandError: If no use case handles the command's type.
            Exception: Whatever the use case raises, after logging it.
        """

        logger.debug("Handling %s", cmd)
        try:
            self._dispatch(cmd)
        except UnknownCommandError:
            logger.error("No use case handles %s", type(cmd).__name__)
            raise
        except Exception:
            logger.exception("%s failed", type(cmd).__name__)
            raise

    def _dispatch(self, cmd: commands.Command) -> None:
        match cmd:
            case commands.DraftProject():
                project_handlers.draft_project(cmd, self.projects)
            case commands.StartProject():
                project_handlers.start_project(cmd, self.projects)
            case commands.ScheduleConsultation():
                project_handlers.schedule_consultation(
                    cmd, self.projects, self.consultation_ids
                )
            case commands.DiscardConsultation():
                project_handlers.discard_consultation(cmd, self.projects)
            case commands.CloseProject():
                project_handlers.close_project(cmd, self.projects)
            case commands.RegisterPackage():
                package_handlers.register_package(cmd, self.packages)
            case commands.BookConsultation():
                package_handlers.book_consultation(cmd, self.packages)
            case _:
                raise UnknownCommandError(cmd)
