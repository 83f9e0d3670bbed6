"""Failures of a use case that are not domain rule violations."""

from bestinvestments.domain.value_objects import PackageReference, ProjectReference


class ServiceError(Exception):
    """Base class for service-layer errors."""


class ProjectNotFoundError(ServiceError, LookupError):
    """Raised when a command names a project that was never drafted."""

    def __init__(self, reference: ProjectReference) -> None:
        super().__init__(f"No project with reference {reference}.")
        self.reference = reference


class PackageNotFoundError(ServiceError, LookupError):
    """Raised when a command names a package that was never registered."""

    def __init__(self, reference: PackageReference) -> None:
        super().__init__(f"No package with reference {reference}.")
        self.reference = reference


class DuplicateProjectError(ServiceError):
    """Raised when drafting a project under a reference already in use."""

    def __init__(self, reference: ProjectReference) -> None:
        super().__init__(f"Project {reference} has already been drafted.")
        self.reference = reference


class DuplicatePackageError(ServiceError):
    """Raised when registering a package under a reference already in use."""

    def __init__(self, reference: PackageReference) -> None:
        super().__init__(f"Package {reference} has already been registered.")
        self.reference = reference


class UnknownCommandError(ServiceError, LookupError):
    """Raised when a workspace is handed a command it has no use case for."""

    def __init__(self, cmd: object) -> None:
        super().__init__(f"No use case handles {type(cmd).__name__}.")
        self.command = cmd
