"""Use cases of the invoicing context: prepaid packages."""

import logging

from bestinvestments.domain.aggregates import Package
from bestinvestments.domain.value_objects import (
    ClientIdentifier,
    ConsultationIdentifier,
    PackageReference,
)
from bestinvestments.interfaces.package_repository import PackageRepository
from bestinvestments.service_layer import commands
from bestinvestments.service_layer.errors import (
    DuplicatePackageError,
    PackageNotFoundError,
)

logger = logging.getLogger(__name__)


def register_package(cmd: commands.RegisterPackage, packages: PackageRepository) -> None:
    """Register a new prepaid package."""

    reference = PackageReference(cmd.package_reference)
    if packages.get_by_reference(reference) is not None:
        raise DuplicatePackageError(reference)

    packages.add(
        Package.register(
            reference=reference,
            client_id=ClientIdentifier(cmd.client_id),
            start_date=cmd.start_date,
            duration_months=cmd.duration_months,
            nominal_hours=cmd.nominal_hours,
        )
    )


def book_consultation(
    cmd: commands.BookConsultation, packages: PackageRepository
) -> None:
    """Book the time of a consultation against a package."""

    reference = PackageReference(cmd.package_reference)
    if (package := packages.get_by_reference(reference)) is None:
        raise PackageNotFoundError(reference)

    package.book_consultation(ConsultationIdentifier(cmd.consultation_id), cmd.minutes)
    packages.add(package)

    logger.debug(
        "Booked %d minutes of %s on package %s",
        cmd.minutes,
        cmd.consultation_id,
        reference,
    )
