"""Package Aggregate"""

import calendar
from datetime import date

from bestinvestments.domain import errors, events
from bestinvestments.domain.value_objects import (
    ClientIdentifier,
    ConsultationIdentifier,
    PackageReference,
)

from .base import Aggregate

# pylint: disable=too-many-arguments


def add_months(day: date, months: int) -> date:
    """Shift a date by whole months, clamping to the last day of the month."""
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


class Package(Aggregate):
    """Aggregate root representing a prepaid block of consultation hours."""

    def __init__(self, aggregate_id: str) -> None:
        super().__init__(aggregate_id)
        self.reference = PackageReference(aggregate_id)
        self.client_id: ClientIdentifier | None = None
        self.start_date: date | None = None
        self.duration_months: int = 0
        self.nominal_hours: int = 0
        self.bookings: dict[ConsultationIdentifier, int] = {}

    # --- Construction Paths ---

    @classmethod
    def register(
        cls,
        reference: PackageReference,
        client_id: ClientIdentifier,
        start_date: date,
        duration_months: int,
        nominal_hours: int,
    ) -> "Package":
        """Register a new package.

        Raises:
            ValueError: If the duration or the nominal hours are not positive.
        """
        if duration_months < 1:
            raise ValueError("duration_months must be >= 1")
        if nominal_hours < 1:
            raise ValueError("nominal_hours must be >= 1")

        package = cls(reference.value)
        package._enqueue(
            events.PackageRegistered(
                package_reference=reference.value,
                client_id=client_id.value,
                start_date=start_date.isoformat(),
                duration_months=duration_months,
                nominal_hours=nominal_hours,
            )
        )
        return package

    # --- State Transitions ---

    def book_consultation(
        self, consultation_id: ConsultationIdentifier, minutes: int
    ) -> None:
        """Book the time spent on a consultation against this package.

        Raises:
            ValueError: If `minutes` is not positive.
            ConsultationAlreadyBookedError: If the consultation was booked before.
            PackageHoursExceededError: If the booking exceeds the remaining time.
        """
        if minutes < 1:
            raise ValueError("minutes must be >= 1")
        if consultation_id in self.bookings:
            raise errors.ConsultationAlreadyBookedError(
                self.aggregate_id, consultation_id.value
            )
        if minutes > self.remaining_minutes:
            raise errors.PackageHoursExceededError(
                self.aggregate_id, minutes, self.remaining_minutes
            )
        self._enqueue(
            events.ConsultationBooked(
                package_reference=self.aggregate_id,
                consultation_id=consultation_id.value,
                minutes=minutes,
            )
        )

    # --- Queries ---

    @property
    def end_date(self) -> date | None:
        """First day after the package has run out, or None before registration."""
        if self.start_date is None:
            return None
        return add_months(self.start_date, self.duration_months)

    def is_active_on(self, day: date) -> bool:
        """Return True if `day` falls within the package's running period."""
        if self.start_date is None or self.end_date is None:
            return False
        return self.start_date <= day < self.end_date

    @property
    def booked_minutes(self) -> int:
        """Total consultation minutes booked so far."""
        return sum(self.bookings.values())

    @property
    def remaining_minutes(self) -> int:
        """Minutes still available on the package."""
        return self.nominal_hours * 60 - self.booked_minutes

    # --- Event Application ---

    def _apply(self, event: events.DomainEvent) -> None:
        match event:
            case events.PackageRegistered():
                self.client_id = ClientIdentifier(event.client_id)
                self.start_date = date.fromisoformat(event.start_date)
                self.duration_months = event.duration_months
                self.nominal_hours = event.nominal_hours
            case events.ConsultationBooked():
                self.bookings[ConsultationIdentifier(event.consultation_id)] = (
                    event.minutes
                )
            case _:
                raise ValueError(f"Unhandled event type: {type(event).__name__}")
