"""Global pytest fixtures for BestInvestments."""

from __future__ import annotations

from datetime import datetime

import pytest

from bestinvestments.domain.entities import Consultation
from bestinvestments.domain.value_objects import SpecialistIdentifier


@pytest.fixture
def make_consultation():
    """Factory for consultations created on 2016-12-12 with `specialist-1234`.

    Example:
        ```py
        def test_something(make_consultation):
            consultation = make_consultation(specialist="specialist-9876")
        ```
    """

    def _make(
        *,
        specialist: str = "specialist-1234",
        created_at: datetime = datetime(2016, 12, 12),
        consultation_id=None,
    ) -> Consultation:
        return Consultation(
            created_at, SpecialistIdentifier(specialist), consultation_id
        )

    return _make
