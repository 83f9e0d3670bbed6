"""Pytest fixtures for service layer handler unit tests."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from bestinvestments.adapters.id_generators import SequentialConsultationIds
from bestinvestments.bootstrap import bootstrap
from bestinvestments.service_layer import commands
from bestinvestments.service_layer.workspace import Workspace

# pylint: disable=redefined-outer-name


@pytest.fixture
def workspace() -> Workspace:
    """An empty in-memory workspace.

    Consultation ids come out as ``"consultation-1"``, ``"consultation-2"``...
    """
    return bootstrap(SequentialConsultationIds())


@pytest.fixture
def active_project(workspace: Workspace) -> str:
    """Draft and start ``project-1``; return its reference."""
    workspace.handle(
        commands.DraftProject(
            project_reference="project-1",
            client_id="client-1",
            name="Market scan",
            deadline=date(2017, 1, 31),
        )
    )
    workspace.handle(commands.StartProject(project_reference="project-1"))
    return "project-1"


@pytest.fixture
def registered_package(workspace: Workspace) -> str:
    """Register ``package-1`` (12 months, 10 hours); return its reference."""
    workspace.handle(
        commands.RegisterPackage(
            package_reference="package-1",
            client_id="client-1",
            start_date=date(2017, 1, 1),
            duration_months=12,
            nominal_hours=10,
        )
    )
    return "package-1"


@pytest.fixture
def scheduled_at() -> datetime:
    """The day consultations in these tests are scheduled on."""
    return datetime(2016, 12, 12, 10, 0)
