"""Fixtures for end-to-end CLI tests, and default marks for `tests/e2e/`."""

import json
import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

# pylint: disable=redefined-outer-name,unused-argument

E2E_ROOT = Path(__file__).parent.resolve()
MARKER_NAME = "e2e"


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add default `e2e` marks to items in `tests/e2e/`."""
    for item in items:
        if E2E_ROOT in item.path.resolve().parents and not any(
            marker.name == MARKER_NAME for marker in item.iter_markers()
        ):
            item.add_marker(pytest.mark.e2e)


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo the root handlers and per-logger levels a CLI run installs."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name in list(logging.root.manager.loggerDict):
        if name.startswith("bestinvestments"):
            logging.getLogger(name).setLevel(logging.NOTSET)


@pytest.fixture
def runner():
    """Return a Click CliRunner with a wide terminal and no ambient configuration.

    Rich wraps log lines and tables to the terminal width, so a wide one keeps
    assertions on whole lines stable.
    """
    return CliRunner(
        env={
            "COLUMNS": "200",
            "BESTINVESTMENTS_ID_GENERATOR": None,
            "BESTINVESTMENTS_LOGGER_LEVELS": None,
            "BESTINVESTMENTS_LOG_PATH": "flight_recorder.log",
        }
    )


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated filesystem."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def write_script(fs):
    """Write a list of command entries to a JSON script; return its path."""

    def _write(entries: list[dict], name: str = "script.json") -> str:
        Path(name).write_text(json.dumps(entries), encoding="utf-8")
        return name

    return _write


@pytest.fixture
def consultation_script() -> list[dict]:
    """A project with two consultations, one discarded, and a package booking."""
    return [
        {
            "command": "DraftProject",
            "project_reference": "project-1",
            "client_id": "client-1",
            "name": "Market scan",
            "deadline": "2017-01-31",
        },
        {"command": "StartProject", "project_reference": "project-1"},
        {
            "command": "ScheduleConsultation",
            "project_reference": "project-1",
            "specialist_id": "specialist-1234",
            "scheduled_at": "2016-12-12T10:00:00",
            "consultation_id": "consultation-5432",
        },
        {
            "command": "ScheduleConsultation",
            "project_reference": "project-1",
            "specialist_id": "specialist-9876",
            "scheduled_at": "2016-12-12T14:00:00",
            "consultation_id": "consultation-6543",
        },
        {
            "command": "DiscardConsultation",
            "project_reference": "project-1",
            "consultation_id": "consultation-5432",
        },
        {
            "command": "RegisterPackage",
            "package_reference": "package-1",
            "client_id": "client-1",
            "start_date": "2017-01-01",
            "duration_months": 12,
            "nominal_hours": 10,
        },
        {
            "command": "BookConsultation",
            "package_reference": "package-1",
            "consultation_id": "consultation-6543",
            "minutes": 90,
        },
    ]
