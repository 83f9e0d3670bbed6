"""End-to-end CLI tests for the top-level `bestinvestments` command.

These tests exercise logging, verbosity flags, logger-level overrides, debug
formatting, configuration errors and the flight recorder by replaying a small
command script under various CLI flags and environment variables.
"""

import re
from pathlib import Path

import pytest

from bestinvestments.entrypoints.cli.main import bestinvestments

# pylint: disable=unused-argument,redefined-outer-name

SCHEDULED = "Scheduled consultation consultation-5432 with specialist-1234"


def assert_in_output(pattern: str, output: str) -> None:
    """Assert that a regex pattern is found in the output string."""
    if not re.search(pattern, output, re.MULTILINE):
        raise AssertionError(f"Pattern '{pattern}' not found in output:\n{output}")


def assert_not_in_output(pattern: str, output: str) -> None:
    """Assert that a regex pattern is NOT found in the output string."""
    if re.search(pattern, output, re.MULTILINE):
        raise AssertionError(f"Pattern '{pattern}' found in output:\n{output}")


@pytest.fixture
def script(write_script, consultation_script) -> str:
    """Path of a script that replays cleanly."""
    return write_script(consultation_script)


@pytest.fixture
def failing_script(write_script, consultation_script) -> str:
    """Path of a script whose last command is rejected."""
    return write_script(
        consultation_script
        + [{"command": "CloseProject", "project_reference": "project-1"}],
        name="failing.json",
    )


def test_default_hides_info(runner, script):
    """Default invocation hides INFO records."""
    result = runner.invoke(bestinvestments, ["replay", script])
    assert result.exit_code == 0
    assert_not_in_output(SCHEDULED, result.stderr)


def test_verbose_shows_info(runner, script):
    """Single -v enables INFO-level console output (but not DEBUG)."""
    result = runner.invoke(bestinvestments, ["-v", "replay", script])
    assert result.exit_code == 0
    assert_in_output(SCHEDULED, result.stderr)
    assert_not_in_output("Handling ", result.stderr)


def test_vv_shows_debug(runner, script):
    """-vv enables DEBUG-level console output."""
    result = runner.invoke(bestinvestments, ["-vv", "replay", script])
    assert result.exit_code == 0
    assert_in_output("Handling StartProject", result.stderr)


def test_quiet_hides_errors(runner, failing_script):
    """-qq lowers verbosity to CRITICAL, hiding the workspace's ERROR record."""
    loud = runner.invoke(bestinvestments, ["replay", failing_script])
    quiet = runner.invoke(bestinvestments, ["-qq", "replay", failing_script])

    assert loud.exit_code == quiet.exit_code == 1
    assert_in_output("CloseProject failed", loud.stderr)
    assert_not_in_output("CloseProject failed", quiet.stderr)


@pytest.mark.parametrize(
    "env, cli_args",
    [
        ({}, ["-v", "-L", "bestinvestments.service_layer=WARNING"]),
        (
            {"BESTINVESTMENTS_LOGGER_LEVELS": "bestinvestments.service_layer=WARNING"},
            ["-v"],
        ),
    ],
    ids=["cli-flag", "env-var"],
)
def test_logger_level_overrides(runner, script, env, cli_args):
    """Per-logger overrides silence INFO records from the named logger."""
    result = runner.invoke(bestinvestments, cli_args + ["replay", script], env=env)
    assert result.exit_code == 0
    assert_not_in_output(SCHEDULED, result.stderr)
    assert_in_output("Replayed 7 command", result.stderr)


def test_invalid_logger_level_is_usage_error(runner, script):
    """A malformed -L value is rejected by Click."""
    result = runner.invoke(bestinvestments, ["-L", "nonsense", "replay", script])
    assert result.exit_code == 2
    assert_in_output("Expected NAME=LEVEL", result.output)


def test_debug_mode_shows_logger_names(runner, script):
    """--debug includes logger names in console output."""
    result = runner.invoke(bestinvestments, ["--debug", "replay", script])
    assert result.exit_code == 0
    assert_in_output(r"bestinvestments\.service_layer\.workspace", result.stderr)


@pytest.mark.parametrize("kind", ["ulid", "uuid4", "sequential"])
def test_id_generator_choices_accepted(runner, write_script, kind):
    """Every documented id generator can be selected from the environment."""
    script = write_script(
        [
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
            },
        ]
    )
    result = runner.invoke(
        bestinvestments,
        ["replay", script, "--format", "json"],
        env={"BESTINVESTMENTS_ID_GENERATOR": kind},
    )
    assert result.exit_code == 0, result.output


def test_invalid_id_generator_exits(runner, script):
    """An unknown id generator in the environment exits with code 2."""
    result = runner.invoke(
        bestinvestments,
        ["replay", script],
        env={"BESTINVESTMENTS_ID_GENERATOR": "snowflake"},
    )
    assert result.exit_code == 2
    assert_in_output("is not one of ulid, uuid4, sequential", result.stderr)


def test_flight_recorder_flushes_on_error(runner, failing_script):
    """A failing replay dumps buffered DEBUG records to the log file."""
    result = runner.invoke(
        bestinvestments, ["--log-path", "fr.log", "replay", failing_script]
    )
    assert result.exit_code == 1

    content = Path("fr.log").read_text(encoding="utf-8")
    assert_in_output("DEBUG .*Handling DraftProject", content)
    assert_in_output("ERROR .*CloseProject failed", content)


def test_flight_recorder_quiet_on_success(runner, script):
    """A clean run writes nothing to the log file unless forced."""
    result = runner.invoke(bestinvestments, ["--log-path", "fr.log", "replay", script])
    assert result.exit_code == 0
    assert "Handling DraftProject" not in Path("fr.log").read_text(encoding="utf-8")


def test_flight_recorder_can_be_disabled(runner, failing_script):
    """--no-flight-recorder never creates the log file."""
    result = runner.invoke(
        bestinvestments,
        ["--log-path", "fr.log", "--no-flight-recorder", "replay", failing_script],
    )
    assert result.exit_code == 1
    assert not Path("fr.log").exists()


def test_startup_logging(runner, script):
    """--force-flush writes the startup summary and diagnostics."""
    result = runner.invoke(
        bestinvestments,
        ["--log-path", "startup.log", "--force-flush", "replay", script],
        env={"BESTINVESTMENTS_ID_GENERATOR": "sequential"},
    )
    assert result.exit_code == 0
    content = Path("startup.log").read_text(encoding="utf-8")
    assert_in_output(r"BestInvestments \d+\.\d+\.\d+", content)
    assert_in_output(r"console=WARNING", content)
    assert_in_output(r"flight-recorder=ON", content)
    assert_in_output(r"Python: \d+\.\d+\.\d+", content)
    assert_in_output(r"PID: \d+", content)
    assert_in_output(r"Consultation id generator: sequential", content)
    assert_in_output(
        r"Flight recorder: path=startup\.log, capacity=2000, flush_on_close=True",
        content,
    )
    assert_in_output(r"Per-logger overrides: {'markdown_it': 'WARNING'}", content)
    assert_in_output(r"Replayed 7 command\(s\) from script\.json", content)
