"""Loading of command scripts for ``bestinvestments replay``.

A script is a JSON array of objects. Each object names a command in its
``"command"`` key; the remaining keys are the command's fields. Each value
must have the JSON type of its field. Counts are integers (never booleans),
references and names are strings, and dates and datetimes are ISO 8601
strings::

    [
      {"command": "DraftProject", "project_reference": "project-1",
       "client_id": "client-1", "name": "Market scan", "deadline": "2017-01-31"},
      {"command": "StartProject", "project_reference": "project-1"},
      {"command": "ScheduleConsultation", "project_reference": "project-1",
       "specialist_id": "specialist-1234", "scheduled_at": "2016-12-12T10:00:00"}
    ]
"""

from __future__ import annotations

import json
from dataclasses import fields
from datetime import date, datetime
from pathlib import Path
from typing import Any, get_args, get_type_hints

from bestinvestments.service_layer.commands import COMMAND_REGISTRY, Command

COMMAND_KEY = "command"


class ScriptError(Exception):
    """Raised when a command script cannot be read or parsed."""


def load_commands(path: Path) -> list[Command]:
    """Read a command script and build its commands, in order.

    Raises:
        ScriptError: If the file is not valid JSON, is not a list, or any entry
            does not describe a known command with valid fields.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ScriptError(f"{path}: invalid JSON ({e.msg} at line {e.lineno})") from e

    if not isinstance(data, list):
        raise ScriptError(f"{path}: expected a JSON array of commands")

    return [parse_command(entry, position) for position, entry in enumerate(data, 1)]


def parse_command(entry: Any, position: int) -> Command:
    """Build a single command from its JSON object.

    Args:
        entry: The decoded JSON object.
        position: 1-based position of the entry, used in error messages.

    Raises:
        ScriptError: If the entry cannot be turned into a command.
    """
    if not isinstance(entry, dict):
        raise ScriptError(f"entry {position}: expected an object")

    values = dict(entry)
    name = values.pop(COMMAND_KEY, None)
    if (command_cls := COMMAND_REGISTRY.get(str(name))) is None:
        raise ScriptError(f"entry {position}: unknown command {name!r}")

    hints = get_type_hints(command_cls)
    known = {field.name for field in fields(command_cls)}
    if unexpected := sorted(set(values) - known):
        raise ScriptError(
            f"entry {position}: unexpected field(s) for {name}: {', '.join(unexpected)}"
        )

    try:
        kwargs = {key: _coerce(key, hints[key], value) for key, value in values.items()}
        return command_cls(**kwargs)
    except (TypeError, ValueError) as e:
        raise ScriptError(f"entry {position} ({name}): {e}") from e


def _coerce(field_name: str, hint: Any, value: Any) -> Any:
    """Check a decoded JSON value against its field type and convert it.

    Raises:
        TypeError: If the value does not have the JSON type the field needs.
        ValueError: If a date or datetime string is not ISO 8601.
    """
    if type(None) in (args := get_args(hint)):
        if value is None:
            return None
        (hint,) = (arg for arg in args if arg is not type(None))

    if hint in (date, datetime):
        if not isinstance(value, str):
            raise TypeError(
                f"field {field_name} expects an ISO 8601 string, got {value!r}"
            )
        return hint.fromisoformat(value)

    # JSON true/false decode to bool, which is an int subclass
    if not isinstance(value, hint) or (isinstance(value, bool) and hint is not bool):
        raise TypeError(f"field {field_name} expects {hint.__name__}, got {value!r}")
    return value
