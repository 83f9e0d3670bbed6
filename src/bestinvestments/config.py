"""Configuration utilities for BestInvestments.

This module centralizes small helpers and constants related to application configuration.
"""

import os

ID_GENERATOR_ENV_VAR = "BESTINVESTMENTS_ID_GENERATOR"  # pragma: no mutate
ID_GENERATOR_CHOICES = ("ulid", "uuid4", "sequential")
DEFAULT_ID_GENERATOR = "ulid"


class InvalidIdGeneratorError(ValueError):
    """Raised when BESTINVESTMENTS_ID_GENERATOR names an unknown generator."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"{ID_GENERATOR_ENV_VAR}={value!r} is not one of "
            f"{', '.join(ID_GENERATOR_CHOICES)}."
        )
        self.value = value


def get_id_generator_kind() -> str:
    """Get the kind of generator used for new consultation identifiers.

    Returns:
        The lower-cased value of `BESTINVESTMENTS_ID_GENERATOR`, or `"ulid"` when
        the variable is unset or empty.

    Raises:
        InvalidIdGeneratorError: If the variable names an unknown generator.
    """
    if not (kind := os.environ.get(ID_GENERATOR_ENV_VAR, "").strip().lower()):
        return DEFAULT_ID_GENERATOR
    if kind not in ID_GENERATOR_CHOICES:
        raise InvalidIdGeneratorError(kind)
    return kind
