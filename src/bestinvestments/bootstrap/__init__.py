"""Bootstrap (composition root) for BestInvestments.

Wires the in-memory adapters and the configured consultation id generator into
a `Workspace`.

Import rules:
- Entry points get their workspace from *this* package, never by building
  adapters themselves.
- Inner layers must not import `bestinvestments.bootstrap`.
"""

from .bootstrap import bootstrap, build_consultation_ids

__all__ = ["bootstrap", "build_consultation_ids"]
