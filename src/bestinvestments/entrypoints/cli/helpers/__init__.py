"""CLI helpers for BestInvestments.

Utilities used by the command-line interface: logger-level option parsing,
command-script loading, and message emitters that write to stderr with
emoji→ASCII fallbacks.
"""

from .messages import error, success, warn
from .scripts import ScriptError, load_commands

__all__ = ["ScriptError", "error", "load_commands", "success", "warn"]
