"""Use-case functions, one per command, grouped by bounded context."""
