"""Contract tests.

Purpose
- Define the behavior of a port once (PackageRepository, ProjectRepository)
  and run it against every implementation to keep them interchangeable.

Guidelines
- Parametrize implementations via fixtures.
- Assert only the public contract (inputs/outputs/effects), not internals.
"""
