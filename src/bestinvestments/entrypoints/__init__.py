"""Entrypoints (inbound adapters) for BestInvestments.

Expose the application to the outside world. Parse and validate inputs, send
commands to the bootstrapped workspace, and present results.

Dependency rule: may import `bestinvestments.bootstrap` and
`bestinvestments.service_layer`; avoid importing `bestinvestments.adapters`
directly.
"""
