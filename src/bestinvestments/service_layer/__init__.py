"""Service layer for BestInvestments.

Implements application use-cases: commands, the functions handling them, the
`Workspace` routing commands to those functions, and read-side views. Calls
domain objects and the outbound ports declared in `bestinvestments.interfaces`.

Dependency rule: may import `bestinvestments.domain` and
`bestinvestments.interfaces`, but not `bestinvestments.adapters` or
`bestinvestments.entrypoints`.
"""
