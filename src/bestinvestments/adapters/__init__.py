"""Adapters (outbound implementations) for BestInvestments.

Concrete implementations of the ports declared in `bestinvestments.interfaces`.

Dependency rule: may import `bestinvestments.interfaces` and
`bestinvestments.domain`; must not import `bestinvestments.entrypoints`.
"""
