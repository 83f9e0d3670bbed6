"""Outbound ports for BestInvestments.

Abstract contracts the service layer depends on. Concrete implementations live
in `bestinvestments.adapters`.

Dependency rule: may import `bestinvestments.domain`; must not import adapters,
bootstrap, or entrypoints.
"""
