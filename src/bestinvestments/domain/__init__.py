"""Domain layer for BestInvestments.

Contains business rules: value objects, entities, aggregates, collections and
domain events. This package is deliberately technology-agnostic.

Dependency rule: do not import from `bestinvestments.adapters` or
`bestinvestments.entrypoints`.
"""
