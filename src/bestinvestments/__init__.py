"""BestInvestments

A domain model for research consultations and invoicing packages.
Projects track which specialists are being consulted, and prepaid
packages record the consultation time billed against them.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
