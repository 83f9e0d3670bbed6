"""Command-line interface for BestInvestments."""
