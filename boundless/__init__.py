"""Crowdfunding contract model with project voting and milestone review on an in-memory ledger."""

__version__ = "0.1.0"
__all__ = ["admin", "contract", "datatypes", "env", "milestones", "projects", "voting"]