"""The crowdfunding contract with all its operations."""

from __future__ import annotations

from boundless.admin import ContractManagement
from boundless.env import Env
from boundless.milestones import MilestoneOperations
from boundless.projects import ProjectManagement
from boundless.voting import VotingOperations


class BoundlessContract(
    ContractManagement,
    ProjectManagement,
    VotingOperations,
    MilestoneOperations,
):
    """A contract instance bound to the environment it runs in."""

    def __init__(self, env=None):
        self.env = env if env is not None else Env()