"""Data types, constants and errors shared by the crowdfunding contract."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum

from boundless.env import Address

DAY_IN_LEDGERS = 17280  # five seconds per ledger
PROJECTS_BUMP_AMOUNT = 30 * DAY_IN_LEDGERS
PROJECTS_LIFETIME_THRESHOLD = PROJECTS_BUMP_AMOUNT - DAY_IN_LEDGERS

FUNDING_PERIOD_DAYS = 30
VOTING_PERIOD_DAYS = 30

FUNDING_PERIOD_LEDGERS = FUNDING_PERIOD_DAYS * DAY_IN_LEDGERS
VOTING_PERIOD_LEDGERS = VOTING_PERIOD_DAYS * DAY_IN_LEDGERS


class ErrorCode(IntEnum):
    """Numeric codes of every failure the contract can report."""

    ALREADY_INITIALIZED = 1
    UNAUTHORIZED = 2
    ALREADY_EXISTS = 3
    NOT_FOUND = 4
    INVALID_FUNDING_TARGET = 5
    INVALID_MILESTONE = 6
    PROJECT_CLOSED = 7
    FUNDING_PERIOD_ENDED = 8
    VOTING_PERIOD_ENDED = 9
    ALREADY_VOTED = 10
    NOT_VOTED = 11
    INVALID_VOTE = 12
    MILESTONE_ALREADY_RELEASED = 13
    MILESTONE_ALREADY_APPROVED = 14
    MILESTONE_ALREADY_REJECTED = 15
    INSUFFICIENT_FUNDS = 16
    REFUND_ALREADY_PROCESSED = 17
    INVALID_OPERATION = 18
    INTERNAL_ERROR = 19


class BoundlessError(Exception):
    """Raised when a contract operation fails; ``code`` tells why."""

    def __init__(self, code):
        self.code = ErrorCode(code)
        super().__init__(f"{self.code.name} ({int(self.code)})")


class ProjectStatus(IntEnum):
    """Lifecycle phase of a project."""

    FUNDING = 1
    VOTING = 2
    FUNDED = 3
    FAILED = 4
    CLOSED = 5


class MilestoneStatus(Enum):
    """Review state of a single milestone."""

    PENDING = "pending"
    RELEASED = "released"
    APPROVED = "approved"
    REJECTED = "rejected"


class DataKey(Enum):
    """Storage keys.

    Keys without a payload are used as they are; keys that belong to a
    project are stored as ``(DataKey.PROJECT, project_id)`` and the like.
    """

    VERSION = "version"
    INITIALIZED = "initialized"
    ADMIN = "admin"
    PROJECTS = "projects"
    PROJECT = "project"
    BACKERS = "backers"
    VOTES = "votes"
    MILESTONES = "milestones"


@dataclass(frozen=True)
class ProjectCreatedEvent:
    project_id: str
    creator: Address
    funding_target: int
    funding_deadline: int


@dataclass(frozen=True)
class ProjectFundedEvent:
    project_id: str
    total_funded: int


@dataclass(frozen=True)
class ProjectVotingEvent:
    project_id: str
    voting_deadline: int


@dataclass(frozen=True)
class ProjectClosedEvent:
    project_id: str
    is_successful: bool


@dataclass(frozen=True)
class MilestoneReleasedEvent:
    project_id: str
    milestone_number: int
    amount: int


@dataclass(frozen=True)
class MilestoneApprovedEvent:
    project_id: str
    milestone_number: int


@dataclass(frozen=True)
class MilestoneRejectedEvent:
    project_id: str
    milestone_number: int


@dataclass(frozen=True)
class RefundProcessedEvent:
    project_id: str
    backer: Address
    amount: int


@dataclass
class Milestone:
    """A milestone of a project; ``number`` is 1-based."""

    number: int
    description: str
    amount: int
    status: MilestoneStatus = MilestoneStatus.PENDING
    released_at: int | None = None
    completed_at: int | None = None


@dataclass
class BackerContribution:
    """One backer's contribution to a project."""

    backer: Address
    amount: int
    timestamp: int


@dataclass
class Vote:
    """A vote: positive approves, negative rejects."""

    voter: Address
    value: int
    timestamp: int


@dataclass
class Project:
    """Everything the contract records about one project."""

    project_id: str
    creator: Address
    metadata_uri: str
    funding_target: int
    milestone_count: int
    current_milestone: int = 0
    total_funded: int = 0
    backers: list[tuple[Address, int]] = field(default_factory=list)
    votes: list[tuple[Address, int]] = field(default_factory=list)
    validated: bool = False
    is_successful: bool = False
    is_closed: bool = False
    created_at: int = 0
    milestone_approvals: list[tuple[int, bool]] = field(default_factory=list)
    milestone_releases: list[tuple[int, int]] = field(default_factory=list)
    refund_processed: bool = False
    funding_deadline: int = 0
    voting_deadline: int = 0
    status: ProjectStatus = ProjectStatus.VOTING
    milestones: list[Milestone] = field(default_factory=list)

    def find_vote(self, voter):
        """Return the position of ``voter``'s vote in ``votes``, or None."""
        return next(
            (position for position, (who, _) in enumerate(self.votes) if who == voter),
            None,
        )