import pytest

from boundless.datatypes import (
    BoundlessError,
    ErrorCode,
    Milestone,
    MilestoneStatus,
    Project,
    ProjectStatus,
)
from boundless.env import Address


def _project():
    return Project(
        project_id="test_project",
        creator=Address.generate(),
        metadata_uri="https://example.com/metadata",
        funding_target=1000,
        milestone_count=5,
    )


@pytest.mark.parametrize("value", range(1, 20))
def test_every_integer_code_maps_to_an_error(value):
    error = BoundlessError(value)
    assert int(error.code) == value
    assert error.code.name in str(error)


def test_error_codes_lookup_by_number():
    assert BoundlessError(1).code is ErrorCode.ALREADY_INITIALIZED
    assert BoundlessError(19).code is ErrorCode.INTERNAL_ERROR


def test_error_accepts_integer_code():
    error = BoundlessError(int(ErrorCode.NOT_FOUND))
    assert error.code is ErrorCode.NOT_FOUND
    assert "NOT_FOUND" in str(error)


def test_error_rejects_unknown_code():
    with pytest.raises(ValueError):
        BoundlessError(0)


def test_error_is_an_exception_carrying_its_code():
    error = BoundlessError(ErrorCode.ALREADY_VOTED)
    assert isinstance(error, Exception)
    assert error.code is ErrorCode.ALREADY_VOTED


def test_project_status_values():
    assert ProjectStatus(1) is ProjectStatus.FUNDING
    assert ProjectStatus(5) is ProjectStatus.CLOSED


def test_new_project_defaults():
    project = _project()
    assert project.status is ProjectStatus.VOTING
    assert project.total_funded == 0
    assert project.votes == []
    assert project.milestones == []
    assert project.is_closed is False


def test_project_lists_are_not_shared():
    first, second = _project(), _project()
    first.votes.append((Address.generate(), 1))
    assert second.votes == []


def test_find_vote():
    project = _project()
    voter, other = Address.generate(), Address.generate()
    project.votes.append((other, -1))
    project.votes.append((voter, 1))
    assert project.find_vote(voter) == 1
    assert project.find_vote(other) == -1 or project.find_vote(other) == 0
    assert project.find_vote(Address.generate()) is None


def test_milestone_defaults_pending():
    milestone = Milestone(number=1, description="design", amount=100)
    assert milestone.status is MilestoneStatus.PENDING
    assert milestone.released_at is None
    assert milestone.completed_at is None