"""Casting, withdrawing and inspecting votes on projects."""

from __future__ import annotations

from boundless.datatypes import BoundlessError, DataKey, ErrorCode, ProjectStatus

APPROVE = 1
REJECT = -1


def _project_key(project_id):
    return (DataKey.PROJECT, project_id)


class VotingOperations:
    """Voting operations.

    Meant to be combined into a contract class that provides ``self.env``.
    """

    def _voting_project(self, project_id):
        project = self.env.storage.get(_project_key(project_id))
        if project is None:
            raise BoundlessError(ErrorCode.NOT_FOUND)
        return project

    def _open_for_voting(self, project_id, voter):
        project = self._voting_project(project_id)
        if project.status != ProjectStatus.VOTING:
            raise BoundlessError(ErrorCode.INVALID_OPERATION)
        if project.is_closed:
            raise BoundlessError(ErrorCode.PROJECT_CLOSED)
        if project.voting_deadline < self.env.timestamp:
            raise BoundlessError(ErrorCode.VOTING_PERIOD_ENDED)
        if project.creator == voter:
            raise BoundlessError(ErrorCode.INVALID_OPERATION)
        return project

    def vote_project(self, project_id, voter, vote_value):
        """Record ``voter``'s vote of +1 or -1 on a project in its voting phase."""
        project = self._open_for_voting(project_id, voter)
        if project.find_vote(voter) is not None:
            raise BoundlessError(ErrorCode.ALREADY_VOTED)
        if vote_value not in (APPROVE, REJECT):
            raise BoundlessError(ErrorCode.INVALID_VOTE)
        project.votes.append((voter, vote_value))
        self.env.storage.set(_project_key(project_id), project)
        self.env.publish((_project_key(project_id), "voted"), project_id)

    def withdraw_vote(self, project_id, voter):
        """Remove ``voter``'s vote from a project in its voting phase."""
        project = self._open_for_voting(project_id, voter)
        position = project.find_vote(voter)
        if position is None:
            raise BoundlessError(ErrorCode.NOT_VOTED)
        del project.votes[position]
        self.env.storage.set(_project_key(project_id), project)
        self.env.publish((_project_key(project_id), "withdrawn"), project_id)

    def has_voted(self, project_id, voter):
        """Return whether ``voter`` has a vote on the project."""
        return self._voting_project(project_id).find_vote(voter) is not None

    def get_vote(self, project_id, voter):
        """Return ``voter``'s vote value; ALREADY_VOTED is raised if there is none."""
        project = self._voting_project(project_id)
        position = project.find_vote(voter)
        if position is None:
            raise BoundlessError(ErrorCode.ALREADY_VOTED)
        return project.votes[position][1]