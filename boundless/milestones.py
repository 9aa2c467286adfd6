"""Releasing, approving and rejecting project milestones."""

from __future__ import annotations

from dataclasses import replace

from boundless.datatypes import (
    BoundlessError,
    DataKey,
    ErrorCode,
    MilestoneStatus,
    ProjectStatus,
)
from boundless.projects import _load_project, _save_and_publish

_UNREVIEWABLE = (ProjectStatus.VOTING, ProjectStatus.FUNDING)

_TOPICS = {
    MilestoneStatus.RELEASED: "released",
    MilestoneStatus.APPROVED: "approved",
    MilestoneStatus.REJECTED: "rejected",
}


def _invalid():
    return BoundlessError(ErrorCode.INVALID_OPERATION)


class MilestoneOperations:
    """Milestone operations; milestones are addressed by their position.

    Meant to be combined into a contract class that provides ``self.env``.
    """

    def _move(self, project_id, milestone_number, admin, expected, new_status):
        project = _load_project(self.env, project_id)
        if project.status in _UNREVIEWABLE or project.creator == admin:
            raise _invalid()
        if len(project.milestones) <= milestone_number:
            raise _invalid()
        milestone = project.milestones[milestone_number]
        if milestone.status != expected:
            raise _invalid()
        project.milestones[milestone_number] = replace(milestone, status=new_status)
        if new_status == MilestoneStatus.APPROVED:
            project.milestone_approvals.append((milestone_number, True))
        _save_and_publish(self.env, project_id, project, _TOPICS[new_status], milestone_number)

    def release_milestone(self, project_id, milestone_number, admin):
        """Release a pending milestone for review; only the contract admin may."""
        self.env.require_auth(admin)
        admin_address = self.env.storage.get(DataKey.ADMIN)
        if admin_address is None:
            raise BoundlessError(ErrorCode.NOT_FOUND)
        if admin_address != admin:
            raise BoundlessError(ErrorCode.UNAUTHORIZED)
        self._move(
            project_id, milestone_number, admin, MilestoneStatus.PENDING, MilestoneStatus.RELEASED
        )

    def approve_milestone(self, project_id, milestone_number, admin):
        """Approve a released milestone."""
        self.env.require_auth(admin)
        self._move(
            project_id, milestone_number, admin, MilestoneStatus.RELEASED, MilestoneStatus.APPROVED
        )

    def reject_milestone(self, project_id, milestone_number, admin):
        """Reject a released milestone."""
        self.env.require_auth(admin)
        self._move(
            project_id, milestone_number, admin, MilestoneStatus.RELEASED, MilestoneStatus.REJECTED
        )

    def get_milestone_status(self, project_id, milestone_number):
        """Return the status of the milestone at ``milestone_number``."""
        milestones = _load_project(self.env, project_id).milestones
        if len(milestones) <= milestone_number:
            raise _invalid()
        return milestones[milestone_number].status

    def get_project_milestones(self, project_id):
        """Return the project's milestones."""
        return _load_project(self.env, project_id).milestones