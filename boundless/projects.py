"""Creating projects and managing their settings."""

from __future__ import annotations

from boundless.datatypes import (
    VOTING_PERIOD_LEDGERS,
    BoundlessError,
    DataKey,
    ErrorCode,
    Project,
    ProjectStatus,
)

MIN_MILESTONES_EXCLUSIVE = 4
MAX_MILESTONES = 100


def _project_key(project_id):
    return (DataKey.PROJECT, project_id)


def _load_project(env, project_id):
    """Return the stored project or raise NOT_FOUND."""
    project = env.storage.get(_project_key(project_id))
    if project is None:
        raise BoundlessError(ErrorCode.NOT_FOUND)
    return project


def _save_and_publish(env, project_id, project, topic=None, data=None):
    """Store the project and, when a topic is given, publish an event for it."""
    env.storage.set(_project_key(project_id), project)
    if topic is not None:
        env.publish((_project_key(project_id), topic), data)


class ProjectManagement:
    """Project operations.

    Meant to be combined into a contract class that provides ``self.env``.
    """

    def _update_owned(self, project_id, caller, **changes):
        self.env.require_auth(caller)
        project = _load_project(self.env, project_id)
        if project.creator != caller:
            raise BoundlessError(ErrorCode.UNAUTHORIZED)
        if "is_closed" in changes and project.status != ProjectStatus.VOTING:
            raise BoundlessError(ErrorCode.UNAUTHORIZED)
        for name, value in changes.items():
            setattr(project, name, value)
        _save_and_publish(self.env, project_id, project)

    def create_project(self, project_id, creator, metadata_uri, funding_target, milestone_count):
        """Create a project that opens in the voting phase."""
        if self.env.storage.has(_project_key(project_id)):
            raise BoundlessError(ErrorCode.ALREADY_EXISTS)
        if funding_target == 0:
            raise BoundlessError(ErrorCode.INVALID_FUNDING_TARGET)
        if not MIN_MILESTONES_EXCLUSIVE < milestone_count <= MAX_MILESTONES:
            raise BoundlessError(ErrorCode.INVALID_MILESTONE)
        self.env.require_auth(creator)

        now = self.env.timestamp
        project = Project(
            project_id=project_id,
            creator=creator,
            metadata_uri=metadata_uri,
            funding_target=funding_target,
            milestone_count=milestone_count,
            created_at=now,
            voting_deadline=now + VOTING_PERIOD_LEDGERS,
            funding_deadline=0,
            status=ProjectStatus.VOTING,
        )
        _save_and_publish(self.env, project_id, project, "created", project_id)

    def get_project(self, project_id):
        """Return the stored project; raise NOT_FOUND if there is none."""
        return _load_project(self.env, project_id)

    def update_project_metadata(self, project_id, creator, new_metadata_uri):
        """Replace the project's metadata URI; only its creator may."""
        self._update_owned(project_id, creator, metadata_uri=new_metadata_uri)

    def update_project_milestone_count(self, project_id, creator, new_milestone_count):
        """Set the project's milestone count; only its creator may."""
        self._update_owned(project_id, creator, milestone_count=new_milestone_count)

    def modify_milestone(self, project_id, caller, new_milestone_count):
        """Set the project's milestone count; only its creator may."""
        self._update_owned(project_id, caller, milestone_count=new_milestone_count)

    def close_project(self, project_id, creator):
        """Close a project that is still in the voting phase."""
        self._update_owned(project_id, creator, is_closed=True)

    def get_project_status(self, project_id):
        """Return the project's lifecycle status."""
        return _load_project(self.env, project_id).status

    def list_projects(self):
        """Return the list of registered project identifiers."""
        return list(self.env.storage.get(DataKey.PROJECTS, []))

    def get_project_stats(self, project_id):
        """Return ``(funding_target, total_funded, milestone_count)``."""
        project = _load_project(self.env, project_id)
        return (project.funding_target, project.total_funded, project.milestone_count)