# boundless

A crowdfunding contract model. Creators put projects up for a community
vote, other addresses vote for or against them, and an administrator
moves milestones through review. All state lives in an in-memory ledger
environment (`boundless.env.Env`) that provides persistent storage, a
ledger timestamp, authorization checks and an event log.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from boundless.contract import BoundlessContract
from boundless.datatypes import BoundlessError, ErrorCode, ProjectStatus
from boundless.env import Address, Env

env = Env()
env.mock_all_auths()
contract = BoundlessContract(env)

admin = Address.generate()
contract.initialize(admin)
assert contract.get_admin() == admin
assert contract.get_version() == 1

creator = Address.generate()
contract.create_project(
    "test_project", creator, "https://example.com/metadata", 1000, 5
)
assert contract.get_project_status("test_project") == ProjectStatus.VOTING
assert contract.get_project_stats("test_project") == (1000, 0, 5)

voter = Address.generate()
contract.vote_project("test_project", voter, 1)
assert contract.has_voted("test_project", voter)
assert contract.get_vote("test_project", voter) == 1

try:
    contract.vote_project("test_project", creator, 1)
except BoundlessError as exc:
    assert exc.code is ErrorCode.INVALID_OPERATION
```

## Modules

- `boundless.env`: `Address` (with `Address.generate()`), `Env`,
  `Storage`, `Event` and `AuthorizationError`.
- `boundless.datatypes`: `ErrorCode`, `BoundlessError`, `ProjectStatus`,
  `MilestoneStatus`, `DataKey`, the `Project`, `Milestone`, `Vote` and
  `BackerContribution` records, the event records, and the period
  constants such as `VOTING_PERIOD_LEDGERS`.
- `boundless.admin`, `boundless.projects`, `boundless.voting`,
  `boundless.milestones`: the operation groups `ContractManagement`,
  `ProjectManagement`, `VotingOperations` and `MilestoneOperations`.
- `boundless.contract`: `BoundlessContract`, which combines them all.
  `BoundlessContract()` creates its own `Env` when none is given.

## The environment

- Authorization: `env.mock_all_auths()` lets every address pass;
  otherwise `env.authorize(address)` grants one address, and an
  operation that needs a missing authorization raises
  `AuthorizationError`.
- Time: `env.timestamp` starts at 0 and is changed with
  `env.set_timestamp(...)` (negative values raise `ValueError`).
- Storage: `env.storage` copies values on `set` and on `get`, so a project
  read from storage changes only when written back.
- Events: every published event is appended to `env.events` as an
  `Event(topics, data)`. Topics are `((DataKey.PROJECT, project_id), name)`
  with names such as `"created"`, `"voted"`, `"withdrawn"`, `"released"`,
  `"approved"` and `"rejected"`.

## Rules

- `initialize` may be called once; a second call raises
  `ALREADY_INITIALIZED`. `get_admin` raises `RuntimeError` before
  initialization, and `get_version` returns 0 then.
- `upgrade(new_wasm_hash)` needs the admin's authorization and a 32-byte
  hash, and increments the version.
- A project needs a non-zero funding target (`INVALID_FUNDING_TARGET`)
  and 5 to 100 milestones (`INVALID_MILESTONE`); ids are unique
  (`ALREADY_EXISTS`). Unknown ids raise `NOT_FOUND`.
- New projects start in `ProjectStatus.VOTING` with a voting deadline of
  the creation timestamp plus `VOTING_PERIOD_LEDGERS`; voting is refused
  with `VOTING_PERIOD_ENDED` once the timestamp passes it.
- Votes are `1` or `-1` (`INVALID_VOTE`), one per voter (`ALREADY_VOTED`);
  creators cannot vote on their own project. Withdrawing a vote that was
  never cast raises `NOT_VOTED`; `get_vote` for a voter with no vote
  raises `ALREADY_VOTED`. Closed projects refuse both with
  `PROJECT_CLOSED`.
- Only the creator may change a project's metadata or milestone count
  (`update_project_metadata`, `update_project_milestone_count`,
  `modify_milestone`) or close it, and closing is only possible while the
  project is in voting; otherwise `UNAUTHORIZED` is raised.
- Milestones are addressed by their position in `project.milestones`.
  `release_milestone` (contract admin only) moves a pending milestone to
  released; `approve_milestone` and `reject_milestone` move a released one
  on. None of these is allowed while the project is in voting or funding,
  or for the project's creator; these cases raise `INVALID_OPERATION`.

Every failure raises `BoundlessError`; its `code` is a member of
`ErrorCode`.

## What it does not do

- There are no funding or refund operations and no token transfers:
  `total_funded` stays 0 and the backer records stay empty.
- No operation moves a project out of the voting phase, and no operation
  adds milestones to a project, so the milestone operations only act on
  projects whose stored state was set up by other means.
- `list_projects` returns the registry stored under `DataKey.PROJECTS`;
  `create_project` does not add to it.
- Nothing is persisted beyond the `Env` object, and there is no
  command-line interface.