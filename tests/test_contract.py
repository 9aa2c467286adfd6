import pytest

from boundless.contract import BoundlessContract
from boundless.datatypes import BoundlessError, ErrorCode, ProjectStatus
from boundless.env import Address, Env

PROJECT_ID = "test_project"
METADATA_URI = "https://example.com/metadata"


@pytest.fixture
def env():
    environment = Env()
    environment.mock_all_auths()
    return environment


def test_initialize_and_read_admin(env):
    admin = Address.generate()
    contract = BoundlessContract(env)
    contract.initialize(admin)
    assert contract.get_admin() == admin
    assert contract.get_version() == 1


def test_initialize_twice(env):
    contract = BoundlessContract(env)
    contract.initialize(Address.generate())
    with pytest.raises(BoundlessError) as info:
        contract.initialize(Address.generate())
    assert info.value.code == ErrorCode.ALREADY_INITIALIZED


def test_contracts_on_one_env_share_state(env):
    first = BoundlessContract(env)
    second = BoundlessContract(env)
    creator = Address.generate()
    first.create_project(PROJECT_ID, creator, METADATA_URI, 1000, 5)
    assert second.get_project(PROJECT_ID).creator == creator


def test_default_env_is_fresh():
    first = BoundlessContract()
    second = BoundlessContract()
    first.env.mock_all_auths()
    first.create_project(PROJECT_ID, Address.generate(), METADATA_URI, 1000, 5)
    with pytest.raises(BoundlessError) as info:
        second.get_project(PROJECT_ID)
    assert info.value.code == ErrorCode.NOT_FOUND


def test_full_voting_flow(env):
    contract = BoundlessContract(env)
    contract.initialize(Address.generate())
    creator = Address.generate()
    voter = Address.generate()
    contract.create_project(PROJECT_ID, creator, METADATA_URI, 1000, 5)
    contract.vote_project(PROJECT_ID, voter, 1)
    assert contract.has_voted(PROJECT_ID, voter) is True
    assert contract.get_project_status(PROJECT_ID) == ProjectStatus.VOTING
    assert contract.get_project_stats(PROJECT_ID) == (1000, 0, 5)
    contract.withdraw_vote(PROJECT_ID, voter)
    assert contract.has_voted(PROJECT_ID, voter) is False


def test_upgrade_bumps_version(env):
    contract = BoundlessContract(env)
    contract.initialize(Address.generate())
    contract.upgrade(bytes(32))
    assert contract.get_version() == 2
    assert env.wasm_hash == bytes(32)