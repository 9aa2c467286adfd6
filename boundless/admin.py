"""Contract set-up: the admin, the code version and upgrades."""

from __future__ import annotations

from boundless.datatypes import BoundlessError, DataKey, ErrorCode


class ContractManagement:
    """Initialization and upgrade operations.

    Meant to be combined into a contract class that provides ``self.env``.
    """

    def initialize(self, admin):
        """Record ``admin`` as the contract's admin and set the version to 1."""
        storage = self.env.storage
        if storage.get(DataKey.INITIALIZED, False):
            raise BoundlessError(ErrorCode.ALREADY_INITIALIZED)
        storage.set(DataKey.ADMIN, admin)
        storage.set(DataKey.VERSION, 1)
        storage.set(DataKey.INITIALIZED, True)

    def upgrade(self, new_wasm_hash):
        """Replace the contract code; only the admin may do this."""
        admin = self.get_admin()
        self.env.require_auth(admin)
        self.env.update_current_contract_wasm(new_wasm_hash)
        self.env.storage.set(DataKey.VERSION, self.get_version() + 1)

    def get_admin(self):
        """Return the admin address; raise RuntimeError if none is set."""
        admin = self.env.storage.get(DataKey.ADMIN)
        if admin is None:
            raise RuntimeError("Admin not set")
        return admin

    def get_version(self):
        """Return the code version, 0 before initialization."""
        return self.env.storage.get(DataKey.VERSION, 0)