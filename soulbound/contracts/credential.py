from soulbound.db.contract import Contract, export
from soulbound.contracts.nft import NFT, require_identity
from soulbound.contracts.policy import BurnAuth, can_burn
from soulbound.exceptions import AlreadyIssued, NotFound, Locked, Unauthorized
from soulbound import config


class CredentialLedger(Contract):
    """
    Soulbound credential overlay on top of an NFT ledger.

    Every token carries a record of four fields: issuer, holder, lock flag
    and burn authorization. The record lives exactly as long as the ledger
    considers the token minted. Transfers of a locked token are always
    rejected, and a burn is only delegated to the ledger when the caller
    matches the token's burn authorization.

    Every per-token query or operation on a token without a live record
    raises NotFound; none of them fall back to a default value.
    """
    def __init__(self, name, ledger: NFT=None, driver=None, events=None):
        super().__init__(name, driver=driver, events=events)

        self.ledger = ledger or NFT(name, driver=self._driver, events=self._events)

        self.issuers = self.hash('issuers')
        self.holders = self.hash('holders')
        self.locks = self.hash('locks')
        self.burn_auths = self.hash('burn_auths')

    def _require_record(self, token_id):
        issuer = self.issuers[token_id]
        if issuer is None:
            raise NotFound(token_id=token_id)
        return issuer

    @export
    def issue(self, caller, to, token_id, locked, burn_auth):
        burn_auth = BurnAuth(burn_auth)

        require_identity(caller)
        if self.issuers[token_id] is not None:
            raise AlreadyIssued(token_id=token_id)

        self.ledger.mint(to, token_id)

        self.issuers[token_id] = caller
        self.holders[token_id] = to
        self.locks[token_id] = bool(locked)
        self.burn_auths[token_id] = burn_auth.value

        self.emit('Issued', issuer=caller, to=to, token_id=token_id, burn_auth=burn_auth)
        if locked:
            self.emit('Locked', token_id=token_id)

    @export
    def is_locked(self, token_id):
        self._require_record(token_id)
        return self.locks[token_id]

    @export
    def burn_auth_of(self, token_id):
        self._require_record(token_id)
        return BurnAuth(self.burn_auths[token_id])

    @export
    def holder_of(self, token_id):
        self._require_record(token_id)
        return self.holders[token_id]

    @export
    def issuer_of(self, token_id):
        return self._require_record(token_id)

    @export
    def exists(self, token_id):
        return self.issuers[token_id] is not None

    def _guard_transfer(self, token_id):
        self._require_record(token_id)

        # No identity, issuer included, bypasses the lock
        if self.locks[token_id]:
            raise Locked(token_id=token_id)

    @export
    def transfer_from(self, caller, sender, to, token_id):
        self._guard_transfer(token_id)
        self.ledger.transfer(caller, sender, to, token_id)
        self.holders[token_id] = to

    @export
    def safe_transfer_from(self, caller, sender, to, token_id, data=b''):
        self._guard_transfer(token_id)
        self.ledger.safe_transfer(caller, sender, to, token_id, data)
        self.holders[token_id] = to

    @export
    def burn(self, caller, token_id):
        issuer = self._require_record(token_id)
        holder = self.holders[token_id]

        if not can_burn(self.burn_auths[token_id], caller, issuer, holder):
            raise Unauthorized(caller=caller, token_id=token_id)

        del self.issuers[token_id]
        del self.holders[token_id]
        del self.locks[token_id]
        del self.burn_auths[token_id]

        self.ledger.destroy(token_id)

    @export
    def supports_interface(self, interface_id):
        return interface_id in config.SUPPORTED_INTERFACES

    # Ledger views and approvals, passed through unguarded

    @export
    def get_name(self):
        return self.ledger.get_name()

    @export
    def get_symbol(self):
        return self.ledger.get_symbol()

    @export
    def balance_of(self, owner):
        return self.ledger.balance_of(owner)

    @export
    def owner_of(self, token_id):
        return self.ledger.owner_of(token_id)

    @export
    def approve(self, caller, to, token_id):
        self.ledger.approve(caller, to, token_id)

    @export
    def get_approved(self, token_id):
        return self.ledger.get_approved(token_id)

    @export
    def set_approval_for_all(self, caller, operator, approved):
        self.ledger.set_approval_for_all(caller, operator, approved)

    @export
    def is_approved_for_all(self, owner, operator):
        return self.ledger.is_approved_for_all(owner, operator)
