from soulbound.db.contract import Contract, export
from soulbound.exceptions import (
    InvalidIdentity, TokenAlreadyMinted, NonexistentToken, NotTokenOwner, NotApproved, ReceiverRejected
)
from soulbound import config


def is_valid_identity(identity):
    return isinstance(identity, str) and identity != '' and identity != config.NULL_IDENTITY


def require_identity(identity):
    if not is_valid_identity(identity):
        raise InvalidIdentity(identity=identity)


class NFT(Contract):
    """
    Non-fungible token ledger. Keeps ownership, balances and approvals.

    mint, transfer, safe_transfer and destroy are primitives for the
    contract layered on top; they are not exported, so a caller can never
    reach them without going through that contract's guards.
    """
    def __init__(self, name, token_name=config.DEFAULT_TOKEN_NAME, symbol=config.DEFAULT_TOKEN_SYMBOL,
                 driver=None, events=None):
        super().__init__(name, driver=driver, events=events)

        self.balances = self.hash('balances', default_value=0)
        self.owners = self.hash('owners')
        self.approvals = self.hash('approvals')
        self.operators = self.hash('operators', default_value=False)

        self.token_name = self.variable('token_name', t=str)
        self.token_symbol = self.variable('token_symbol', t=str)

        # Identity -> hook(operator, sender, token_id, data), consulted by safe_transfer
        self.receivers = {}

        if self.token_name.get() is None:
            self.token_name.set(token_name)
            self.token_symbol.set(symbol)

    def mint(self, to, token_id):
        require_identity(to)
        if self.owners[token_id] is not None:
            raise TokenAlreadyMinted(token_id=token_id)

        self.owners[token_id] = to
        self.balances[to] += 1

        self.emit('Transfer', sender=config.NULL_IDENTITY, to=to, token_id=token_id)

    def _check_transfer(self, caller, sender, to, token_id):
        owner = self.owner_of(token_id)

        if owner != sender:
            raise NotTokenOwner(sender=sender, token_id=token_id)
        if not self._is_approved_or_owner(caller, owner, token_id):
            raise NotApproved(caller=caller, token_id=token_id)
        require_identity(to)

    def _move(self, sender, to, token_id):
        del self.approvals[token_id]

        self.balances[sender] -= 1
        self.balances[to] += 1
        self.owners[token_id] = to

        self.emit('Transfer', sender=sender, to=to, token_id=token_id)

    def transfer(self, caller, sender, to, token_id):
        self._check_transfer(caller, sender, to, token_id)
        self._move(sender, to, token_id)

    def safe_transfer(self, caller, sender, to, token_id, data=b''):
        self._check_transfer(caller, sender, to, token_id)

        # The receiver is asked before anything is written
        hook = self.receivers.get(to)
        if hook is not None and hook(caller, sender, token_id, data or b'') is not True:
            raise ReceiverRejected(to=to, token_id=token_id)

        self._move(sender, to, token_id)

    def destroy(self, token_id):
        owner = self.owner_of(token_id)

        del self.approvals[token_id]

        self.balances[owner] -= 1
        del self.owners[token_id]

        self.emit('Transfer', sender=owner, to=config.NULL_IDENTITY, token_id=token_id)

    def register_receiver(self, identity, hook):
        self.receivers[identity] = hook

    def _is_approved_or_owner(self, caller, owner, token_id):
        return caller == owner or \
               self.approvals[token_id] == caller or \
               self.operators[owner, caller] is True

    @export
    def exists(self, token_id):
        return self.owners[token_id] is not None

    @export
    def owner_of(self, token_id):
        owner = self.owners[token_id]
        if owner is None:
            raise NonexistentToken(token_id=token_id)
        return owner

    @export
    def balance_of(self, owner):
        require_identity(owner)
        return self.balances[owner]

    @export
    def get_name(self):
        return self.token_name.get()

    @export
    def get_symbol(self):
        return self.token_symbol.get()

    @export
    def approve(self, caller, to, token_id):
        owner = self.owner_of(token_id)

        if caller != owner and self.operators[owner, caller] is not True:
            raise NotApproved(caller=caller, token_id=token_id)

        self.approvals[token_id] = to
        self.emit('Approval', owner=owner, approved=to, token_id=token_id)

    @export
    def get_approved(self, token_id):
        self.owner_of(token_id)
        return self.approvals[token_id]

    @export
    def set_approval_for_all(self, caller, operator, approved):
        require_identity(operator)
        if operator == caller:
            raise InvalidIdentity(identity=operator)

        self.operators[caller, operator] = bool(approved)
        self.emit('ApprovalForAll', owner=caller, operator=operator, approved=bool(approved))

    @export
    def is_approved_for_all(self, owner, operator):
        return self.operators[owner, operator] is True
