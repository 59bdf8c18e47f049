class SoulboundError(Exception):
    """
    The base exception for soulbound. The fmt directive
    will be overloaded by the inheriting classes

    :ivar msg: The message associated with the error
    """
    fmt = 'An unspecified error occurred'

    def __init__(self, **kwargs):
        msg = self.fmt.format(**kwargs)
        Exception.__init__(self, msg)
        self.kwargs = kwargs


class AlreadyIssued(SoulboundError):
    """
    Issuance was attempted on a token id that already has
    a live credential record

    :ivar token_id: The token id passed to issue
    """
    fmt = "Token '{token_id}' has already been issued"


class NotFound(SoulboundError):
    """
    No live credential record exists for the token id. Raised
    uniformly by every per-token query and operation.

    :ivar token_id: The token id that was looked up
    """
    fmt = "Token '{token_id}' does not exist"


class Locked(SoulboundError):
    """
    A transfer was attempted on a locked token

    :ivar token_id: The locked token id
    """
    fmt = "Token '{token_id}' is locked"


class Unauthorized(SoulboundError):
    """
    The burn authorization set at issuance does not allow
    the caller to burn the token

    :ivar caller: The identity that attempted the burn
    :ivar token_id: The token id
    """
    fmt = "The set burnAuth doesn't allow '{caller}' to burn token '{token_id}'"


class InvalidIdentity(SoulboundError):
    """
    The null identity was used where a real principal is required

    :ivar identity: The rejected identity
    """
    fmt = "'{identity}' is not a valid identity"


class LedgerError(SoulboundError):
    """
    Base for failures raised by the underlying token ledger
    """


class TokenAlreadyMinted(LedgerError):
    fmt = "Token '{token_id}' has already been minted"


class NonexistentToken(LedgerError):
    fmt = "Token '{token_id}' has not been minted"


class NotTokenOwner(LedgerError):
    fmt = "'{sender}' is not the owner of token '{token_id}'"


class NotApproved(LedgerError):
    fmt = "'{caller}' is neither owner nor approved for token '{token_id}'"


class ReceiverRejected(LedgerError):
    fmt = "Receiver '{to}' rejected token '{token_id}'"
