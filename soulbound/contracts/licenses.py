from soulbound.db.contract import Contract, export
from soulbound.contracts.credential import CredentialLedger
from soulbound.contracts.nft import NFT
from soulbound.contracts.policy import DRIVING_LICENSE
from soulbound import config


class DrivingLicense(Contract):
    """Driving licenses: always locked, burnable by the issuer only."""

    policy = DRIVING_LICENSE

    def __init__(self, name, credentials: CredentialLedger=None, driver=None, events=None):
        super().__init__(name, driver=driver, events=events)

        if credentials is None:
            ledger = NFT(name, token_name=config.DRIVING_LICENSE_NAME, symbol=config.DRIVING_LICENSE_SYMBOL,
                         driver=self._driver, events=self._events)
            credentials = CredentialLedger(name, ledger=ledger, driver=self._driver, events=self._events)

        self.credentials = credentials

    @export
    def issue_driving_license(self, caller, to, token_id):
        self.credentials.issue(caller, to, token_id, self.policy.locked, self.policy.burn_auth)

    @export
    def get_driving_license_owner(self, token_id):
        if not self.credentials.exists(token_id):
            return config.NULL_IDENTITY
        return self.credentials.holder_of(token_id)

    @export
    def transfer_from(self, caller, sender, to, token_id):
        self.credentials.transfer_from(caller, sender, to, token_id)

    @export
    def safe_transfer_from(self, caller, sender, to, token_id, data=b''):
        self.credentials.safe_transfer_from(caller, sender, to, token_id, data)

    @export
    def burn(self, caller, token_id):
        self.credentials.burn(caller, token_id)

    @export
    def is_locked(self, token_id):
        return self.credentials.is_locked(token_id)

    @export
    def burn_auth_of(self, token_id):
        return self.credentials.burn_auth_of(token_id)

    @export
    def holder_of(self, token_id):
        return self.credentials.holder_of(token_id)

    @export
    def issuer_of(self, token_id):
        return self.credentials.issuer_of(token_id)
