from functools import partial

from soulbound.execution.executor import Executor
from soulbound.db.driver import ContractDriver
from soulbound.events import EventLog
from soulbound.contracts.nft import NFT
from soulbound.contracts.credential import CredentialLedger
from soulbound.contracts.licenses import DrivingLicense
from soulbound.logger import get_logger
from soulbound import config

log = get_logger('Client')


class AbstractContract:
    def __init__(self, name, signer, executor: Executor, funcs):
        self.name = name
        self.signer = signer
        self.executor = executor
        self.functions = funcs

        # set up virtual functions
        for f in funcs:
            # unpack tuple packed in Contract.exported_functions
            func, kwargs = f

            # each function is a partial that allows kwarg overloading and overriding, signer included
            setattr(self, func, partial(self._abstract_function_call,
                                        signer=self.signer,
                                        contract_name=self.name,
                                        executor=self.executor,
                                        func=func))

    def keys(self):
        return self.executor.driver.get_contract_keys(self.name)

    def quick_read(self, variable, key=None, args=None):
        a = []

        if key is not None:
            a.append(key)

        if args is not None and isinstance(args, list):
            for arg in args:
                a.append(arg)

        k = self.executor.driver.make_key(contract=self.name, variable=variable, args=a)
        return self.executor.driver.get(k)

    def _abstract_function_call(self, signer, executor, contract_name, func, **kwargs):
        output = executor.execute(sender=signer,
                                  contract_name=contract_name,
                                  function_name=func,
                                  kwargs=kwargs)

        if output['status_code'] == 1:
            raise output['result']

        return output['result']


class SoulboundClient:
    def __init__(self, signer='sys', driver=None, events=None):
        self.raw_driver = driver or ContractDriver()
        self.events = events or EventLog()
        self.executor = Executor(driver=self.raw_driver, events=self.events)
        self.signer = signer

    def _register(self, contract):
        self.executor.register(contract)

        # Constructors write metadata; persist it like any other call
        self.raw_driver.commit()
        self.events.commit()

        log.info('Deployed {} as {}'.format(type(contract).__name__, contract.name))
        return self.get_contract(contract.name)

    def deploy_credentials(self, name, token_name=config.DEFAULT_TOKEN_NAME, symbol=config.DEFAULT_TOKEN_SYMBOL):
        ledger = NFT(name, token_name=token_name, symbol=symbol, driver=self.raw_driver, events=self.events)
        contract = CredentialLedger(name, ledger=ledger, driver=self.raw_driver, events=self.events)
        return self._register(contract)

    def deploy_driving_license(self, name='driving_license'):
        contract = DrivingLicense(name, driver=self.raw_driver, events=self.events)
        return self._register(contract)

    # Returns abstract contract which has partial methods mapped to each exported function.
    def get_contract(self, name, signer=None):
        contract = self.executor.contracts.get(name)

        if contract is None:
            return None

        return AbstractContract(name=name,
                                signer=signer or self.signer,
                                executor=self.executor,
                                funcs=contract.exported_functions())

    def get_contracts(self):
        return sorted(self.executor.contracts.keys())

    def get_var(self, contract, variable, arguments=[]):
        return self.raw_driver.get_var(contract, variable, arguments)

    def flush(self):
        # Wipes state and events; deployed contracts stay registered but empty
        self.raw_driver.flush()
        self.events.flush()
