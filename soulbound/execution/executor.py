from copy import deepcopy
import traceback

from soulbound.db.driver import ContractDriver
from soulbound.events import EventLog
from soulbound.logger import get_logger
from soulbound import config

log = get_logger('Executor')


class Executor:
    """
    Runs each call as one unit of work. Contract functions write to the
    driver's pending layer and emit into the event log's pending buffer;
    on success both are committed, on any exception both are discarded.
    """
    def __init__(self, driver=None, events=None):
        self.driver = driver or ContractDriver()
        self.events = events or EventLog()
        self.contracts = {}

    def register(self, contract):
        assert contract.name not in self.contracts, 'Contract {} already registered.'.format(contract.name)
        self.contracts[contract.name] = contract

    def execute(self, sender, contract_name, function_name, kwargs, auto_commit=True) -> dict:
        assert not function_name.startswith(config.PRIVATE_METHOD_PREFIX), 'Private method not callable.'

        contract = self.contracts.get(contract_name)
        assert contract is not None, 'Contract {} does not exist.'.format(contract_name)
        assert contract.is_exported(function_name), 'Function {} is not exported by {}.'.format(
            function_name, contract_name)

        # The caller identity comes from the host, never from the arguments
        assert config.CALLER_ARG not in kwargs, 'Caller cannot be passed as an argument.'

        kwargs = dict(kwargs)
        if contract.takes_caller(function_name):
            kwargs[config.CALLER_ARG] = sender

        status_code = 0
        try:
            func = getattr(contract, function_name)
            result = func(**kwargs)
            writes = deepcopy(self.driver.pending_writes)

            if auto_commit:
                self.driver.commit()
                self.events.commit()
        except Exception as e:
            result = e
            writes = {}
            status_code = 1
            log.error('{}.{} by {} failed: {}'.format(contract_name, function_name, sender, e))
            log.debug(traceback.format_exc())

            self.driver.clear_pending_state()
            self.events.rollback()

        output = {
            'status_code': status_code,
            'result': result,
            'writes': writes,
        }

        return output
