import inspect

from soulbound.db.driver import ContractDriver
from soulbound.db.orm import Variable, Hash
from soulbound.events import EventLog
from soulbound import config


def export(func):
    setattr(func, config.EXPORT_ATTR, True)
    return func


class Contract:
    def __init__(self, name, driver: ContractDriver=None, events: EventLog=None):
        assert name, 'Contract name must not be empty.'
        assert config.DELIMITER not in name, 'Illegal delimiter in contract name.'
        assert config.INDEX_SEPARATOR not in name, 'Illegal separator in contract name.'
        assert not name.startswith(config.PRIVATE_METHOD_PREFIX), 'Contract name must not be private.'

        self.name = name
        self._driver = driver or ContractDriver()
        self._events = events or EventLog()

    def variable(self, name, t=None):
        return Variable(contract=self.name, name=name, driver=self._driver, t=t)

    def hash(self, name, default_value=None):
        return Hash(contract=self.name, name=name, driver=self._driver, default_value=default_value)

    def emit(self, event, **data):
        self._events.emit(self.name, event, **data)

    @classmethod
    def exported_functions(cls):
        funcs = []
        for func_name, func in inspect.getmembers(cls, predicate=inspect.isfunction):
            if func_name.startswith(config.PRIVATE_METHOD_PREFIX):
                continue
            if not getattr(func, config.EXPORT_ATTR, False):
                continue

            params = list(inspect.signature(func).parameters)[1:]
            kwargs = [p for p in params if p != config.CALLER_ARG]

            funcs.append((func_name, kwargs))

        return funcs

    @classmethod
    def is_exported(cls, function_name):
        func = getattr(cls, function_name, None)
        return func is not None and getattr(func, config.EXPORT_ATTR, False)

    @classmethod
    def takes_caller(cls, function_name):
        func = getattr(cls, function_name)
        return config.CALLER_ARG in inspect.signature(func).parameters
