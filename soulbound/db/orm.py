from soulbound.db.driver import ContractDriver
from soulbound import config


class Datum:
    def __init__(self, contract, name, driver: ContractDriver):
        self._driver = driver
        self._key = self._driver.make_key(contract, name)


class Variable(Datum):
    def __init__(self, contract, name, driver: ContractDriver, t=None):
        super().__init__(contract, name, driver=driver)
        self._type = t if isinstance(t, type) else None

    def set(self, value):
        if self._type is not None:
            assert isinstance(value, self._type), 'Wrong type passed to variable! Expected {}, got {}.'.format(
                self._type,
                type(value)
            )

        self._driver.set(self._key, value)

    def get(self):
        return self._driver.get(self._key)


def _key_part(part):
    part = str(part)

    assert config.DELIMITER not in part, 'Illegal delimiter in key.'
    assert config.INDEX_SEPARATOR not in part, 'Illegal separator in key.'

    return part


class Hash(Datum):
    """
    Keyed storage under contract.name:key. A tuple key addresses one more
    dimension per element. Missing keys read as default_value, and deleting
    a key writes None, which the driver treats as removal.
    """
    def __init__(self, contract, name, driver: ContractDriver, default_value=None):
        super().__init__(contract, name, driver=driver)
        self._default_value = default_value

    def _storage_key(self, key):
        parts = key if isinstance(key, tuple) else (key,)

        assert len(parts) <= config.MAX_HASH_DIMENSIONS, 'Too many dimensions ({}) for hash. Max is {}'.format(
            len(parts), config.MAX_HASH_DIMENSIONS
        )

        suffix = config.DELIMITER.join(_key_part(p) for p in parts)

        assert len(suffix) <= config.MAX_KEY_SIZE, 'Key is too long ({}). Max is {}.'.format(
            len(suffix), config.MAX_KEY_SIZE
        )

        return '{}{}{}'.format(self._key, config.DELIMITER, suffix)

    def __getitem__(self, key):
        value = self._driver.get(self._storage_key(key))
        return self._default_value if value is None else value

    def __setitem__(self, key, value):
        self._driver.set(self._storage_key(key), value)

    def __delitem__(self, key):
        self._driver.delete(self._storage_key(key))
