from soulbound.db.encoder import encode, decode, make_key as _make_key
from soulbound.logger import get_logger

# DB maps bytes to bytes
# Driver maps string to python object


class InMemDriver:
    def __init__(self):
        self.db = {}

    def get(self, item: str):
        key = item.encode()
        res = self.db.get(key)
        if res is None:
            return None
        return decode(res)

    def set(self, key: str, value):
        if value is None:
            self.__delitem__(key)
        else:
            self.db[key.encode()] = encode(value).encode()

    def delete(self, key: str):
        self.__delitem__(key)

    def iter(self, prefix: str, length=0):
        p = prefix.encode()

        l = []
        for k in sorted(self.db.keys()):
            if k.startswith(p):
                l.append(k.decode())
            if 0 < length <= len(l):
                break

        return l

    def keys(self):
        return sorted([k.decode() for k in self.db.keys()])

    def flush(self):
        self.db.clear()

    def __getitem__(self, item: str):
        value = self.get(item)
        if value is None:
            raise KeyError(item)
        return value

    def __setitem__(self, key: str, value):
        self.set(key, value)

    def __delitem__(self, key: str):
        k = key.encode()
        try:
            del self.db[k]
        except KeyError:
            pass


class CacheDriver:
    def __init__(self, driver=None):
        self.pending_writes = {}
        self.driver = driver or InMemDriver()

    def get(self, key: str):
        # A pending None is a pending delete and must shadow the stored value
        if key in self.pending_writes:
            return self.pending_writes[key]

        return self.driver.get(key)

    def set(self, key, value):
        self.pending_writes[key] = value

    def delete(self, key):
        self.set(key, None)

    def commit(self):
        for k, v in self.pending_writes.items():
            self.driver.set(k, v)

        self.pending_writes.clear()

    def rollback(self):
        self.pending_writes.clear()

    def clear_pending_state(self):
        self.rollback()


class ContractDriver(CacheDriver):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.log = get_logger('Driver')

    def items(self, prefix=''):
        _items = {k: v for k, v in self.pending_writes.items() if k.startswith(prefix)}

        for k in self.driver.iter(prefix=prefix):
            if k not in _items:
                _items[k] = self.driver.get(k)

        # Pending deletes hide stored keys
        return {k: v for k, v in _items.items() if v is not None}

    def keys(self, prefix=''):
        return sorted(self.items(prefix).keys())

    def make_key(self, contract, variable, args=[]):
        return _make_key(contract, variable, args)

    def get_var(self, contract, variable, arguments=[]):
        key = self.make_key(contract, variable, arguments)
        return self.get(key)

    def get_contract_keys(self, name):
        return self.keys(name + '.')

    def commit(self):
        self.log.debug('Committing {} pending writes'.format(len(self.pending_writes)))
        super().commit()

    def rollback(self):
        if self.pending_writes:
            self.log.debug('Discarding {} pending writes'.format(len(self.pending_writes)))
        super().rollback()

    def flush(self):
        self.log.debug('Flushing state')
        self.driver.flush()
        self.clear_pending_state()
