import json
from enum import Enum

from soulbound.config import INDEX_SEPARATOR, DELIMITER

MAX_SAFE_INT = 2 ** 63 - 1
MIN_SAFE_INT = -(2 ** 63)

##
# ENCODER CLASS
# Add to this to encode Python types for storage.
# Token ids may be 256 bit integers, so big ints are wrapped as strings. Enums are stored by value.
##


class Encoder(json.JSONEncoder):
    def default(self, o, *args):
        if isinstance(o, bytes):
            return {
                '__bytes__': o.hex()
            }
        return super().default(o)


def encode_int(value: int):
    if MIN_SAFE_INT < value < MAX_SAFE_INT:
        return value

    return {
        '__big_int__': str(value)
    }


def _preprocess(data):
    # bool is an int subclass and must stay a bool
    if isinstance(data, bool):
        return data
    if isinstance(data, Enum):
        return _preprocess(data.value)
    if isinstance(data, int):
        return encode_int(int(data))
    if isinstance(data, dict):
        return {k: _preprocess(v) for k, v in data.items()}
    if isinstance(data, (list, tuple)):
        return [_preprocess(i) for i in data]
    return data


def encode(data):
    """ NOTE:
    Normally encoding behavior is overriden in 'default' method inside
    a class derived from json.JSONEncoder. Unfortunately ints never reach
    'default', so big integers and enums are preprocessed first.
    """
    return json.dumps(_preprocess(data), cls=Encoder, separators=(',', ':'))


def as_object(d):
    if '__bytes__' in d:
        return bytes.fromhex(d['__bytes__'])
    elif '__big_int__' in d:
        return int(d['__big_int__'])
    return dict(d)


# Decode has a hook for JSON objects, which are just Python dictionaries. You have to specify the logic in this hook.
def decode(data):
    if data is None:
        return None

    if isinstance(data, bytes):
        data = data.decode()

    try:
        return json.loads(data, object_hook=as_object)
    except json.decoder.JSONDecodeError:
        return None


def make_key(contract, variable, args=[]):
    contract_variable = INDEX_SEPARATOR.join((contract, variable))
    if args:
        return DELIMITER.join((contract_variable, *[str(arg) for arg in args]))
    return contract_variable
