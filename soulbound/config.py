DELIMITER = ':'
INDEX_SEPARATOR = '.'

MAX_HASH_DIMENSIONS = 16
MAX_KEY_SIZE = 1024

# Identity used for "nobody": mint source, burn destination, burned holder
NULL_IDENTITY = '0x0000000000000000000000000000000000000000'

PRIVATE_METHOD_PREFIX = '_'
EXPORT_ATTR = '__export__'
CALLER_ARG = 'caller'

DEFAULT_TOKEN_NAME = 'Soulbound'
DEFAULT_TOKEN_SYMBOL = 'SBT'

DRIVING_LICENSE_NAME = 'DrivingLicense'
DRIVING_LICENSE_SYMBOL = 'DLT'

# ERC-165 interface ids
ERC165_INTERFACE_ID = 0x01ffc9a7
ERC721_INTERFACE_ID = 0x80ac58cd
ERC721_METADATA_INTERFACE_ID = 0x5b5e139f
ERC5192_INTERFACE_ID = 0xb45a3c0e
ERC5484_INTERFACE_ID = 0x0489b56f

SUPPORTED_INTERFACES = {
    ERC165_INTERFACE_ID,
    ERC721_INTERFACE_ID,
    ERC721_METADATA_INTERFACE_ID,
    ERC5192_INTERFACE_ID,
    ERC5484_INTERFACE_ID,
}
