from collections import namedtuple
from enum import IntEnum


class BurnAuth(IntEnum):
    IssuerOnly = 0
    OwnerOnly = 1
    Both = 2
    Neither = 3


# Who may burn a token, given its burn authorization. Each rule gets the caller,
# the recorded issuer and the recorded holder.
BURN_RULES = {
    BurnAuth.IssuerOnly: lambda caller, issuer, holder: caller == issuer,
    BurnAuth.OwnerOnly: lambda caller, issuer, holder: caller == holder,
    BurnAuth.Both: lambda caller, issuer, holder: caller == issuer or caller == holder,
    BurnAuth.Neither: lambda caller, issuer, holder: False,
}


def can_burn(burn_auth, caller, issuer, holder):
    return BURN_RULES[BurnAuth(burn_auth)](caller, issuer, holder)


Policy = namedtuple('Policy', ['locked', 'burn_auth'])

DRIVING_LICENSE = Policy(locked=True, burn_auth=BurnAuth.IssuerOnly)
