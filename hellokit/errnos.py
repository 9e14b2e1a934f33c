"""Error numbers, with stand-in values for names the platform lacks.

Some systems leave out a few of the error numbers that POSIX asks for.
For each of those a fixed stand-in value is used instead. The values
are well above anything a real system hands out, so they never clash.
"""

from __future__ import annotations

import errno
import sys
from types import MappingProxyType
from typing import Mapping

# Stand-ins for names the system leaves undefined.
_FALLBACKS: Mapping[str, int] = MappingProxyType(
    {
        "ENOMSG": 2000,
        "EIDRM": 2001,
        "ENOLINK": 2002,
        "EPROTO": 2003,
        "EMULTIHOP": 2004,
        "EBADMSG": 2005,
        "EOVERFLOW": 2006,
        "ENOTSUP": 2007,
        "ECANCELED": 2008,
        "ESTALE": 2009,
        "EDQUOT": 2010,
        "ENETRESET": 2011,
        "ECONNABORTED": 2012,
    }
)

# Native Windows uses the same values as its own C runtime, and the
# socket error numbers for names that runtime leaves out.
_WINDOWS_VALUES: Mapping[str, int] = MappingProxyType(
    {
        "ENOMSG": 122,
        "EIDRM": 111,
        "ENOLINK": 121,
        "EPROTO": 134,
        "EBADMSG": 104,
        "EOVERFLOW": 132,
        "ENOTSUP": 129,
        "ENETRESET": 117,
        "ECONNABORTED": 106,
        "ECANCELED": 105,
        "EINPROGRESS": 112,
        "EALREADY": 103,
        "ENOTSOCK": 128,
        "EDESTADDRREQ": 109,
        "EMSGSIZE": 115,
        "EPROTOTYPE": 136,
        "ENOPROTOOPT": 123,
        "EPROTONOSUPPORT": 135,
        "EOPNOTSUPP": 130,
        "EAFNOSUPPORT": 102,
        "EADDRINUSE": 100,
        "EADDRNOTAVAIL": 101,
        "ENETDOWN": 116,
        "ENETUNREACH": 118,
        "ECONNRESET": 108,
        "ENOBUFS": 119,
        "EISCONN": 113,
        "ENOTCONN": 126,
        "ETIMEDOUT": 138,
        "ECONNREFUSED": 107,
        "ELOOP": 114,
        "EHOSTUNREACH": 110,
        "EWOULDBLOCK": 140,
        "ETXTBSY": 139,
        "ENODATA": 120,
        "ENOSR": 124,
        "ENOSTR": 125,
        "ENOTRECOVERABLE": 127,
        "EOWNERDEAD": 133,
        "ETIME": 137,
        "EOTHER": 131,
        "ESOCKTNOSUPPORT": 10044,
        "EPFNOSUPPORT": 10046,
        "ESHUTDOWN": 10058,
        "ETOOMANYREFS": 10059,
        "EHOSTDOWN": 10064,
        "EPROCLIM": 10067,
        "EUSERS": 10068,
        "EDQUOT": 10069,
        "ESTALE": 10070,
        "EREMOTE": 10071,
    }
)


def _system_value(name: str) -> int | None:
    value = getattr(errno, name, None)
    return value if isinstance(value, int) else None


def _stand_in(name: str) -> int | None:
    if sys.platform == "win32" and name in _WINDOWS_VALUES:
        return _WINDOWS_VALUES[name]
    return _FALLBACKS.get(name)


def errno_value(name: str) -> int:
    """Return the error number called ``name``.

    The system's own value wins; otherwise a stand-in is used. A name
    with neither raises ``KeyError``.
    """
    value = _system_value(name)
    if value is not None:
        return value
    value = _stand_in(name)
    if value is None:
        raise KeyError(f"unknown error name: {name!r}")
    return value


def is_fallback(name: str) -> bool:
    """Tell whether ``name`` resolves to a stand-in rather than a system value."""
    if _system_value(name) is not None:
        return False
    if _stand_in(name) is None:
        raise KeyError(f"unknown error name: {name!r}")
    return True