import errno
import sys

import pytest

from hellokit.errnos import errno_value, is_fallback

FALLBACK_NAMES = [
    "ENOMSG",
    "EIDRM",
    "ENOLINK",
    "EPROTO",
    "EMULTIHOP",
    "EBADMSG",
    "EOVERFLOW",
    "ENOTSUP",
    "ECANCELED",
    "ESTALE",
    "EDQUOT",
    "ENETRESET",
    "ECONNABORTED",
]


def test_system_value_is_used():
    assert errno_value("ENOENT") == errno.ENOENT
    assert is_fallback("ENOENT") is False


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        errno_value("ENOSUCHTHING")
    with pytest.raises(KeyError):
        is_fallback("ENOSUCHTHING")


def test_missing_name_uses_stand_in(monkeypatch):
    monkeypatch.delattr(errno, "EDQUOT", raising=False)
    assert is_fallback("EDQUOT") is True
    expected = 10069 if sys.platform == "win32" else 2010
    assert errno_value("EDQUOT") == expected


def test_missing_ecanceled_uses_stand_in(monkeypatch):
    monkeypatch.delattr(errno, "ECANCELED", raising=False)
    expected = 105 if sys.platform == "win32" else 2008
    assert errno_value("ECANCELED") == expected


@pytest.mark.parametrize("name", FALLBACK_NAMES)
def test_every_fallback_name_resolves(name, monkeypatch):
    monkeypatch.delattr(errno, name, raising=False)
    assert is_fallback(name) is True
    assert errno_value(name) > 0


def test_stand_ins_are_distinct(monkeypatch):
    for name in FALLBACK_NAMES:
        monkeypatch.delattr(errno, name, raising=False)
    values = [errno_value(name) for name in FALLBACK_NAMES]
    assert len(set(values)) == len(values)


@pytest.mark.parametrize("name", FALLBACK_NAMES)
def test_present_name_matches_system(name):
    if hasattr(errno, name):
        assert errno_value(name) == getattr(errno, name)
        assert is_fallback(name) is False
    else:
        assert is_fallback(name) is True