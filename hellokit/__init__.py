"""Diagnostic reporting, errno stand-ins, integer overflow checks and array growth helpers."""

__version__ = "2.8.0"
__all__ = ["errnos", "errors", "intprops", "growth"]