"""Opt-in pylint plugin flagging magic numbers: numeric literals used inline instead of named constants."""

from magic_numbers_linter.checker import register

__all__ = ["register"]
