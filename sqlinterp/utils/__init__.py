"""Utility functions and classes for sqlinterp."""

from sqlinterp.utils import logging, type_guards

__all__ = ("logging", "type_guards")
