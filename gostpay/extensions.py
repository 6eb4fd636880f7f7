# gostpay/extensions.py
"""
Extension point for requisites that are not part of the built-in dictionary.

A host application subclasses CustomRequisites, provides ``key``/``value``
properties and a ``from_pair`` classmethod, and passes the class to the parser
as ``extensions=``. Pairs whose key the built-in dictionary
does not know are handed to ``from_pair``.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from gostpay.errors import UnknownPair


class CustomRequisites(ABC):
    @property
    @abstractmethod
    def key(self) -> str:
        ...

    @property
    @abstractmethod
    def value(self) -> str:
        ...

    @classmethod
    @abstractmethod
    def from_pair(cls, key: str, value: str) -> "CustomRequisites":
        """Build a requisite from a wire pair or raise a PaymentError."""


class NoCustomRequisites(CustomRequisites):
    """Default extension: recognises nothing."""

    @property
    def key(self) -> str:
        raise RuntimeError("NoCustomRequisites carries no key")

    @property
    def value(self) -> str:
        raise RuntimeError("NoCustomRequisites carries no value")

    @classmethod
    def from_pair(cls, key: str, value: str) -> "CustomRequisites":
        raise UnknownPair(key, value)
