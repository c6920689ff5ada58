"""Scheduler performance modes.

The loader transmits modes as unsigned integers; the order of the members
below is the wire order and must not change.
"""
from __future__ import annotations

from enum import Enum

from .errors import DecodeError, InvalidRequest


class Mode(str, Enum):
    AUTO = "auto"
    GAMING = "gaming"
    POWERSAVE = "powersave"
    LOWLATENCY = "lowlatency"
    SERVER = "server"

    @property
    def label(self) -> str:
        return self.value

    @property
    def code(self) -> int:
        return _CODES[self]

    @classmethod
    def from_code(cls, code: int) -> "Mode":
        # bool is an int subclass but never a valid wire value
        if isinstance(code, bool) or not isinstance(code, int):
            raise DecodeError(code)
        try:
            return _BY_CODE[code]
        except KeyError:
            raise DecodeError(code) from None

    @classmethod
    def from_label(cls, label: str) -> "Mode":
        try:
            return cls(label.strip().lower())
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise InvalidRequest(f"unknown mode {label!r} (choose from {choices})") from None

    def __str__(self) -> str:
        return self.value


_CODES: dict[Mode, int] = {m: i for i, m in enumerate(Mode)}
_BY_CODE: dict[int, Mode] = {i: m for m, i in _CODES.items()}
