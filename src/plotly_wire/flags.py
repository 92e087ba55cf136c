"""Bit-flag vocabularies and the "OR of flags" combinator.

Plotly exposes several combinable options as a single string whose parts are
joined by ``+`` (``"lines+markers"``, ``"toaxis+across"``, ``"event+select"``).
Each such vocabulary is modelled as an ``enum.Flag`` subclass decorated with
``@wire_flags``:

- one member per option, each a single bit (``auto()`` is the norm)
- member declaration order is the canonical encoding order
- the wire token is the lowercased member name (``TOAXIS`` -> ``"toaxis"``)

Example::

    @wire_flags
    class SpikeMode(Flag):
        TOAXIS = auto()
        ACROSS = auto()
        MARKER = auto()

    combine_flags(SpikeMode.MARKER | SpikeMode.TOAXIS)  # "toaxis+marker"
    combine_flags(SpikeMode(0))                         # ""
"""

from __future__ import annotations

import enum
import logging
from enum import Flag
from typing import TypeVar

from plotly_wire.errors import SchemaError

__all__ = ["FLAG_SEPARATOR", "combine_flags", "flag_tokens", "is_wire_flags", "wire_flags"]

log = logging.getLogger(__name__)

FLAG_SEPARATOR = "+"

F = TypeVar("F", bound=type[Flag])

# Vocabularies that passed verification; node fields may only use these.
_VOCABULARIES: set[type[Flag]] = set()

_verify = enum.verify(enum.UNIQUE, enum.CONTINUOUS)


def wire_flags(cls: F) -> F:
    """Verify and register a flag vocabulary.

    A vocabulary must contain at least one member, every member must be a
    distinct single bit (no aliases, no composite members), and the bits must
    start at 1 with no gaps.

    Raises:
        SchemaError: If the vocabulary has a duplicate or missing bit assignment.
    """
    name = cls.__qualname__
    if not issubclass(cls, Flag):
        msg = f"{name} must subclass enum.Flag to be used as a flag vocabulary"
        raise SchemaError(msg, node_type=name)

    try:
        _verify(cls)
    except ValueError as exc:
        msg = f"flag vocabulary {name} has duplicate or missing bits: {exc}"
        raise SchemaError(msg, node_type=name) from exc

    for member_name, member in cls.__members__.items():
        bits = member.value
        if not isinstance(bits, int) or bits <= 0 or bits & (bits - 1):
            msg = f"flag vocabulary {name}: option {member_name} must be a single bit"
            raise SchemaError(msg, node_type=name)

    members = list(cls)
    if not members:
        msg = f"flag vocabulary {name} declares no options"
        raise SchemaError(msg, node_type=name)
    if min(m.value for m in members) != 1:
        msg = f"flag vocabulary {name} must start at bit value 1"
        raise SchemaError(msg, node_type=name)

    _VOCABULARIES.add(cls)
    log.debug(
        "registered flag vocabulary %s: %s",
        name,
        FLAG_SEPARATOR.join(m.name.lower() for m in members),
    )
    return cls


def is_wire_flags(cls: object) -> bool:
    """Return True if ``cls`` is a vocabulary registered with ``@wire_flags``."""
    return cls in _VOCABULARIES


def flag_tokens(value: Flag) -> list[str]:
    """Return the tokens of every set option in declaration order.

    Iterating a ``Flag`` class yields only its canonical single-bit members,
    in the order they were declared, so the order never depends on the order
    in which bits were combined in calling code.
    """
    return [member.name.lower() for member in type(value) if member in value]


def combine_flags(value: Flag) -> str:
    """Encode a flag set as its ``+``-joined tokens; zero bits yields ``""``."""
    return FLAG_SEPARATOR.join(flag_tokens(value))
