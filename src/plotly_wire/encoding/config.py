"""EncoderConfig: knobs for the node encoder.

EncoderConfig is a frozen (immutable) dataclass; with the defaults every field
that was set is written, empty flag sets included.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EncoderConfig:
    """Immutable configuration for NodeEncoder.

    Attributes:
        emit_empty_flags: When True (default), a flag field that is set but has
            no bits set is written as ``""``.  When False it is omitted as if
            the field were absent.
        coerce_numpy: When True (default), numpy scalars in primitive fields are
            unwrapped with ``.item()`` and numpy arrays in sequence fields are
            converted with ``.tolist()``.  When False such values raise
            ``TypeError``.
    """

    emit_empty_flags: bool = True
    coerce_numpy: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.emit_empty_flags, bool):
            msg = f"emit_empty_flags must be a bool, got {self.emit_empty_flags!r}"
            raise ValueError(msg)
        if not isinstance(self.coerce_numpy, bool):
            msg = f"coerce_numpy must be a bool, got {self.coerce_numpy!r}"
            raise ValueError(msg)
