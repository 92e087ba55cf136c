"""Exception raised when a node type or flag vocabulary is defined incorrectly.

Schema definition errors surface while a module is being imported (the
``@node`` and ``@wire_flags`` decorators run at class-creation time), so a
field that forgot to register its wire key fails loudly on first import
rather than producing a document with a silently missing key.
"""

from __future__ import annotations

__all__ = ["SchemaError"]


class SchemaError(TypeError):
    """A node type, field or flag vocabulary violates the encoding contract.

    Attributes:
        node_type:  Qualified name of the offending class.
        field_name: The offending field, or ``None`` when the problem concerns
                    the class as a whole (e.g. an extra renaming entry).
    """

    def __init__(
        self,
        message: str,
        *,
        node_type: str,
        field_name: str | None = None,
    ) -> None:
        super().__init__(message)
        self.node_type = node_type
        self.field_name = field_name
