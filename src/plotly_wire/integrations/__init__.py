"""Integrations subpackage for plotly-wire.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via pytest11 entry point), providing the
  ``assert_wire_document`` and ``assert_key_fidelity`` fixtures
"""

from __future__ import annotations

__all__: list[str] = []
