"""KeyNormalizer: derives a compact lowercase key from a Python field name.

Plotly's attribute names are fully lowercase with no separators
(``autoexpand``, ``showlegend``, ``paper_bgcolor`` being one of the few
exceptions).  The normalizer splits identifiers written in any of the common
conventions into words and joins them back together:

- snake_case (e.g. "auto_expand" -> "autoexpand")
- camelCase (e.g. "autoExpand" -> "autoexpand")
- PascalCase (e.g. "AutoExpand" -> "autoexpand")
- kebab-case (e.g. "auto-expand" -> "autoexpand")

The result is only ever used as a *suggestion* in error messages.  Wire keys
are always read from each node type's ``WIRE_KEYS`` table because the schema
is full of irregular names (``pad`` for padding, ``nticks`` for num_ticks,
``bgcolor`` for background_color) that no casing transform gets right.
"""

import re

# Matches snake_case and kebab-case separators (underscores and hyphens)
_SEP = re.compile(r"[_\-]+")

# Matches camelCase boundary: lowercase letter followed by uppercase letter
_UPPER_LOWER = re.compile(r"([a-z])([A-Z])")

# Matches acronym runs: "URLParser" -> "URL Parser"
_UPPER_RUN = re.compile(r"([A-Z]+)([A-Z][a-z])")


class KeyNormalizer:
    """Splits identifiers into lowercase words.

    Example usage:
        normalizer = KeyNormalizer()
        normalizer.words("autoExpand")      # ["auto", "expand"]
        normalizer.compact("auto_expand")   # "autoexpand"
        normalizer.compact("URLTemplate")   # "urltemplate"
    """

    def words(self, key: str) -> list[str]:
        """Split ``key`` into lowercase words.

        Processing pipeline (applied in order):
        1. Replace underscore and hyphen separators with spaces.
        2. Insert space at camelCase boundaries (lowercase->uppercase transitions).
        3. Insert space at acronym runs (e.g. "URL" before "Template").
        4. Lowercase everything and split on whitespace.
        """
        s = _SEP.sub(" ", key)
        s = _UPPER_LOWER.sub(r"\1 \2", s)
        s = _UPPER_RUN.sub(r"\1 \2", s)
        return s.lower().split()

    def compact(self, key: str) -> str:
        """Return the Plotly-style compact form of ``key``."""
        return "".join(self.words(key))
