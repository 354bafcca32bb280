"""Configuration constants.

Values that describe the wrapped tool's output format. The location-only
codes are the default for ``ParserConfig.location_only_codes``.
"""

LOCATION_ONLY_CODES: frozenset[str] = frozenset({"830", "831"})
"""Codes that only report where a symbol was defined (folded into the previous diagnostic)."""

WALK_BANNER = "During Specific Walk:"
"""Banner printed before the call-chain of a specific walk."""

HEADER_EXTENSIONS: frozenset[str] = frozenset({".h", ".hh", ".hpp", ".hxx", ".h++", ".inl"})
"""Extensions analyzed with the header argument set."""

MESSAGE_FORMAT = "%f  %l %c  %t %n: %m"
"""Message format option matching the diagnostic line grammar."""
