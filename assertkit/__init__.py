"""Type-name prettifying, token tables, expression decomposition and value stringification."""

__version__ = "0.1.0"

__all__ = ["decompose", "lexicon", "stringify", "types"]