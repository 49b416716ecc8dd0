"""Building blocks for a CommonMark processor: positions, pointers, tokens,
errors, rollback transactions, collections and HTML rendering."""

__version__ = "0.1.0"