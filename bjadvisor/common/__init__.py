"""Card game building blocks: cards and hands."""
