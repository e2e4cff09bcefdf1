"""Tech News: posts, comments and a consistent one-vote-per-user ledger."""

__version__ = "0.1.0"
