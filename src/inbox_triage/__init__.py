"""Email categorisation, importance scoring and reply drafting."""

__version__ = "0.1.0"
