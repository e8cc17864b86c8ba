"""dconv — convert between RFC3339 dates and Unix epoch timestamps."""

__version__ = "0.3.0"
