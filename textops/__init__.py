"""textops: in-place text transforms for a selection or whole document."""

__version__ = "0.1.0"
