"""catalogctl: validation rules for book catalog records."""

__version__ = "0.1.0"
