"""Filter a directory and push the clean files to a remote git repository."""

__version__ = "0.1.0"
