"""Desktop file manager with in-memory accounts, owned and shared file lists, upload and delete."""

__version__ = "0.1.0"