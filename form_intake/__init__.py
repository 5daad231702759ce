"""Single-form intake service: form, upload, SQLite store, admin listing."""

__version__ = "2.0.0"
