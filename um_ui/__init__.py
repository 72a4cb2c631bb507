"""User-facing layer for unicode-menu (CLI and terminal host)."""
