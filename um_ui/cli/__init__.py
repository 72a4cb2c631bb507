"""Command-line entry points for unicode-menu."""
