"""Run moz60tool over GNOME Shell extensions and present its diagnostics."""

__version__ = "0.1.0"
