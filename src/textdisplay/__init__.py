"""Minimal Qt application: type text, click a button, see it displayed."""
