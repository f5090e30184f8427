"""Packaged shell wrapper sources."""
