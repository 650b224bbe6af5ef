"""Interfaces layer - user-facing entry points (CLI)."""
