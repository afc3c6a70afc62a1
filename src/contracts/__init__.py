"""Shared protocol constants for the web UI."""
