"""Launcher configuration CLI."""
