"""Filesystem adapters for the injection use-case."""
