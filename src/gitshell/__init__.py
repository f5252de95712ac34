"""Thin wrappers around the git and gh command-line tools."""
