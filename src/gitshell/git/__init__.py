"""Wrappers around the git command-line tool.

Import from submodules:
- command: GitCommand, remote_url
- options: commit, push and pull option variants
"""
