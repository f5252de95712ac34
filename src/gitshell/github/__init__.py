"""Wrappers around the GitHub CLI (`gh`).

Import from submodules:
- client: GitHub
- options: repo create and api option variants
- types: Collaborator, CollaboratorPermission, ApiCallFailure
- parsing: parse_collaborators
"""
