"""
Version 1 of the API.

This subpackage bundles the registration endpoints.  Breaking changes
belong in a new version subpackage (e.g. ``v2``).
"""
