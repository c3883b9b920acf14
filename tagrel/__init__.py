"""Publish tiered GitHub releases from a single semver tag."""

__version__ = "0.1.0"
