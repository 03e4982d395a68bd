"""Core domain package for stale-options.

Core holds option defaults, merging, validation and filter compilation
without any GitHub Actions or environment-specific code.
"""
