"""Depth-bounded directory tree listings with configurable exclusion rules.

This package provides the node type used to describe listing entries, the
explicit per-entry result types, and the builder that walks the filesystem.
"""
