"""Directory traversal producing sorted per-directory child listings.

This package walks a directory subtree once, groups the discovered entries by
their parent directory and orders every group so that it can be rendered
deterministically.
"""
