"""
Pure algorithms with no domain-specific dependencies.

Modules:
    tree - Iterative tree traversals
"""
