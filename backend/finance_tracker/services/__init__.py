"""Business logic services.

Submodules are imported directly; ``database`` depends on ``services.accounts``
so this package must not import modules that depend on ``database``.
"""
