"""Person API Package: HTTP adapter over a MongoDB person collection.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
