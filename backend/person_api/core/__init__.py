"""Core Layer: pure domain logic, no IO, no async, no driver calls.

Invariants:
    - No module in core/ imports from api/ or infrastructure/
    - All functions are pure and deterministic
"""
