"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or models/
    - Password hashing and token signing are pure computation (no IO)

Design Decisions:
    - Functional core separated from imperative shell: services own the awaits,
      core owns the rules
"""
