"""Services Layer — credential store, catalog registry and ownership ledger.

Invariants:
    - Services take an AsyncSession and commit their own single-row writes
    - Services raise PokecatchError subclasses; routes never translate SQLAlchemy errors

Design Decisions:
    - One service class per component for locality
"""
