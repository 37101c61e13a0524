"""Core Layer — domain types, errors and boundary contracts. No IO.

Invariants:
    - No module in core/ imports from api/ or infrastructure/
"""
