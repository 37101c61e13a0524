"""Infrastructure Layer — database client and cross-cutting concerns.

Invariants:
    - Driver exceptions never escape this layer untranslated
"""
