"""Infrastructure Layer — database access, logging setup and credential hashing.

Invariants:
    - Infrastructure never imports from api/
    - Raw driver/ORM exceptions are mapped to core/errors.py types here
"""
