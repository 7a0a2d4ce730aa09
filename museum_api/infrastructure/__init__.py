"""Infrastructure Layer: database pool, secret loading, logging setup.

Invariants:
    - Infrastructure never imports from api/
    - Driver exceptions are translated to core/errors.py types at this boundary
"""
