"""Core: error taxonomy and boundary protocols.

Invariants:
    - Core never imports from infrastructure/ or api/
"""
