"""Services Layer — in-memory registries that apply core naming rules.

Invariants:
    - Services hold state; core functions stay pure
    - Services raise SessionTitlesError subclasses, never HTTPException
"""
