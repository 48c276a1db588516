"""Resolution Core: command capability, registry, alias/prefix resolution, router.

Invariants:
    - Core never imports from api/, infrastructure/ or config
    - Nothing in core performs I/O or logging at resolution time
"""
