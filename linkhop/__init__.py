"""linkhop: personal command router that turns short tokens into redirects.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
