"""Mentorship Admin Package — staff, mentees, finance records and inventory.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
