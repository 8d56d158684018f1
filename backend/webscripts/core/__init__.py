"""Core Layer — pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Repository access only through the Protocols in repository_protocols.py

Design Decisions:
    - Functional core separated from imperative shell
"""
