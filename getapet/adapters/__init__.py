"""Adapter package for external I/O implementations.

Purpose:
    Collect concrete implementations for domain ports (catalog files and local
    preference storage) used by use cases.

Dependencies:
    Submodules depend on filesystem APIs, ``json``, and domain protocol
    definitions only.

Call context:
    Imported by app composition modules (for runtime wiring) and by tests.
"""
