"""ViewModel package for explorer UI state and command surfaces.

Call context:
    ``getapet/app/main.py`` and ``getapet/web_ui/main.py`` import concrete
    viewmodels from this package to bind view callbacks to state transitions.

Dependencies:
    Modules in this package depend on domain types only. File I/O and
    use-case orchestration remain outside.

Responsibilities:
    - Own the hierarchical list model and the adoption set.
    - Turn items into view-facing row DTOs.
    - Keep MVVM boundaries explicit by avoiding toolkit and persistence logic.
"""
