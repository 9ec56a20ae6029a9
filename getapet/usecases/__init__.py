"""Use-case layer wrapping adapter calls for the explorer runtimes.

Each module turns adapter failures into ``UseCaseError`` so views can show a
message and fall back to defaults.
"""
