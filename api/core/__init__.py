"""
Shared, cross-cutting code for the API.

`core/` holds small building blocks that every feature uses (settings, DB
wiring, exception handlers). Feature-specific SQL and business logic live in
the corresponding feature package (e.g. `votes/`).
"""
