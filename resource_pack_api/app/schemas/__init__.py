"""
Pydantic schema definitions for the domain model and API payloads.

These are the *domain* shapes.  The legacy shapes that the document
store still holds live next to their mapping functions in
``app.mappers`` so the two never get mixed up.
"""
