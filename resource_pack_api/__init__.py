"""
Resource Pack API.

Backend for a community resource pack: textures and their uses and
paths, contributions, mods, pack submissions, add-ons with a review
workflow, and user accounts.  Data lives in a document store and is
served over HTTP by a FastAPI application (``resource_pack_api.app``).
"""

__all__ = []
