"""
Top-level router for the versioned API.

Aggregates the resource routers under a single prefix.  When a new
resource is added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import (
    addons,
    cloudflare,
    contributions,
    mods,
    paths,
    submissions,
    textures,
    users,
    uses,
)

router = APIRouter()

router.include_router(textures.router, prefix="/textures", tags=["textures"])
router.include_router(uses.router, prefix="/uses", tags=["uses"])
router.include_router(paths.router, prefix="/paths", tags=["paths"])
router.include_router(contributions.router, prefix="/contributions", tags=["contributions"])
router.include_router(mods.router, prefix="/mods", tags=["mods"])
router.include_router(submissions.router, prefix="/submissions", tags=["submissions"])
router.include_router(addons.router, prefix="/addons", tags=["addons"])
# The users router also serves ``/auth/verify/...``, so it brings its own paths.
router.include_router(users.router, tags=["users"])
router.include_router(cloudflare.router, prefix="/cloudflare", tags=["cloudflare"])
