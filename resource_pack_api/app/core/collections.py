"""Document store collection names.

The store has no DDL for collections: a collection exists as soon as a
record is written to it.  These constants are the single source of
truth for the names.
"""

TEXTURES = "textures"
USES = "uses"
PATHS = "paths"
CONTRIBUTIONS = "contributions"
MODS = "mods"
MODPACKS = "modpacks"
PACK_VERSIONS = "pack_versions"
PACKS = "packs"
SUBMISSIONS = "submissions"
ADDONS = "addons"
USERS = "users"
