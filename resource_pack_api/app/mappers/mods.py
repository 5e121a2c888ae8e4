"""
Mapping between stored and domain mods.

Stored mods keep ``curse_url`` as an empty string when the mod is not
listed in the catalog; the domain uses ``None``.  Stored records may
also lack ``aliases`` or ``resource_pack`` entirely.
"""

from typing import Any, Dict

from ..schemas.mod import Mod, ModResourcePack


def map_mod(record: Dict[str, Any]) -> Mod:
    resource_pack = record.get("resource_pack") or {}
    return Mod(
        id=str(record["id"]),
        name=record["name"],
        aliases=list(record.get("aliases") or []),
        curse_url=record.get("curse_url") or None,
        resource_pack=ModResourcePack(
            blacklist=list(resource_pack.get("blacklist") or []),
            versions=list(resource_pack.get("versions") or []),
            git_repository=resource_pack.get("git_repository") or None,
        ),
        blacklisted=bool(record.get("blacklisted", False)),
    )


def unmap_mod(mod: Mod) -> Dict[str, Any]:
    return mod.model_dump()
