"""
Mapping between stored and domain contributions.

The stored layout names the resolution ``res`` and the texture
``textureID``; nothing else differs.
"""

from typing import List, Sequence

from pydantic import BaseModel

from ..schemas.contribution import Contribution, Resolution


class LegacyContribution(BaseModel):
    id: str
    date: int
    res: Resolution
    textureID: int
    contributors: List[str]


def map_contribution(old: LegacyContribution) -> Contribution:
    return Contribution(
        id=old.id,
        date=old.date,
        resolution=old.res,
        texture=old.textureID,
        contributors=list(old.contributors),
    )


def map_contributions(data: Sequence[LegacyContribution]) -> List[Contribution]:
    return [map_contribution(c) for c in data]


def unmap_contribution(contribution: Contribution) -> LegacyContribution:
    return LegacyContribution(
        id=contribution.id,
        date=contribution.date,
        res=contribution.resolution,
        textureID=contribution.texture,
        contributors=list(contribution.contributors),
    )
