from typing import List

from pydantic import BaseModel


class NavLink(BaseModel):
    title: str
    href: str


class NavGroup(BaseModel):
    """One titled section of the documentation sidebar."""

    title: str
    links: List[NavLink]
