"""Site settings and the documentation navigation manifest."""

import os
from pathlib import Path
from typing import List

from pydantic import BaseModel, Field

from docsite.models.navigation import NavGroup, NavLink

# Every publishable page is a file with this name in its route directory
PAGE_FILENAME = "page.md"

_DEFAULT_SITE_URL = "https://nestledjs.com"

NAVIGATION: List[NavGroup] = [
    NavGroup(
        title="Documentation",
        links=[
            NavLink(title="Getting started", href="/"),
            NavLink(title="Installation", href="/docs/installation"),
            NavLink(title="Commands", href="/docs/commands"),
            NavLink(title="Architecture", href="/docs/architecture"),
            NavLink(title="Generators", href="/docs/generators"),
            NavLink(title="Deployment", href="/docs/deployment"),
        ],
    ),
]


class Settings(BaseModel):
    site_name: str = "Nestled"
    site_description: str = (
        "Nestled is a production-ready SaaS starter template built as an Nx monorepo "
        "with NestJS GraphQL API, React frontend, Prisma ORM, and code generation. "
        "It provides auth, profiles, organizations/teams, RBAC, billing/subscriptions, "
        "admin area, and audit logging out of the box."
    )
    site_url: str = _DEFAULT_SITE_URL
    content_dir: Path = Field(default_factory=lambda: Path.cwd() / "content")


def get_settings() -> Settings:
    """Build :class:`Settings` from the environment.

    ``DOCSITE_SITE_URL`` and ``DOCSITE_CONTENT_DIR`` override the defaults; the
    content directory otherwise is ``content/`` under the working directory.
    The environment is read on every call.
    """
    return Settings(
        site_url=os.environ.get("DOCSITE_SITE_URL", _DEFAULT_SITE_URL).rstrip("/"),
        content_dir=Path(os.environ.get("DOCSITE_CONTENT_DIR", Path.cwd() / "content")),
    )
