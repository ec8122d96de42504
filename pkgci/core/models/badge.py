"""
Badge model — a README badge contributed by a plugin.

URLs carry ``{{{USER}}}`` / ``{{{PKG}}}`` placeholders; the renderer fills
them in, not this package.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Badge(BaseModel):
    """A README badge.

    Attributes:
        hover: Badge label, shown as the image alt text.
        image: URL of the badge image.
        link:  URL the badge links to.
    """

    model_config = ConfigDict(frozen=True)

    hover: str
    image: str
    link: str

    def markdown(self) -> str:
        """Render as a Markdown image link."""
        return f"[![{self.hover}]({self.image})]({self.link})"
