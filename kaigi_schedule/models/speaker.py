"""Speaker model for schedule sessions.

Name and handle come from the schedule grid; bio and social links are only
filled in by the presentation-page enrichment pass.
"""

from typing import Optional
from pydantic import BaseModel, Field


class SocialLinks(BaseModel):
    """Speaker profile links found on a presentation page."""

    github: Optional[str] = Field(default=None, description="GitHub profile URL")
    twitter: Optional[str] = Field(default=None, description="Twitter/X profile URL")

    @property
    def present(self) -> list[tuple[str, str]]:
        """(label, url) pairs for the links that are set, GitHub first."""
        links = []
        if self.github:
            links.append(("GitHub", self.github))
        if self.twitter:
            links.append(("Twitter", self.twitter))
        return links


class Speaker(BaseModel):
    """A speaker listed on a schedule item."""

    name: str = Field(description="Display name")
    id: str = Field(default="", description="Handle as shown on the grid: '@ko1'")

    # ===== ENRICHMENT (presentation page) =====
    bio: Optional[str] = None
    sns: Optional[SocialLinks] = None

    @property
    def handle(self) -> str:
        """Handle without its leading '@', as used in presentation URLs."""
        return self.id[1:] if self.id.startswith("@") else self.id

    @property
    def has_profile(self) -> bool:
        """True if enrichment attached a bio or any social link."""
        return bool(self.bio) or bool(self.sns and self.sns.present)
