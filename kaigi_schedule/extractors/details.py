"""Presentation page extraction: abstract, speaker bios and social links.

Each presentation page (`/2025/presentations/<handle>.html`) has a description
block followed by one member block per speaker, in the same order as the
speakers on the schedule grid.
"""

from dataclasses import dataclass, field
from typing import Optional

from bs4 import BeautifulSoup, Tag

from kaigi_schedule.models import SocialLinks

PRESENTATION_PATH = "/2025/presentations/{handle}.html#{day_id}"

DESCRIPTION_SELECTOR = ".m-presentation__description"
MEMBER_SELECTOR = ".m-speaker"
BIO_SELECTOR = ".m-speaker__bio"
SNS_LINK_SELECTOR = ".m-speaker__sns a[href]"

# Class markers on the social anchors
SNS_MARKERS = {
    "github": "github",
    "twitter": "twitter",
}


@dataclass
class MemberDetails:
    """One speaker block on a presentation page."""

    bio: Optional[str] = None
    sns: Optional[SocialLinks] = None


@dataclass
class PresentationDetails:
    """Everything the enrichment pass reads from a presentation page."""

    description: Optional[str] = None
    members: list[MemberDetails] = field(default_factory=list)


def presentation_url(base_url: str, speaker_id: str, day_id: str) -> str:
    """Presentation page URL for a speaker handle, e.g. '@ko1' -> .../ko1.html#day1."""
    handle = speaker_id[1:] if speaker_id.startswith("@") else speaker_id
    return base_url.rstrip("/") + PRESENTATION_PATH.format(handle=handle, day_id=day_id)


def _sns_kind(anchor: Tag) -> Optional[str]:
    classes = " ".join(anchor.get("class") or []).lower()
    for kind, marker in SNS_MARKERS.items():
        if marker in classes:
            return kind
    return None


def parse_sns(member: Tag) -> Optional[SocialLinks]:
    """GitHub/Twitter links of a member block. Duplicates: the last anchor wins."""
    links = {}
    for anchor in member.select(SNS_LINK_SELECTOR):
        kind = _sns_kind(anchor)
        if kind:
            links[kind] = anchor["href"]

    if not links:
        return None
    return SocialLinks(**links)


def _flat_text(node: Tag) -> str:
    """Text of a block on one line; paragraphs and line breaks become single spaces."""
    return " ".join(" ".join(node.stripped_strings).split())


def parse_member(member: Tag) -> MemberDetails:
    bio_node = member.select_one(BIO_SELECTOR)
    bio = _flat_text(bio_node) if bio_node is not None else ""
    return MemberDetails(bio=bio or None, sns=parse_sns(member))


def parse_presentation(document: BeautifulSoup) -> PresentationDetails:
    """Extract description and member blocks from a presentation page."""
    details = PresentationDetails()

    description_node = document.select_one(DESCRIPTION_SELECTOR)
    if description_node is not None:
        details.description = _flat_text(description_node) or None

    details.members = [parse_member(m) for m in document.select(MEMBER_SELECTOR)]
    return details
