"""Data models shared by the feature stages."""

from dataclasses import dataclass, field


@dataclass
class FeatureVector:
    """Word and bigram counts of one script, labelled with its content rating."""
    title: str
    content_rating: str
    counts: dict[str, int] = field(default_factory=dict)
