"""Insight model for natural-language findings."""

from dataclasses import dataclass


@dataclass
class Insight:
    """A short finding derived from the aggregates.

    Attributes:
        type: One of 'positive', 'neutral', 'warning', 'suggestion', 'info'.
        title: Headline for the finding.
        message: Sentence with the computed figures interpolated.
        icon: Display glyph.
    """

    type: str
    title: str
    message: str
    icon: str

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "title": self.title,
            "message": self.message,
            "icon": self.icon,
        }
