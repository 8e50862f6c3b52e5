"""Decide which third-party widgets the site configuration turns on."""

from typing import FrozenSet, Iterable, Tuple

from .models import PrimaryCommentWidget, SecondaryCommentWidget, SiteConfig, SponsorWidget

# Render order of widget regions under a post.
WIDGET_ORDER = ('sponsor', 'primary-comment', 'secondary-comment')


def resolve(config: SiteConfig) -> FrozenSet:
    """Return every widget whose identifier is configured, ignoring post category."""
    widgets = set()
    if config.sponsor.id:
        widgets.add(SponsorWidget(sponsor_id=config.sponsor.id))
    if config.comment.short_name:
        widgets.add(PrimaryCommentWidget(short_name=config.comment.short_name))
    if config.comment.repository:
        widgets.add(SecondaryCommentWidget(repository=config.comment.repository))
    return frozenset(widgets)


def ordered(widgets: Iterable) -> Tuple:
    """Sort widgets into the sponsor, primary comment, secondary comment order."""
    return tuple(sorted(widgets, key=lambda widget: WIDGET_ORDER.index(widget.kind)))
