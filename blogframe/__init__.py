"""
Blogframe - a small static blog generator.

Blogframe reads markdown posts with YAML front matter, resolves each post into
a view model, composes it into ordered page regions and renders them with
Jinja2 templates. Disqus, utterances and Buy Me a Coffee widgets are attached
when the site configuration names them.
"""

__version__ = "1.0.0"

from .composer import RenderedPage, Region, compose
from .core import Blogframe
from .image_locator import locate
from .models import (
    CommentConfig,
    ContentRecord,
    Frontmatter,
    PostViewModel,
    PrimaryCommentWidget,
    SecondaryCommentWidget,
    SiteConfig,
    SponsorConfig,
    SponsorWidget,
)
from .view_model import build
from .widgets import resolve

__all__ = [
    'Blogframe',
    'CommentConfig',
    'ContentRecord',
    'Frontmatter',
    'PostViewModel',
    'PrimaryCommentWidget',
    'Region',
    'RenderedPage',
    'SecondaryCommentWidget',
    'SiteConfig',
    'SponsorConfig',
    'SponsorWidget',
    'build',
    'compose',
    'locate',
    'resolve',
]
