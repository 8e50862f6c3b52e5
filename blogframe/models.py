"""
Value objects shared by the rendering pipeline.

Everything here is immutable: content records and the site configuration are
loaded once, view models are rebuilt for every render.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

PAGE_CATEGORY = 'page'


@dataclass(frozen=True)
class Frontmatter:
    title: str
    date: str = ''
    author: Optional[str] = None
    category: Optional[str] = None
    featured_image: Optional[str] = None


@dataclass(frozen=True)
class ContentRecord:
    slug: str
    html: str
    excerpt: str
    frontmatter: Frontmatter


@dataclass(frozen=True)
class CommentConfig:
    short_name: str = ''
    repository: str = ''


@dataclass(frozen=True)
class SponsorConfig:
    id: str = ''


@dataclass(frozen=True)
class SiteConfig:
    title: str = ''
    description: str = ''
    author: str = ''
    introduction: str = ''
    site_url: str = ''
    comment: CommentConfig = field(default_factory=CommentConfig)
    sponsor: SponsorConfig = field(default_factory=SponsorConfig)
    social: Tuple[Tuple[str, str], ...] = ()
    keywords: Tuple[str, ...] = ()
    ga: str = ''
    facebook_app_id: str = ''
    count_of_initial_post: int = 10

    def social_handle(self, network):
        """Handle configured for a social network, or '' when unset."""
        return dict(self.social).get(network, '')


@dataclass(frozen=True)
class SponsorWidget:
    sponsor_id: str
    kind: str = field(default='sponsor', init=False)


@dataclass(frozen=True)
class PrimaryCommentWidget:
    """Disqus thread."""
    short_name: str
    kind: str = field(default='primary-comment', init=False)


@dataclass(frozen=True)
class SecondaryCommentWidget:
    """utterances thread backed by a GitHub repository."""
    repository: str
    kind: str = field(default='secondary-comment', init=False)


@dataclass(frozen=True)
class PostViewModel:
    slug: str
    title: str
    date: str
    author: Optional[str]
    category: Optional[str]
    excerpt: str
    body: str
    featured_image: Optional[str]
    show_metadata: bool
    active_widgets: Tuple[Any, ...] = ()
