"""
Page composition.

A page is an ordered list of regions. Each region names the template fragment
the presentation layer should use (``kind``) and carries the values that
fragment needs (``data``). The order is fixed:

    head, title-block (posts only), body, sponsor, primary-comment,
    secondary-comment

Widget regions follow the fixed order regardless of how the view model lists
its active widgets.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from .models import PostViewModel, SiteConfig
from .widgets import WIDGET_ORDER

HEAD = 'head'
TITLE_BLOCK = 'title-block'
BODY = 'body'


@dataclass(frozen=True)
class Region:
    kind: str
    data: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class RenderedPage:
    regions: Tuple[Region, ...]

    def __iter__(self):
        return iter(self.regions)

    def __len__(self):
        return len(self.regions)

    @property
    def kinds(self):
        return [region.kind for region in self.regions]


def page_url(site_url, slug):
    """Absolute URL of a post, or a root-relative one when no site URL is set."""
    path = f"/{slug.strip('/')}/" if slug else '/'
    return site_url.rstrip('/') + path if site_url else path


def _widget_region(widget, vm, url):
    if widget.kind == 'sponsor':
        return Region(widget.kind, {'sponsor_id': widget.sponsor_id})
    if widget.kind == 'primary-comment':
        return Region(widget.kind, {
            'short_name': widget.short_name,
            'page_url': url,
            'identifier': vm.slug,
            'title': vm.title,
        })
    return Region(widget.kind, {'repository': widget.repository})


def compose(vm: PostViewModel, config: SiteConfig) -> RenderedPage:
    url = page_url(config.site_url, vm.slug)
    regions = [Region(HEAD, {
        'title': vm.title,
        'description': vm.excerpt,
        'featured_image': vm.featured_image,
        'site_title': config.title,
        'site_url': config.site_url,
        'page_url': url,
        'author': vm.author,
        'keywords': list(config.keywords),
        'ga': config.ga,
        'facebook_app_id': config.facebook_app_id,
    })]

    if vm.show_metadata:
        regions.append(Region(TITLE_BLOCK, {
            'title': vm.title,
            'date': vm.date,
            'author': vm.author,
        }))

    regions.append(Region(BODY, {'html': vm.body}))

    by_kind = {widget.kind: widget for widget in vm.active_widgets}
    for kind in WIDGET_ORDER:
        if kind in by_kind:
            regions.append(_widget_region(by_kind[kind], vm, url))

    return RenderedPage(tuple(regions))
