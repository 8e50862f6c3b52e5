"""Turn a content record plus site configuration into a render-ready view model."""

from .image_locator import locate
from .models import PAGE_CATEGORY, ContentRecord, PostViewModel, SiteConfig
from .widgets import ordered, resolve


def build(record: ContentRecord, config: SiteConfig) -> PostViewModel:
    meta = record.frontmatter
    show_metadata = meta.category != PAGE_CATEGORY

    featured_image = None
    if meta.featured_image:
        featured_image = locate(record.html, meta.featured_image)

    # Standalone pages never carry widgets, whatever the configuration says.
    widgets = ordered(resolve(config)) if show_metadata else ()

    return PostViewModel(
        slug=record.slug,
        title=meta.title,
        date=meta.date,
        author=meta.author or config.author or None,
        category=meta.category,
        excerpt=record.excerpt,
        body=record.html,
        featured_image=featured_image,
        show_metadata=show_metadata,
        active_widgets=widgets,
    )
