"""
Jinja2 presentation layer.

Turns a composed page into HTML. Every region is rendered with its own
fragment template (``regions/<kind>.html``); the head region lands inside
``<head>`` and the remaining regions are emitted into the body in the order the
composer produced them.
"""

import logging
import os

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .composer import HEAD, page_url
from .models import PAGE_CATEGORY

PACKAGE_TEMPLATES = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'templates')

SOCIAL_URLS = [
    ('github', 'GitHub', 'https://github.com/{}'),
    ('linkedin', 'LinkedIn', 'https://www.linkedin.com/in/{}/'),
    ('twitter', 'Twitter', 'https://twitter.com/{}'),
    ('medium', 'Medium', 'https://medium.com/{}'),
    ('facebook', 'Facebook', 'https://www.facebook.com/{}'),
]

BLOG_PATH = '/'
ABOUT_PATH = '/about/'


def absolute_url(path, site_url):
    """Prefix a root-relative asset path with the site URL."""
    if not path or path.startswith(('http://', 'https://', '//')) or not site_url:
        return path
    return site_url.rstrip('/') + '/' + path.lstrip('/')


def social_links(site):
    links = []
    for network, label, pattern in SOCIAL_URLS:
        handle = site.social_handle(network)
        if not handle:
            continue
        url = handle if handle.startswith(('http://', 'https://')) else pattern.format(handle.lstrip('@'))
        links.append({'label': label, 'url': url})
    return links


class PageRenderer:
    """Render composed pages, the blog index and the about page to HTML strings."""

    def __init__(self, templates_dir=None):
        search_path = []
        if templates_dir and os.path.isdir(templates_dir):
            search_path.append(templates_dir)
        search_path.append(PACKAGE_TEMPLATES)
        self.templates_dir = search_path[0]
        self.logger = logging.getLogger('Blogframe.renderer')
        self.env = Environment(
            loader=FileSystemLoader(search_path),
            autoescape=select_autoescape(['html']),
        )
        self.env.filters['absolute_url'] = absolute_url

    def render_region(self, region, site):
        template = self.env.get_template(f'regions/{region.kind}.html')
        return template.render(site=site, **region.data)

    def render_page(self, page, site):
        head = ''
        regions = []
        for region in page:
            html = self.render_region(region, site)
            if region.kind == HEAD:
                head = html
            else:
                regions.append(html)
        self.logger.debug(f"Rendered regions: {', '.join(page.kinds)}")
        return self.env.get_template('post.html').render(
            site=site,
            head=head,
            regions=regions,
            root_path=BLOG_PATH,
        )

    def render_index(self, records, site):
        posts = []
        for record in records:
            if record.frontmatter.category == PAGE_CATEGORY:
                continue
            posts.append({
                'title': record.frontmatter.title,
                'date': record.frontmatter.date,
                'excerpt': record.excerpt,
                'url': page_url('', record.slug),
            })
        return self.env.get_template('index.html').render(
            site=site,
            posts=posts[:site.count_of_initial_post],
            root_path=BLOG_PATH,
        )

    def render_about(self, record, site, contact, excerpt=''):
        return self.env.get_template('about.html').render(
            site=site,
            title=record.frontmatter.title,
            description=excerpt or record.excerpt,
            html=record.html,
            links=social_links(site),
            contact=contact,
            root_path=ABOUT_PATH,
        )
