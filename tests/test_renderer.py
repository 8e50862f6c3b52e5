"""Tests for the Jinja2 presentation layer."""

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound

from blogframe.composer import Region, RenderedPage, compose
from blogframe.contact import ContactReveal
from blogframe.renderer import PageRenderer, absolute_url, social_links
from blogframe.view_model import build


@pytest.fixture
def renderer():
    return PageRenderer()


class TestRenderPage:
    """Test cases for PageRenderer.render_page."""

    def test_regions_emitted_in_order(self, renderer, make_record, full_site):
        record = make_record(html='<p>POST BODY</p>')
        html = renderer.render_page(compose(build(record, full_site), full_site), full_site)
        markers = ['<h1>Hello</h1>', 'POST BODY', 'buymeacoffee.com/coffee-id',
                   'disqus.com/embed.js', 'utteranc.es/client.js']
        positions = [html.index(marker) for marker in markers]
        assert positions == sorted(positions)

    def test_head_region_inside_head(self, renderer, make_record, full_site):
        record = make_record(featured_image='cover', html='<img src="/static/cover.png">')
        html = renderer.render_page(compose(build(record, full_site), full_site), full_site)
        head = html[:html.index('</head>')]
        assert '<title>Hello | devAdvice blog</title>' in head
        assert 'content="https://blog.example.com/static/cover.png"' in head
        assert 'summary_large_image' in head

    def test_page_category_renders_no_widgets(self, renderer, make_record, full_site):
        record = make_record(category='page')
        html = renderer.render_page(compose(build(record, full_site), full_site), full_site)
        assert 'disqus_thread' not in html
        assert 'utteranc.es' not in html
        assert 'post-title' not in html

    def test_title_is_escaped(self, renderer, make_record, empty_site):
        record = make_record(title='<script>alert(1)</script>')
        html = renderer.render_page(compose(build(record, empty_site), empty_site), empty_site)
        assert '<script>alert(1)</script>' not in html
        assert '&lt;script&gt;' in html

    def test_body_is_not_escaped(self, renderer, make_record, empty_site):
        record = make_record(html='<p><em>raw</em></p>')
        html = renderer.render_page(compose(build(record, empty_site), empty_site), empty_site)
        assert '<p><em>raw</em></p>' in html

    def test_disqus_config_values(self, renderer, make_record, full_site):
        record = make_record(slug='hello')
        html = renderer.render_page(compose(build(record, full_site), full_site), full_site)
        assert '"https://blog.example.com/hello/"' in html
        assert 'this.page.identifier = "hello"' in html

    def test_unknown_region_kind(self, renderer, empty_site):
        with pytest.raises(TemplateNotFound):
            renderer.render_page(RenderedPage((Region('mystery'),)), empty_site)

    def test_user_templates_override_package(self, temp_dir, make_record, empty_site):
        regions_dir = Path(temp_dir) / 'templates' / 'regions'
        regions_dir.mkdir(parents=True)
        (regions_dir / 'body.html').write_text('<div class="custom">{{ html|safe }}</div>', encoding='utf-8')
        renderer = PageRenderer(str(Path(temp_dir) / 'templates'))
        html = renderer.render_page(compose(build(make_record(), empty_site), empty_site), empty_site)
        assert '<div class="custom"><p>Body</p></div>' in html
        assert 'class="link active"' in html


class TestRenderIndexAndAbout:
    """Test cases for the index and about pages."""

    def test_index_lists_posts_only(self, renderer, make_record, empty_site):
        records = [make_record(title='Post A', slug='a'), make_record(title='Standalone', slug='s', category='page')]
        html = renderer.render_index(records, empty_site)
        assert 'href="/a/"' in html
        assert 'Standalone' not in html

    def test_index_respects_initial_post_count(self, renderer, make_record):
        from blogframe.models import SiteConfig
        site = SiteConfig(title='Blog', count_of_initial_post=1)
        records = [make_record(title='First', slug='first'), make_record(title='Second', slug='second')]
        html = renderer.render_index(records, site)
        assert 'First' in html
        assert 'Second' not in html

    def test_about_hides_email_until_revealed(self, renderer, make_record, full_site):
        record = make_record(title='about', category='page', html='<p>Hi there</p>')
        html = renderer.render_about(record, full_site, ContactReveal('me@example.com'))
        assert '>Email</span>' in html
        assert 'data-email="me@example.com"' in html
        assert 'href="https://github.com/octocat"' in html
        assert 'class="link active" href="/about/"' in html

    def test_about_revealed_state(self, renderer, make_record, full_site):
        record = make_record(title='about', category='page')
        html = renderer.render_about(record, full_site, ContactReveal('me@example.com').reveal())
        assert '>me@example.com</span>' in html
        assert 'data-email' not in html


class TestHelpers:

    def test_absolute_url(self):
        assert absolute_url('/static/a.png', 'https://x.dev/') == 'https://x.dev/static/a.png'
        assert absolute_url('https://cdn.dev/a.png', 'https://x.dev') == 'https://cdn.dev/a.png'
        assert absolute_url('/static/a.png', '') == '/static/a.png'

    def test_social_links(self, full_site):
        assert social_links(full_site) == [{'label': 'GitHub', 'url': 'https://github.com/octocat'}]
