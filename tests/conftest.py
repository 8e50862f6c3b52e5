"""Test configuration and fixtures for Blogframe tests."""

import pytest
import tempfile
import shutil
import os
import sys
from pathlib import Path

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from blogframe.models import CommentConfig, ContentRecord, Frontmatter, SiteConfig, SponsorConfig


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_dir = tempfile.mkdtemp()
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def mock_content_dir(temp_dir):
    """Create a mock content directory with two posts, a standalone page and an about page."""
    content_dir = Path(temp_dir) / 'content'
    (content_dir / 'blog' / 'hello-world').mkdir(parents=True)
    (content_dir / 'blog' / 'second-post').mkdir(parents=True)
    (content_dir / 'pages').mkdir(parents=True)

    (content_dir / 'blog' / 'hello-world' / 'index.md').write_text("""---
title: Hello World
date: 2023-01-01
author: Jane Smith
category: post
featuredImage: cover
---

First paragraph of the post.

![cover](/static/abc123-cover.png)
""", encoding='utf-8')

    (content_dir / 'blog' / 'second-post' / 'index.md').write_text("""---
title: Second Post
date: 2023-02-15
---

Another post without a featured image.
""", encoding='utf-8')

    (content_dir / 'pages' / 'colophon.md').write_text("""---
title: Colophon
category: page
---

Built with Blogframe.
""", encoding='utf-8')

    (content_dir / 'pages' / 'about.md').write_text("""---
title: about
category: page
---

I write about **software**.
""", encoding='utf-8')

    return str(content_dir)


@pytest.fixture
def mock_output_dir(temp_dir):
    """Create a mock output directory."""
    output_dir = Path(temp_dir) / 'output'
    output_dir.mkdir()
    return str(output_dir)


@pytest.fixture
def logs_dir(temp_dir):
    return str(Path(temp_dir) / 'logs')


@pytest.fixture
def empty_site():
    """Site configuration with every optional widget disabled."""
    return SiteConfig(title='devAdvice blog', author='Site Author', site_url='https://blog.example.com')


@pytest.fixture
def full_site():
    """Site configuration with every widget enabled."""
    return SiteConfig(
        title='devAdvice blog',
        author='Site Author',
        site_url='https://blog.example.com',
        comment=CommentConfig(short_name='devadvice', repository='org/repo'),
        sponsor=SponsorConfig(id='coffee-id'),
        social=(('github', 'octocat'), ('email', 'me@example.com')),
        keywords=('blog', 'python'),
    )


@pytest.fixture
def make_record():
    """Factory for content records."""
    def _make(title='Hello', category='post', featured_image=None,
              html='<p>Body</p>', slug='hello', author=None, date='January 01, 2023'):
        return ContentRecord(
            slug=slug,
            html=html,
            excerpt='Body',
            frontmatter=Frontmatter(
                title=title,
                date=date,
                author=author,
                category=category,
                featured_image=featured_image,
            ),
        )
    return _make
