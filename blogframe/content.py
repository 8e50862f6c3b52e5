"""
Markdown content source.

Reads markdown files with YAML front matter from a content directory and turns
each one into an immutable ContentRecord. Markdown rendering is delegated to
mistune.
"""

import html
import logging
import os
import re
from datetime import date, datetime

import mistune
import yaml

from .models import ContentRecord, Frontmatter

DISPLAY_DATE_FORMAT = '%B %d, %Y'
DATE_FORMATS = ['%Y-%m-%dT%H:%M:%S', '%Y-%m-%d', '%b %d, %Y']
POST_EXCERPT_LENGTH = 280
PAGE_EXCERPT_LENGTH = 160

TAG_RE = re.compile(r'<[^>]+>')
WHITESPACE_RE = re.compile(r'\s+')


def create_markdown_parser():
    """Create a Mistune markdown parser with a custom renderer."""
    class CustomRenderer(mistune.HTMLRenderer):
        def __init__(self):
            super().__init__(escape=False)

        def block_code(self, code, info=None):
            escaped_code = mistune.escape(code)
            if info:
                lang = mistune.escape(info.split(None, 1)[0])
                return f'<pre class="language-{lang}"><code>{escaped_code}</code></pre>\n'
            return f'<pre><code>{escaped_code}</code></pre>\n'

    return mistune.create_markdown(
        renderer=CustomRenderer(),
        plugins=['table', 'task_lists', 'strikethrough']
    )


def parse_date(value):
    """Parse a front matter date. Unknown values come back as datetime.min."""
    if isinstance(value, datetime):
        return value
    elif isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        for fmt in DATE_FORMATS:
            try:
                return datetime.strptime(value.strip(), fmt)
            except ValueError:
                continue
    return datetime.min


def format_date(value):
    """Format a front matter date for display, keeping unparseable strings as written."""
    if value is None or value == '':
        return ''
    parsed = parse_date(value)
    if parsed == datetime.min:
        return str(value)
    return parsed.strftime(DISPLAY_DATE_FORMAT)


def generate_excerpt(markup, length=POST_EXCERPT_LENGTH):
    """Plain-text excerpt of rendered HTML, pruned at a word boundary."""
    text = html.unescape(TAG_RE.sub(' ', markup))
    text = WHITESPACE_RE.sub(' ', text).strip()
    if len(text) <= length:
        return text
    pruned = text[:length]
    if ' ' in pruned and not text[length].isspace():
        pruned = pruned.rsplit(' ', 1)[0]
    return pruned.rstrip(' ,.;:') + '…'


def split_front_matter(text):
    """Split a markdown document into (metadata dict, markdown body)."""
    text = text.lstrip('\ufeff')
    if not text.startswith('---'):
        return {}, text
    parts = text.split('---', 2)
    if len(parts) < 3:
        return {}, text
    metadata = yaml.safe_load(parts[1]) or {}
    if not isinstance(metadata, dict):
        raise ValueError('front matter must be a mapping')
    return metadata, parts[2].strip()


def _optional_str(value):
    if value is None:
        return None
    value = str(value).strip()
    return value or None


class ContentSource:
    """Loads and indexes every markdown document under a content directory."""

    def __init__(self, content_dir, excerpt_length=POST_EXCERPT_LENGTH):
        if not os.path.isdir(content_dir):
            raise FileNotFoundError(f"Content directory not found: {content_dir}")
        self.content_dir = content_dir
        self.excerpt_length = excerpt_length
        self.logger = logging.getLogger('Blogframe.content')
        self.markdown_parser = create_markdown_parser()
        self._records = {}
        self._sort_keys = {}

    def get_markdown_files(self):
        markdown_files = []
        for root, _, files in os.walk(self.content_dir):
            for name in files:
                if name.endswith('.md'):
                    markdown_files.append(os.path.join(root, name))
        return sorted(markdown_files)

    def slug_for(self, metadata, file_path):
        if metadata.get('slug'):
            return str(metadata['slug']).strip('/')
        stem = os.path.splitext(os.path.basename(file_path))[0]
        if stem == 'index':
            return os.path.basename(os.path.dirname(file_path))
        return stem

    def load_file(self, file_path):
        """Parse a single markdown file into a ContentRecord, or None on failure."""
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                text = f.read()
        except (IOError, OSError) as e:
            self.logger.error(f"Failed to read markdown file {file_path}: {e}")
            return None

        try:
            metadata, markdown_content = split_front_matter(text)
        except (yaml.YAMLError, ValueError) as e:
            self.logger.error(f"Invalid front matter in {file_path}: {e}")
            return None

        body = self.markdown_parser(markdown_content)
        frontmatter = Frontmatter(
            title=_optional_str(metadata.get('title')) or '',
            date=format_date(metadata.get('date')),
            author=_optional_str(metadata.get('author')),
            category=_optional_str(metadata.get('category')),
            featured_image=_optional_str(metadata.get('featuredImage')),
        )
        record = ContentRecord(
            slug=self.slug_for(metadata, file_path),
            html=body,
            excerpt=generate_excerpt(body, self.excerpt_length),
            frontmatter=frontmatter,
        )
        self._sort_keys[record.slug] = parse_date(metadata.get('date'))
        return record

    def load(self):
        """Load every markdown file. Returns the number of records loaded."""
        self._records = {}
        self._sort_keys = {}
        for file_path in self.get_markdown_files():
            record = self.load_file(file_path)
            if record is None:
                continue
            if record.slug in self._records:
                self.logger.warning(f"Duplicate slug '{record.slug}' in {file_path}, replacing earlier record")
            self._records[record.slug] = record
            self.logger.debug(f"Loaded {file_path} as '{record.slug}'")
        return len(self._records)

    def records(self):
        """All records, newest first."""
        return sorted(
            self._records.values(),
            key=lambda r: (-self._sort_keys[r.slug].toordinal(), r.frontmatter.title.lower())
        )

    def get(self, slug):
        return self._records[slug]

    def find_by_title(self, title):
        wanted = title.lower()
        for record in self._records.values():
            if record.frontmatter.title.lower() == wanted:
                return record
        return None
