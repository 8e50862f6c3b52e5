import logging
import os
from datetime import datetime

from jinja2 import TemplateNotFound, TemplateSyntaxError

from .composer import compose
from .contact import ContactReveal
from .content import PAGE_EXCERPT_LENGTH, ContentSource, generate_excerpt
from .models import PAGE_CATEGORY
from .renderer import PageRenderer
from .view_model import build as build_view_model

ABOUT_TITLE = 'about'


class InfoFilter(logging.Filter):
    """Filter to allow only selected INFO messages to be shown in the console."""
    def filter(self, record):
        allowed_messages = [
            "Site build completed in",
            "Total posts generated:",
            "Total pages generated:",
            "Building index page",
            "Building about page",
            "Loaded configuration from",
        ]
        return record.levelno > logging.INFO or any(msg in record.getMessage() for msg in allowed_messages)


def setup_logging(logs_dir=None):
    """Attach the console and file handlers to the 'Blogframe' logger once."""
    logger = logging.getLogger('Blogframe')
    logger.setLevel(logging.DEBUG)

    if not logger.handlers:
        # Console handler with filter
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)
        console_handler.addFilter(InfoFilter())
        console_handler.setFormatter(logging.Formatter('%(message)s'))
        logger.addHandler(console_handler)

        # File handler for all logs
        logs_dir = logs_dir or os.path.join(os.getcwd(), 'logs')
        os.makedirs(logs_dir, exist_ok=True)
        log_filename = datetime.now().strftime('blogframe_%Y-%m-%d_%H-%M-%S.log')
        file_handler = logging.FileHandler(os.path.join(logs_dir, log_filename))
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
        logger.addHandler(file_handler)

    return logger


class Blogframe:
    """Builds every post, the about page and the blog index into an output directory."""

    def __init__(self, site, content_dir='content', output_dir='output', templates_dir=None, logs_dir=None):
        self.site = site
        self.content_dir = content_dir
        self.output_dir = output_dir
        self.logs_dir = logs_dir or os.path.join(os.getcwd(), 'logs')
        self.posts_generated = 0
        self.pages_generated = 0

        self.logger = setup_logging(self.logs_dir)

        self.content = ContentSource(content_dir)
        self.content.load()
        self.renderer = PageRenderer(templates_dir)

    def about_record(self):
        return self.content.find_by_title(ABOUT_TITLE)

    def post_records(self):
        about = self.about_record()
        return [record for record in self.content.records() if about is None or record.slug != about.slug]

    def render_post(self, slug):
        """Render one record through the view model, composer and templates."""
        record = self.content.get(slug)
        view_model = build_view_model(record, self.site)
        page = compose(view_model, self.site)
        return self.renderer.render_page(page, self.site)

    def write_page(self, relative_dir, html):
        output_dir = os.path.join(self.output_dir, relative_dir)
        os.makedirs(output_dir, exist_ok=True)
        output_file_path = os.path.join(output_dir, 'index.html')
        try:
            with open(output_file_path, 'w', encoding='utf-8') as output_file:
                output_file.write(html)
            self.logger.debug(f"Generated HTML: {output_file_path}")
        except (IOError, OSError) as e:
            self.logger.error(f"Failed to write HTML file {output_file_path}: {e}")
            return False
        return True

    def build_posts(self):
        for record in self.post_records():
            try:
                html = self.render_post(record.slug)
            except (TemplateNotFound, TemplateSyntaxError) as e:
                self.logger.error(f"Template error for {record.slug}: {e}")
                continue
            if not self.write_page(record.slug, html):
                continue
            if record.frontmatter.category == PAGE_CATEGORY:
                self.pages_generated += 1
            else:
                self.posts_generated += 1

    def build_about_page(self):
        record = self.about_record()
        if record is None:
            self.logger.debug("No about page found, skipping")
            return
        self.logger.info("Building about page")
        contact = ContactReveal(self.site.social_handle('email'))
        excerpt = generate_excerpt(record.html, PAGE_EXCERPT_LENGTH)
        try:
            html = self.renderer.render_about(record, self.site, contact, excerpt)
        except (TemplateNotFound, TemplateSyntaxError) as e:
            self.logger.error(f"Template error for about page: {e}")
            return
        if self.write_page('about', html):
            self.pages_generated += 1

    def build_index_page(self):
        self.logger.info("Building index page")
        try:
            html = self.renderer.render_index(self.post_records(), self.site)
        except (TemplateNotFound, TemplateSyntaxError) as e:
            self.logger.error(f"Template error for index page: {e}")
            return
        if self.write_page('', html):
            self.pages_generated += 1

    def build(self):
        """Build the whole site."""
        self.logger.debug(f"Starting site build into {self.output_dir}")
        os.makedirs(self.output_dir, exist_ok=True)
        self.build_posts()
        self.build_about_page()
        self.build_index_page()
