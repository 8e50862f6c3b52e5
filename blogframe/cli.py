#!/usr/bin/env python3
"""
Command-line interface for Blogframe.
"""

import argparse
import os
import sys
import time

from . import __version__
from .core import Blogframe, setup_logging
from .settings import SiteSettings, to_site_config


def main(argv=None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(description='Blogframe - static blog generator')
    parser.add_argument('--output', type=str,
                        help='Output directory for generated site')
    parser.add_argument('--content', type=str,
                        help='Content directory containing markdown files')
    parser.add_argument('--templates', type=str,
                        help='Templates directory overriding the bundled templates')
    parser.add_argument('--site-title', type=str, help='Site title for metadata')
    parser.add_argument('--site-url', type=str,
                        help='Site URL used for canonical and comment thread URLs')
    parser.add_argument('--config-dir', type=str,
                        help='Directory holding blogframe.yml / blogframe.json')
    parser.add_argument('--init', type=str, choices=['yml', 'yaml', 'json'],
                        help='Create a sample configuration file')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    args = parser.parse_args(argv)
    settings_loader = SiteSettings(args.config_dir)

    if args.init:
        try:
            config_path = settings_loader.create_sample_config(args.init)
        except (IOError, OSError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        print(f"Created sample configuration file: {config_path}")
        return

    setup_logging()
    settings_loader.load_settings()
    final_settings = settings_loader.merge_with_args({
        'output': args.output,
        'content': args.content,
        'templates': args.templates,
        'title': args.site_title,
        'siteUrl': args.site_url,
    })

    output_dir = os.path.expanduser(final_settings['output'])
    overall_start_time = time.time()

    try:
        generator = Blogframe(
            site=to_site_config(final_settings),
            content_dir=final_settings['content'],
            output_dir=output_dir,
            templates_dir=final_settings['templates'],
        )
        generator.build()

        total_time = time.time() - overall_start_time
        generator.logger.info(f"Site build completed in {total_time:.6f} seconds.")
        generator.logger.info(f"Total posts generated: {generator.posts_generated}")
        generator.logger.info(f"Total pages generated: {generator.pages_generated}")
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
