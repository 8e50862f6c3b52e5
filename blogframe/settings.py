#!/usr/bin/env python3
"""
Settings loader for Blogframe.
Supports configuration from blogframe.yml, blogframe.yaml, or blogframe.json files.
"""

import copy
import json
import logging
import os
from typing import Any, Dict, Optional

import yaml

from .models import CommentConfig, SiteConfig, SponsorConfig

logger = logging.getLogger('Blogframe.settings')

SAMPLE_YAML = """\
# Blogframe Configuration File
# Configure your blog here

# Site information
title: My Blog
description: A blog about software development.
author: Your Name
introduction: I explain with words and code.
siteUrl: https://blog.example.com
keywords: [blog, python]

# Social accounts (leave empty to hide)
social:
  twitter: ''
  github: ''
  medium: ''
  facebook: ''
  linkedin: ''
  email: ''

# Comment widgets; both may be enabled at once
comment:
  disqusShortName: ''     # your Disqus short name
  utterances: ''          # owner/repo holding the comment issues

configs:
  countOfInitialPost: 10

sponsor:
  buyMeACoffeeId: ''

share:
  facebookAppId: ''

ga: ''                    # Google Analytics tracking id

# Build settings
content: content
output: output
templates: templates
"""


def _deep_merge(base, override):
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _text(value):
    return '' if value is None else str(value).strip()


class SiteSettings:
    """Load and manage Blogframe configuration settings."""

    DEFAULT_SETTINGS = {
        'title': '',
        'description': '',
        'author': '',
        'introduction': '',
        'siteUrl': '',
        'social': {
            'twitter': '',
            'github': '',
            'medium': '',
            'facebook': '',
            'linkedin': '',
            'email': '',
        },
        'keywords': [],
        'comment': {
            'disqusShortName': '',
            'utterances': '',
        },
        'configs': {
            'countOfInitialPost': 10,
        },
        'sponsor': {
            'buyMeACoffeeId': '',
        },
        'share': {
            'facebookAppId': '',
        },
        'ga': '',
        'content': 'content',
        'output': 'output',
        'templates': None,
    }

    # Config file names to look for (in order of preference)
    CONFIG_FILES = ['blogframe.yml', 'blogframe.yaml', 'blogframe.json']

    def __init__(self, config_dir: str = None):
        """
        Initialize settings loader.

        Args:
            config_dir: Directory to look for config files. Defaults to current directory.
        """
        self.config_dir = config_dir or os.getcwd()
        self.settings = copy.deepcopy(self.DEFAULT_SETTINGS)
        self.config_file_path = None

    def load_settings(self) -> Dict[str, Any]:
        """
        Load settings from configuration file if it exists.

        Returns:
            Dictionary of configuration settings
        """
        config_file = self._find_config_file()

        if config_file:
            self.config_file_path = config_file
            try:
                loaded_settings = self._load_config_file(config_file)
                if loaded_settings:
                    self.settings = _deep_merge(self.settings, loaded_settings)
                    logger.info(f"Loaded configuration from: {os.path.relpath(config_file)}")
            except (ValueError, IOError) as e:
                logger.warning(f"Failed to load config file {config_file}: {e}")

        return copy.deepcopy(self.settings)

    def _find_config_file(self) -> Optional[str]:
        for filename in self.CONFIG_FILES:
            config_path = os.path.join(self.config_dir, filename)
            if os.path.exists(config_path):
                return config_path
        return None

    def _load_config_file(self, config_path: str) -> Dict[str, Any]:
        """
        Load configuration from a file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Dictionary of configuration settings
        """
        file_ext = os.path.splitext(config_path)[1].lower()
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                if file_ext in ['.yml', '.yaml']:
                    data = yaml.safe_load(f) or {}
                elif file_ext == '.json':
                    data = json.load(f) or {}
                else:
                    raise ValueError(f"Unsupported config file format: {file_ext}")
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in configuration file {config_path}: {e}")
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in configuration file {config_path}: {e}")
        except (IOError, OSError) as e:
            raise IOError(f"Error reading configuration file {config_path}: {e}")

        if not isinstance(data, dict):
            raise ValueError(f"Configuration file must contain a mapping: {config_path}")
        return data

    def create_sample_config(self, file_format: str = 'yml') -> str:
        """
        Create a sample configuration file.

        Args:
            file_format: Format for config file ('yml', 'yaml', or 'json')

        Returns:
            Path to created sample config file
        """
        filename = f'blogframe.{file_format}'
        config_path = os.path.join(self.config_dir, filename)

        try:
            with open(config_path, 'w', encoding='utf-8') as f:
                if file_format in ['yml', 'yaml']:
                    f.write(SAMPLE_YAML)
                elif file_format == 'json':
                    sample = yaml.safe_load(SAMPLE_YAML)
                    json.dump(sample, f, indent=2)
                else:
                    raise ValueError(f"Unsupported config file format: {file_format}")
        except PermissionError:
            raise PermissionError(f"Permission denied creating configuration file: {config_path}")
        except (IOError, OSError) as e:
            raise IOError(f"Error writing configuration file {config_path}: {e}")

        return config_path

    def merge_with_args(self, args_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge configuration settings with command-line arguments.
        Command-line arguments take precedence over config file settings.

        Args:
            args_dict: Dictionary of command-line arguments, keyed like the config file

        Returns:
            Merged configuration dictionary
        """
        overrides = {key: value for key, value in args_dict.items() if value is not None}
        return _deep_merge(self.settings, overrides)


def to_site_config(settings: Dict[str, Any]) -> SiteConfig:
    """Freeze a settings dictionary into the SiteConfig passed to every render."""
    comment = settings.get('comment') or {}
    sponsor = settings.get('sponsor') or {}
    share = settings.get('share') or {}
    configs = settings.get('configs') or {}

    repository = _text(comment.get('utterances'))
    if repository and '/' not in repository:
        logger.warning(f"comment.utterances should look like 'owner/repo', got '{repository}'")

    keywords = settings.get('keywords') or []
    if isinstance(keywords, str):
        keywords = [word.strip() for word in keywords.split(',')]

    try:
        count = int(configs.get('countOfInitialPost', 10))
    except (TypeError, ValueError):
        logger.warning(f"Invalid configs.countOfInitialPost: {configs.get('countOfInitialPost')!r}, using 10")
        count = 10

    return SiteConfig(
        title=_text(settings.get('title')),
        description=_text(settings.get('description')),
        author=_text(settings.get('author')),
        introduction=_text(settings.get('introduction')),
        site_url=_text(settings.get('siteUrl')),
        comment=CommentConfig(
            short_name=_text(comment.get('disqusShortName')),
            repository=repository,
        ),
        sponsor=SponsorConfig(id=_text(sponsor.get('buyMeACoffeeId'))),
        social=tuple((key, _text(value)) for key, value in (settings.get('social') or {}).items()),
        keywords=tuple(str(word).strip() for word in keywords if word),
        ga=_text(settings.get('ga')),
        facebook_app_id=_text(share.get('facebookAppId')),
        count_of_initial_post=max(0, count),
    )
