#!/usr/bin/env python3

import os
import json
import tomllib
from pathlib import Path

import logging
import sys

import yaml

logger = logging.getLogger("bevypatch")

CONFIG_FILENAMES = ['config.json', 'config.toml', 'config.yaml', 'config.yml']

CONFIG_SECTIONS = ('defaults', 'github', 'logging')


def configure_logging(level=None, fmt=None):
    """Send package log records to stderr, keeping stdout for the patch block."""
    if level is None:
        level = logging.WARNING
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt or "%(levelname)s: %(message)s"))

    # Replace rather than stack handlers when called more than once
    logger.handlers[:] = [handler]
    logger.setLevel(level)
    logger.propagate = False


def get_config_path():
    """Get the path to the configuration file.

    Checks in order:
    1. BEVY_PATCH_CONFIG environment variable
    2. ~/.bevy-patch/ directory
    """
    if 'BEVY_PATCH_CONFIG' in os.environ:
        path = Path(os.environ['BEVY_PATCH_CONFIG'])
        if path.exists():
            return path

    config_dir = Path.home() / '.bevy-patch'
    for filename in CONFIG_FILENAMES:
        path = config_dir / filename
        if path.exists():
            return path

    # No file exists; this is where one would go
    return config_dir / 'config.json'


def read_config_file(config_path):
    """Parse a JSON, TOML or YAML configuration file into a dict."""
    suffix = config_path.suffix.lower()
    if suffix == '.toml':
        with open(config_path, 'rb') as f:
            return tomllib.load(f)
    if suffix in ['.yaml', '.yml']:
        with open(config_path, 'r') as f:
            return yaml.safe_load(f) or {}
    with open(config_path, 'r') as f:
        return json.load(f)


def validate_config_file(file_config):
    """Reject files whose top level or known sections are not mappings."""
    if not isinstance(file_config, dict):
        raise ValueError("top level must be a mapping")
    for section in CONFIG_SECTIONS:
        if section in file_config and not isinstance(file_config[section], dict):
            raise ValueError(f"section '{section}' must be a mapping")


def load_config():
    """Load configuration from file."""
    config_path = get_config_path()

    # Start with default config
    config = get_default_config()

    if config_path.exists():
        try:
            file_config = read_config_file(config_path)
            validate_config_file(file_config)
            config = merge_configs(config, file_config)
            logger.debug(f"Loaded configuration from {config_path}")
        except (OSError, ValueError, tomllib.TOMLDecodeError, yaml.YAMLError) as e:
            logger.error(f"Error loading config from {config_path}: {e}")

    config = apply_env_overrides(config)

    if not config['github'].get('token'):
        config['github']['token'] = os.environ.get('GITHUB_TOKEN', '')

    return config


def get_default_config():
    """Get default configuration."""
    return {
        "defaults": {
            "repository": "https://github.com/bevyengine/bevy",
            "branch": "main",
            "umbrella": "bevy",
        },
        "github": {
            "token": "",
            "timeout_seconds": 5,
            "user_agent": "bevy-patch",
            "api_accept": "application/vnd.github.v3+json",
        },
        "logging": {
            "level": "WARNING",
            "format": "%(levelname)s: %(message)s",
        },
    }


def merge_configs(base_config, override_config):
    """
    Recursively merge two configuration dictionaries.

    Args:
        base_config (dict): Base configuration
        override_config (dict): Configuration to merge/override with

    Returns:
        dict: Merged configuration
    """
    merged = base_config.copy()

    for key, value in override_config.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            # Recursively merge nested dictionaries
            merged[key] = merge_configs(merged[key], value)
        else:
            # Override or add new key
            merged[key] = value

    return merged


def apply_env_overrides(config):
    """
    Apply environment variable overrides to configuration.
    Environment variables follow the pattern: BEVY_PATCH_SECTION_KEY
    For example: BEVY_PATCH_GITHUB_TIMEOUT_SECONDS=10
    """
    env_prefix = "BEVY_PATCH_"

    for env_key, value in os.environ.items():
        if not env_key.startswith(env_prefix) or env_key == 'BEVY_PATCH_CONFIG':
            continue

        key_parts = env_key[len(env_prefix):].lower().split('_')

        # Convert value
        if value.lower() in ('true', 'yes', 'on'):
            typed_value = True
        elif value.lower() in ('false', 'no', 'off'):
            typed_value = False
        elif value.isdigit():
            typed_value = int(value)
        else:
            typed_value = value

        current_level = config
        i = 0
        while i < len(key_parts):
            # Find the longest key in current_level that is a prefix of the remaining key_parts
            best_match_len = 0
            matched_key = None

            for config_key in current_level.keys():
                config_key_parts = config_key.split('_')
                if key_parts[i:i + len(config_key_parts)] == config_key_parts:
                    if len(config_key_parts) > best_match_len:
                        best_match_len = len(config_key_parts)
                        matched_key = config_key

            if matched_key is None:
                break

            if i + best_match_len == len(key_parts):
                current_level[matched_key] = typed_value
                break

            if not isinstance(current_level[matched_key], dict):
                # Path conflict: env var is longer than the config key path
                break

            current_level = current_level[matched_key]
            i += best_match_len

    return config
