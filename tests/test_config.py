"""
Unit tests for bevypatch.config module
"""
import unittest
import tempfile
import os
import shutil
import json
import logging
from pathlib import Path
from unittest.mock import patch

from bevypatch.config import (
    load_config,
    get_config_path,
    get_default_config,
    merge_configs,
    apply_env_overrides,
    configure_logging,
)


class TestConfigManagement(unittest.TestCase):
    """Test configuration management functionality"""

    def setUp(self):
        """Set up an isolated HOME and environment"""
        self.temp_dir = tempfile.mkdtemp()
        env = {
            key: value for key, value in os.environ.items()
            if not key.startswith('BEVY_PATCH_') and key != 'GITHUB_TOKEN'
        }
        env['HOME'] = self.temp_dir
        self.env_patcher = patch.dict(os.environ, env, clear=True)
        self.env_patcher.start()
        self.config_dir = Path(self.temp_dir) / '.bevy-patch'

    def tearDown(self):
        """Clean up test environment"""
        self.env_patcher.stop()
        shutil.rmtree(self.temp_dir)

    def test_get_default_config(self):
        """Test default configuration structure"""
        config = get_default_config()

        self.assertEqual(config['defaults']['repository'], 'https://github.com/bevyengine/bevy')
        self.assertEqual(config['defaults']['branch'], 'main')
        self.assertEqual(config['defaults']['umbrella'], 'bevy')
        self.assertEqual(config['github']['timeout_seconds'], 5)
        self.assertEqual(config['github']['user_agent'], 'bevy-patch')
        self.assertIn('level', config['logging'])
        self.assertIn('format', config['logging'])

    def test_default_config_path(self):
        """Test the path returned when no file exists"""
        self.assertEqual(get_config_path(), self.config_dir / 'config.json')

    def test_load_config_no_file(self):
        """Test loading config when no file exists"""
        self.assertEqual(load_config(), get_default_config())

    def test_load_config_json_file(self):
        """Test loading config from JSON file"""
        self.config_dir.mkdir()
        with open(self.config_dir / 'config.json', 'w') as f:
            json.dump({'defaults': {'branch': 'trunk'}}, f)

        config = load_config()

        self.assertEqual(config['defaults']['branch'], 'trunk')
        # Untouched keys keep their defaults
        self.assertEqual(config['defaults']['umbrella'], 'bevy')

    def test_load_config_toml_file(self):
        """Test loading config from TOML file"""
        self.config_dir.mkdir()
        (self.config_dir / 'config.toml').write_text(
            '[defaults]\nrepository = "https://github.com/aceeri/bevy"\n'
        )

        config = load_config()

        self.assertEqual(config['defaults']['repository'], 'https://github.com/aceeri/bevy')

    def test_load_config_yaml_file(self):
        """Test loading config from YAML file"""
        self.config_dir.mkdir()
        (self.config_dir / 'config.yaml').write_text('github:\n  timeout_seconds: 12\n')

        config = load_config()

        self.assertEqual(config['github']['timeout_seconds'], 12)

    def test_config_env_var_path(self):
        """Test BEVY_PATCH_CONFIG pointing at a file"""
        custom = Path(self.temp_dir) / 'custom.json'
        custom.write_text(json.dumps({'defaults': {'umbrella': 'engine'}}))
        os.environ['BEVY_PATCH_CONFIG'] = str(custom)

        self.assertEqual(get_config_path(), custom)
        self.assertEqual(load_config()['defaults']['umbrella'], 'engine')

    def test_malformed_config_falls_back_to_defaults(self):
        """Test that a broken file is logged and ignored"""
        self.config_dir.mkdir()
        (self.config_dir / 'config.json').write_text('{not json')

        with self.assertLogs('bevypatch', level='ERROR') as logs:
            config = load_config()

        self.assertEqual(config, get_default_config())
        self.assertIn('Error loading config', logs.output[0])

    def test_null_section_falls_back_to_defaults(self):
        """Test that an empty YAML section is logged and ignored"""
        self.config_dir.mkdir()
        (self.config_dir / 'config.yaml').write_text('github:\n')

        with self.assertLogs('bevypatch', level='ERROR') as logs:
            config = load_config()

        self.assertEqual(config, get_default_config())
        self.assertIn("section 'github' must be a mapping", logs.output[0])

    def test_scalar_section_falls_back_to_defaults(self):
        """Test that a non-mapping section is logged and ignored"""
        self.config_dir.mkdir()
        (self.config_dir / 'config.json').write_text(json.dumps({'defaults': 'x'}))

        with self.assertLogs('bevypatch', level='ERROR'):
            config = load_config()

        self.assertEqual(config['defaults']['umbrella'], 'bevy')

    def test_unknown_scalar_section_kept(self):
        """Test that keys outside the known sections are merged as-is"""
        self.config_dir.mkdir()
        (self.config_dir / 'config.json').write_text(json.dumps({'extra': 1}))

        self.assertEqual(load_config()['extra'], 1)

    def test_env_override(self):
        """Test BEVY_PATCH_SECTION_KEY overrides"""
        os.environ['BEVY_PATCH_GITHUB_TIMEOUT_SECONDS'] = '10'
        os.environ['BEVY_PATCH_DEFAULTS_BRANCH'] = 'develop'

        config = load_config()

        self.assertEqual(config['github']['timeout_seconds'], 10)
        self.assertEqual(config['defaults']['branch'], 'develop')

    def test_github_token_from_env(self):
        """Test GITHUB_TOKEN fills an empty token"""
        os.environ['GITHUB_TOKEN'] = 'ghp_env'
        self.assertEqual(load_config()['github']['token'], 'ghp_env')

    def test_configured_token_wins_over_env(self):
        """Test an explicit token is kept"""
        os.environ['GITHUB_TOKEN'] = 'ghp_env'
        os.environ['BEVY_PATCH_GITHUB_TOKEN'] = 'ghp_config'
        self.assertEqual(load_config()['github']['token'], 'ghp_config')


class TestConfigHelpers(unittest.TestCase):
    """Test merge and override helpers"""

    def test_merge_configs_nested(self):
        base = {'a': {'b': 1, 'c': 2}, 'd': 3}
        merged = merge_configs(base, {'a': {'c': 20}, 'e': 5})
        self.assertEqual(merged, {'a': {'b': 1, 'c': 20}, 'd': 3, 'e': 5})
        self.assertEqual(base['a']['c'], 2)

    def test_apply_env_overrides_bool(self):
        config = {'github': {'verify': True}}
        with patch.dict(os.environ, {'BEVY_PATCH_GITHUB_VERIFY': 'false'}):
            apply_env_overrides(config)
        self.assertIs(config['github']['verify'], False)

    def test_apply_env_overrides_unknown_key_ignored(self):
        config = get_default_config()
        with patch.dict(os.environ, {'BEVY_PATCH_NOPE_KEY': 'x'}):
            apply_env_overrides(config)
        self.assertEqual(config, get_default_config())

    def test_configure_logging(self):
        configure_logging('DEBUG')
        logger = logging.getLogger('bevypatch')
        self.assertEqual(logger.level, logging.DEBUG)
        self.assertEqual(len(logger.handlers), 1)

        configure_logging('INFO')
        self.assertEqual(logger.level, logging.INFO)
        self.assertEqual(len(logger.handlers), 1)


if __name__ == '__main__':
    unittest.main()
