import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from textpolish.config import DEFAULTS, load_config
from textpolish.errors import ConfigError


class LoadConfigTests(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmp.name)
        self.config_path = str(self.dir / 'config.json')
        self.env_path = str(self.dir / '.env')
        env_patch = patch.dict(os.environ, {}, clear=True)
        env_patch.start()
        self.addCleanup(env_patch.stop)
        self.addCleanup(self.tmp.cleanup)

    def write_config(self, data):
        Path(self.config_path).write_text(
            data if isinstance(data, str) else json.dumps(data), encoding='utf-8')

    def write_env(self, content):
        Path(self.env_path).write_text(content, encoding='utf-8')

    def test_file_values_and_key_from_env_file(self):
        self.write_config({
            'openai_model': 'gpt-4o',
            'openai_api_endpoint': 'http://localhost:8080/v1/chat/completions',
            'request_timeout_seconds': 12,
            'default_language': 'pt-br',
            'unrelated': True,
        })
        self.write_env('OPENAI_API_KEY=sk-test\n')

        config = load_config(self.config_path, self.env_path)

        self.assertEqual(config.openai_model, 'gpt-4o')
        self.assertEqual(config.openai_api_endpoint, 'http://localhost:8080/v1/chat/completions')
        self.assertEqual(config.request_timeout_seconds, 12)
        self.assertEqual(config.default_language, 'pt-br')
        self.assertEqual(config.openai_api_key, 'sk-test')

    def test_missing_config_file_uses_defaults(self):
        os.environ['OPENAI_API_KEY'] = 'sk-exported'

        config = load_config(self.config_path, self.env_path)

        self.assertEqual(config.openai_model, DEFAULTS['openai_model'])
        self.assertEqual(config.openai_api_endpoint, DEFAULTS['openai_api_endpoint'])
        self.assertEqual(config.request_timeout_seconds, DEFAULTS['request_timeout_seconds'])
        self.assertEqual(config.default_language, DEFAULTS['default_language'])
        self.assertEqual(config.openai_api_key, 'sk-exported')

    def test_environment_overrides_file(self):
        self.write_config({'openai_model': 'from-file', 'request_timeout_seconds': 5})
        self.write_env('OPENAI_API_KEY=sk-test\nOPENAI_MODEL=from-env\nREQUEST_TIMEOUT_SECONDS=2.5\n')

        config = load_config(self.config_path, self.env_path)

        self.assertEqual(config.openai_model, 'from-env')
        self.assertEqual(config.request_timeout_seconds, 2.5)

    def test_missing_api_key(self):
        self.write_config({'openai_model': 'gpt-4o'})
        with self.assertRaises(ConfigError) as ctx:
            load_config(self.config_path, self.env_path)
        self.assertIn('OPENAI_API_KEY not set', str(ctx.exception))

    def test_blank_api_key(self):
        self.write_env('OPENAI_API_KEY="   "\n')
        with self.assertRaises(ConfigError):
            load_config(self.config_path, self.env_path)

    def test_malformed_config_file(self):
        os.environ['OPENAI_API_KEY'] = 'sk-test'
        for content in ['{not json', '[1, 2, 3]']:
            with self.subTest(content=content):
                self.write_config(content)
                with self.assertRaises(ConfigError):
                    load_config(self.config_path, self.env_path)

    def test_invalid_timeout(self):
        os.environ['OPENAI_API_KEY'] = 'sk-test'
        for timeout in [0, -3, 'soon', None, True]:
            with self.subTest(timeout=timeout):
                self.write_config({'request_timeout_seconds': timeout})
                with self.assertRaises(ConfigError):
                    load_config(self.config_path, self.env_path)

    def test_non_finite_timeout_in_config_file(self):
        os.environ['OPENAI_API_KEY'] = 'sk-test'
        for literal in ['NaN', 'Infinity', '-Infinity']:
            with self.subTest(literal=literal):
                self.write_config('{"request_timeout_seconds": %s}' % literal)
                with self.assertRaises(ConfigError) as ctx:
                    load_config(self.config_path, self.env_path)
                self.assertIn('positive finite number', str(ctx.exception))

    def test_non_finite_timeout_from_environment(self):
        for value in ['inf', 'nan']:
            with self.subTest(value=value):
                self.write_env(f'OPENAI_API_KEY=sk-test\nREQUEST_TIMEOUT_SECONDS={value}\n')
                with self.assertRaises(ConfigError):
                    load_config(self.config_path, self.env_path)

    def test_env_file_wins_over_empty_exported_key(self):
        os.environ['OPENAI_API_KEY'] = ''
        self.write_env('OPENAI_API_KEY=sk-from-file\n')

        config = load_config(self.config_path, self.env_path)

        self.assertEqual(config.openai_api_key, 'sk-from-file')

    def test_empty_model_rejected(self):
        os.environ['OPENAI_API_KEY'] = 'sk-test'
        self.write_config({'openai_model': ''})
        with self.assertRaises(ConfigError):
            load_config(self.config_path, self.env_path)

    def test_config_is_read_only(self):
        os.environ['OPENAI_API_KEY'] = 'sk-test'
        config = load_config(self.config_path, self.env_path)
        with self.assertRaises(AttributeError):
            config.openai_model = 'other'


if __name__ == '__main__':
    unittest.main()
