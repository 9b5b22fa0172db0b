import json
import os
import tempfile
import unittest

from invoice_template.config.loader import RendererConfig, load_config, load_renderer_config
from invoice_template.exceptions import ConfigurationError


class TestRendererConfig(unittest.TestCase):

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.temp_dir.cleanup()

    def _write(self, name, content):
        path = os.path.join(self.temp_dir.name, name)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        return path

    def test_defaults(self):
        config = load_renderer_config()
        self.assertEqual(config.page_size, 'A4')
        self.assertEqual(config.page_margins, [40, 60, 40, 60])
        self.assertEqual(config.font_family, 'Roboto')
        self.assertIsNone(config.font_path)
        self.assertEqual(config.title, 'Rechnung')

    def test_load_camel_case_file(self):
        path = self._write('renderer.json', json.dumps({
            'pageSize': 'LETTER',
            'pageMargins': [20, 30, 20, 30],
            'fontFamily': 'Roboto',
            'fontPath': '/fonts/Roboto-Regular.ttf',
        }))
        config = load_renderer_config(path)

        self.assertEqual(config.page_size, 'LETTER')
        self.assertEqual(config.page_margins, [20, 30, 20, 30])
        self.assertEqual(config.font_path, '/fonts/Roboto-Regular.ttf')

    def test_snake_case_keywords(self):
        config = RendererConfig(page_size='LETTER', title='Invoice')
        self.assertEqual(config.page_size, 'LETTER')
        self.assertEqual(config.title, 'Invoice')

    def test_load_config_returns_dict(self):
        path = self._write('plain.json', '{"title": "Gutschrift"}')
        self.assertEqual(load_config(path), {'title': 'Gutschrift'})

    def test_missing_file(self):
        with self.assertRaises(ConfigurationError):
            load_renderer_config(os.path.join(self.temp_dir.name, 'missing.json'))

    def test_invalid_json(self):
        path = self._write('broken.json', '{"pageSize": ')
        with self.assertRaises(ConfigurationError):
            load_renderer_config(path)

    def test_invalid_values(self):
        path = self._write('bad.json', json.dumps({'pageSize': 'A0'}))
        with self.assertRaises(ConfigurationError):
            load_renderer_config(path)

        path = self._write('bad_margins.json', json.dumps({'pageMargins': [1, 2]}))
        with self.assertRaises(ConfigurationError):
            load_renderer_config(path)


if __name__ == '__main__':
    unittest.main()
