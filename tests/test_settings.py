import json
import os
import shutil
import tempfile
import unittest

from julia_explorer.settings import DEFAULT_SETTINGS, SETTINGS_PATH, load_settings


class Test_settings(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def write(self, text):
        path = os.path.join(self.tmpdir, "settings.json")
        with open(path, "w") as f:
            f.write(text)
        return path

    def test_packaged_file_matches_defaults(self):
        with open(SETTINGS_PATH) as f:
            packaged = json.load(f)
        self.assertEqual(packaged, DEFAULT_SETTINGS)
        self.assertEqual(load_settings(), DEFAULT_SETTINGS)

    def test_partial_file_is_merged(self):
        path = self.write(json.dumps({"window": {"fps": 30},
                                      "keys": {"exit": ["q"]}}))
        settings = load_settings(path)
        self.assertEqual(settings["window"]["fps"], 30)
        self.assertEqual(settings["window"]["width"], 800)
        self.assertEqual(settings["keys"]["exit"], ["q"])
        self.assertEqual(settings["keys"]["zoom_in"], ["z"])

    def test_missing_file_falls_back(self):
        with self.assertLogs("julia_explorer.settings", level="WARNING"):
            settings = load_settings(os.path.join(self.tmpdir, "nope.json"))
        self.assertEqual(settings, DEFAULT_SETTINGS)

    def test_malformed_file_falls_back(self):
        path = self.write("{not json")
        with self.assertLogs("julia_explorer.settings", level="WARNING"):
            self.assertEqual(load_settings(path), DEFAULT_SETTINGS)

    def test_defaults_not_mutated(self):
        path = self.write(json.dumps({"window": {"width": 1}}))
        load_settings(path)
        self.assertEqual(DEFAULT_SETTINGS["window"]["width"], 800)


if __name__ == "__main__":
    unittest.main()
