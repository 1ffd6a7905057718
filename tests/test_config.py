"""Tests for the configuration module."""

import os
import shutil
import tempfile
import unittest

from file_logger.config import Config, load_config, load_yaml_config

ENV_KEYS = ("LOG_CACHE_DIR", "LOG_FILENAME", "MAX_MESSAGES", "MAX_FILE_SIZE_BYTES")


class TestConfigDefaults(unittest.TestCase):
    def test_default_values(self):
        cfg = Config()
        self.assertIsNone(cfg.cache_dir)
        self.assertEqual(cfg.log_filename, "errors.log")
        self.assertEqual(cfg.max_messages, 30)
        self.assertEqual(cfg.max_file_size_bytes, 4194304)

    def test_frozen(self):
        cfg = Config()
        with self.assertRaises(AttributeError):
            cfg.cache_dir = "/tmp"

    def test_rejects_non_positive_values(self):
        with self.assertRaises(ValueError):
            Config(max_messages=0)
        with self.assertRaises(ValueError):
            Config(max_file_size_bytes=-1)


class TestLoadConfig(unittest.TestCase):
    def setUp(self):
        self._orig_env = os.environ.copy()
        for key in ENV_KEYS:
            os.environ.pop(key, None)

    def tearDown(self):
        os.environ.clear()
        os.environ.update(self._orig_env)

    def test_defaults_without_env(self):
        self.assertEqual(load_config(), Config())

    def test_env_var_overrides(self):
        os.environ["LOG_CACHE_DIR"] = "/var/cache/app"
        os.environ["LOG_FILENAME"] = "custom.log"
        os.environ["MAX_MESSAGES"] = "10"
        os.environ["MAX_FILE_SIZE_BYTES"] = "2048"
        cfg = load_config()
        self.assertEqual(cfg.cache_dir, "/var/cache/app")
        self.assertEqual(cfg.log_filename, "custom.log")
        self.assertEqual(cfg.max_messages, 10)
        self.assertEqual(cfg.max_file_size_bytes, 2048)

    def test_yaml_values_used_when_env_absent(self):
        cfg = load_config({"cache_dir": "/data/cache", "max_messages": 5})
        self.assertEqual(cfg.cache_dir, "/data/cache")
        self.assertEqual(cfg.max_messages, 5)
        self.assertEqual(cfg.log_filename, "errors.log")

    def test_env_takes_precedence_over_yaml(self):
        os.environ["MAX_MESSAGES"] = "7"
        cfg = load_config({"max_messages": 5})
        self.assertEqual(cfg.max_messages, 7)

    def test_empty_cache_dir_means_none(self):
        os.environ["LOG_CACHE_DIR"] = ""
        self.assertIsNone(load_config().cache_dir)

    def test_invalid_number_raises(self):
        os.environ["MAX_MESSAGES"] = "lots"
        with self.assertRaises(ValueError):
            load_config()


class TestLoadYamlConfig(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def test_no_path(self):
        self.assertEqual(load_yaml_config(None), {})

    def test_missing_file(self):
        self.assertEqual(load_yaml_config(os.path.join(self.tmpdir, "nope.yml")), {})

    def test_reads_mapping(self):
        path = os.path.join(self.tmpdir, "logger.yml")
        with open(path, "w", encoding="utf-8") as f:
            f.write("cache_dir: /tmp/cache\nlog_filename: app.log\nmax_file_size_bytes: 1024\n")
        self.assertEqual(
            load_yaml_config(path),
            {"cache_dir": "/tmp/cache", "log_filename": "app.log", "max_file_size_bytes": 1024},
        )

    def test_empty_file(self):
        path = os.path.join(self.tmpdir, "empty.yml")
        open(path, "w").close()
        self.assertEqual(load_yaml_config(path), {})

    def test_non_mapping_document_rejected(self):
        path = os.path.join(self.tmpdir, "list.yml")
        with open(path, "w", encoding="utf-8") as f:
            f.write("- cache_dir\n- errors.log\n")
        with self.assertRaises(ValueError):
            load_yaml_config(path)


if __name__ == "__main__":
    unittest.main()
