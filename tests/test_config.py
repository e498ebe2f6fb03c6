import io
import json
import logging
import unittest

from termcells.config import CONFIG, CellsConfig, configure_logging, load_config


class TestLoadConfig(unittest.TestCase):
    def test_defaults(self):
        cfg = load_config({})
        self.assertEqual(cfg, CellsConfig())
        self.assertEqual(cfg.codepoint_cache_size, 4096)
        self.assertEqual(cfg.cell_len_max_bytes, 64)

    def test_values_from_environment(self):
        cfg = load_config({
            "TERMCELLS_CODEPOINT_CACHE_SIZE": "128",
            "TERMCELLS_CELL_LEN_CACHE_SIZE": " 256 ",
            "TERMCELLS_CELL_LEN_MAX_BYTES": "32",
            "TERMCELLS_DEBUG_LOG": "Yes",
            "LOG_LEVEL": "debug",
            "LOG_JSON": "1",
        })
        self.assertEqual(cfg.codepoint_cache_size, 128)
        self.assertEqual(cfg.cell_len_cache_size, 256)
        self.assertEqual(cfg.cell_len_max_bytes, 32)
        self.assertTrue(cfg.debug_log)
        self.assertEqual(cfg.log_level, "DEBUG")
        self.assertTrue(cfg.log_json)

    def test_bad_values_fall_back_with_warning(self):
        with self.assertLogs("termcells.config", level="WARNING") as logs:
            cfg = load_config({
                "TERMCELLS_CODEPOINT_CACHE_SIZE": "lots",
                "TERMCELLS_CELL_LEN_CACHE_SIZE": "0",
                "LOG_LEVEL": "LOUD",
            })
        self.assertEqual(cfg.codepoint_cache_size, 4096)
        self.assertEqual(cfg.cell_len_cache_size, 4096)
        self.assertEqual(cfg.log_level, "INFO")
        self.assertEqual(len(logs.records), 3)

    def test_module_config_is_loaded(self):
        self.assertIsInstance(CONFIG, CellsConfig)


class TestConfigureLogging(unittest.TestCase):
    def tearDown(self):
        logging.getLogger("termcells").handlers = []

    def test_plain_lines(self):
        stream = io.StringIO()
        logger = configure_logging(level="INFO", stream=stream, json_lines=False)
        logging.getLogger("termcells.cells").info("hello %s", "world")
        self.assertIs(logger, logging.getLogger("termcells"))
        self.assertIn("INFO termcells.cells: hello world", stream.getvalue())

    def test_json_lines(self):
        stream = io.StringIO()
        configure_logging(level="WARNING", stream=stream, json_lines=True)
        logging.getLogger("termcells.wrap").warning("careful")
        payload = json.loads(stream.getvalue().strip())
        self.assertEqual(payload["level"], "WARNING")
        self.assertEqual(payload["logger"], "termcells.wrap")
        self.assertEqual(payload["msg"], "careful")

    def test_repeated_calls_do_not_duplicate(self):
        stream = io.StringIO()
        configure_logging(level="INFO", stream=stream, json_lines=False)
        configure_logging(level="INFO", stream=stream, json_lines=False)
        logging.getLogger("termcells").info("once")
        self.assertEqual(stream.getvalue().count("once"), 1)


if __name__ == "__main__":
    unittest.main()
