"""Unit tests for ConfigFileLoader (pyproject.toml discovery)."""

import tempfile
import unittest
from pathlib import Path

from magic_numbers_linter.infrastructure.config_file_loader import ConfigFileLoader


class TestConfigFileLoader(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_reads_tool_section(self) -> None:
        (self.root / "pyproject.toml").write_text(
            '[tool.no-magic-numbers]\nseverity = "error"\nenabled = true\n\n[tool.pylint]\njobs = 2\n'
        )
        config = ConfigFileLoader.load_config_from_fs(self.root)
        self.assertEqual(config, {"severity": "error", "enabled": True})
        self.assertNotIn("pylint", config)

    def test_walks_up_from_nested_directory(self) -> None:
        (self.root / "pyproject.toml").write_text('[tool.no-magic-numbers]\nseverity = "error"\n')
        nested = self.root / "src" / "pkg"
        nested.mkdir(parents=True)
        config = ConfigFileLoader.load_config_from_fs(nested)
        self.assertEqual(config, {"severity": "error"})

    def test_nearest_pyproject_without_section_gives_empty_config(self) -> None:
        (self.root / "pyproject.toml").write_text('[tool.no-magic-numbers]\nseverity = "error"\n')
        nested = self.root / "sub"
        nested.mkdir()
        (nested / "pyproject.toml").write_text('[project]\nname = "sub"\n')
        self.assertEqual(ConfigFileLoader.load_config_from_fs(nested), {})

    def test_malformed_toml_is_skipped(self) -> None:
        (self.root / "pyproject.toml").write_text('[tool.no-magic-numbers]\nseverity = "error"\n')
        nested = self.root / "broken"
        nested.mkdir()
        (nested / "pyproject.toml").write_text("[tool.no-magic-numbers\n")
        with self.assertLogs("magic_numbers_linter.infrastructure.config_file_loader", level="WARNING"):
            config = ConfigFileLoader.load_config_from_fs(nested)
        self.assertEqual(config, {"severity": "error"})

    def test_non_table_section_is_ignored(self) -> None:
        (self.root / "pyproject.toml").write_text('[tool]\nno-magic-numbers = "on"\n')
        with self.assertLogs("magic_numbers_linter.infrastructure.config_file_loader", level="WARNING"):
            config = ConfigFileLoader.load_config_from_fs(self.root)
        self.assertEqual(config, {})
