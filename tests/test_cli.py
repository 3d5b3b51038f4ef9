"""Tests for the Click CLI interface.

These tests verify that:
1. Commands are wired to the checker, scanner and cache
2. Environment variables are used as fallbacks for options
3. Invalid configuration is reported as a usage error
4. --json and --fail-on-eol shape output and exit codes
"""

import json
import unittest
from importlib import import_module
from importlib.metadata import PackageNotFoundError
from unittest.mock import patch

from click.testing import CliRunner

from eolcheck import __version__, _get_version
from eolcheck._lifecycle.evaluator import EvaluationResult, Status
from eolcheck._lifecycle.models import LifecycleCycle
from eolcheck.cli.main import Config, build_config, cli, parse_ttl_hours
from eolcheck.exceptions import ConfigurationError
from eolcheck.scanner import DetectedService, ScanResult

cli_main_module = import_module("eolcheck.cli.main")

OK_RESULT = EvaluationResult(component="node", version="22.1.0", status=Status.OK, message="Version 22 is supported")
ERR_RESULT = EvaluationResult(component="node", version="16.0.0", status=Status.ERR, message="Version 16 is EOL")

SCAN = ScanResult(
    runtime_version="3.12.4",
    package_manager="uv",
    os="Ubuntu 22.04.4 LTS",
    detected_services=[DetectedService(name="node", product="nodejs", version="16.0.0")],
)


class TestCLIHelp(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()

    def test_help_option(self):
        result = self.runner.invoke(cli, ["--help"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("end-of-life", result.output)
        for command in ("scan", "check", "ai", "cache", "models"):
            self.assertIn(command, result.output)

    def test_short_help_option(self):
        result = self.runner.invoke(cli, ["-h"])
        self.assertEqual(result.exit_code, 0)

    def test_version_option(self):
        result = self.runner.invoke(cli, ["--version"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("eol-check", result.output)
        self.assertIn(__version__, result.output)

    def test_version_falls_back_to_pyproject(self):
        with patch("importlib.metadata.version", side_effect=PackageNotFoundError("eol-check")):
            self.assertEqual(_get_version(), "0.1.0")


class TestConfig(unittest.TestCase):
    def test_defaults(self):
        config = build_config()
        self.assertEqual(config.cache_ttl_ms, 24 * 60 * 60 * 1000)
        self.assertEqual(config.log_level, "WARNING")

    def test_verbose_forces_debug(self):
        self.assertEqual(build_config(log_level="ERROR", verbose=True).log_level, "DEBUG")

    def test_ttl_hours(self):
        self.assertEqual(parse_ttl_hours("1.5"), 1.5)
        self.assertEqual(build_config(cache_ttl="2").cache_ttl_ms, 2 * 60 * 60 * 1000)

    def test_invalid_ttl(self):
        for value in ("soon", "0", "-3"):
            with self.assertRaises(ConfigurationError):
                parse_ttl_hours(value)

    def test_invalid_log_level(self):
        with self.assertRaises(ConfigurationError):
            build_config(log_level="LOUD")

    def test_api_url_validation(self):
        with self.assertRaises(ConfigurationError):
            build_config(api_base_url="ftp://example.com")
        self.assertEqual(build_config(api_base_url="https://eol.example/api/").api_base_url, "https://eol.example/api")

    def test_validate_rejects_non_positive_ttl(self):
        with self.assertRaises(ConfigurationError):
            Config(cache_ttl_hours=0).validate()


class TestCheckCommand(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()

    @patch.object(cli_main_module, "check_component", return_value=OK_RESULT)
    def test_check_table_output(self, mock_check):
        result = self.runner.invoke(cli, ["check", "node", "22.1.0"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("OK", result.output)
        args, kwargs = mock_check.call_args
        self.assertEqual(args, ("node", "node", "22.1.0"))
        self.assertFalse(kwargs["refresh_cache"])

    @patch.object(cli_main_module, "check_component", return_value=OK_RESULT)
    def test_refresh_cache_flag(self, mock_check):
        self.runner.invoke(cli, ["check", "node", "22.1.0", "--refresh-cache"])
        self.assertTrue(mock_check.call_args[1]["refresh_cache"])

    @patch.object(cli_main_module, "check_component", return_value=OK_RESULT)
    def test_global_refresh_cache_flag(self, mock_check):
        self.runner.invoke(cli, ["--refresh-cache", "check", "node", "22.1.0"])
        self.assertTrue(mock_check.call_args[1]["refresh_cache"])

    @patch.object(cli_main_module, "check_component", return_value=OK_RESULT)
    def test_json_output(self, mock_check):
        result = self.runner.invoke(cli, ["--json", "check", "node", "22.1.0"])
        self.assertEqual(result.exit_code, 0, result.output)
        payload = json.loads(result.output)
        self.assertEqual(payload["results"], [OK_RESULT.to_dict()])
        self.assertEqual(payload["summary"], {"OK": 1, "WARN": 0, "ERR": 0})

    @patch.object(cli_main_module, "check_component", return_value=ERR_RESULT)
    def test_eol_exits_zero_by_default(self, mock_check):
        result = self.runner.invoke(cli, ["check", "node", "16.0.0"])
        self.assertEqual(result.exit_code, 0)

    @patch.object(cli_main_module, "check_component", return_value=ERR_RESULT)
    def test_fail_on_eol(self, mock_check):
        result = self.runner.invoke(cli, ["--fail-on-eol", "check", "node", "16.0.0"])
        self.assertEqual(result.exit_code, 1)

    @patch.object(cli_main_module, "check_component", return_value=ERR_RESULT)
    def test_fail_on_eol_from_env(self, mock_check):
        result = self.runner.invoke(cli, ["check", "node", "16.0.0"], env={"EOLCHECK_FAIL_ON_EOL": "true"})
        self.assertEqual(result.exit_code, 1)

    def test_invalid_ttl_env_is_usage_error(self):
        result = self.runner.invoke(cli, ["check", "node", "22"], env={"EOLCHECK_CACHE_TTL_HOURS": "soon"})
        self.assertEqual(result.exit_code, 2)
        self.assertIn("Invalid cache TTL", result.output)


class TestCheckCommandEndToEnd:
    """Runs the real pipeline with a pre-populated cache and no network."""

    def test_check_uses_cache(self, tmp_path):
        runner = CliRunner()
        env = {"EOLCHECK_CACHE_DIR": str(tmp_path)}
        store = cli_main_module.build_cache(build_config(cache_dir=str(tmp_path)))
        store.set("nodejs", [LifecycleCycle(cycle="16", eol="2023-09-11")])

        with patch("eolcheck._lifecycle.source.create_session") as mock_session:
            result = runner.invoke(cli, ["--json", "check", "node", "16.20.2"], env=env)

        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["results"][0]["status"] == "ERR"
        assert payload["results"][0]["message"] == "Version 16 is EOL (ended 2023-09-11)"
        mock_session.return_value.get.assert_not_called()


class TestScanCommand(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()

    @patch.object(cli_main_module, "check_components", return_value=[OK_RESULT, ERR_RESULT])
    @patch.object(cli_main_module, "scan_environment", return_value=SCAN)
    def test_default_command_scans(self, mock_scan, mock_check):
        result = self.runner.invoke(cli, ["--json"])
        self.assertEqual(result.exit_code, 0, result.output)
        mock_scan.assert_called_once()
        payload = json.loads(result.output)
        self.assertEqual(payload["environment"]["packageManager"], "uv")
        self.assertEqual(payload["environment"]["detectedServices"][0]["product"], "nodejs")
        self.assertEqual(payload["summary"]["ERR"], 1)

        requests_ = mock_check.call_args[0][0]
        self.assertEqual([r.identifier for r in requests_], ["python", "nodejs"])

    @patch.object(cli_main_module, "check_components", return_value=[OK_RESULT])
    @patch.object(cli_main_module, "scan_environment", return_value=SCAN)
    def test_scan_table_output(self, mock_scan, mock_check):
        result = self.runner.invoke(cli, ["scan", "--refresh-cache"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Ubuntu 22.04.4 LTS", result.output)
        self.assertTrue(mock_check.call_args[1]["refresh_cache"])


class TestAICommand(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()

    def test_ai_defaults_to_latest(self):
        result = self.runner.invoke(cli, ["--json", "ai", "anthropic", "claude-3-opus"])
        self.assertEqual(result.exit_code, 0, result.output)
        payload = json.loads(result.output)
        self.assertEqual(payload["results"][0]["version"], "latest")
        self.assertIn("2026-01-05", payload["results"][0]["message"])

    def test_ai_accepts_sdk_package_name(self):
        result = self.runner.invoke(cli, ["--json", "ai", "@anthropic-ai/sdk", "claude-3-opus"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(json.loads(result.output)["results"][0]["component"], "Anthropic claude-3-opus")

    def test_ai_unknown_model_warns(self):
        result = self.runner.invoke(cli, ["--json", "ai", "openai", "gpt-99"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(json.loads(result.output)["results"][0]["status"], "WARN")

    @patch.object(cli_main_module, "get_default_resolver")
    def test_refresh_docs(self, mock_get_resolver):
        resolver = mock_get_resolver.return_value
        resolver.refresh.return_value = 0
        resolver.resolve.return_value = None
        resolver.resolve_pattern.return_value = None

        self.runner.invoke(cli, ["ai", "anthropic", "claude-3-opus", "--refresh-docs"])
        resolver.refresh.assert_called_once()

    def test_models_lists_providers(self):
        result = self.runner.invoke(cli, ["models"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("anthropic", result.output.split())

    def test_models_for_unknown_provider(self):
        result = self.runner.invoke(cli, ["models", "acme"])
        self.assertNotEqual(result.exit_code, 0)


class TestCacheCommands:
    def test_clear_and_invalidate(self, tmp_path):
        runner = CliRunner()
        env = {"EOLCHECK_CACHE_DIR": str(tmp_path)}
        store = cli_main_module.build_cache(build_config(cache_dir=str(tmp_path)))
        store.set("nodejs", [LifecycleCycle(cycle="20")])
        store.set("postgresql", [LifecycleCycle(cycle="16")])

        result = runner.invoke(cli, ["cache", "invalidate", "psql"], env=env)
        assert result.exit_code == 0, result.output
        assert store.get("postgresql") is None
        assert store.get("nodejs") is not None

        result = runner.invoke(cli, ["cache", "clear"], env=env)
        assert result.exit_code == 0, result.output
        assert store.get("nodejs") is None
