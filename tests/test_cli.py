import json
import unittest
from pathlib import Path
from unittest import mock
import sys

from click.testing import CliRunner

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "tickerreport" / "src"
sys.path.insert(0, str(SRC))

from tickerreport import cli as cli_module
from tickerreport.errors import ProviderError, format_error


class TestCli(unittest.TestCase):
    def setUp(self):
        patcher = mock.patch.object(cli_module, "configure_logging")
        patcher.start()
        self.addCleanup(patcher.stop)
        self.runner = CliRunner()

    def test_report_is_printed(self):
        with mock.patch.object(cli_module.pipeline, "run", return_value="REPORT BODY") as run:
            result = self.runner.invoke(cli_module.cli, ["-t", " msft "])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("REPORT BODY", result.output)
        symbol, options = run.call_args.args
        self.assertEqual(symbol, "MSFT")
        self.assertTrue(options.include_chart)
        self.assertIsNone(options.lookback_days)

    def test_section_flags(self):
        with mock.patch.object(cli_module.pipeline, "run", return_value="") as run:
            result = self.runner.invoke(
                cli_module.cli,
                ["--ticker", "AAPL", "--days", "10", "--no-chart", "--no-cashflow", "--no-header"],
            )

        self.assertEqual(result.exit_code, 0, result.output)
        options = run.call_args.args[1]
        self.assertEqual(options.lookback_days, 10)
        self.assertFalse(options.include_chart)
        self.assertFalse(options.include_cashflow)
        self.assertFalse(options.include_header)

    def test_ticker_is_required(self):
        result = self.runner.invoke(cli_module.cli, [])
        self.assertNotEqual(result.exit_code, 0)

    def test_days_must_be_positive(self):
        with mock.patch.object(cli_module.pipeline, "run") as run:
            result = self.runner.invoke(cli_module.cli, ["-t", "MSFT", "--days", "0"])

        self.assertNotEqual(result.exit_code, 0)
        run.assert_not_called()

    def test_main_exits_nonzero_on_provider_failure(self):
        with mock.patch.object(cli_module.pipeline, "run", side_effect=ProviderError("No price data for NOPE")), \
                mock.patch.object(sys, "argv", ["tickerreport", "-t", "NOPE"]):
            with self.assertRaises(SystemExit) as ctx:
                cli_module.main()

        self.assertEqual(ctx.exception.code, 1)


class TestFormatError(unittest.TestCase):
    def test_domain_error_envelope(self):
        payload = json.loads(format_error(ProviderError("No price data for NOPE", {"ticker": "NOPE"})))
        self.assertFalse(payload["ok"])
        self.assertEqual(payload["error"]["type"], "ProviderError")
        self.assertEqual(payload["error"]["details"], {"ticker": "NOPE"})

    def test_unknown_error_envelope(self):
        try:
            raise RuntimeError("unexpected")
        except RuntimeError as e:
            payload = json.loads(format_error(e))
        self.assertEqual(payload["error"]["type"], "UnknownError")
        self.assertIn("traceback", payload["error"]["details"])


if __name__ == "__main__":
    unittest.main()
