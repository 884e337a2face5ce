import io
import json
import logging
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

from infix_calc.main import build_parser, format_result, main, run_cli, run_interactive
from infix_calc.utils.config_loader import CalculatorConfig, EngineSettings


class MainTestCase(unittest.TestCase):
    def setUp(self) -> None:
        root = logging.getLogger()
        self._saved_handlers = list(root.handlers)
        self._saved_level = root.level
        self.config = CalculatorConfig()

    def tearDown(self) -> None:
        root = logging.getLogger()
        root.handlers = self._saved_handlers
        root.setLevel(self._saved_level)

    def test_format_result(self) -> None:
        self.assertEqual(format_result(4.0), "4")
        self.assertEqual(format_result(-2.0), "-2")
        self.assertEqual(format_result(0.5), "0.5")
        self.assertEqual(format_result(1e20), "1e+20")
        self.assertEqual(format_result(float("nan")), "nan")
        self.assertEqual(format_result(float("-inf")), "-inf")

    def test_run_cli_prints_result(self) -> None:
        output = io.StringIO()
        code = run_cli("2 + 3 * sqrt(4)", self.config, output=output)
        self.assertEqual(code, 0)
        self.assertEqual(output.getvalue(), "8\n")

    def test_run_cli_prints_error(self) -> None:
        output = io.StringIO()
        code = run_cli("5 / 0", self.config, output=output)
        self.assertEqual(code, 1)
        self.assertEqual(output.getvalue(), "Error: division by zero\n")

    def test_run_cli_json_envelope(self) -> None:
        output = io.StringIO()
        code = run_cli("2 ^ 10", self.config, as_json=True, output=output)
        payload = json.loads(output.getvalue())
        self.assertEqual(code, 0)
        self.assertTrue(payload["ok"])
        self.assertEqual(payload["result"], 1024.0)

    def test_run_cli_json_reports_length_limit(self) -> None:
        config = CalculatorConfig(engine=EngineSettings(max_expression_length=3))
        output = io.StringIO()
        code = run_cli("1 + 2", config, as_json=True, output=output)
        payload = json.loads(output.getvalue())
        self.assertEqual(code, 1)
        self.assertFalse(payload["ok"])
        self.assertEqual(payload["metadata"]["code"], "expression_too_long")

    def test_interactive_loop_survives_errors(self) -> None:
        input_stream = io.StringIO("2+2\n\n5/0\n  -2 ^ 2  \nexit\n1+1\n")
        output = io.StringIO()

        code = run_interactive(self.config, input_stream=input_stream, output=output)

        text = output.getvalue()
        self.assertEqual(code, 0)
        self.assertIn("Calculator Interactive Mode", text)
        self.assertIn("> 4\n", text)
        self.assertIn("Error: division by zero", text)
        self.assertTrue(text.endswith("> 4\n> "))

    def test_interactive_loop_stops_at_end_of_input(self) -> None:
        output = io.StringIO()
        code = run_interactive(self.config, input_stream=io.StringIO("3 * 3\n"), output=output)
        self.assertEqual(code, 0)
        self.assertIn("> 9\n", output.getvalue())

    def test_main_evaluates_expr_flag(self) -> None:
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            code = main(["--expr", "(2 + 3) * 4", "--log-level", "WARNING"])
        self.assertEqual(code, 0)
        self.assertEqual(buffer.getvalue(), "20\n")

    def test_main_without_expr_runs_interactive(self) -> None:
        with patch("infix_calc.main.run_interactive", return_value=0) as interactive:
            code = main(["--log-level", "WARNING"])
        self.assertEqual(code, 0)
        interactive.assert_called_once()

    def test_main_api_mode_uses_overrides(self) -> None:
        with patch("infix_calc.main.run_api", return_value=0) as run_api:
            code = main(["--mode", "api", "--port", "9090", "--log-level", "WARNING"])
        self.assertEqual(code, 0)
        _, kwargs = run_api.call_args
        self.assertEqual(kwargs["port"], 9090)
        self.assertIsNone(kwargs["host"])

    def test_main_rejects_missing_config(self) -> None:
        with redirect_stdout(io.StringIO()), patch("sys.stderr", new_callable=io.StringIO):
            with self.assertRaises(SystemExit):
                main(["--config", "does/not/exist.yml", "--expr", "1"])

    def test_main_rejects_unknown_log_level(self) -> None:
        stderr = io.StringIO()
        with redirect_stdout(io.StringIO()), patch("sys.stderr", stderr):
            with self.assertRaises(SystemExit) as ctx:
                main(["--expr", "1", "--log-level", "bogus"])
        self.assertEqual(ctx.exception.code, 2)
        self.assertIn("Unknown log level 'BOGUS'", stderr.getvalue())

    def test_parser_defaults(self) -> None:
        args = build_parser().parse_args([])
        self.assertEqual(args.mode, "cli")
        self.assertEqual(args.expr, "")
        self.assertFalse(args.json)


if __name__ == "__main__":
    unittest.main()
