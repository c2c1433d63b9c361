"""
Tests for the interactive report menu.
"""

import io
import logging
import sys
import unittest
from pathlib import Path

# Add the src directory to the path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from gridreport.cli import (
    MENU, PROMPT, UNKNOWN_REQUEST,
    DispatchState, ReportMenu, main, read_option
)
from gridreport.config import LogConfig, default_grid, setup_logging
from gridreport.models import Grid
from gridreport.reports import format_grid_report, format_plant_report


def run_menu(text):
    stdout = io.StringIO()
    status = main(stdin=io.StringIO(text), stdout=stdout)
    return status, stdout.getvalue()


class TestReadOption(unittest.TestCase):

    def test_first_token(self):
        self.assertEqual(read_option(io.StringIO("  2 extra\n")), "2")

    def test_end_of_stream(self):
        self.assertEqual(read_option(io.StringIO("")), "")

    def test_blank_line(self):
        self.assertEqual(read_option(io.StringIO("\n")), "")

    def test_undecodable_input(self):
        stdin = io.TextIOWrapper(io.BytesIO(b"\xff\n"), encoding="utf-8")
        self.assertEqual(read_option(stdin), "")


class TestMenu(unittest.TestCase):
    """End-to-end runs of the menu."""

    def test_menu_is_printed(self):
        _, output = run_menu("1\n")
        self.assertTrue(output.startswith(
            "1) Generatee Power Plant Report\n"
            "2) Generatee Power Grid Report\n"
            "Please choose an option: "
        ))

    def test_plant_report(self):
        status, output = run_menu("1\n")
        self.assertEqual(status, 0)
        self.assertEqual(output, MENU + PROMPT + format_plant_report(default_grid()))
        for i in range(6):
            self.assertIn(f"Plant #{i}\n", output)
        self.assertNotIn("Plant #6", output)

    def test_grid_report(self):
        status, output = run_menu("2\n")
        self.assertEqual(status, 0)
        self.assertEqual(output, MENU + PROMPT + format_grid_report(default_grid()))
        self.assertIn(f"{'Utilization: ':<20}82.19%", output)

    def test_unknown_option(self):
        for text in ["3\n", "\n", "", "abc\n", "12\n"]:
            with self.subTest(text=text):
                status, output = run_menu(text)
                self.assertEqual(status, 0)
                self.assertEqual(output[len(MENU + PROMPT):], UNKNOWN_REQUEST + "\n")

    def test_unknown_message_text(self):
        self.assertEqual(UNKNOWN_REQUEST, "Unknown request, exiting applciation...")

    def test_state_transitions(self):
        menu = ReportMenu(default_grid(), stdin=io.StringIO("2\n"), stdout=io.StringIO())
        self.assertEqual(menu.state, DispatchState.AWAITING_INPUT)
        menu.run()
        self.assertEqual(menu.state, DispatchState.EXIT)

    def test_custom_grid(self):
        stdout = io.StringIO()
        main(stdin=io.StringIO("2\n"), stdout=stdout, grid=Grid(load=10))
        self.assertIn(f"{'Capacity: ':<20}0\n", stdout.getvalue())

    def test_undecodable_input_is_unknown_request(self):
        stdin = io.TextIOWrapper(io.BytesIO(b"\xff\n"), encoding="utf-8")
        stdout = io.StringIO()
        status = main(stdin=stdin, stdout=stdout)
        self.assertEqual(status, 0)
        self.assertEqual(stdout.getvalue(), MENU + PROMPT + UNKNOWN_REQUEST + "\n")

    def test_keeps_configured_log_level(self):
        logger = setup_logging(LogConfig(level="DEBUG"))
        try:
            main(stdin=io.StringIO("1\n"), stdout=io.StringIO())
            self.assertEqual(logger.level, logging.DEBUG)
        finally:
            logger.setLevel(logging.WARNING)


if __name__ == "__main__":
    unittest.main()
