"""Tests for raw-mode lifecycle.

Verifies the attribute flags applied on entry, restoration on exit (including
after exceptions), atexit registration, and fatal errors from termios.
"""

from __future__ import annotations

import termios
import tty
import unittest
from unittest import mock

from youreditor.errors import TerminalError
from youreditor.runtime.terminal import TerminalController, raw_attributes, read_timeout_deciseconds


def _cooked_attrs() -> list:
    cc = [0] * 32
    cc[termios.VMIN] = 1
    cc[termios.VTIME] = 0
    return [
        termios.BRKINT | termios.ICRNL | termios.INPCK | termios.ISTRIP | termios.IXON,
        termios.OPOST,
        0,
        termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG,
        0,
        0,
        cc,
    ]


class RawAttributesTests(unittest.TestCase):
    def test_raw_attributes_clear_and_set_expected_flags(self) -> None:
        saved = _cooked_attrs()
        raw = raw_attributes(saved)

        self.assertEqual(raw[tty.IFLAG], 0)
        self.assertEqual(raw[tty.OFLAG], 0)
        self.assertEqual(raw[tty.CFLAG] & termios.CS8, termios.CS8)
        self.assertEqual(raw[tty.LFLAG], 0)
        self.assertEqual(raw[tty.CC][termios.VMIN], 0)
        self.assertEqual(raw[tty.CC][termios.VTIME], 1)

    def test_raw_attributes_leave_saved_state_untouched(self) -> None:
        saved = _cooked_attrs()
        raw_attributes(saved)

        self.assertEqual(saved, _cooked_attrs())

    def test_raw_attributes_apply_requested_vtime(self) -> None:
        raw = raw_attributes(_cooked_attrs(), vtime=7)

        self.assertEqual(raw[tty.CC][termios.VTIME], 7)

    def test_read_timeout_converts_to_bounded_deciseconds(self) -> None:
        self.assertEqual(read_timeout_deciseconds(100), 1)
        self.assertEqual(read_timeout_deciseconds(250), 2)
        self.assertEqual(read_timeout_deciseconds(1000), 10)
        self.assertEqual(read_timeout_deciseconds(20), 1)
        self.assertEqual(read_timeout_deciseconds(60_000), 255)


class TerminalControllerTests(unittest.TestCase):
    def test_enable_and_disable_round_trip_saved_attributes(self) -> None:
        saved = _cooked_attrs()
        with mock.patch("youreditor.runtime.terminal.termios.tcgetattr", return_value=saved), mock.patch(
            "youreditor.runtime.terminal.termios.tcsetattr"
        ) as setattr_mock, mock.patch("youreditor.runtime.terminal.atexit") as atexit_mock:
            controller = TerminalController(stdin_fd=0)
            controller.enable_raw_mode()
            self.assertTrue(controller.raw_enabled)
            controller.disable_raw_mode()

        self.assertFalse(controller.raw_enabled)
        self.assertEqual(setattr_mock.call_count, 2)
        self.assertEqual(setattr_mock.call_args_list[0].args, (0, termios.TCSAFLUSH, raw_attributes(saved)))
        self.assertEqual(setattr_mock.call_args_list[1].args, (0, termios.TCSAFLUSH, saved))
        atexit_mock.register.assert_called_once_with(controller.disable_raw_mode)
        atexit_mock.unregister.assert_called_once_with(controller.disable_raw_mode)

    def test_configured_read_timeout_sets_vtime(self) -> None:
        saved = _cooked_attrs()
        with mock.patch("youreditor.runtime.terminal.termios.tcgetattr", return_value=saved), mock.patch(
            "youreditor.runtime.terminal.termios.tcsetattr"
        ) as setattr_mock, mock.patch("youreditor.runtime.terminal.atexit"):
            controller = TerminalController(stdin_fd=0, read_timeout_ms=500)
            controller.enable_raw_mode()

        applied = setattr_mock.call_args_list[0].args[2]
        self.assertEqual(applied[tty.CC][termios.VTIME], 5)

    def test_disable_is_idempotent(self) -> None:
        with mock.patch("youreditor.runtime.terminal.termios.tcgetattr", return_value=_cooked_attrs()), mock.patch(
            "youreditor.runtime.terminal.termios.tcsetattr"
        ) as setattr_mock, mock.patch("youreditor.runtime.terminal.atexit"):
            controller = TerminalController(stdin_fd=0)
            controller.disable_raw_mode()
            controller.enable_raw_mode()
            controller.disable_raw_mode()
            controller.disable_raw_mode()

        self.assertEqual(setattr_mock.call_count, 2)

    def test_raw_mode_restores_terminal_after_exception(self) -> None:
        controller = TerminalController(stdin_fd=0)

        with mock.patch.object(controller, "enable_raw_mode") as enable_mock, mock.patch.object(
            controller, "disable_raw_mode"
        ) as disable_mock:
            with self.assertRaises(RuntimeError):
                with controller.raw_mode():
                    raise RuntimeError("boom")

        enable_mock.assert_called_once()
        disable_mock.assert_called_once()

    def test_tcgetattr_failure_is_terminal_error(self) -> None:
        with mock.patch(
            "youreditor.runtime.terminal.termios.tcgetattr",
            side_effect=termios.error(25, "Inappropriate ioctl for device"),
        ), mock.patch("youreditor.runtime.terminal.atexit") as atexit_mock:
            controller = TerminalController(stdin_fd=0)
            with self.assertRaises(TerminalError) as ctx:
                controller.enable_raw_mode()

        self.assertEqual(ctx.exception.context, "tcgetattr")
        self.assertTrue(str(ctx.exception).startswith("tcgetattr: "))
        self.assertFalse(controller.raw_enabled)
        atexit_mock.register.assert_not_called()

    def test_tcsetattr_failure_is_terminal_error_and_unregisters_restore(self) -> None:
        with mock.patch("youreditor.runtime.terminal.termios.tcgetattr", return_value=_cooked_attrs()), mock.patch(
            "youreditor.runtime.terminal.termios.tcsetattr",
            side_effect=termios.error(5, "Input/output error"),
        ), mock.patch("youreditor.runtime.terminal.atexit") as atexit_mock:
            controller = TerminalController(stdin_fd=0)
            with self.assertRaises(TerminalError) as ctx:
                controller.enable_raw_mode()

        self.assertEqual(ctx.exception.context, "tcsetattr")
        self.assertFalse(controller.raw_enabled)
        atexit_mock.unregister.assert_called_once_with(controller.disable_raw_mode)


if __name__ == "__main__":
    unittest.main()
