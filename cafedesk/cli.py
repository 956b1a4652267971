"""Command-line entry point: the login screen and the session loop."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

from cafedesk.shell import Shell

__all__ = ["login", "main"]

_TITLE = "Coffee Manager"

_LOGIN_HELP = (
    "1) login     log in\n"
    "2) register  create an account (Chưa có tài khoản?)\n"
    "q) quit      leave the program"
)

_REGISTER_NOTICE = "Bằng cách nhấp vào đăng kí bạn đồng ý với chúng tôi"


class _EndOfInput(Exception):
    """The input stream ran dry."""


def _ask(stdin: TextIO, stdout: TextIO, prompt: str) -> str:
    stdout.write(prompt)
    stdout.flush()
    line = stdin.readline()
    if line == "":
        raise _EndOfInput
    return line.rstrip("\n").rstrip("\r")


def _say(stdout: TextIO, text: str = "") -> None:
    stdout.write(text + "\n")
    stdout.flush()


def _register(stdin: TextIO, stdout: TextIO) -> None:
    _ask(stdin, stdout, "Account name: ")
    _ask(stdin, stdout, "Password: ")
    _say(stdout, _REGISTER_NOTICE)


def login(stdin: TextIO | None = None, stdout: TextIO | None = None) -> str | None:
    """Run the login screen.

    Returns the name the user logged in with, or None when they quit or
    the input ended. The password is asked for but not checked.
    """
    source = stdin if stdin is not None else sys.stdin
    sink = stdout if stdout is not None else sys.stdout
    _say(sink, _TITLE)
    _say(sink, _LOGIN_HELP)
    try:
        while True:
            choice = _ask(source, sink, "login> ").strip().lower()
            if not choice:
                continue
            if choice in ("1", "login"):
                username = _ask(source, sink, "Username: ")
                _ask(source, sink, "Password: ")
                return username
            if choice in ("2", "register"):
                _register(source, sink)
                _say(sink, _LOGIN_HELP)
            elif choice in ("q", "quit", "exit"):
                return None
            elif choice in ("h", "help", "?"):
                _say(sink, _LOGIN_HELP)
            else:
                _say(sink, f"Unknown command: {choice}")
    except _EndOfInput:
        _say(sink)
        return None


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cafedesk",
        description="Point-of-sale desk for a coffee shop.",
    )
    parser.add_argument(
        "-d",
        "--workdir",
        default=".",
        help="directory holding menu.txt, receipt.txt and daily_summary.txt",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Start the program: log in, work, and log in again after logging out."""
    args = _parser().parse_args(argv)
    stdin, stdout = sys.stdin, sys.stdout
    while True:
        username = login(stdin, stdout)
        if username is None:
            return 0
        shell = Shell(username, args.workdir, stdin, stdout)
        if not shell.run():
            return 0


if __name__ == "__main__":
    sys.exit(main())