#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Report output for dirstat using rich consoles.

Per-directory blocks and the grand totals go to stdout, one diagnostic line
per failed open/stat goes to stderr. Styling only shows up on a terminal;
redirected output is the plain text of each line.
"""

import os
from typing import Optional, TextIO
from rich.console import Console
from rich.text import Text

from config import DIRECTORY_STYLE, ERROR_STYLE, OUTSIDE_STYLE, USAGE


def _plain_console(file: Optional[TextIO] = None, stderr: bool = False) -> Console:
    # No markup/highlighting: paths are printed literally
    return Console(
        file=file,
        stderr=stderr,
        markup=False,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )


def printable_path(path: str) -> str:
    """Undecodable bytes in a file name are shown as \\xNN escapes."""
    return os.fsencode(path).decode("utf-8", errors="backslashreplace")


class Reporter:
    """Writes directory statistics, grand totals and diagnostics."""

    def __init__(self, out: Optional[TextIO] = None, err: Optional[TextIO] = None):
        self.out = _plain_console(file=out)
        self.err = _plain_console(file=err, stderr=err is None)

    def directory(self, stats) -> None:
        header = Text("Directory: ")
        header.append(printable_path(stats.path), style=DIRECTORY_STYLE)
        self.out.print(header)
        self.out.print(f"  Total file links: {stats.file_links}")
        self.out.print(f"  Total file space: {stats.file_space}")
        self.out.print(f"  Total sub-directories: {stats.subdirectories}")
        self.out.print(f"  Total sub-directory file space: {stats.subdirectory_space}")

    def totals(self, totals) -> None:
        self.out.print(f"Total directories encountered: {totals.directories}")
        self.out.print(f"Total file links: {totals.file_links}")
        self.out.print(f"Total files: {totals.files}")
        self.out.print(f"Total file space: {totals.file_space}")
        style = OUTSIDE_STYLE if totals.outside_files else ""
        self.out.print(
            Text(f"Files linked outside directory structure: {totals.outside_files}", style=style)
        )
        self.out.print(
            Text(f"File Space linked outside directory structure: {totals.outside_space}", style=style)
        )

    def failure(self, path: str, reason: str) -> None:
        """perror-style diagnostic: '<path>: <system error text>'."""
        self.err.print(Text(f"{printable_path(path)}: {reason}", style=ERROR_STYLE))

    def usage(self, message: str) -> None:
        self.out.print(message)
        self.out.print(USAGE)
