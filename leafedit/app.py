"""Start-up of the editor: settings file, command line and initial document."""

from __future__ import annotations

import argparse
import locale
import os
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Optional, Sequence

from leafedit.buffer import TextBuffer
from leafedit.selector import UTF8, charset_supported
from leafedit.utils import read_stdin
from leafedit.view import jump_to_line, window_title

PACKAGE = "leafedit"
VERSION = "0.8.18"
DEFAULT_TAB_WIDTH = 8
UNTITLED = "Untitled"


class UsageError(ValueError):
    """The command line could not be understood."""


@dataclass
class Config:
    """Window and editing preferences kept between sessions."""

    width: int = 600
    height: int = 400
    fontname: str = "Monospace 12"
    wordwrap: bool = False
    linenumbers: bool = False
    autoindent: bool = False
    tabwidth: int = DEFAULT_TAB_WIDTH


@dataclass
class Options:
    """What the command line asked for."""

    charset: Optional[str] = None
    charset_flag: bool = False
    tab_width: int = 0
    jump: int = 0
    version: bool = False
    filename: Optional[str] = None


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def config_path(config_dir: Optional[str | os.PathLike[str]] = None) -> Path:
    """Location of the settings file inside *config_dir* (default: the user's)."""
    if config_dir is None:
        config_dir = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(config_dir) / PACKAGE / f"{PACKAGE}rc"


def load_config(
    path: str | os.PathLike[str], default_tab_width: int = DEFAULT_TAB_WIDTH
) -> Config:
    """Read the settings file; missing or too old files give the defaults."""
    config = Config(tabwidth=default_tab_width)
    try:
        with open(path, encoding="utf-8") as stream:
            lines = stream.read().splitlines()
    except OSError:
        return config
    if not lines:
        return config

    parts = lines[0].split(".", 2)
    if len(parts) < 3 or _atoi(parts[1]) < 8 or _atoi(parts[2]) < 0:
        return config

    values = lines[1:8] + [""] * (7 - len(lines[1:8]))
    width, height, fontname, wordwrap, linenumbers, autoindent, tabwidth = values
    config.width = _atoi(width)
    config.height = _atoi(height)
    if len(lines) > 3:
        config.fontname = fontname
    config.wordwrap = bool(_atoi(wordwrap))
    config.linenumbers = bool(_atoi(linenumbers))
    config.autoindent = bool(_atoi(autoindent))
    config.tabwidth = _atoi(tabwidth) if _atoi(tabwidth) > 0 else default_tab_width
    return config


def save_config(path: str | os.PathLike[str], config: Config, version: str = VERSION) -> None:
    """Write *config* to *path*, creating its directory when needed."""
    path = Path(path)
    path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
    fields = [
        version,
        str(config.width),
        str(config.height),
        config.fontname,
        str(int(config.wordwrap)),
        str(int(config.linenumbers)),
        str(int(config.autoindent)),
        str(config.tabwidth),
    ]
    path.write_text("".join(f"{field}\n" for field in fields), encoding="utf-8")


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


def _default_charset() -> str:
    return locale.getpreferredencoding(False) or UTF8


def parse_args(argv: Optional[Sequence[str]] = None) -> Options:
    """Parse command-line arguments; raise UsageError on bad ones."""
    parser = _Parser(prog=PACKAGE, usage=f"{PACKAGE} [OPTION...] [filename]")
    parser.add_argument("--codeset", metavar="CODESET", help="Set codeset to open file")
    parser.add_argument("--tab-width", type=int, default=0, metavar="WIDTH", help="Set tab width")
    parser.add_argument("--jump", type=int, default=0, metavar="LINENUM", help="Jump to specified line")
    parser.add_argument("--version", action="store_true", help="Show version number")
    parser.add_argument("files", nargs="*", help=argparse.SUPPRESS)
    args = parser.parse_args(sys.argv[1:] if argv is None else list(argv))

    options = Options(tab_width=args.tab_width, jump=args.jump, version=args.version)
    if args.codeset and charset_supported(args.codeset):
        options.charset = args.codeset
    if options.charset:
        known = {_default_charset().lower(), UTF8.lower()}
        options.charset_flag = options.charset.lower() not in known
    if args.files:
        options.filename = args.files[0]
    return options


def open_document(options: Options, stdin: Optional[IO] = None) -> TextBuffer:
    """Load the named file, or piped standard input, into a new buffer."""
    buffer = TextBuffer()
    if options.filename:
        try:
            data = Path(options.filename).read_bytes()
        except FileNotFoundError:
            data = b""
        text = data.decode(options.charset or UTF8)
        if text:
            buffer.insert(0, text)
    elif stdin is not None:
        data = read_stdin(stdin)
        if data:
            text = data.decode(_default_charset(), errors="replace") if isinstance(data, bytes) else data
            buffer.insert(0, text)
    buffer.place_cursor(0)
    buffer.set_modified(False)
    if options.jump > 0:
        jump_to_line(buffer, options.jump)
    return buffer


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the editor on the command line's document and report its state."""
    try:
        options = parse_args(argv)
    except UsageError as error:
        print(f"{PACKAGE}: {error}")
        return 255
    if options.version:
        print(f"{PACKAGE} {VERSION}")
        return 0

    config = load_config(config_path(), options.tab_width or DEFAULT_TAB_WIDTH)
    buffer = open_document(options, None if options.filename else sys.stdin)
    basename = os.path.basename(options.filename) if options.filename else UNTITLED
    title = window_title(basename, buffer.modified)
    line = buffer.line_at_offset(buffer.cursor) + 1
    print(
        f"{title}: {buffer.line_count()} lines, cursor at line {line}, "
        f"{config.width}x{config.height}, tab width {config.tabwidth}"
    )
    return 0