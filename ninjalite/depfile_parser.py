"""Parser for the Makefile-style dependency files emitted by compilers."""

from __future__ import annotations

import enum
import string
import warnings
from dataclasses import dataclass, field

_PLAIN_ASCII = frozenset(
    string.ascii_letters + string.digits + "+,/_:.~()}{%=@[]!-"
)


def _is_plain(ch: str) -> bool:
    return ch in _PLAIN_ASCII or ord(ch) >= 0x80


class DepfileParseError(ValueError):
    """Raised when a depfile cannot be parsed."""


class DepfileDistinctTargetLinesAction(enum.Enum):
    """What to do when a depfile names different targets on separate lines."""

    WARN = "warn"
    ERROR = "err"


@dataclass
class DepfileParserOptions:
    """Options controlling depfile parsing."""

    depfile_distinct_target_lines_action: DepfileDistinctTargetLinesAction = (
        DepfileDistinctTargetLinesAction.WARN
    )


def _read_filename(text: str, pos: int) -> tuple[str, int, bool]:
    """Scan one file name starting at ``pos``.

    Returns the de-escaped name (possibly empty), the position after the
    terminating token and whether that token was a newline.
    """
    n = len(text)
    pieces: list[str] = []

    def done(new_pos: int, newline: bool = False) -> tuple[str, int, bool]:
        return "".join(pieces), new_pos, newline

    while True:
        if pos >= n:
            return done(pos + 1)
        ch = text[pos]

        if _is_plain(ch):
            end = pos + 1
            while end < n and _is_plain(text[end]):
                end += 1
            pieces.append(text[pos:end])
            pos = end
            continue

        if ch == "\\":
            end = pos
            while end < n and text[end] == "\\":
                end += 1
            count = end - pos
            nxt = text[end] if end < n else "\0"
            if nxt == " ":
                if count % 2:
                    # 2N+1 backslashes plus space -> N backslashes plus space.
                    pieces.append("\\" * (count // 2) + " ")
                    pos = end + 1
                    continue
                # 2N backslashes plus space -> 2N backslashes, end of name.
                pieces.append("\\" * count)
                return done(end + 1)
            if nxt == "#":
                pieces.append("\\" * (count - 1) + "#")
                pos = end + 1
                continue
            if nxt in "\0\r\n":
                if count >= 2:
                    pieces.append("\\" * count)
                    pos = end
                    continue
                if nxt == "\n":
                    return done(end + 1)
                if nxt == "\r" and end + 1 < n and text[end + 1] == "\n":
                    return done(end + 2)
                # A lone backslash is swallowed and ends the name.
                return done(pos + 1)
            pieces.append(text[pos : end + 1])
            pos = end + 1
            continue

        if ch == "$":
            if pos + 1 < n and text[pos + 1] == "$":
                pieces.append("$")
                pos += 2
                continue
            return done(pos + 1)

        if ch == "\n":
            return done(pos + 1, True)
        if ch == "\r" and pos + 1 < n and text[pos + 1] == "\n":
            return done(pos + 2, True)

        # Whitespace, NUL or any other character ends the current name.
        return done(pos + 1)


@dataclass
class DepfileParser:
    """Parser for the dependency information emitted by gcc's -M flags.

    After :meth:`parse`, ``out`` holds the target and ``ins`` its inputs.
    """

    options: DepfileParserOptions = field(default_factory=DepfileParserOptions)
    out: str | None = None
    ins: list[str] = field(default_factory=list)

    def parse(self, content: str) -> None:
        """Parse depfile ``content``; raise DepfileParseError on failure."""
        pos = 0
        have_target = False
        have_secondary_target_on_this_rule = False
        have_newline_since_primary_target = False
        warned_distinct_target_lines = False
        parsing_targets = True

        while pos < len(content):
            name, pos, have_newline = _read_filename(content, pos)

            is_dependency = not parsing_targets
            if name.endswith(":"):
                name = name[:-1]
                parsing_targets = False
                have_target = True

            if name:
                if is_dependency:
                    if have_secondary_target_on_this_rule:
                        if not have_newline_since_primary_target:
                            raise DepfileParseError(
                                "depfile has multiple output paths"
                            )
                        if (
                            self.options.depfile_distinct_target_lines_action
                            is DepfileDistinctTargetLinesAction.ERROR
                        ):
                            raise DepfileParseError(
                                "depfile has multiple output paths (on separate"
                                " lines) [-w depfilemulti=err]"
                            )
                        if not warned_distinct_target_lines:
                            warned_distinct_target_lines = True
                            warnings.warn(
                                "depfile has multiple output paths (on separate "
                                "lines); continuing anyway [-w depfilemulti=warn]",
                                stacklevel=2,
                            )
                        continue
                    self.ins.append(name)
                elif self.out is None:
                    self.out = name
                elif self.out != name:
                    have_secondary_target_on_this_rule = True

            if have_newline:
                # A newline ends a rule so the next name is a new target.
                parsing_targets = True
                have_secondary_target_on_this_rule = False
                if have_target:
                    have_newline_since_primary_target = True

        if not have_target:
            raise DepfileParseError("expected ':' in depfile")