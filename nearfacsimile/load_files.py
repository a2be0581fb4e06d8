"""Finding, filtering and loading the text files to compare."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

from nearfacsimile.options import Options

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class File:
    """A loaded text file."""

    path: Path
    content: str


@dataclass(frozen=True)
class _Rule:
    regex: re.Pattern[str]
    negated: bool
    dir_only: bool


def _glob_to_regex(glob: str) -> str:
    out: list[str] = []
    i, n = 0, len(glob)
    while i < n:
        char = glob[i]
        if glob.startswith("**", i):
            after = i + 2
            at_start = i == 0 or glob[i - 1] == "/"
            at_end = after == n
            if at_start and at_end:
                out.append(".*")
                i = after
                continue
            if at_start and glob[after] == "/":
                out.append("(?:.*/)?")
                i = after + 1
                continue
            out.append("[^/]*")
            i = after
        elif char == "*":
            out.append("[^/]*")
            i += 1
        elif char == "?":
            out.append("[^/]")
            i += 1
        elif char == "[":
            j = i + 1
            if j < n and glob[j] in "!^":
                j += 1
            if j < n and glob[j] == "]":
                j += 1
            close = glob.find("]", j)
            if close == -1:
                out.append(re.escape(char))
                i += 1
                continue
            inner = glob[i + 1 : close].replace("\\", "\\\\").replace("[", "\\[")
            if inner[:1] in ("!", "^"):
                inner = "^" + inner[1:]
            out.append(f"[{inner}]")
            i = close + 1
        elif char == "\\" and i + 1 < n:
            out.append(re.escape(glob[i + 1]))
            i += 2
        else:
            out.append(re.escape(char))
            i += 1
    return "".join(out)


def _parse_rule(line: str) -> _Rule | None:
    if not line or line.startswith("#"):
        return None
    stripped = line.rstrip(" ")
    if stripped.endswith("\\") and len(stripped) < len(line):
        stripped += " "
    line = stripped
    negated = False
    if line.startswith("!"):
        negated = True
        line = line[1:]
    elif line.startswith(("\\!", "\\#")):
        line = line[1:]
    dir_only = line.endswith("/")
    if dir_only:
        line = line[:-1]
    if not line:
        return None
    anchored = "/" in line
    body = _glob_to_regex(line.lstrip("/"))
    prefix = "" if anchored else "(?:.*/)?"
    return _Rule(re.compile(f"{prefix}{body}\\Z", re.DOTALL), negated, dir_only)


def _read_rules(path: Path) -> list[_Rule]:
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return []
    return [rule for rule in map(_parse_rule, text.splitlines()) if rule is not None]


def _inside_git_repo(root: Path) -> bool:
    resolved = root.resolve()
    return any((directory / ".git").exists() for directory in (resolved, *resolved.parents))


def _is_ignored(path: Path, is_dir: bool, matchers: Sequence[tuple[Path, list[_Rule]]]) -> bool:
    for base, rules in reversed(matchers):
        relative = path.relative_to(base).as_posix()
        for rule in reversed(rules):
            if rule.dir_only and not is_dir:
                continue
            if rule.regex.match(relative):
                return not rule.negated
    return False


def _walk_dir(
    directory: Path, matchers: list[tuple[Path, list[_Rule]]], use_git: bool
) -> Iterator[Path]:
    rules = _read_rules(directory / ".gitignore") if use_git else []
    # Rules from .ignore come last, so they take precedence over .gitignore.
    rules += _read_rules(directory / ".ignore")
    if rules:
        matchers = [*matchers, (directory, rules)]

    with os.scandir(directory) as scan:
        entries = sorted(scan, key=lambda entry: entry.name)

    for entry in entries:
        if entry.name.startswith("."):
            continue
        path = directory / entry.name
        is_dir = entry.is_dir(follow_symlinks=False)
        if _is_ignored(path, is_dir, matchers):
            continue
        yield path
        if is_dir:
            yield from _walk_dir(path, matchers, use_git)


def walk(root: Path | str) -> Iterator[Path]:
    """Yield every path under the root, skipping hidden and ignored entries.

    Rules from .ignore files always apply; rules from .gitignore files apply
    only inside a git repository.
    """
    root = Path(root)
    if not root.exists():
        raise FileNotFoundError(f"No such file or directory: {root}")
    if not root.is_dir():
        yield root
        return
    yield from _walk_dir(root, [], _inside_git_repo(root))


def load_file(path: Path | str) -> File | None:
    """Load a file as text. Returns None if it is not valid UTF-8."""
    path = Path(path)
    log.debug("Loading file: %s", path)
    data = path.read_bytes()
    try:
        content = data.decode("utf-8")
    except UnicodeDecodeError:
        log.debug("Skipping file that is not valid UTF-8 text: %s", path)
        return None
    return File(path, content)


def _extension(path: Path) -> str | None:
    name = path.name
    dot = name.rfind(".")
    if dot <= 0:
        return None
    return name[dot + 1 :]


def _name_in(path: Path, names: Sequence[str]) -> bool:
    return bool(path.name) and path.name in names


def _extension_in(path: Path, extensions: Sequence[str]) -> bool:
    extension = _extension(path)
    return extension is not None and extension in extensions


def wanted(path: Path, options: Options) -> bool:
    """Decide whether a file takes part, from the required and ignored names."""
    if options.require_file:
        if options.require_ext:
            return _name_in(path, options.require_file) or _extension_in(
                path, options.require_ext
            )
        return _name_in(path, options.require_file)
    if options.ignore_file:
        if options.require_ext:
            return _extension_in(path, options.require_ext) and not _name_in(
                path, options.ignore_file
            )
        if options.ignore_ext:
            return not _name_in(path, options.ignore_file) and not _extension_in(
                path, options.ignore_ext
            )
        return not _name_in(path, options.ignore_file)
    if options.require_ext:
        return _extension_in(path, options.require_ext)
    if options.ignore_ext:
        return not _extension_in(path, options.ignore_ext)
    return True


def _lines(text: str) -> Iterator[str]:
    parts = text.split("\n")
    trailing = parts.pop()
    for part in parts:
        yield part[:-1] if part.endswith("\r") else part
    if trailing:
        yield trailing


def strip_lines(text: str, regexes: Iterable[re.Pattern[str] | str]) -> str:
    """Remove every line that any of the regular expressions matches."""
    patterns = [re.compile(regex) for regex in regexes]

    def skipped(line: str) -> bool:
        for pattern in patterns:
            if pattern.search(line):
                log.debug("Skipping line due to regex %r:\n%r", pattern.pattern, line)
                return True
        return False

    return "\n".join(line for line in _lines(text) if not skipped(line))


def load_files(options: Options) -> list[File]:
    """Load every wanted text file under the configured directory."""
    log.debug("Loading files…")
    files = [
        file
        for path in walk(options.path)
        if path.is_file() and wanted(path, options)
        if (file := load_file(path)) is not None
    ]
    if not options.skip_lines:
        return files
    return [
        File(file.path, strip_lines(file.content, options.skip_lines)) for file in files
    ]