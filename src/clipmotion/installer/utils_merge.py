"""Textual merge of shared utility files.

Several registry items ship the same utils module (e.g. the `cn` class-name
helper). Instead of overwriting a user's copy on every install, new top-level
functions are appended and existing ones are left untouched. Name equality is
the only conflict key: two bindings with the same name are the same binding,
whatever their bodies look like.

The merge is a two-step pipeline:

1. `extract_binding_names` scans for top-level function declarations and
   `const`/`let`/`var` bindings assigned a function or arrow function.
2. `extract_binding` cuts the source text of one named binding, bounded by its
   balanced block or its statement terminator.

Both steps are pattern scans over text, not a parser.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)

_UTILS_FILE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^utils\.(ts|js|tsx|jsx)$"),
    re.compile(r"^utils/index\.(ts|js|tsx|jsx)$"),
    re.compile(r"/utils/index\.(ts|js|tsx|jsx)$"),
    re.compile(r"^cn\.(ts|js)$"),
    re.compile(r"^cn/index\.(ts|js)$"),
)

_IDENTIFIER = r"[A-Za-z_$][\w$]*"

_FUNCTION_DECLARATION = re.compile(
    rf"^(?:export\s+)?(?:default\s+)?(?:async\s+)?function\s*\*?\s*({_IDENTIFIER})",
    re.MULTILINE,
)

# const cn = (...inputs: ClassValue[]): string =>
# const debounce = function (...) {
# export const clamp = async x =>
# export const cn: (...inputs: string[]) => string = (...inputs) =>
_FUNCTION_BINDING = re.compile(
    rf"^(?:export\s+)?(?:const|let|var)\s+({_IDENTIFIER})\s*(?::(?:[^=\n]|=>)+?)?=\s*"
    rf"(?:async\s+)?(?:function\b|(?:<[^>\n]*>\s*)?\([^)]*\)\s*(?::[^=\n]+)?=>|{_IDENTIFIER}\s*=>)",
    re.MULTILINE,
)

_OPENERS = "([{"
_CLOSERS = ")]}"

# A line starting with one of these continues the previous expression
_CONTINUATION_STARTS = ".?:&|+-*/,)]}"
# A line ending with one of these continues on the next line
_CONTINUATION_ENDS = "=>,+-*/&|?:.([{"

# Return-type text ending with one of these is still expecting a type
_TYPE_CONTINUATIONS = (":", "|", "&", "=>", ",")


class MergeStatus(Enum):
    CREATED = "created"
    MERGED = "merged"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class MergeResult:
    """Outcome of merging one utils file."""

    status: MergeStatus
    added: tuple[str, ...] = ()  # Binding names appended (MERGED only)


def is_utils_file(file_name: str) -> bool:
    """Whether a registry file name denotes a shared utils module."""
    normalized = file_name.replace("\\", "/").lower()
    return any(pattern.search(normalized) for pattern in _UTILS_FILE_PATTERNS)


def extract_binding_names(text: str) -> list[str]:
    """Top-level function-like binding names, in source order, without repeats."""
    found: list[tuple[int, str]] = []
    for pattern in (_FUNCTION_DECLARATION, _FUNCTION_BINDING):
        found.extend((match.start(), match.group(1)) for match in pattern.finditer(text))

    names: list[str] = []
    for _, name in sorted(found):
        if name not in names:
            names.append(name)
    return names


def extract_binding(text: str, name: str) -> str | None:
    """Source text of the top-level binding called name, or None.

    A directly preceding block comment (JSDoc) is included. Function
    declarations end at their balanced body; variable bindings end at `;` or
    at the end of the statement's last line.
    """
    escaped = re.escape(name)
    declaration = re.compile(
        rf"^(?P<function>(?:export\s+)?(?:default\s+)?(?:async\s+)?"
        rf"function\s*\*?\s*{escaped})(?![\w$])"
        rf"|^(?:export\s+)?(?:const|let|var)\s+{escaped}(?![\w$])",
        re.MULTILINE,
    )
    match = declaration.search(text)
    if match is None:
        return None

    if match.group("function") is not None:
        body = _function_body_start(text, match.end())
        end = _scan_statement_end(text, body, block_ends_statement=True)
    else:
        end = _scan_statement_end(text, match.end(), block_ends_statement=False)
    start = _leading_comment_start(text, match.start())
    return text[start:end].strip()


def merge_utils_file(target: Path, incoming: str, *, overwrite: bool) -> MergeResult:
    """Reconcile incoming utils content with the file at target.

    Args:
        target: Destination path of the utils module
        incoming: Content shipped by the registry item
        overwrite: Replace the existing file instead of merging

    Returns:
        CREATED when the file was written whole, MERGED with the appended
        binding names, or SKIPPED when every incoming binding already exists
    """
    if not target.exists():
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(incoming, encoding="utf-8")
        logger.debug("Created new utils file: %s", target)
        return MergeResult(status=MergeStatus.CREATED)

    if overwrite:
        target.write_text(incoming, encoding="utf-8")
        logger.debug("Overwrote utils file: %s", target)
        return MergeResult(status=MergeStatus.CREATED)

    existing = target.read_text(encoding="utf-8")
    existing_names = set(extract_binding_names(existing))
    missing = [name for name in extract_binding_names(incoming) if name not in existing_names]
    logger.debug("Utils bindings missing from %s: %s", target, missing)

    snippets: list[str] = []
    added: list[str] = []
    for name in missing:
        snippet = extract_binding(incoming, name)
        if snippet:
            snippets.append(snippet)
            added.append(name)

    if not snippets:
        return MergeResult(status=MergeStatus.SKIPPED)

    merged = existing.rstrip() + "\n\n" + "\n\n".join(snippets) + "\n"
    target.write_text(merged, encoding="utf-8")
    logger.debug("Merged %d new bindings into %s", len(snippets), target)
    return MergeResult(status=MergeStatus.MERGED, added=tuple(added))


def _scan_statement_end(text: str, start: int, *, block_ends_statement: bool) -> int:
    """Index just past the end of the statement beginning before start.

    Brackets are balanced; string, template and comment contents are skipped.
    """
    depth = 0
    length = len(text)
    i = start
    while i < length:
        ch = text[i]
        pair = text[i : i + 2]

        if pair == "//":
            newline = text.find("\n", i)
            i = length if newline == -1 else newline
            continue
        if pair == "/*":
            close = text.find("*/", i + 2)
            i = length if close == -1 else close + 2
            continue
        if ch in "'\"`":
            i = _skip_string(text, i)
            continue

        if ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS:
            depth -= 1
            if depth == 0 and ch == "}" and block_ends_statement:
                return i + 1
        elif depth == 0:
            if ch == ";":
                return i + 1
            if ch == "\n" and not block_ends_statement and _statement_ends_at(text, i):
                return i
        i += 1
    return length


def _function_body_start(text: str, start: int) -> int:
    """Index of the `{` opening a function body, past parameters and return type.

    Falls back to start when no parameter list follows.
    """
    params = text.find("(", start)
    if params == -1:
        return start

    length = len(text)
    i = _skip_balanced(text, params)
    while i < length and text[i].isspace():
        i += 1
    if i >= length or text[i] != ":":
        return i

    # `): { a: number } {` - an object type follows `:`, `|`, `&`, `=>` or `,`
    annotation_start = i
    depth = 0
    i += 1
    while i < length:
        if text.startswith("=>", i):
            i += 2
            continue
        ch = text[i]
        if ch in "'\"`":
            i = _skip_string(text, i)
            continue
        if ch == "{":
            preceding = text[annotation_start:i].rstrip()
            if depth == 0 and not preceding.endswith(_TYPE_CONTINUATIONS):
                return i
            depth += 1
        elif ch in "([<":
            depth += 1
        elif ch in ")]>}":
            depth -= 1
        i += 1
    return start


def _skip_balanced(text: str, open_index: int) -> int:
    """Index just past the bracket closing the one at open_index."""
    depth = 0
    length = len(text)
    i = open_index
    while i < length:
        ch = text[i]
        pair = text[i : i + 2]
        if pair == "//":
            newline = text.find("\n", i)
            i = length if newline == -1 else newline
            continue
        if pair == "/*":
            close = text.find("*/", i + 2)
            i = length if close == -1 else close + 2
            continue
        if ch in "'\"`":
            i = _skip_string(text, i)
            continue
        if ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS:
            depth -= 1
            if depth == 0:
                return i + 1
        i += 1
    return length


def _skip_string(text: str, start: int) -> int:
    quote = text[start]
    i = start + 1
    while i < len(text):
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == quote:
            return i + 1
        if ch == "\n" and quote != "`":
            return i
        i += 1
    return len(text)


def _statement_ends_at(text: str, newline: int) -> bool:
    line_before = text[:newline].rstrip()
    if line_before and line_before[-1] in _CONTINUATION_ENDS:
        return False

    for line in text[newline + 1 :].splitlines():
        if not line.strip():
            continue
        return not (line[0].isspace() or line[0] in _CONTINUATION_STARTS)
    return True


def _leading_comment_start(text: str, declaration_start: int) -> int:
    before = text[:declaration_start].rstrip()
    if not before.endswith("*/"):
        return declaration_start

    comment_start = before.rfind("/*")
    if comment_start == -1:
        return declaration_start
    line_start = text.rfind("\n", 0, comment_start) + 1
    if text[line_start:comment_start].strip():
        return declaration_start
    # Only a comment separated by whitespace alone belongs to the binding
    if text[len(before) : declaration_start].count("\n") > 1:
        return declaration_start
    return comment_start
