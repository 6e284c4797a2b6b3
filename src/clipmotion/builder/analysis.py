"""Dependency analysis of component source text.

Pattern matching over text stands in for a real parser. Everything downstream
goes through `extract_imports`, so a parser-backed implementation only has to
replace that one function.
"""

import re

from clipmotion.models.registry import FRAMEWORK_BASE_PACKAGES

# Static `import x from "y"`, `import { a, b } from "y"`, `export * from "y"`.
# [^'";] lets named-import lists span lines.
_STATIC_IMPORT = re.compile(
    r"""\b(?:import|export)\s+(?:type\s+)?[^'";]*?\bfrom\s*['"]([^'"]+)['"]"""
)
# Side-effect `import "y"`
_BARE_IMPORT = re.compile(r"""\bimport\s*['"]([^'"]+)['"]""")
_DYNAMIC_IMPORT = re.compile(r"""\bimport\s*\(\s*['"]([^'"]+)['"]\s*\)""")
_REQUIRE = re.compile(r"""\brequire\s*\(\s*['"]([^'"]+)['"]\s*\)""")

_IMPORT_PATTERNS = (_STATIC_IMPORT, _BARE_IMPORT, _DYNAMIC_IMPORT, _REQUIRE)

# Specifier prefixes that never name an external package
_RELATIVE_PREFIXES = ("./", "../", "/")
_ALIAS_PREFIXES = ("@/", "~/", "#")

# Dev-only tooling. A match records the package owning the specifier.
DEV_DEPENDENCY_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^vitest(?:/|$)"),
    re.compile(r"^jest(?:/|$)"),
    re.compile(r"^@jest/"),
    re.compile(r"^@testing-library/"),
    re.compile(r"^@types/"),
    re.compile(r"^@playwright/test(?:/|$)"),
    re.compile(r"^cypress(?:/|$)"),
    re.compile(r"^@storybook/"),
    re.compile(r"^@vue/test-utils(?:/|$)"),
)

# Internal alias imports that point at other registry items
UTILS_ITEM_NAME = "utils"
_UTILS_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^@/(?:components|lib)/utils(?:/index)?$"),
    re.compile(r"^(?:\.\./)+lib/utils(?:/index)?$"),
    re.compile(r"^\./utils(?:/index)?$"),
)
_NAMED_ITEM_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^@/components/(?:ui/|hooks/|lib/)?([a-z0-9]+(?:-[a-z0-9]+)*)$"),
    re.compile(r"^@/(?:hooks|lib)/([a-z0-9]+(?:-[a-z0-9]+)*)$"),
    re.compile(r"^(?:\.\./)+(?:ui|hooks|lib)/([a-z0-9]+(?:-[a-z0-9]+)*)$"),
)


def strip_comments(text: str) -> str:
    """Blank out // and /* */ comments, leaving string literals intact."""
    out: list[str] = []
    i = 0
    length = len(text)
    quote: str | None = None
    while i < length:
        char = text[i]
        if quote is not None:
            out.append(char)
            if char == "\\" and i + 1 < length:
                out.append(text[i + 1])
                i += 2
                continue
            # Plain string literals end at a newline (apostrophes in JSX text)
            if char == quote or (char == "\n" and quote != "`"):
                quote = None
            i += 1
            continue

        if char in ("'", '"', "`"):
            quote = char
            out.append(char)
            i += 1
        elif text.startswith("//", i):
            end = text.find("\n", i)
            i = length if end == -1 else end
        elif text.startswith("/*", i):
            end = text.find("*/", i + 2)
            i = length if end == -1 else end + 2
            out.append(" ")
        else:
            out.append(char)
            i += 1
    return "".join(out)


def extract_imports(text: str) -> list[str]:
    """Return every module specifier imported by text, in source order.

    Covers static imports and re-exports, side-effect imports, dynamic
    `import()` and CommonJS `require()`. Commented-out imports are ignored;
    duplicates are kept.
    """
    text = strip_comments(text)
    found: list[tuple[int, str]] = []
    seen_positions: set[int] = set()
    for pattern in _IMPORT_PATTERNS:
        for match in pattern.finditer(text):
            position = match.start(1)
            if position in seen_positions:
                continue
            seen_positions.add(position)
            found.append((position, match.group(1)))
    found.sort()
    return [specifier for _, specifier in found]


def package_name(specifier: str) -> str | None:
    """Map a module specifier to the external package that provides it.

    Returns None for relative paths, internal aliases, URL-style specifiers
    ("node:fs", "https://...") and anything without a usable package name.
    """
    specifier = specifier.strip()
    if not specifier:
        return None
    if specifier.startswith(_RELATIVE_PREFIXES) or specifier.startswith(_ALIAS_PREFIXES):
        return None

    segments = specifier.split("/")
    if ":" in segments[0]:
        return None

    if specifier.startswith("@"):
        if len(segments) < 2 or not segments[0][1:] or not segments[1]:
            return None
        return "/".join(segments[:2])

    return segments[0] or None


def is_dev_specifier(specifier: str) -> bool:
    return any(pattern.search(specifier) for pattern in DEV_DEPENDENCY_PATTERNS)


def extract_dev_dependencies(text: str) -> list[str]:
    """Dev-only packages (test frameworks, type stubs) imported by text."""
    packages: set[str] = set()
    for specifier in extract_imports(text):
        if not is_dev_specifier(specifier):
            continue
        name = package_name(specifier)
        if name is not None:
            packages.add(name)
    return sorted(packages)


def extract_dependencies(text: str, framework: str) -> list[str]:
    """Runtime packages imported by text plus the framework's base package.

    Dev-only packages are reported by `extract_dev_dependencies` instead.
    """
    packages: set[str] = set()
    base_package = FRAMEWORK_BASE_PACKAGES.get(framework)
    if base_package is not None:
        packages.add(base_package)

    for specifier in extract_imports(text):
        if is_dev_specifier(specifier):
            continue
        name = package_name(specifier)
        if name is not None:
            packages.add(name)
    return sorted(packages)


def registry_dependency_name(specifier: str) -> str | None:
    """Name of the registry item an internal import refers to, if any."""
    if any(pattern.match(specifier) for pattern in _UTILS_PATTERNS):
        return UTILS_ITEM_NAME
    for pattern in _NAMED_ITEM_PATTERNS:
        match = pattern.match(specifier)
        if match:
            return match.group(1)
    return None


def extract_registry_dependencies(text: str) -> list[str]:
    """Names of other registry items that text imports through internal aliases."""
    names: set[str] = set()
    for specifier in extract_imports(text):
        name = registry_dependency_name(specifier)
        if name is not None:
            names.add(name)
    return sorted(names)
