"""Tests for the textual utils merge."""

from pathlib import Path

from clipmotion.installer.utils_merge import (
    MergeStatus,
    extract_binding,
    extract_binding_names,
    is_utils_file,
    merge_utils_file,
)

EXISTING_UTILS = """import { clsx, type ClassValue } from "clsx";
import { twMerge } from "tailwind-merge";

// Customized by the user
export function cn(...inputs: ClassValue[]) {
  return twMerge(clsx("custom", inputs));
}
"""

INCOMING_UTILS = """import { clsx, type ClassValue } from "clsx";
import { twMerge } from "tailwind-merge";

export function cn(...inputs: ClassValue[]) {
  return twMerge(clsx(inputs));
}

/** Clamp a value into [min, max]. */
export const clamp = (value: number, min: number, max: number): number =>
  Math.min(Math.max(value, min), max);

export function lerp(a: number, b: number, t: number) {
  if (t < 0) {
    return a;
  }
  return a + (b - a) * t;
}
"""


def test_is_utils_file_patterns() -> None:
    assert is_utils_file("utils.ts")
    assert is_utils_file("utils/index.ts")
    assert is_utils_file("lib/utils/index.tsx")
    assert is_utils_file("lib\\utils\\index.js")
    assert is_utils_file("cn.ts")
    assert is_utils_file("Utils.TS")
    assert not is_utils_file("utils.vue")
    assert not is_utils_file("image-crossfade.tsx")
    assert not is_utils_file("my-utils.ts")


def test_extract_binding_names_in_source_order() -> None:
    assert extract_binding_names(INCOMING_UTILS) == ["cn", "clamp", "lerp"]


def test_extract_binding_names_ignores_non_functions_and_nested() -> None:
    text = """export const VERSION = "1";
export type Props = { a: string };
export async function load() {
  const inner = () => 1;
  function nested() {}
}
let handler = async (event) => event;
var legacy = function () {};
const single = x => x * 2;
"""
    assert extract_binding_names(text) == ["load", "handler", "legacy", "single"]


def test_extract_binding_balances_nested_blocks() -> None:
    snippet = extract_binding(INCOMING_UTILS, "lerp")

    assert snippet is not None
    assert snippet.startswith("export function lerp(")
    assert snippet.endswith("return a + (b - a) * t;\n}")


def test_extract_binding_multiline_arrow_with_doc_comment() -> None:
    snippet = extract_binding(INCOMING_UTILS, "clamp")

    assert snippet == (
        "/** Clamp a value into [min, max]. */\n"
        "export const clamp = (value: number, min: number, max: number): number =>\n"
        "  Math.min(Math.max(value, min), max);"
    )


def test_extract_binding_skips_braces_in_strings() -> None:
    text = 'export function brace() {\n  return "}";\n}\n\nexport function after() {}\n'
    assert extract_binding(text, "brace") == 'export function brace() {\n  return "}";\n}'


def test_extract_binding_unknown_name() -> None:
    assert extract_binding(INCOMING_UTILS, "missing") is None
    # Prefix of an existing name is not a match
    assert extract_binding(INCOMING_UTILS, "cla") is None


def test_merge_creates_missing_file(tmp_path: Path) -> None:
    target = tmp_path / "components" / "utils" / "index.ts"

    result = merge_utils_file(target, INCOMING_UTILS, overwrite=False)

    assert result.status == MergeStatus.CREATED
    assert target.read_text(encoding="utf-8") == INCOMING_UTILS


def test_merge_appends_only_missing_bindings(tmp_path: Path) -> None:
    """Test that existing cn stays untouched and new bindings are appended."""
    target = tmp_path / "index.ts"
    target.write_text(EXISTING_UTILS, encoding="utf-8")

    result = merge_utils_file(target, INCOMING_UTILS, overwrite=False)

    assert result.status == MergeStatus.MERGED
    assert result.added == ("clamp", "lerp")
    merged = target.read_text(encoding="utf-8")
    assert merged.startswith(EXISTING_UTILS.rstrip())
    assert merged.count("export function cn(") == 1
    assert 'clsx("custom", inputs)' in merged
    assert "export const clamp" in merged
    assert "export function lerp" in merged
    assert merged.endswith("}\n")


def test_merge_is_idempotent(tmp_path: Path) -> None:
    """Test that merging the same content twice is a no-op the second time."""
    target = tmp_path / "index.ts"
    target.write_text(EXISTING_UTILS, encoding="utf-8")

    merge_utils_file(target, INCOMING_UTILS, overwrite=False)
    after_first = target.read_text(encoding="utf-8")
    second = merge_utils_file(target, INCOMING_UTILS, overwrite=False)

    assert second.status == MergeStatus.SKIPPED
    assert target.read_text(encoding="utf-8") == after_first


def test_merge_with_overwrite_replaces_file(tmp_path: Path) -> None:
    target = tmp_path / "index.ts"
    target.write_text(EXISTING_UTILS, encoding="utf-8")

    result = merge_utils_file(target, INCOMING_UTILS, overwrite=True)

    assert result.status == MergeStatus.CREATED
    assert target.read_text(encoding="utf-8") == INCOMING_UTILS


def test_extract_binding_object_return_type() -> None:
    """Test that an object type annotation is not mistaken for the function body."""
    text = "export function f(): { a: number } {\n  return { a: 1 };\n}\n\nconst after = 1;\n"

    assert extract_binding(text, "f") == text.split("\n\nconst")[0]


def test_extract_binding_names_typed_const() -> None:
    text = 'export const cn: (...a: string[]) => string = (...a) => a.join(" ");\n'

    assert extract_binding_names(text) == ["cn"]
    assert extract_binding(text, "cn") == text.strip()


def test_merge_appends_typed_bindings_intact(tmp_path: Path) -> None:
    target = tmp_path / "index.ts"
    target.write_text(EXISTING_UTILS, encoding="utf-8")
    incoming = (
        "export function size(): { w: number; h: number } {\n"
        "  return { w: 1, h: 2 };\n"
        "}\n"
        "\n"
        'export const join: (...a: string[]) => string = (...a) => a.join(" ");\n'
    )

    result = merge_utils_file(target, incoming, overwrite=False)

    assert result.status == MergeStatus.MERGED
    assert result.added == ("size", "join")
    merged = target.read_text(encoding="utf-8")
    assert merged.endswith(incoming)
