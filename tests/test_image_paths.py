from __future__ import annotations

import os

from typoradify.core.image_paths import find_image_references, resolve_image_paths


def _p(*parts: str) -> str:
    return os.path.normpath(os.path.join(*parts))


def test_relative_target_is_joined_with_base_dir():
    out = resolve_image_paths("![alt](img/pic.png)", "/notes/project")
    assert out == f"![alt]({_p('/notes/project', 'img/pic.png')})"


def test_remote_target_is_left_untouched():
    src = "![alt](https://example.com/pic.png)"
    assert resolve_image_paths(src, "/notes/project") == src


def test_any_scheme_counts_as_remote():
    src = "![a](data-uri://x) ![b](my_app://icon.png)"
    assert resolve_image_paths(src, "/base") == src


def test_no_images_returns_input_unchanged():
    src = "# Title\n\nJust [a link](page.md) and text."
    assert resolve_image_paths(src, "/base") is src


def test_duplicate_references_are_each_rewritten_once():
    src = "![a](x.png) and again ![a](x.png)"
    joined = _p("/base", "x.png")
    assert resolve_image_paths(src, "/base") == f"![a]({joined}) and again ![a]({joined})"


def test_text_outside_images_is_preserved():
    src = "before ![a](x.png) middle ![b](http://h/y.png) after"
    out = resolve_image_paths(src, "/base")
    assert out == f"before ![a]({_p('/base', 'x.png')}) middle ![b](http://h/y.png) after"


def test_parent_segments_are_normalized():
    out = resolve_image_paths("![up](../shared/p.png)", "/notes/project")
    assert out == f"![up]({_p('/notes/shared/p.png')})"


def test_empty_display_text_is_kept():
    out = resolve_image_paths("![](pic.png)", "/base")
    assert out == f"![]({_p('/base/pic.png')})"


def test_image_syntax_does_not_span_lines():
    src = "![broken\n](pic.png)"
    assert resolve_image_paths(src, "/base") == src


def test_find_image_references_reports_offsets_in_order():
    src = "x ![a](one.png) y ![b](https://h/two.png)"
    refs = find_image_references(src)

    assert [r.target for r in refs] == ["one.png", "https://h/two.png"]
    assert [r.display for r in refs] == ["a", "b"]
    assert src[refs[0].start : refs[0].end] == "![a](one.png)"
    assert refs[0].is_remote is False
    assert refs[1].is_remote is True
