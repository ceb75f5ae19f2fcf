from __future__ import annotations

import os
import re
from pathlib import PurePath

from typoradify.domain.models import ImageReference

# ![display](target) on one line: display has no "]", target has no ")", both lazy.
IMAGE_RE = re.compile(r"!\[([^\]\n]*?)\]\(([^)\n]*?)\)")


def find_image_references(markdown: str) -> list[ImageReference]:
    """All non-overlapping image references, in document order."""
    return [
        ImageReference(display=m.group(1), target=m.group(2), start=m.start(), end=m.end())
        for m in IMAGE_RE.finditer(markdown)
    ]


def resolve_image_paths(markdown: str, base_dir: str | PurePath) -> str:
    """
    Rewrite relative image targets so they resolve against `base_dir`.

    Remote targets (``scheme://...``) are kept byte-identical. The result is rebuilt
    from match offsets, so identical references are each rewritten in place and
    text outside image syntax is copied through untouched. Resolution is lexical:
    nothing on disk is checked.
    """
    refs = find_image_references(markdown)
    if not refs:
        return markdown

    base = os.fspath(base_dir)
    out: list[str] = []
    pos = 0
    for ref in refs:
        if ref.is_remote:
            continue
        joined = os.path.normpath(os.path.join(base, ref.target))
        out.append(markdown[pos : ref.start])
        out.append(f"![{ref.display}]({joined})")
        pos = ref.end
    out.append(markdown[pos:])
    return "".join(out)
