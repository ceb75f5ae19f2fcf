# typoradify/services/markdown_renderer.py
from __future__ import annotations

import html
import re

import markdown

from typoradify.domain.interfaces import IMarkdownRenderer
from typoradify.domain.models import RenderConfiguration
from typoradify.utils.constants import HTML_DOCUMENT_TEMPLATE, MATHJAX_CONFIG

# $$ ... $$ display blocks (delimiters on their own lines)
_MATH_BLOCK_RE = re.compile(r"^(?P<indent>[ \t]*)\$\$[ \t]*\n(?P<body>.*?)\n[ \t]*\$\$[ \t]*$", re.M | re.S)


def apply_math_line_breaks(markdown_text: str) -> str:
    """Turn each new line inside a ``$$`` block into a TeX line break (``\\\\``)."""

    def _sub(m: re.Match[str]) -> str:
        lines = m.group("body").split("\n")
        out = []
        for i, line in enumerate(lines):
            stripped = line.rstrip()
            is_last = i == len(lines) - 1
            if is_last or not stripped or stripped.endswith("\\\\"):
                out.append(line)
            else:
                out.append(stripped + " \\\\")
        indent = m.group("indent")
        return f"{indent}$$\n" + "\n".join(out) + f"\n{indent}$$"

    return _MATH_BLOCK_RE.sub(_sub, markdown_text)


class MarkdownRenderer(IMarkdownRenderer):
    """
    python-markdown backed renderer driven by a RenderConfiguration.

    Math is wrapped by pymdownx.arithmatex in generic mode; MathJax is injected only
    when math options are present. Code highlighting (Pygments via codehilite, inline
    styles so the output is self-contained) is enabled only when code options are.
    """

    def render(self, markdown_text: str, config: RenderConfiguration) -> str:
        exts: list[str] = [
            "extra",
            "sane_lists",
            "toc",
            "pymdownx.arithmatex",
        ]
        ext_cfg: dict[str, dict] = {
            "pymdownx.arithmatex": {"generic": True},
        }

        code = config.code_renderer_options
        if code is not None:
            exts.append("codehilite")
            ext_cfg["codehilite"] = {
                "guess_lang": False,
                "noclasses": True,
                "linenums": code.display_line_numbers,
            }

        math = config.math_renderer_options
        if math is not None and math.apply_line_breaks:
            markdown_text = apply_math_line_breaks(markdown_text)

        body = markdown.markdown(
            markdown_text,
            extensions=exts,
            extension_configs=ext_cfg,
            output_format="html5",
        )

        if not config.vanilla_html:
            body = f'<div id="write">\n{body}\n</div>'

        if not config.include_head:
            return body

        head_parts: list[str] = []
        if config.extra_head_tags:
            head_parts.append(config.extra_head_tags)
        if math is not None:
            head_parts.append(MATHJAX_CONFIG.format(tags="ams" if math.auto_numbering else "none"))

        return HTML_DOCUMENT_TEMPLATE.format(
            title=html.escape(config.title),
            head="\n".join(head_parts),
            body_attrs="" if config.vanilla_html else ' class="typora-export"',
            body=body,
        )
