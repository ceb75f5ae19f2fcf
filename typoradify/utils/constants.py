APP_ORG = "Typoradify"
APP_NAME = "Typoradify"

PLUGIN_ID = "org.typoradify.export"

HTML_DOCUMENT_TEMPLATE = """<!doctype html>
<html>
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width, initial-scale=1.0"/>
<title>{title}</title>
{head}
</head>
<body{body_attrs}>
{body}
</body>
</html>
"""

# MathJax v3 with generic arithmatex delimiters (\( \) and \[ \]).
MATHJAX_CONFIG = """<script>
window.MathJax = {{
  tex: {{
    inlineMath: [['\\\\(', '\\\\)']],
    displayMath: [['\\\\[', '\\\\]']],
    processEscapes: true,
    tags: '{tags}'
  }},
  options: {{
    skipHtmlTags: ['script', 'noscript', 'style', 'textarea', 'pre', 'code']
  }}
}};
</script>
<script id="MathJax-script" async src="https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-chtml.js"></script>"""


SETTINGS_RECENTS = "file/recent"
MAX_RECENTS = 8

DEFAULT_PDF_TIMEOUT_MS = 15000
DEFAULT_PDF_SETTLE_MS = 300
DEFAULT_LOG_LEVEL = "INFO"
