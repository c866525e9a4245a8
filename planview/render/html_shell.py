# planview/render/html_shell.py
"""Page skeleton for the standalone plan view.

The payload script sits ahead of the markup so it is parsed before the page
script runs; the page script reads it by id. Every marker appears once.
"""

from __future__ import annotations

from typing import Tuple

SHELL_MARKERS: Tuple[str, ...] = ("__TITLE__", "__CSS_BLOCK__", "__DATA_JSON__", "__BODY_MARKUP__", "__JS_BLOCK__")

_HEAD = """<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width, initial-scale=1" />
<meta name="color-scheme" content="light" />
<meta name="generator" content="planview" />
<title>__TITLE__</title>
<style>
__CSS_BLOCK__
</style>
</head>"""

_DATA = """<script id="pv-data" type="application/json">
__DATA_JSON__
</script>"""

_NOSCRIPT = (
    "<noscript><p class=\"pv-noscript\">"
    "Scrolling, resizing and the view buttons need JavaScript. Bars are still drawn."
    "</p></noscript>"
)

_BODY = "\n".join(
    (
        '<body class="pv-page">',
        _DATA,
        _NOSCRIPT,
        "__BODY_MARKUP__",
        "<script>\n__JS_BLOCK__\n</script>",
        "</body>",
    )
)

HTML_SHELL = "\n".join(("<!doctype html>", '<html lang="en">', _HEAD, _BODY, "</html>", ""))
