# planview/render/template.py
from __future__ import annotations

from .html_shell import HTML_SHELL
from .inline_css import CSS_BLOCK
from .inline_js import JS_BLOCK


# Shell with CSS/JS in place; title, body markup and data are injected by build_html.
HTML_TEMPLATE = (
    HTML_SHELL
    .replace("__CSS_BLOCK__", CSS_BLOCK)
    .replace("__JS_BLOCK__", JS_BLOCK)
)
