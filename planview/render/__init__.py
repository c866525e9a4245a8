from __future__ import annotations

from .inline import build_document_payload, build_html

__all__ = ["build_document_payload", "build_html"]
