# planview/render/css/part01_tokens.py
from __future__ import annotations

CSS_PART = r'''
:root {
    --bg: #f8fafc;
    --surface: #ffffff;
    --surface2: #f1f5f9;
    --text: #0f172a;
    --muted: #475569;
    --line: #cbd5e1;
    --line-soft: #f1f5f9;
    --accent: #4f46e5;
    --accent-soft: #e0e7ff;
    --radius: 12px;

    --status-future: #22c55e;
    --status-progress: #f97316;
    --status-overdue: #ef4444;
    --status-nodate: #cbd5e1;

    --group-h: 40px;
    --row-h: 32px;
    --scrollbar-h: 12px;
}

* { box-sizing: border-box; }

body {
    margin: 0;
    background: var(--bg);
    color: var(--text);
    font: 14px/1.4 system-ui, -apple-system, "Segoe UI", Roboto, sans-serif;
}

.pv-noscript { margin: 8px 16px; color: var(--muted); font-size: 12px; }
'''
