# planview/render/css/part02_chart.py
from __future__ import annotations

CSS_PART = r'''
.pv-root {
    display: flex;
    flex-direction: column;
    overflow: hidden;
    background: var(--surface);
    border: 1px solid var(--line);
    border-radius: var(--radius);
}
.pv-modal { width: 95vw; max-width: 95vw; max-height: 90vh; margin: 2vh auto; box-shadow: 0 20px 40px rgba(15,23,42,0.18); }
.pv-inline { width: 100%; }

.pv-header {
    display: flex; align-items: center; justify-content: space-between;
    padding: 12px 20px; border-bottom: 1px solid var(--line);
}
.pv-header h2 { margin: 0; font-size: 20px; }
.pv-controls { display: flex; align-items: center; gap: 16px; }
.pv-views { display: flex; gap: 4px; padding: 4px; background: var(--surface2); border-radius: 8px; }
.pv-views button {
    border: 0; background: transparent; color: var(--muted);
    padding: 6px 12px; border-radius: 6px; font-weight: 600; cursor: pointer;
}
.pv-views button.active { background: var(--accent); color: #fff; }
.pv-close { border: 0; background: transparent; font-size: 22px; cursor: pointer; }

.pv-empty { padding: 48px; text-align: center; color: #94a3b8; }
.pv-empty .pv-empty-title { font-size: 18px; font-weight: 600; }

.pv-view { display: none; }
.pv-view.active { display: flex; }

.pv-chart { flex: 1; display: flex; overflow: hidden; width: 100%; }

.pv-panel {
    position: relative; flex-shrink: 0; display: flex; flex-direction: column;
    border-right: 1px solid var(--line); background: var(--surface);
    transition: width 0.2s ease-out;
}
.pv-panel.resizing { transition: none; }
.pv-resize {
    position: absolute; right: 0; top: 0; bottom: 0; width: 8px; margin-right: -4px;
    z-index: 30; display: flex; justify-content: center; cursor: col-resize;
    user-select: none; touch-action: none;
}
.pv-resize-line { width: 2px; height: 100%; background: var(--line); }
.pv-resize:hover .pv-resize-line, .pv-panel.resizing .pv-resize-line { background: var(--accent); }

.pv-panel-head, .pv-axis { background: var(--surface2); border-bottom: 2px solid var(--line); flex-shrink: 0; }
.pv-panel-head .pv-cols { display: flex; gap: 16px; padding: 8px; font-weight: 600; color: #334155; }
.pv-spacer { height: 8px; }
.pv-panel-body { flex: 1; overflow-y: auto; }

.pv-group-title {
    height: var(--group-h); display: flex; align-items: center;
    margin: 8px 8px 0; padding: 0 16px; border-radius: 8px;
    background: var(--surface2); font-weight: 600;
}
.pv-row {
    height: var(--row-h); display: flex; gap: 16px; align-items: center;
    padding: 0 8px; border-bottom: 1px solid var(--line-soft);
}
.pv-cell { flex-shrink: 0; overflow: hidden; white-space: nowrap; text-overflow: ellipsis; }
.pv-cell.pv-resp { font-size: 12px; color: var(--muted); }

.pv-timeline { flex: 1; display: flex; flex-direction: column; overflow: hidden; min-width: 0; width: 0; }
.pv-axis { overflow-x: auto; overflow-y: hidden; scrollbar-width: none; }
.pv-axis-grid { display: grid; gap: 0; }
.pv-unit {
    padding: 8px 4px; text-align: center; white-space: nowrap;
    font-size: 12px; font-weight: 600; color: var(--muted);
    background: var(--surface); border-right: 1px solid var(--line);
}
.pv-scrollbar { height: var(--scrollbar-h); overflow-x: auto; overflow-y: hidden; flex-shrink: 0; border-bottom: 1px solid var(--line); }
.pv-content { flex: 1; overflow: auto; scrollbar-width: none; }
.pv-axis::-webkit-scrollbar, .pv-content::-webkit-scrollbar { display: none; }

.pv-bar-group { height: var(--group-h); margin-top: 8px; }
.pv-bar-row { position: relative; height: var(--row-h); border-bottom: 1px solid var(--line-soft); }
.pv-bar {
    position: absolute; top: 2px; height: calc(100% - 4px);
    border-radius: 4px; cursor: pointer; opacity: 0.9;
}
.pv-bar:hover { opacity: 1; box-shadow: 0 0 0 2px rgba(15,23,42,0.15); }
.pv-nodate { height: 100%; display: flex; align-items: center; padding-left: 8px; font-size: 12px; color: #94a3b8; }

.pv-legend { display: flex; gap: 20px; align-items: center; padding: 10px 20px; border-top: 1px solid var(--line); font-size: 13px; }
.pv-legend .pv-swatch { display: inline-block; width: 14px; height: 14px; border-radius: 3px; margin-right: 6px; vertical-align: -2px; }
.pv-footer-close { margin-left: auto; padding: 6px 16px; border: 1px solid var(--line); border-radius: 8px; background: var(--surface); cursor: pointer; }
'''
