# planview/render/js/part02_panel_resize.py
from __future__ import annotations

JS_PART = r'''// Label panel resize
  // -----------------------------
  const PANEL_MIN = 250;
  const PANEL_MAX = 800;

  function clampPanel(w) {
    return Math.max(PANEL_MIN, Math.min(PANEL_MAX, w));
  }

  function applyPanelWidth(w) {
    panelWidth = clampPanel(w);
    const taskW = Math.max(200, panelWidth * 0.6);
    const respW = Math.max(120, panelWidth * 0.35);
    for (const p of document.querySelectorAll(".pv-panel")) p.style.width = panelWidth + "px";
    for (const c of document.querySelectorAll(".pv-task")) c.style.width = taskW + "px";
    for (const c of document.querySelectorAll(".pv-resp")) c.style.width = respW + "px";
  }

  function bindResize(handle, panel) {
    if (!handle || !panel) return;
    let pointerId = null;
    let panelLeft = 0;
    let pending = null;
    let frame = null;

    function onMove(ev) {
      if (pointerId === null || ev.pointerId !== pointerId) return;
      if (!panel.isConnected) return;
      pending = clampPanel(ev.clientX - panelLeft);
      if (frame !== null) return;
      frame = requestAnimationFrame(() => {
        frame = null;
        if (pending !== null) applyPanelWidth(pending);
        pending = null;
      });
    }

    function onUp(ev) {
      if (pointerId === null || (ev && ev.pointerId !== pointerId)) return;
      if (frame !== null) { cancelAnimationFrame(frame); frame = null; }
      if (pending !== null) { applyPanelWidth(pending); pending = null; }
      try { handle.releasePointerCapture(pointerId); } catch (_) {}
      pointerId = null;
      panel.classList.remove("resizing");
      document.body.style.cursor = "";
      document.body.style.userSelect = "";
      window.removeEventListener("pointermove", onMove);
      window.removeEventListener("pointerup", onUp);
      window.removeEventListener("pointercancel", onUp);
    }

    handle.addEventListener("pointerdown", (ev) => {
      if (pointerId !== null) return;
      ev.preventDefault();
      ev.stopPropagation();
      pointerId = ev.pointerId;
      panelLeft = panel.getBoundingClientRect().left;
      try { handle.setPointerCapture(pointerId); } catch (_) {}
      panel.classList.add("resizing");
      document.body.style.cursor = "col-resize";
      document.body.style.userSelect = "none";
      window.addEventListener("pointermove", onMove, { passive: true });
      window.addEventListener("pointerup", onUp);
      window.addEventListener("pointercancel", onUp);
    });
  }
'''
