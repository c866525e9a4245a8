# planview/render/js/part03_init.py
from __future__ import annotations

JS_PART = r'''// Controls / init
  // -----------------------------
  function showView(name) {
    for (const sec of document.querySelectorAll(".pv-view")) {
      sec.classList.toggle("active", sec.dataset.view === name);
    }
    for (const btn of document.querySelectorAll(".pv-views button")) {
      btn.classList.toggle("active", btn.dataset.view === name);
    }
  }

  function filterProject(projectId) {
    for (const el of document.querySelectorAll("[data-project]")) {
      el.style.display = (!projectId || el.dataset.project === projectId) ? "" : "none";
    }
  }

  for (const btn of document.querySelectorAll(".pv-views button")) {
    btn.addEventListener("click", () => showView(btn.dataset.view));
  }

  const sel = document.getElementById("pv-project");
  if (sel) sel.addEventListener("change", () => filterProject(sel.value));

  for (const btn of document.querySelectorAll("[data-close]")) {
    btn.addEventListener("click", () => {
      const root = document.querySelector(".pv-root");
      if (root) root.remove();
    });
  }

  for (const sec of document.querySelectorAll(".pv-view")) {
    const axis = sec.querySelector(".pv-axis");
    const bar = sec.querySelector(".pv-scrollbar");
    const content = sec.querySelector(".pv-content");
    const sync = makeScrollSync([axis, bar, content]);
    linkVerticalScroll(sec.querySelector(".pv-panel-body"), content);
    for (const b of sec.querySelectorAll(".pv-bar[data-scroll]")) {
      b.addEventListener("click", (ev) => {
        ev.stopPropagation();
        sync.scrollToFraction(parseFloat(b.dataset.scroll), content);
      });
    }
    bindResize(sec.querySelector(".pv-resize"), sec.querySelector(".pv-panel"));
  }

  applyPanelWidth(panelWidth);
  if (DATA.cfg && DATA.cfg.project_id) {
    if (sel) sel.value = DATA.cfg.project_id;
    filterProject(DATA.cfg.project_id);
  }
'''
