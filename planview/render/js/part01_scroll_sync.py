# planview/render/js/part01_scroll_sync.py
from __future__ import annotations

JS_PART = r'''// Scroll lock-step (header / scrollbar proxy / bar content)
  // -----------------------------
  // idle -> propagating on a scroll event, peers copied on the next frame,
  // back to idle. Programmatic assignments are remembered per region so the
  // scroll event they cause is consumed instead of starting another pass.
  const ECHO_TOLERANCE_PX = 1;

  function makeScrollSync(regions) {
    let state = "idle";
    const echo = new Map();

    function live() {
      return regions.filter(el => el && el.isConnected);
    }

    function assign(el, value) {
      if (Math.abs(el.scrollLeft - value) < ECHO_TOLERANCE_PX) return;
      echo.set(el, value);
      el.scrollLeft = value;
    }

    function onScroll(ev) {
      const src = ev.currentTarget;
      if (!src || !src.isConnected) return;
      if (echo.has(src)) {
        const expected = echo.get(src);
        echo.delete(src);
        if (Math.abs(src.scrollLeft - expected) < ECHO_TOLERANCE_PX) return;
      }
      if (state !== "idle") return;
      state = "propagating";
      requestAnimationFrame(() => {
        try {
          if (!src.isConnected) return;
          const value = src.scrollLeft;
          for (const el of live()) {
            if (el !== src) assign(el, value);
          }
        } finally {
          state = "idle";
        }
      });
    }

    for (const el of regions) {
      if (el) el.addEventListener("scroll", onScroll, { passive: true });
    }

    return {
      scrollAllTo(left) {
        for (const el of live()) assign(el, left);
      },
      scrollToFraction(fraction, ref) {
        if (!ref || !ref.isConnected) return;
        const max = Math.max(0, ref.scrollWidth - ref.clientWidth);
        const target = Math.max(0, Math.min(1, fraction)) * max;
        for (const el of live()) assign(el, target);
      }
    };
  }

  // Row labels follow the bar area vertically, and the other way round.
  function linkVerticalScroll(a, b) {
    if (!a || !b) return;
    let busy = false;
    const follow = (src, dst) => () => {
      if (busy) return;
      busy = true;
      dst.scrollTop = src.scrollTop;
      requestAnimationFrame(() => { busy = false; });
    };
    a.addEventListener("scroll", follow(a, b), { passive: true });
    b.addEventListener("scroll", follow(b, a), { passive: true });
  }
'''
