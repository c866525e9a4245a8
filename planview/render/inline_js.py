# planview/render/inline_js.py
from __future__ import annotations

from .js.part01_scroll_sync import JS_PART as JS_01
from .js.part02_panel_resize import JS_PART as JS_02
from .js.part03_init import JS_PART as JS_03

_JS_PRELUDE = r'''(function () {
  "use strict";
  const DATA = JSON.parse(document.getElementById("pv-data").textContent || "{}");
  let panelWidth = (DATA.cfg && DATA.cfg.panel_width) || 400;
'''

_JS_EPILOGUE = r'''
})();'''

JS_BLOCK = "\n".join([
  _JS_PRELUDE, JS_01, JS_02, JS_03, _JS_EPILOGUE
])
