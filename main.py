"""
main.py — Inorder Traversal Visualizer Flask App
=================================================
The web server that powers the visualizer.

Routes:
  GET  /                       – main UI
  GET  /api/state              – current state + rendered fragments
  POST /api/step/next          – advance one step (no-op when complete)
  POST /api/step/reset         – back to "not started"
  POST /api/step/play          – toggle auto-play
  POST /api/step/tick          – timer callback while auto-playing
  POST /api/tree/generate      – new random tree
  POST /api/tree/sample        – back to the fixed sample tree
  POST /api/theme/toggle       – light ↔ dark

State management:
  The whole Visualizer (tree, plan, cursor, playing flag, theme, epoch)
  is serialised into the Flask session after every request.  The browser
  owns the auto-play timer: one setTimeout handle, cleared before every
  state-changing request and re-armed only while the server reports
  that playback is still on.

Stale ticks:
  A tick carries the playback epoch it was scheduled under.  The server
  also remembers the epoch it last saved for each session id, so a tick
  that arrives with an outdated session cookie is refused as well.
  Refused ticks answer 409 and leave the session cookie untouched.
"""

from collections import OrderedDict
from flask import Flask, render_template_string, request, jsonify, session
import logging
import secrets
import threading
import sys
import os

# add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config import Settings, load_settings
from algorithms import PSEUDOCODE, start_hint
from engine import Visualizer
from ui import (
    render_tree,
    get_theme,
    theme_css,
    playback_controls,
    theme_toggle,
    legend,
    result_panel,
    step_description,
    pseudocode_viewer,
)

logger = logging.getLogger(__name__)

SESSION_KEY = "visualizer"
SID_KEY = "sid"

# latest saved epoch per session id, oldest sessions evicted first
MAX_TRACKED_SESSIONS = 4096
_latest_epochs: "OrderedDict[str, int]" = OrderedDict()
_epochs_lock = threading.Lock()

app = Flask(__name__)


def configure_app(settings: Settings) -> Flask:
    """Apply settings to the module-level app."""
    app.secret_key = settings.secret_key
    app.config["SETTINGS"] = settings
    return app


configure_app(load_settings())


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_settings() -> Settings:
    return app.config["SETTINGS"]


def get_visualizer() -> Visualizer:
    """Deserialise the visualizer from session, or create the sample one."""
    delay = get_settings().step_delay
    data = session.get(SESSION_KEY)
    if data is None:
        session.pop(SID_KEY, None)
        return Visualizer.sample(delay=delay)
    try:
        return Visualizer.from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        logger.warning("Discarding unreadable session state: %s", e)
        # a fresh visualizer starts a new epoch sequence
        session.pop(SID_KEY, None)
        return Visualizer.sample(delay=delay)


def save_visualizer(vis: Visualizer) -> None:
    sid = session.get(SID_KEY)
    if not isinstance(sid, str):
        sid = secrets.token_hex(8)
        session[SID_KEY] = sid
    session[SESSION_KEY] = vis.to_dict()

    with _epochs_lock:
        _latest_epochs[sid] = vis.epoch
        _latest_epochs.move_to_end(sid)
        while len(_latest_epochs) > MAX_TRACKED_SESSIONS:
            _latest_epochs.popitem(last=False)


def is_stale_tick(vis: Visualizer, epoch: int) -> bool:
    """
    True when the tick was scheduled under another epoch, or when the
    session cookie is older than the last state saved for it.
    """
    if epoch != vis.epoch:
        return True
    sid = session.get(SID_KEY)
    with _epochs_lock:
        latest = _latest_epochs.get(sid)
    return latest is not None and latest != vis.epoch


def describe(vis: Visualizer) -> str:
    step = vis.stepper.current_step
    if step is None:
        return start_hint(vis.tree)
    return step.explanation


def state_payload(vis: Visualizer) -> dict:
    """Everything the page needs to redraw itself."""
    theme = get_theme(vis.theme)
    step = vis.stepper.current_step
    return {
        "svg":          render_tree(vis.tree, vis.visited, theme),
        "playback":     playback_controls(
            is_playing=vis.is_playing,
            current_step=vis.cursor,
            total_steps=vis.stepper.total_steps,
            is_finished=vis.stepper.is_complete,
        ),
        "result_html":  result_panel(vis.result),
        "description":  step_description(describe(vis)),
        "pseudocode":   pseudocode_viewer(PSEUDOCODE, step.pseudocode_line if step else -1),
        "theme_toggle": theme_toggle(vis.is_dark),
        "theme_css":    theme_css(theme),
        "theme":        vis.theme,
        "state":        vis.state.value,
        "current_step": vis.cursor,
        "total_steps":  vis.stepper.total_steps,
        "is_playing":   vis.is_playing,
        "is_complete":  vis.stepper.is_complete,
        "result":       list(vis.result),
        "visited":      sorted(vis.visited),
        "delay_ms":     get_settings().step_delay_ms,
        "epoch":        vis.epoch,
    }


def respond(vis: Visualizer):
    save_visualizer(vis)
    return jsonify(state_payload(vis))


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    vis = get_visualizer()
    save_visualizer(vis)
    payload = state_payload(vis)

    html = render_template_string(INDEX_TEMPLATE,
        theme_css=payload["theme_css"],
        theme_toggle=payload["theme_toggle"],
        svg=payload["svg"],
        playback=payload["playback"],
        legend=legend(),
        result=payload["result_html"],
        description=payload["description"],
        pseudocode=payload["pseudocode"],
        is_playing="true" if vis.is_playing else "false",
        epoch=vis.epoch,
        delay_ms=payload["delay_ms"],
    )
    return html


@app.route("/api/state")
def api_state():
    return respond(get_visualizer())


# ---------------------------------------------------------------------------
# API: Step Navigation
# ---------------------------------------------------------------------------
@app.route("/api/step/next", methods=["POST"])
def api_step_next():
    vis = get_visualizer()
    vis.advance()
    return respond(vis)


@app.route("/api/step/reset", methods=["POST"])
def api_step_reset():
    vis = get_visualizer()
    vis.reset()
    return respond(vis)


@app.route("/api/step/play", methods=["POST"])
def api_step_play():
    vis = get_visualizer()
    vis.toggle_play()
    return respond(vis)


@app.route("/api/step/tick", methods=["POST"])
def api_step_tick():
    data = request.get_json(silent=True)
    epoch = data.get("epoch") if isinstance(data, dict) else None
    if isinstance(epoch, bool) or not isinstance(epoch, int):
        return jsonify({"error": "epoch must be an integer"}), 400

    vis = get_visualizer()
    if is_stale_tick(vis, epoch):
        logger.info("Refused stale tick (epoch %d, current %d)", epoch, vis.epoch)
        return jsonify({"error": "stale tick", "stale": True}), 409

    vis.fire(epoch)
    return respond(vis)


# ---------------------------------------------------------------------------
# API: Tree Generation
# ---------------------------------------------------------------------------
@app.route("/api/tree/generate", methods=["POST"])
def api_tree_generate():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    seed = data.get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        return jsonify({"error": "seed must be an integer"}), 400

    vis = get_visualizer()
    vis.regenerate(seed=seed)
    return respond(vis)


@app.route("/api/tree/sample", methods=["POST"])
def api_tree_sample():
    vis = get_visualizer()
    vis.load_sample()
    return respond(vis)


# ---------------------------------------------------------------------------
# API: Theme
# ---------------------------------------------------------------------------
@app.route("/api/theme/toggle", methods=["POST"])
def api_theme_toggle():
    vis = get_visualizer()
    vis.toggle_theme()
    return respond(vis)


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Inorder Traversal</title>
  <style id="theme-vars">{{ theme_css|safe }}</style>
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    body {
      font-family: system-ui, -apple-system, 'Segoe UI', sans-serif;
      background: var(--page-bg);
      color: var(--page-text);
      min-height: 100vh;
      padding: 8px;
      transition: background 0.3s, color 0.3s;
    }

    .card {
      background: var(--card-bg);
      border: 1px solid var(--card-border);
      border-radius: 12px;
      padding: 16px;
      position: relative;
      transition: background 0.3s, border-color 0.3s;
    }

    .card h1 {
      font-size: 18px;
      font-weight: 700;
      text-align: center;
      margin-bottom: 12px;
    }

    #theme-toggle { position: absolute; top: 8px; right: 8px; }

    /* Buttons */
    .button-row {
      display: flex;
      flex-wrap: wrap;
      justify-content: center;
      gap: 12px;
      margin-bottom: 12px;
    }

    button {
      padding: 8px 14px;
      border-radius: 8px;
      cursor: pointer;
      font-size: 13px;
      font-weight: 600;
      border: 1px solid var(--card-border);
      background: var(--card-bg);
      color: var(--page-text);
      transition: all 0.2s ease;
    }

    button:disabled { opacity: 0.5; cursor: not-allowed; }
    .btn-primary { background: #111827; color: #fff; border-color: #111827; }
    .btn-danger  { background: #dc2626; color: #fff; border-color: #dc2626; }
    .btn-ghost   { border: none; background: transparent; font-size: 16px; }

    .step-info {
      text-align: center;
      font-size: 13px;
      font-family: ui-monospace, monospace;
      margin-bottom: 12px;
    }

    .finished-badge {
      background: var(--visited-fill);
      color: #fff;
      padding: 2px 8px;
      border-radius: 6px;
      font-size: 11px;
      font-weight: 700;
    }

    /* Canvas */
    #canvas-container {
      background: var(--canvas-bg);
      border-radius: 8px;
      padding: 12px;
      margin-bottom: 12px;
      overflow-x: auto;
    }
    #canvas-svg svg { min-width: 600px; display: block; margin: 0 auto; }
    .node circle { transition: fill 0.3s, stroke 0.3s; }

    /* Legend */
    .legend { display: flex; justify-content: center; gap: 24px; margin-bottom: 12px; font-size: 14px; }
    .legend-item { display: flex; align-items: center; gap: 8px; }
    .swatch { width: 16px; height: 16px; border-radius: 50%; border: 2px solid; display: inline-block; }
    .swatch-unvisited { background: var(--unvisited-fill); border-color: var(--unvisited-stroke); }
    .swatch-visited   { background: var(--visited-fill); border-color: var(--visited-stroke); }

    /* Result */
    .result-panel {
      background: var(--result-bg);
      border: 1px solid var(--result-border);
      border-radius: 8px;
      padding: 12px;
      margin-bottom: 12px;
    }
    .result-panel h3 { color: var(--result-heading); font-size: 15px; margin-bottom: 8px; }
    .badges { display: flex; flex-wrap: wrap; gap: 8px; }
    .badge {
      background: var(--badge-bg);
      color: var(--badge-text);
      font-size: 18px;
      padding: 4px 12px;
      border-radius: 6px;
    }
    .placeholder { color: var(--muted-text); }

    /* Step description + pseudocode */
    #bottom-panel { display: grid; grid-template-columns: 1fr 1fr; gap: 12px; }
    .explanation-text { font-size: 14px; line-height: 1.6; }
    .code-block { font-family: ui-monospace, monospace; font-size: 13px; line-height: 1.6; }
    .code-line { padding: 2px 8px; border-radius: 4px; }
    .code-line.highlight { background: rgba(34, 197, 94, 0.2); border-left: 3px solid var(--visited-fill); }
  </style>
</head>
<body>
  <div class="card">
    <h1>Inorder Traversal</h1>
    <div id="theme-toggle">{{ theme_toggle|safe }}</div>
    <div id="playback">{{ playback|safe }}</div>

    <div id="canvas-container">
      <div id="canvas-svg">{{ svg|safe }}</div>
    </div>

    {{ legend|safe }}

    <div id="result">{{ result|safe }}</div>

    <div id="bottom-panel">
      <div id="description">{{ description|safe }}</div>
      <div id="pseudocode">{{ pseudocode|safe }}</div>
    </div>
  </div>

  <script>
    let timer = null;
    let delayMs = {{ delay_ms }};
    let epoch = {{ epoch }};
    let latestSeq = 0;
    let queue = Promise.resolve();

    function clearTimer() {
      if (timer !== null) {
        clearTimeout(timer);
        timer = null;
      }
    }

    function schedule(isPlaying) {
      clearTimer();
      if (isPlaying) {
        const scheduledEpoch = epoch;
        timer = setTimeout(() => send('/api/step/tick', {epoch: scheduledEpoch}), delayMs);
      }
    }

    function apply(data) {
      document.getElementById('theme-vars').textContent = data.theme_css;
      document.getElementById('theme-toggle').innerHTML = data.theme_toggle;
      document.getElementById('playback').innerHTML = data.playback;
      document.getElementById('canvas-svg').innerHTML = data.svg;
      document.getElementById('result').innerHTML = data.result_html;
      document.getElementById('description').innerHTML = data.description;
      document.getElementById('pseudocode').innerHTML = data.pseudocode;
      delayMs = data.delay_ms;
      epoch = data.epoch;
      schedule(data.is_playing);
    }

    // API helper: every state change cancels the pending tick first.
    // Requests run one at a time and only the newest response is drawn.
    function send(url, body) {
      clearTimer();
      const seq = ++latestSeq;
      queue = queue.then(async () => {
        const res = await fetch(url, {
          method: 'POST',
          headers: {'Content-Type': 'application/json'},
          body: JSON.stringify(body || {}),
        });
        const data = await res.json();
        if (seq !== latestSeq || data.stale) return;
        if (data.error) {
          console.error(data.error);
          return;
        }
        apply(data);
      }).catch((err) => console.error(err));
      return queue;
    }

    // buttons are re-rendered, so listen on the document
    document.addEventListener('click', (e) => {
      const btn = e.target.closest('button');
      if (!btn) return;
      switch (btn.id) {
        case 'btn-play':   send('/api/step/play'); break;
        case 'btn-next':   send('/api/step/next'); break;
        case 'btn-random': send('/api/tree/generate'); break;
        case 'btn-reset':  send('/api/step/reset'); break;
        case 'btn-theme':  send('/api/theme/toggle'); break;
      }
    });

    window.addEventListener('beforeunload', clearTimer);
    schedule({{ is_playing }});
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    print("=" * 60)
    print("  Inorder Traversal Visualizer")
    print("  Starting Flask server...")
    print(f"  Open http://{settings.host}:{settings.port}")
    print("=" * 60)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)
