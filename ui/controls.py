"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • banner                  – transient success / error message
  • playback_controls       – play/next/prev/reset wired to /api/<page>/*
  • algorithm_selector      – dropdown + array (+ target) inputs + run
  • algorithm_info          – complexity card for the selected algorithm
  • analytics_panel         – comparisons, swaps, steps, result
  • explanation_panel       – the current step's description
  • history_panel           – last N operations, newest first
  • session_list            – past runs with load / delete
  • create_session_form     – type picker (+ capacity / custom id)
  • value_form, action_button – one structure operation each
  • structure_stats         – size / capacity / type card
  • dashboard_cards         – per-type counts and the merged session list

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Output is raw HTML strings; anything the user typed is escaped.
  - The route layer stitches them together.
"""

from html import escape
from typing import Iterable, List, Optional, Sequence

from algorithms import AlgoInfo
from engine import RunMetrics


# ---------------------------------------------------------------------------
# Banner
# ---------------------------------------------------------------------------
def banner(current=None) -> str:
    if current is None:
        return '<div id="banner"></div>'
    icon = "⚠️" if current.is_error else "✅"
    return (
        f'<div id="banner" class="banner {current.kind}" role="alert">'
        f'{icon} {escape(current.text)}</div>'
    )


def field_error(errors: dict, name: str) -> str:
    if name not in errors:
        return ""
    return f'<p class="field-error">{escape(errors[name])}</p>'


# ---------------------------------------------------------------------------
# Playback Controls
# ---------------------------------------------------------------------------
def playback_controls(
    api_prefix: str,
    is_playing: bool = False,
    current_step: int = 0,
    total_steps: int = 0,
    autoplay: bool = False,
) -> str:
    disabled = "disabled" if total_steps == 0 else ""
    shown = current_step + 1 if total_steps else 0
    finished = total_steps > 0 and not is_playing and current_step == total_steps - 1

    return f"""
    <div class="panel playback-controls" data-api="{api_prefix}" data-autoplay="{1 if autoplay else 0}">
      <h3>⏯ Playback</h3>
      <div class="button-row">
        <button id="btn-reset" title="Back to first step" {disabled}>⏮</button>
        <button id="btn-prev" title="Previous step" {disabled}>◀</button>
        <button id="btn-play" title="Play" {disabled}>▶ Play</button>
        <button id="btn-next" title="Next step" {disabled}>▶</button>
      </div>
      <div class="step-info">
        Step <span id="current-step">{shown}</span> / <span id="total-steps">{total_steps}</span>
        <span id="finished-badge" class="finished-badge" {'' if finished else 'hidden'}>FINISHED</span>
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm Selector
# ---------------------------------------------------------------------------
def algorithm_selector(
    algorithms: List[AlgoInfo],
    selected_key: str,
    action: str,
    array_input: str = "",
    target_input: Optional[str] = None,
    max_size: int = 15,
) -> str:
    options = []
    for algo in algorithms:
        sel = 'selected' if algo.key == selected_key else ''
        options.append(
            f'<option value="{algo.key}" {sel}>{algo.label} — {algo.time_average}</option>'
        )

    target_block = ""
    if target_input is not None:
        target_block = f"""
        <label for="target">Target</label>
        <input type="text" id="target" name="target" value="{escape(target_input)}">
        """

    return f"""
    <div class="panel algorithm-selector">
      <h3>🧠 Algorithm</h3>
      <form method="post" action="{action}/select">
        <select id="algo-selector" name="algorithm" onchange="this.form.submit()">
          {''.join(options)}
        </select>
      </form>
      <form method="post" action="{action}/run">
        <label for="array">Array (comma separated, max {max_size})</label>
        <input type="text" id="array" name="array" value="{escape(array_input)}">
        {target_block}
        <div class="button-row">
          <button type="submit" id="btn-run" class="btn-primary">▶ Run Algorithm</button>
          <button type="submit" formaction="{action}/random" class="btn-secondary">🎲 Random</button>
        </div>
      </form>
    </div>
    """


def algorithm_info(info: Optional[AlgoInfo]) -> str:
    if info is None:
        return ""
    return f"""
    <div class="panel algorithm-info">
      <h3>📘 {info.label}</h3>
      <p class="explanation-text">{info.description}</p>
      <table>
        <tr><td>Best:</td><td>{info.time_best}</td></tr>
        <tr><td>Average:</td><td>{info.time_average}</td></tr>
        <tr><td>Worst:</td><td>{info.time_worst}</td></tr>
        <tr><td>Space:</td><td>{info.complexity_space}</td></tr>
        <tr><td>Requirements:</td><td>{info.requirements}</td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Analytics Panel
# ---------------------------------------------------------------------------
def analytics_panel(metrics: Optional[RunMetrics] = None) -> str:
    if not metrics:
        return """
        <div class="panel analytics-panel">
          <h3>📊 Analytics</h3>
          <p class="placeholder">Run an algorithm to see metrics.</p>
        </div>
        """

    if metrics.is_search:
        result = f"✅ Index {metrics.found_index}" if metrics.found else "❌ Not Found"
        rows = f"""
        <tr><td>Target:</td><td><strong>{metrics.target}</strong></td></tr>
        <tr><td>Comparisons:</td><td><strong>{metrics.comparisons}</strong></td></tr>
        <tr><td>Result:</td><td><strong>{result}</strong></td></tr>
        """
    else:
        rows = f"""
        <tr><td>Comparisons:</td><td><strong>{metrics.comparisons}</strong></td></tr>
        <tr><td>Swaps:</td><td><strong>{metrics.swaps}</strong></td></tr>
        """

    return f"""
    <div class="panel analytics-panel">
      <h3>📊 Analytics — {metrics.algo_label}</h3>
      <table>
        <tr><td>Array Size:</td><td><strong>{metrics.array_size}</strong></td></tr>
        {rows}
        <tr><td>Total Steps:</td><td><strong>{metrics.total_steps}</strong></td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Explanation Panel
# ---------------------------------------------------------------------------
def explanation_panel(explanation: str = "") -> str:
    if not explanation:
        return ('<div class="explanation-text">▶ Click <strong>Run Algorithm</strong> to see '
                'a plain-English note for every step.</div>')
    return f'<div class="explanation-text">{escape(explanation)}</div>'


# ---------------------------------------------------------------------------
# History
# ---------------------------------------------------------------------------
def history_panel(entries: Sequence) -> str:
    if not entries:
        return """
        <div class="panel history-panel">
          <h3>🕘 History</h3>
          <p class="placeholder">No operations yet.</p>
        </div>
        """
    rows = []
    for entry in entries:
        operand = f" ({escape(entry.operand)})" if entry.operand is not None else ""
        mark = "✅" if entry.success else "❌"
        rows.append(f'<li>{mark} <strong>{escape(entry.operation)}</strong>{operand}</li>')
    return f"""
    <div class="panel history-panel">
      <h3>🕘 History</h3>
      <ul class="history">{''.join(rows)}</ul>
    </div>
    """


# ---------------------------------------------------------------------------
# Past sessions
# ---------------------------------------------------------------------------
def session_list(sessions: Sequence, page_key: str, current_id: Optional[str] = None) -> str:
    if not sessions:
        return """
        <div class="panel session-list">
          <h3>🗂 Past Sessions</h3>
          <p class="placeholder">No saved sessions.</p>
        </div>
        """
    rows = []
    for s in sessions:
        sid = escape(s.session_id)
        active = "active" if s.session_id == current_id else ""
        values = ", ".join(str(v) for v in (s.original_array or s.array))
        rows.append(f"""
        <li class="{active}">
          <a href="/{page_key}/{sid}">{escape(s.algorithm)} · [{escape(values)}]</a>
          <form method="post" action="/{page_key}/sessions/{sid}/delete" class="inline">
            <button type="submit" class="btn-secondary" title="Delete">🗑</button>
          </form>
        </li>""")
    return f"""
    <div class="panel session-list">
      <h3>🗂 Past Sessions</h3>
      <ul class="sessions">{''.join(rows)}</ul>
    </div>
    """


# ---------------------------------------------------------------------------
# Structure forms
# ---------------------------------------------------------------------------
def create_session_form(page_key: str, kinds: Iterable[str], with_capacity: bool) -> str:
    options = "".join(f'<option value="{k}">{k.title()}</option>' for k in kinds)
    capacity = ""
    if with_capacity:
        capacity = """
        <label for="max_size">Max size (static only)</label>
        <input type="number" id="max_size" name="max_size" min="1">
        """
    return f"""
    <div class="panel create-session">
      <h3>➕ New Session</h3>
      <form method="post" action="/{page_key}/create">
        <label for="kind">Type</label>
        <select id="kind" name="kind">{options}</select>
        {capacity}
        <label for="session_id">Custom session ID (optional)</label>
        <input type="text" id="session_id" name="session_id">
        <button type="submit" class="btn-primary">Create</button>
      </form>
      <form method="get" action="/{page_key}">
        <label for="load_id">Or load an existing session</label>
        <input type="text" id="load_id" name="sessionId">
        <button type="submit" class="btn-secondary">Load</button>
      </form>
    </div>
    """


def value_form(action: str, button: str, with_value: bool = True, with_index: bool = False,
               placeholder: str = "Value") -> str:
    inputs = []
    if with_value:
        inputs.append(f'<input type="text" name="value" placeholder="{placeholder}">')
    if with_index:
        inputs.append('<input type="number" name="index" min="0" placeholder="Index">')
    return f"""
      <form method="post" action="{action}" class="op-form">
        {''.join(inputs)}
        <button type="submit">{button}</button>
      </form>
    """


def action_button(action: str, button: str, css: str = "btn-secondary") -> str:
    return f"""
      <form method="post" action="{action}" class="inline">
        <button type="submit" class="{css}">{button}</button>
      </form>
    """


def structure_stats(session, label: str, extra: Optional[dict] = None) -> str:
    if session is None:
        return ""
    capacity = session.max_size if session.max_size is not None else "∞"
    rows = [
        f'<tr><td>Session:</td><td>{escape(session.session_id)}</td></tr>',
        f'<tr><td>Type:</td><td>{escape(session.type)}</td></tr>',
        f'<tr><td>Size:</td><td>{len(session.elements)}</td></tr>',
        f'<tr><td>Capacity:</td><td>{capacity}</td></tr>',
    ]
    for key, value in (extra or {}).items():
        shown = "—" if value is None else escape(str(value))
        rows.append(f'<tr><td>{key}:</td><td>{shown}</td></tr>')
    return f"""
    <div class="panel structure-stats">
      <h3>📊 {label}</h3>
      <table>{''.join(rows)}</table>
    </div>
    """


# ---------------------------------------------------------------------------
# Dashboard
# ---------------------------------------------------------------------------
TYPE_LABELS = {
    "linkedlist": ("🔗", "Linked List"),
    "stack":      ("📚", "Stack"),
    "queue":      ("🚶", "Queue"),
    "sorting":    ("📶", "Sorting"),
    "searching":  ("🔍", "Searching"),
}


def dashboard_cards(counts: dict) -> str:
    cards = []
    for key, (icon, label) in TYPE_LABELS.items():
        cards.append(f"""
        <a class="panel card" href="/{key}">
          <h3>{icon} {label}</h3>
          <div class="count">{counts.get(key, 0)}</div>
          <p class="hint">Open visualizer →</p>
        </a>""")
    return f'<div class="cards">{"".join(cards)}</div>'


def dashboard_sessions(sessions: Sequence) -> str:
    if not sessions:
        return """
        <div class="panel">
          <h3>🗂 Recent Sessions</h3>
          <p class="placeholder">No sessions yet. Pick a visualizer to get started.</p>
        </div>
        """
    rows = []
    for s in sessions:
        icon, label = TYPE_LABELS.get(s.type, ("•", s.type))
        when = escape(s.updated_at or s.created_at or "")
        rows.append(
            f'<tr><td>{icon} {label}</td>'
            f'<td><a href="{escape(s.href)}">{escape(s.name)}</a></td>'
            f'<td>{escape(s.detail)}</td><td>{s.size}</td><td>{when}</td></tr>'
        )
    return f"""
    <div class="panel">
      <h3>🗂 Recent Sessions</h3>
      <table class="dashboard-table">
        <thead><tr><th>Type</th><th>Session</th><th>Detail</th><th>Size</th><th>Updated</th></tr></thead>
        <tbody>{''.join(rows)}</tbody>
      </table>
    </div>
    """
