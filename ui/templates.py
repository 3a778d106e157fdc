"""
templates.py — Page shell
==========================
One Jinja layout rendered with ``render_template_string``.  Pages pass
pre-rendered panel HTML in; the shell adds the nav bar, the banner slot,
the theme and the playback driver script.

Visualizer pages fill ``sidebar``, ``canvas`` and ``explanation``; every
other page fills ``content``.

Playback driver:
  The browser owns the timer.  ``Play`` posts ``<api>/play``, shows the
  returned frame, waits ``delay_ms`` and posts ``<api>/tick``, repeating
  until the server answers ``playing: false``.  Next / prev / reset are one
  request each.
"""

LAYOUT_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{{ title }} · AlgoPulse</title>
  <link rel="preconnect" href="https://fonts.googleapis.com">
  <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
  <link href="https://fonts.googleapis.com/css2?family=JetBrains+Mono:wght@400;500;700&family=DM+Sans:wght@400;500;700&display=swap" rel="stylesheet">
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg-dark: #0d1117;
      --bg-darker: #010409;
      --bg-panel: #161b22;
      --bg-panel-hover: #1c2128;
      --border: #30363d;
      --border-bright: #484f58;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --text-muted: #484f58;
      --accent-cyan: #0ea5e9;
      --accent-teal: #06b6d4;
      --accent-emerald: #10b981;
      --accent-amber: #f59e0b;
      --accent-rose: #f43f5e;
      --accent-purple: #a855f7;
      --glow-cyan: rgba(14, 165, 233, 0.4);
    }

    body {
      font-family: 'DM Sans', -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      min-height: 100vh;
      display: flex;
      flex-direction: column;
    }

    a { color: var(--accent-cyan); text-decoration: none; }

    /* Nav */
    #nav {
      display: flex;
      align-items: center;
      gap: 18px;
      padding: 14px 24px;
      background: var(--bg-dark);
      border-bottom: 1px solid var(--border);
    }
    #nav .brand { font-weight: 700; font-size: 18px; color: var(--text-primary); margin-right: auto; }
    #nav a { color: var(--text-secondary); font-size: 14px; }
    #nav a:hover { color: var(--text-primary); }
    #nav .user { color: var(--text-muted); font-size: 13px; }

    /* Layout */
    #layout { flex: 1; display: flex; min-height: 0; }

    #sidebar {
      width: 340px;
      background: linear-gradient(180deg, var(--bg-dark) 0%, var(--bg-darker) 100%);
      border-right: 1px solid var(--border);
      overflow-y: auto;
      padding: 24px 16px;
    }

    #main { flex: 1; display: flex; flex-direction: column; }

    #canvas-container {
      flex: 1;
      background: radial-gradient(ellipse at top, rgba(6, 182, 212, 0.05) 0%, transparent 50%),
                  var(--bg-darker);
      display: flex;
      align-items: center;
      justify-content: center;
      border-bottom: 1px solid var(--border);
      padding: 24px;
    }
    #canvas-svg { width: 100%; }

    #bottom-panel {
      display: grid;
      grid-template-columns: 1fr 1fr;
      gap: 20px;
      padding: 20px;
      background: var(--bg-dark);
    }

    #content { flex: 1; padding: 32px; max-width: 1100px; margin: 0 auto; width: 100%; }

    /* Banner */
    .banner {
      margin: 12px 24px 0;
      padding: 12px 16px;
      border-radius: 8px;
      font-size: 14px;
      border: 1px solid var(--border);
    }
    .banner.success { background: rgba(16, 185, 129, 0.12); border-color: var(--accent-emerald); }
    .banner.error   { background: rgba(244, 63, 94, 0.12); border-color: var(--accent-rose); }

    /* Panels */
    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 18px;
      margin-bottom: 16px;
    }
    .panel h3 {
      font-size: 13px;
      font-weight: 700;
      margin-bottom: 14px;
      text-transform: uppercase;
      letter-spacing: 0.5px;
    }

    .explanation-text { color: var(--text-secondary); line-height: 1.8; font-size: 14px; }
    .explanation-text strong { color: var(--text-primary); }
    .placeholder, .hint { font-size: 12px; color: var(--text-muted); font-style: italic; }

    /* Buttons */
    .button-row { display: flex; gap: 8px; margin: 10px 0; flex-wrap: wrap; }
    button {
      background: linear-gradient(135deg, var(--accent-cyan), var(--accent-teal));
      color: #fff;
      border: none;
      padding: 10px 16px;
      border-radius: 8px;
      cursor: pointer;
      font-size: 13px;
      font-weight: 600;
      font-family: 'DM Sans', sans-serif;
    }
    button:disabled { opacity: 0.4; cursor: not-allowed; }
    .btn-primary { background: linear-gradient(135deg, var(--accent-emerald), #059669); }
    .btn-secondary { background: var(--bg-panel-hover); border: 1px solid var(--border); }
    form.inline { display: inline; }
    .op-form { display: flex; gap: 6px; margin: 6px 0; }
    .op-form input { flex: 1; }

    /* Inputs */
    select, input[type="text"], input[type="number"], input[type="email"], input[type="password"] {
      width: 100%;
      padding: 10px 12px;
      margin: 6px 0;
      background: var(--bg-darker);
      border: 1px solid var(--border);
      border-radius: 8px;
      color: var(--text-primary);
      font-size: 13px;
    }
    select:focus, input:focus { outline: none; border-color: var(--accent-cyan); box-shadow: 0 0 0 3px var(--glow-cyan); }
    label {
      display: block;
      margin: 10px 0 4px;
      font-size: 12px;
      color: var(--text-secondary);
      text-transform: uppercase;
      letter-spacing: 0.3px;
    }
    .field-error { color: var(--accent-rose); font-size: 12px; }

    /* Step info */
    .step-info {
      font-size: 13px;
      margin: 10px 0;
      color: var(--text-secondary);
      font-family: 'JetBrains Mono', monospace;
      padding: 8px 12px;
      background: var(--bg-darker);
      border-radius: 6px;
      border-left: 3px solid var(--accent-cyan);
    }
    .finished-badge {
      background: linear-gradient(135deg, var(--accent-emerald), #059669);
      color: #fff;
      padding: 4px 10px;
      border-radius: 6px;
      font-size: 11px;
      font-weight: 700;
    }

    /* Tables / lists */
    table { width: 100%; font-size: 13px; border-collapse: separate; border-spacing: 0 4px; }
    table td, table th { padding: 8px 4px; text-align: left; }
    table td:first-child { color: var(--text-secondary); }
    .history, .sessions { list-style: none; font-size: 13px; }
    .history li, .sessions li { padding: 6px 0; border-bottom: 1px solid var(--border); }
    .sessions li.active a { color: var(--accent-emerald); }

    /* Dashboard / landing */
    .cards { display: grid; grid-template-columns: repeat(auto-fill, minmax(180px, 1fr)); gap: 16px; margin-bottom: 24px; }
    .card { color: var(--text-primary); display: block; }
    .card .count { font-size: 32px; font-weight: 700; color: var(--accent-cyan); }
    .hero { text-align: center; padding: 48px 0; }
    .hero h1 { font-size: 42px; margin-bottom: 12px; }
    .auth-box { max-width: 420px; margin: 48px auto; }

    .legend { display: flex; gap: 14px; font-size: 12px; color: var(--text-secondary); margin-top: 12px; }
    .swatch { display: inline-block; width: 12px; height: 12px; border-radius: 3px; margin-right: 6px; vertical-align: middle; }
  </style>
</head>
<body>
  <div id="nav">
    <a class="brand" href="/">⚡ AlgoPulse</a>
    {% if user %}
      <a href="/dashboard">Dashboard</a>
      <a href="/linkedlist">Linked List</a>
      <a href="/stack">Stack</a>
      <a href="/queue">Queue</a>
      <a href="/sorting">Sorting</a>
      <a href="/searching">Searching</a>
      <span class="user">{{ user.username }}</span>
      <a href="/logout">Sign out</a>
    {% else %}
      <a href="/signin">Sign in</a>
      <a href="/signup">Sign up</a>
    {% endif %}
  </div>

  {{ banner|safe }}

  {% if content %}
  <div id="content">{{ content|safe }}</div>
  {% else %}
  <div id="layout">
    <div id="sidebar">{{ sidebar|safe }}</div>
    <div id="main">
      <div id="canvas-container">
        <div id="canvas-svg">{{ canvas|safe }}</div>
      </div>
      <div id="bottom-panel">
        <div class="panel">
          <h3>💡 Step Explanation</h3>
          <div id="explanation">{{ explanation|safe }}</div>
        </div>
        <div>{{ aside|safe }}</div>
      </div>
    </div>
  </div>
  {% endif %}

  <script>
    const banner = document.querySelector('.banner');
    if (banner) setTimeout(() => banner.remove(), {{ message_ttl_ms }});

    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data || {}),
      });
      if (res.status === 401) { window.location = '/signin'; return null; }
      return await res.json();
    }

    const controls = document.querySelector('.playback-controls');
    if (controls) {
      const api = controls.dataset.api;
      let timer = null;

      function show(data) {
        if (!data) return;
        if (data.svg) document.getElementById('canvas-svg').innerHTML = data.svg;
        if (data.explanation !== undefined) document.getElementById('explanation').innerHTML = data.explanation;
        document.getElementById('current-step').textContent = data.total ? data.cursor + 1 : 0;
        document.getElementById('total-steps').textContent = data.total;
        document.getElementById('finished-badge').hidden = !data.finished;
      }

      async function tick() {
        const data = await post(api + '/tick');
        show(data);
        if (data && data.playing) timer = setTimeout(tick, data.delay_ms);
        else timer = null;
      }

      async function play() {
        if (timer) return;
        const data = await post(api + '/play');
        show(data);
        if (data && data.playing) timer = setTimeout(tick, data.delay_ms);
      }

      async function once(action) {
        if (timer) { clearTimeout(timer); timer = null; }
        show(await post(api + '/' + action));
      }

      document.getElementById('btn-play')?.addEventListener('click', play);
      document.getElementById('btn-next')?.addEventListener('click', () => once('next'));
      document.getElementById('btn-prev')?.addEventListener('click', () => once('prev'));
      document.getElementById('btn-reset')?.addEventListener('click', () => once('reset'));

      if (controls.dataset.autoplay === '1') play();
    }
  </script>
</body>
</html>
"""
