from __future__ import annotations
from flask import Flask, request, jsonify, Response
from linefinder.engine import Engine
from linefinder.errors import EmptyIndexError

app = Flask(__name__)
_engine: Engine | None = None


def attach(engine: Engine) -> None:
    """Serve queries from an already built engine."""
    global _engine
    _engine = engine


# ---------- API ----------
@app.get("/api/find")
def api_find():
    # an empty query is valid; only a missing parameter is rejected
    q = request.args.get("q", None, type=str)
    if q is None:
        return jsonify({"error": "missing query parameter 'q'"}), 400
    if _engine is None or _engine.index is None:
        return jsonify({"error": "no document loaded"}), 503
    try:
        result = _engine.find(q)
    except EmptyIndexError as e:
        return jsonify({"error": str(e)}), 422
    return jsonify(result.as_dict())


@app.get("/health")
def health():
    if _engine is None or _engine.index is None:
        return jsonify({"ok": True, "lines": 0, "source": None})
    return jsonify({"ok": True, "lines": len(_engine.index), "source": _engine.source})


# ---------- UI ----------
@app.get("/")
def home():
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Line Finder</title>
<style>
body{ margin:24px auto; max-width:760px; padding:0 16px;
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,Arial; }
input{ width:70%; padding:10px 12px; font-size:16px }
.small{ color:#667; font-variant-numeric:tabular-nums }
</style>
</head>
<body>
  <h1>Line Finder</h1>
  <form id="f">
    <input id="q" type="text" placeholder="Words you remember…" autocomplete="off" autofocus />
    <button type="submit">Find</button>
  </form>
  <p id="out" class="small">Type a few words and press Find.</p>
<script>
const q = document.querySelector("#q"), out = document.querySelector("#out");
document.querySelector("#f").addEventListener("submit", async (ev) => {
  ev.preventDefault();
  if(!q.value.trim()) return;
  try{
    const resp = await fetch(`/api/find?q=${encodeURIComponent(q.value)}`);
    const data = await resp.json();
    if(!resp.ok) throw new Error(data.error || `HTTP ${resp.status}`);
    out.textContent = `Line ${data.line_no} (score ${data.score.toFixed(3)}): ${data.line}`;
  }catch(e){
    out.textContent = `Error: ${e.message ?? e}`;
  }
});
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")
