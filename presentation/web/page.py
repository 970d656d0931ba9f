"""Browser presenter: a static page that polls the leaderboard endpoint."""
from string import Template

_PAGE = Template("""<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>LoL Leaderboard</title>
<style>
  body { margin: 0; background: #0a0a0a; color: #f5f5f5; font-family: system-ui, sans-serif; }
  main { max-width: 72rem; margin: 0 auto; padding: 2rem 1rem; }
  table { width: 100%; border-collapse: collapse; border: 1px solid #262626; border-radius: 1rem; }
  th { text-align: left; padding: .75rem 1rem; font-size: .75rem; text-transform: uppercase; color: #a3a3a3; background: #171717; }
  td { padding: .75rem 1rem; border-top: 1px solid #262626; }
  .num { text-align: right; }
  .win { color: #34d399; font-weight: 600; }
  .loss { color: #fb7185; font-weight: 600; }
  .muted { color: #a3a3a3; text-align: center; }
  .error { color: #fb7185; text-align: center; }
  img { width: 36px; height: 36px; border-radius: 50%; vertical-align: middle; margin-right: .75rem; }
  a { color: #818cf8; }
</style>
</head>
<body>
<main>
  <h1>LoL Leaderboard</h1>
  <table>
    <thead><tr>
      <th>#</th><th>Player</th><th>Account</th><th>Rank</th>
      <th class="num">Games</th><th class="num">W</th><th class="num">L</th>
      <th class="num">WR</th><th class="num">OP.GG</th>
    </tr></thead>
    <tbody id="rows"><tr><td colspan="9" class="muted">Loading…</td></tr></tbody>
  </table>
</main>
<script>
const ENDPOINT = "$endpoint";
const REFRESH_MS = $refresh_ms;

function esc(s) {
  return String(s ?? "").replace(/[&<>"']/g, c => ({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;","'":"&#39;"}[c]));
}

function winRate(p) {
  return p.games > 0 ? Math.round((p.wins / p.games) * 100) : 0;
}

function row(p) {
  const account = p.tagLine ? esc(p.gameName) + "#" + esc(p.tagLine) : "—";
  const link = p.opggUrl ? '<a href="' + esc(p.opggUrl) + '" target="_blank" rel="noreferrer">OP.GG</a>' : "—";
  return "<tr>" +
    "<td>" + esc(p.rank) + "</td>" +
    '<td><img src="' + esc(p.avatarUrl) + '" alt="">' + esc(p.gameName) + "</td>" +
    "<td>" + account + "</td>" +
    "<td>" + esc(p.tier) + " (" + esc(p.lp) + " LP)</td>" +
    '<td class="num">' + esc(p.games) + "</td>" +
    '<td class="num win">' + esc(p.wins) + "</td>" +
    '<td class="num loss">' + esc(p.losses) + "</td>" +
    '<td class="num">' + winRate(p) + "%</td>" +
    '<td class="num">' + link + "</td></tr>";
}

function show(html) { document.getElementById("rows").innerHTML = html; }

async function refresh() {
  try {
    const res = await fetch(ENDPOINT, { cache: "no-store" });
    const data = await res.json();
    if (!Array.isArray(data)) throw new Error(data && data.error ? data.error : "API did not return a list");
    show([...data].sort((a, b) => a.rank - b.rank).map(row).join(""));
  } catch (err) {
    show('<tr><td colspan="9" class="error">Error: ' + esc(err.message) + "</td></tr>");
  }
}

refresh();
setInterval(refresh, REFRESH_MS);
window.addEventListener("focus", refresh);
</script>
</body>
</html>
""")


def render_page(endpoint: str = "/api/leaderboard", refresh_interval_s: int = 20) -> str:
    return _PAGE.substitute(endpoint=endpoint, refresh_ms=int(refresh_interval_s) * 1000)
