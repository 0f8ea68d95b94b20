"""HTML page renderer — one card per counter plus an add-person form."""

from __future__ import annotations

import html
import json

from contador.domain.entities.person import Person


def _person_card(p: Person) -> str:
    pid = html.escape(p.id, quote=True)
    name = html.escape(p.name)
    vezes = "vez" if p.count == 1 else "vezes"
    return (
        f'<li class="person" data-id="{pid}">'
        f'<p>{name} foi babaquinha: <span class="count" aria-live="polite">{p.count}</span>'
        f" {vezes}</p>"
        f'<button type="button" class="increment" data-id="{pid}">+1</button>'
        f"</li>"
    )


_SCRIPT = """
const DAILY_LIMIT = %(limit)s;
function todayKey() { return "clicks-" + new Date().toISOString().slice(0, 10); }
function clicksToday() { return parseInt(localStorage.getItem(todayKey()) || "0", 10); }
document.querySelectorAll("button.increment").forEach((btn) => {
  btn.addEventListener("click", async () => {
    if (DAILY_LIMIT > 0 && clicksToday() >= DAILY_LIMIT) {
      document.getElementById("status").textContent = "Limite diário atingido.";
      return;
    }
    const res = await fetch("/api/person/" + encodeURIComponent(btn.dataset.id) + "/increment", { method: "POST" });
    if (!res.ok) { document.getElementById("status").textContent = "Erro ao contar."; return; }
    const body = await res.json();
    btn.closest("li").querySelector(".count").textContent = body.count;
    localStorage.setItem(todayKey(), String(clicksToday() + 1));
  });
});
document.getElementById("add-person").addEventListener("submit", async (ev) => {
  ev.preventDefault();
  const input = document.getElementById("name");
  const res = await fetch("/api/person", {
    method: "POST",
    headers: { "content-type": "application/json" },
    body: JSON.stringify({ name: input.value }),
  });
  const body = await res.json();
  if (!res.ok) { document.getElementById("status").textContent = body.error; return; }
  window.location.reload();
});
"""


def render_page(people: list[Person], title: str = "Contador de Babaquinha", daily_limit: int = 0) -> str:
    """Render the full HTML document for the given (non-empty) roster."""
    safe_title = html.escape(title)
    cards = "\n".join(_person_card(p) for p in people)
    script = _SCRIPT % {"limit": json.dumps(daily_limit)}
    return f"""<!DOCTYPE html>
<html lang="pt-BR">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{safe_title}</title>
</head>
<body>
<h1>{safe_title}</h1>
<ul id="people">
{cards}
</ul>
<form id="add-person">
<label for="name">Nova pessoa</label>
<input id="name" name="name" required maxlength="100">
<button type="submit">Adicionar</button>
</form>
<p id="status" role="status"></p>
<script>{script}</script>
</body>
</html>
"""
