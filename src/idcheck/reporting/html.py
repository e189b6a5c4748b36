from __future__ import annotations

from pathlib import Path
from jinja2 import Environment, PackageLoader, select_autoescape
from ..engine.checker import BatchResult

def write_report(result: BatchResult, path: Path, show_valid: bool = True) -> None:
    env = Environment(
        loader=PackageLoader("idcheck.reporting", "templates"),
        autoescape=select_autoescape(["html", "xml", "j2"])
    )
    tmpl = env.get_template("report.html.j2")
    rows = [r for r in result.results if show_valid or not r.ok]
    html = tmpl.render(result=result, rows=rows)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html, encoding="utf-8")
