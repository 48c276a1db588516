"""Landing Page: HTML help page listing every command binding and user alias.

Invariants:
    - Built only from CommandDescriptor data (registry.list_descriptors()) and config
    - Every user-controlled string is HTML-escaped
"""

from collections.abc import Mapping, Sequence
from html import escape

from linkhop.core.domain_types import CommandDescriptor

_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>linkhop</title>
<style>
body {{ font-family: system-ui, sans-serif; margin: 2rem auto; max-width: 60rem; }}
table {{ border-collapse: collapse; width: 100%; }}
th, td {{ text-align: left; padding: 0.3rem 0.6rem; border-bottom: 1px solid #ddd; }}
code {{ background: #f3f3f3; padding: 0 0.2rem; }}
</style>
</head>
<body>
<h1>linkhop</h1>
<form action="/" method="get">
<input name="cmd" autofocus size="50" placeholder="gh facebook/react">
<button type="submit">Go</button>
</form>
<p>Unmatched input is sent to <strong>{search}</strong>.
Tickers can be typed as <code>$AAPL</code>.</p>
<h2>Commands ({count})</h2>
<table>
<tr><th>Bindings</th><th>Description</th><th>Example</th></tr>
{rows}
</table>
{aliases}
</body>
</html>
"""


def _command_row(descriptor: CommandDescriptor) -> str:
    bindings = ", ".join(f"<code>{escape(b)}</code>" for b in descriptor.bindings)
    return (
        f"<tr><td>{bindings}</td>"
        f"<td>{escape(descriptor.description)}</td>"
        f"<td><code>{escape(descriptor.example)}</code></td></tr>"
    )


def _alias_section(aliases: Mapping[str, str]) -> str:
    if not aliases:
        return ""
    rows = "\n".join(
        f"<tr><td><code>{escape(name)}</code></td>"
        f"<td><code>{escape(expansion)}</code></td></tr>"
        for name, expansion in sorted(aliases.items())
    )
    return (
        f"<h2>Your aliases ({len(aliases)})</h2>\n<table>\n"
        f"<tr><th>Alias</th><th>Expands to</th></tr>\n{rows}\n</table>"
    )


def render_landing_page(
    descriptors: Sequence[CommandDescriptor],
    search_label: str = "google",
    aliases: Mapping[str, str] | None = None,
) -> str:
    return _PAGE.format(
        search=escape(search_label),
        count=len(descriptors),
        rows="\n".join(_command_row(d) for d in descriptors),
        aliases=_alias_section(aliases or {}),
    )
