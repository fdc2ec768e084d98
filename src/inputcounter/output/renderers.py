"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.text import Text

from inputcounter.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from inputcounter.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    for key in ("length", "count"):
        if key in result.data:
            return str(result.data[key])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="ic.ok")
    op = Text(f"  {result.op}", style="ic.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="ic.key")
    v = Text(str(value), style=style)
    console.print(k, v, sep="", end="", soft_wrap=True)
    console.print()


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="ic.error")
    op = Text(f"  {result.op}", style="ic.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_count(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "length", result.data.get("length", 0), style="ic.count")
    if verbose:
        _field(console, "visible", repr(result.data.get("visible", "")))


def _render_validate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    _field(console, "length", f"{d.get('length', 0)} of {d.get('maximum', 0)}", style="ic.count")


def _render_render(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    # Markup is printed verbatim, never interpreted as Rich markup.
    _field(console, "html", d.get("html", ""), style="ic.markup")
    if d.get("script"):
        _field(console, "script", d["script"], style="ic.markup")
    if d.get("settings"):
        _field(console, "settings", ", ".join(d["settings"]))


def _render_simulate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    count = d.get("count") or 0
    maximum = d.get("maximum") or 0
    style = "ic.over" if maximum and count > maximum else "ic.count"
    _field(console, "content", repr(d.get("content", "")))
    _field(console, "count", f"{count} of {maximum}" if maximum else count, style=style)
    blocked = d.get("blocked") or []
    _field(console, "blocked", len(blocked))
    if verbose and blocked:
        _field(console, "blocked_keys", " ".join(blocked))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "count": _render_count,
    "validate": _render_validate,
    "render": _render_render,
    "simulate": _render_simulate,
}
