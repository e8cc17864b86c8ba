"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from dconv.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from dconv.services.result import ServiceResult


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
    """Render minimal output for ``--quiet`` mode.

    A conversion prints only the representation opposite to its input:
    numeric timestamps become UTC RFC3339, everything else becomes the
    millisecond timestamp.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "convert":
        if result.data.get("input_kind") == "timestamp":
            return str(result.data["utc"])
        return str(result.data["timestamp_millis"])

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="dconv.key")
    console.print(k, Text(str(value)), sep="", soft_wrap=True)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="dconv.error")
    op = Text(f"  {result.op}", style="dconv.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg), soft_wrap=True)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"), soft_wrap=True)


# ── Conversion renderer ──────────────────────────────────────────────


def _render_convert(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Three lines: UTC RFC3339, local RFC3339, millisecond timestamp."""
    d = result.data
    console.print(Text(str(d["utc"]), style="dconv.utc"), soft_wrap=True)
    console.print(Text(str(d["local"])), soft_wrap=True)
    console.print(Text(str(d["timestamp_millis"]), style="dconv.millis"), soft_wrap=True)

    if verbose:
        console.print()
        console.print(Text("  meta:", style="dim"))
        _field(console, "input_kind", d.get("input_kind"))
        _field(console, "operation", d.get("operation") or "none")


# ── Generic fallback ─────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.print(Text("OK", style="dconv.ok"), Text(f"  {result.op}", style="dconv.op"))
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "convert": _render_convert,
}
