#!/usr/bin/env python3
"""
Trace Display
=============
Rich-based rendering of a StageTrace: one row per stage with the spelling
and the IPA surface form, so a rule author can see where a word changed.

Usage:
    from soundchange.ui import print_trace

    trace = run_stages(scan("lupum"), STAGES)
    print_trace(trace)
    print_trace(trace, changed_only=True)
"""

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from soundchange.pipeline import StageTrace
from soundchange.settings import get_setting


def trace_table(trace: StageTrace, changed_only: Optional[bool] = None,
                title: Optional[str] = None) -> Table:
    """
    Build a table of a trace.

    Args:
        trace: result of run_stages()
        changed_only: skip stages that left the IPA unchanged;
            defaults to ``ui.changed_only`` in app.yaml
        title: optional table title

    Returns:
        Rich Table with Stage, Spelling and IPA columns.
    """
    if changed_only is None:
        changed_only = bool(get_setting('ui.changed_only', False))

    table = Table(title=title, box=box.ROUNDED, show_header=True)
    table.add_column("Stage", style="cyan")
    table.add_column("Spelling")
    table.add_column("IPA", style="bold")

    table.add_row(Text("(initial)", style="dim"), trace.initial.join(), trace.initial.to_ipa())

    changed = {id(s) for s in trace.changed()}
    for snapshot in trace:
        if id(snapshot) in changed:
            table.add_row(snapshot.name, snapshot.spelling, snapshot.ipa)
        elif not changed_only:
            table.add_row(
                Text(snapshot.name, style="dim"),
                Text(snapshot.spelling, style="dim"),
                Text(snapshot.ipa, style="dim"),
            )

    return table


def print_trace(trace: StageTrace, console: Optional[Console] = None,
                changed_only: Optional[bool] = None, title: Optional[str] = None) -> None:
    console = console or Console()
    console.print(trace_table(trace, changed_only=changed_only, title=title))


__all__ = ['trace_table', 'print_trace']
