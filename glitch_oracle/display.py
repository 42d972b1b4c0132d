"""Rich and plain-text rendering of readings."""

from __future__ import annotations

import hashlib
from typing import List, Optional, Sequence

from rich.console import Console
from rich.panel import Panel

from .engine import Reading
from .hexagrams import HEXAGRAM_TABLE, TRIGRAM_SYMBOLS
from .meanings import glitch_speak

YANG_LINE = "━━━━━━━"
YIN_LINE = "━━   ━━"
CHANGING_MARK = " ✦"


def format_hexagram_lines(bits: Sequence[int], moving: Optional[Sequence[int]] = None) -> List[str]:
    """Format hexagram lines for display (top to bottom)."""
    lines = []
    for i in range(len(bits) - 1, -1, -1):
        line = YANG_LINE if bits[i] == 1 else YIN_LINE
        if moving and i in moving:
            line += CHANGING_MARK
        lines.append(line)
    return lines


def seed_fingerprint(seed: Optional[int]) -> str:
    if seed is None:
        return "—"
    return hashlib.sha256(str(seed).encode("utf-8")).hexdigest()[:16] + "…"


def _title(number: int) -> str:
    hexagram = HEXAGRAM_TABLE.entry(number)
    return f"HEXAGRAM {number}: {hexagram.name} {hexagram.chinese}"


def _trigrams(number: int) -> str:
    hexagram = HEXAGRAM_TABLE.entry(number)
    upper = TRIGRAM_SYMBOLS[hexagram.upper_trigram]
    lower = TRIGRAM_SYMBOLS[hexagram.lower_trigram]
    return f"{hexagram.upper_trigram} {upper} over {hexagram.lower_trigram} {lower}"


class ReadingDisplay:
    """Handles the display of hexagram readings."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def print_rich(self, reading: Reading) -> None:
        console = self.console
        console.rule("[bold green]☯ GLITCH ORACLE ☯[/bold green]")
        console.print(f"[dim]Seed:[/dim] {seed_fingerprint(reading.seed)}")
        console.print()

        primary = reading.primary_hexagram_number
        primary_content = "\n".join([
            f"[bold]{_title(primary)}[/bold]",
            f"[dim]{_trigrams(primary)}[/dim]",
            "",
            *format_hexagram_lines(reading.primary_hexagram_lines, reading.changing_line_indices),
            "",
            f"[bright_white]{glitch_speak(primary)}[/bright_white]",
        ])
        console.print(Panel(primary_content, title="[bold]Primary Hexagram[/bold]", border_style="green"))

        if reading.has_changing_lines:
            changing = reading.changing_hexagram_number
            positions = ", ".join(str(i + 1) for i in reading.changing_line_indices)
            changing_content = "\n".join([
                f"[yellow]Changing lines: {positions}[/yellow]",
                f"[bold]> CHANGING TO: {_title(changing)}[/bold]",
                "",
                *format_hexagram_lines(reading.changing_hexagram_lines),
                "",
                glitch_speak(changing),
            ])
            console.print()
            console.print(Panel(changing_content, title="[bold]Changing Hexagram[/bold]", border_style="red"))

    def print_plain(self, reading: Reading) -> None:
        print("=" * 60)
        print("GLITCH ORACLE")
        print("=" * 60)
        print(f"Seed: {seed_fingerprint(reading.seed)}")
        print()

        primary = reading.primary_hexagram_number
        print(_title(primary))
        print(_trigrams(primary))
        print("\nLines (top to bottom):")
        for line in format_hexagram_lines(reading.primary_hexagram_lines, reading.changing_line_indices):
            print(f"  {line}")
        print(f"\n{glitch_speak(primary)}")

        if reading.has_changing_lines:
            changing = reading.changing_hexagram_number
            print(f"\nCHANGING LINES: {', '.join(str(i + 1) for i in reading.changing_line_indices)}")
            print(f"> CHANGING TO: {_title(changing)}")
            for line in format_hexagram_lines(reading.changing_hexagram_lines):
                print(f"  {line}")
            print(glitch_speak(changing))
