from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from caesar_breaker.result import BreakResult


COLORS = {
    "found": "spring_green2",
    "not_found": "bright_red",
    "key": "bold yellow",
    "label": "cyan",
}


def key_label(slot: int, slot_count: int) -> str:
    if slot_count == 1:
        return "Key"
    return "Key 1 (even)" if slot == 0 else "Key 2 (odd)"


def render_result(result: BreakResult) -> Panel:
    """Render a break result as a summary table above the recovered plaintext."""
    if not result.found:
        strategy = f" ({result.strategy})" if result.strategy else ""
        return Panel(
            Text(f"No key found{strategy}", style=COLORS["not_found"]),
            title="Caesar Breaker",
            border_style=COLORS["not_found"],
        )

    table = Table(show_header=False, box=None)
    table.add_column(style=COLORS["label"], justify="right")
    table.add_column()

    for slot, key in enumerate(result.keys):
        table.add_row(key_label(slot, len(result.keys)), f"[{COLORS['key']}]{key}[/{COLORS['key']}]")
    table.add_row("Strategy", str(result.strategy))

    plaintext = Panel(Text(result.plaintext), title="Plaintext", border_style="dim")
    return Panel(Group(table, plaintext), title="Caesar Breaker", border_style=COLORS["found"])
