"""Final installation report"""

from rich import box
from rich.console import Console
from rich.table import Table


def print_summary(
    console: Console,
    platform: str,
    service_name: str,
    status: str,
    runtime: str = "",
    port: str = "",
) -> None:
    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    table.add_row("Platform", platform)
    table.add_row("Service", service_name)
    style = "green" if status == "active" else "yellow"
    table.add_row("Status", f"[{style}]{status}[/{style}]")
    if port:
        table.add_row("Port", port)
    if runtime:
        table.add_row("Python", runtime)

    console.print()
    console.print("[bold green]✓ Proxy MCP installed successfully[/bold green]")
    console.print(table)
