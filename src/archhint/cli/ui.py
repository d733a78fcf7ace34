"""
Terminal UI utilities using Rich.
"""

from typing import Iterable, Optional

from rich.console import Console
from rich.table import Table
from rich.tree import Tree

from archhint.completion.suggestion import Suggestion
from archhint.schema.tree import EnumNode, SchemaNode

# Global console instance
console = Console()


def print_success(message: str) -> None:
    console.print(f"\n[bold green]{message}[/bold green]\n")


def print_warning(message: str) -> None:
    console.print(f"\n[bold yellow]{message}[/bold yellow]\n")


def print_error(message: str) -> None:
    console.print(f"\n[bold red]{message}[/bold red]\n")


def show_suggestions(suggestions: Iterable[Suggestion], title: Optional[str] = None) -> None:
    """Print suggestions as a table."""
    suggestions = list(suggestions)
    if not suggestions:
        console.print("[dim]No suggestions[/dim]")
        return

    table = Table(title=title or "Suggestions")
    table.add_column("Label", style="cyan")
    table.add_column("Kind")
    table.add_column("Insert", style="green")
    table.add_column("Detail", style="dim")
    table.add_column("Documentation", style="dim")

    for s in suggestions:
        table.add_row(
            s.label,
            s.kind.name.lower().replace("_", "-"),
            repr(s.insert_text),
            s.detail or "",
            s.documentation or "",
        )

    console.print(table)


def show_schema(root: SchemaNode) -> None:
    """Print the schema as a tree."""
    tree = Tree(f"[bold]{root.name}[/bold]")
    _add_children(tree, root)
    console.print(tree)


def _add_children(branch: Tree, node: SchemaNode) -> None:
    for child in node.children.values():
        label = f"[cyan]{child.name}[/cyan] [dim]{child.kind}[/dim]"
        if isinstance(child, EnumNode):
            label += f" [green]{', '.join(child.enum_values)}[/green]"
        _add_children(branch.add(label), child)
