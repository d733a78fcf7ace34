"""
CLI commands for archhint.

Main entry point: `archhint serve` for editors, `archhint complete` and
`archhint edit` for the terminal.
"""

import json
import sys
from pathlib import Path

import click
from dotenv import load_dotenv
from prompt_toolkit import PromptSession
from prompt_toolkit.filters import completion_is_selected
from prompt_toolkit.key_binding import KeyBindings

from archhint.cli import ui
from archhint.cli.completer import SchemaCompleter
from archhint.completion.document import Position
from archhint.completion.engine import CompletionEngine
from archhint.config import Config
from archhint.errors import SchemaLoadError
from archhint.schema.loader import load_schema
from archhint.server.service import CompletionService

schema_option = click.option(
    "--schema",
    "schema_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Schema file (default: $ARCHHINT_SCHEMA_PATH, workspace metadata.yaml, bundled schema)",
)
workspace_option = click.option(
    "--workspace",
    type=click.Path(file_okay=False),
    default=None,
    help="Workspace root searched for metadata.yaml",
)


def _build_engine(schema_path, workspace) -> CompletionEngine:
    load_dotenv()
    config = Config(workspace=workspace)
    config.configure_logging()
    return CompletionEngine(schema_path or config.schema_path)


@click.group()
def main():
    """
    archhint - schema-aware completion for architecture-as-code YAML

    Examples:
        archhint serve --workspace .
        archhint complete architecture.yaml --line 3 --character 2
        archhint edit architecture.yaml
    """


@main.command()
@schema_option
@workspace_option
def serve(schema_path, workspace):
    """Run the JSON-RPC completion service on stdio"""
    engine = _build_engine(schema_path, workspace)
    CompletionService(engine).run()


@main.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--line", type=int, required=True, help="Cursor line (0-indexed)")
@click.option("--character", type=int, default=None, help="Cursor column (default: end of line)")
@click.option("--newline", is_flag=True, help="Treat the request as triggered by a newline")
@click.option("--json", "as_json", is_flag=True, help="Print LSP-style completion items as JSON")
@schema_option
@workspace_option
def complete(file, line, character, newline, as_json, schema_path, workspace):
    """Show completions for a position in FILE"""
    engine = _build_engine(schema_path, workspace)
    text = Path(file).read_text(encoding="utf-8")

    if character is None:
        lines = text.split("\n")
        character = len(lines[line]) if 0 <= line < len(lines) else 0

    position = Position(line=line, character=character)
    if newline:
        suggestions = engine.provide_completions_on_newline(text, position)
    else:
        suggestions = engine.provide_completions(text, position)

    if as_json:
        click.echo(json.dumps([s.to_dict() for s in suggestions], indent=2))
    else:
        ui.show_suggestions(suggestions, title=f"{file}:{line}:{character}")


@main.command()
@schema_option
@workspace_option
def schema(schema_path, workspace):
    """Print the schema tree"""
    load_dotenv()
    path = schema_path or Config(workspace=workspace).schema_path
    try:
        root = load_schema(path)
    except SchemaLoadError as e:
        ui.print_error(str(e))
        sys.exit(1)
    ui.show_schema(root)


@main.command()
@click.argument("file", type=click.Path(dir_okay=False))
@schema_option
@workspace_option
def edit(file, schema_path, workspace):
    """Edit FILE with completion (Esc+Enter saves, Ctrl+C cancels)"""
    engine = _build_engine(schema_path, workspace)
    path = Path(file)
    text = path.read_text(encoding="utf-8") if path.exists() else ""

    kb = KeyBindings()

    @kb.add('enter', filter=completion_is_selected)
    def _(event):
        """Accept the selected completion instead of inserting a newline."""
        buffer = event.current_buffer
        if buffer.complete_state and buffer.complete_state.current_completion:
            buffer.apply_completion(buffer.complete_state.current_completion)

    session = PromptSession(
        multiline=True,
        completer=SchemaCompleter(engine),
        complete_while_typing=True,
        key_bindings=kb,
    )

    try:
        result = session.prompt("", default=text)
    except (KeyboardInterrupt, EOFError):
        ui.print_warning("Edit cancelled, nothing saved")
        return

    path.write_text(result, encoding="utf-8")
    ui.print_success(f"Saved {path}")


@main.command("architecture-as-code")
def architecture_as_code():
    """Acknowledge architecture-as-code support"""
    ui.console.print(CompletionEngine().acknowledge())


@main.command()
def version():
    """Show version information"""
    from archhint import __version__

    ui.console.print(f"\n[bold]archhint[/bold] v{__version__}\n")


if __name__ == "__main__":
    main()
