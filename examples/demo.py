"""
Demo script for the archhint completion engine.

Walks through a document being typed and prints what the engine offers at
each step, without the CLI or the stdio service.
"""

import os
import sys

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from archhint import CompletionEngine, Position


def show(engine, title, text, line, character=None, newline=False):
    print("=" * 60)
    print(title)
    print("=" * 60)
    if character is None:
        character = len(text.split("\n")[line])
    position = Position(line=line, character=character)
    if newline:
        suggestions = engine.provide_completions_on_newline(text, position)
    else:
        suggestions = engine.provide_completions(text, position)
    for s in suggestions:
        print(f"  {s.label:<16} {s.kind.name:<12} {s.insert_text!r}")
    if not suggestions:
        print("  (no suggestions)")
    print()


def main():
    engine = CompletionEngine()

    show(engine, "Empty document", "", 0)
    show(engine, "Prefix 'Do' at the root", "Company: Acme\n\nDo", 2)
    show(engine, "Newline after a Domain scalar", "Domain:\n  Name: Payments\n  ", 2, newline=True)
    show(engine, "Right after Nodes:", "Nodes:\n  ", 1, newline=True)
    show(engine, "Node type value", "Nodes:\n  - Api:\n      Type:", 2)

    text = (
        "Nodes:\n"
        "  - Api:\n"
        "      Type: Service\n"
        "  - Ledger:\n"
        "      Type: Database\n"
        "Relationships:\n"
        "  - ApiToLedger:\n"
        "      Start:"
    )
    show(engine, "Relationship start", text, 7)


if __name__ == "__main__":
    main()
