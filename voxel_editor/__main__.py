#!/usr/bin/env python3
"""
Voxel Editor console. Drives an in-memory world with /se commands.
"""

import sys

from rich.console import Console

from voxel_editor.config import EditorConfig
from voxel_editor.editor import EditingService
from voxel_editor.input_handler import Actor, CommandHandler
from voxel_editor.world import ChunkedWorld


def _install_completion(handler: CommandHandler):
    try:
        import readline
    except ImportError:
        return

    def complete(text, state):
        args = readline.get_line_buffer().split()
        if args and args[0].lower() in ("/se", "se"):
            args = args[1:]
        if not args or readline.get_line_buffer().endswith(" "):
            args.append("")
        options = handler.complete(args)
        return options[state] if state < len(options) else None

    readline.set_completer(complete)
    readline.parse_and_bind("tab: complete")


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    config = EditorConfig.load_from_toml(argv[0] if argv else "config.toml")
    console = Console(highlight=False)

    service = EditingService(ChunkedWorld.from_config(config), config)
    handler = CommandHandler(service)
    actor = Actor("console")
    _install_completion(handler)

    console.print("[bold cyan]Voxel Editor[/] - type 'help' for commands, 'quit' to exit.")
    while True:
        try:
            line = console.input(f"[dim]{actor.position}[/] > ")
        except (EOFError, KeyboardInterrupt):
            console.print()
            break
        if line.strip().lower() in ("q", "quit", "exit"):
            break
        if not line.strip():
            continue
        feedback = handler.handle(actor, line)
        console.print(feedback.message, style=feedback.style, markup=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
