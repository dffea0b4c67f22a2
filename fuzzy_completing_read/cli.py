#!/usr/bin/env python
"""Command-line interface for fuzzy-completing-read."""

import argparse
import os
import sys
from typing import List, Optional
from rich.console import Console
from rich.panel import Panel

from . import __version__
from . import host
from .adapter import read_with_completion
from .config.manager import ConfigManager
from .config.settings import get_default_settings, settings_override


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fzread",
        description="Pick one of several candidates with fuzzy completion"
    )

    # Candidate options
    candidate_group = parser.add_argument_group("candidate options")
    candidate_group.add_argument("choices", nargs="*", help="Candidates to choose from")
    candidate_group.add_argument("--choices-file", help="Read candidates from a file, one per line")

    # Prompt options
    prompt_group = parser.add_argument_group("prompt options")
    prompt_group.add_argument("--prompt", default="Select: ", help="Prompt text. Default: 'Select: '")
    prompt_group.add_argument("--default", action="append",
                              help="Default value (repeat to give a list of defaults)")
    prompt_group.add_argument("--initial", help="Initial input")
    prompt_group.add_argument("--require-match", action="store_true", default=False,
                              help="Only accept one of the candidates")

    # Adapter options
    adapter_group = parser.add_argument_group("adapter options")
    adapter_group.add_argument("--config", help="Name of the configuration to load")
    adapter_group.add_argument("--max-items", type=int,
                               help="Use standard completion above this many candidates (0 for unlimited)")
    adapter_group.add_argument("--standard", action="store_true", default=False,
                               help="Always use standard completion")
    adapter_group.add_argument("--debug", action="store_true", default=False,
                               help="Explain fallback decisions")

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def read_choices_file(path: str) -> List[str]:
    """Read candidates from a file, one per line, skipping blank lines."""
    with open(path, 'r') as f:
        return [line.rstrip("\n") for line in f if line.strip()]


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    console = Console()

    choices = list(args.choices)
    if args.choices_file:
        if not os.path.exists(args.choices_file):
            console.print(f"[bold red]Error: Choices file not found: {args.choices_file}[/bold red]")
            return 1
        choices.extend(read_choices_file(args.choices_file))

    if not choices:
        parser.error("No candidates given: pass them as arguments or with --choices-file")

    # Load the named configuration, or the default one when it exists
    config_manager = ConfigManager(console)
    if args.config or config_manager.config_exists():
        settings = config_manager.load_settings(args.config)
    else:
        settings = get_default_settings()

    changes = {
        "fallback_function": settings.fallback_function,
        "max_items": settings.max_items,
        "debug": settings.debug or args.debug,
    }
    if args.max_items is not None:
        changes["max_items"] = args.max_items if args.max_items > 0 else None

    default = args.default
    if default and len(default) == 1:
        default = default[0]

    reader = host.completing_read_default if args.standard else read_with_completion

    try:
        with settings_override(**changes):
            selection = reader(args.prompt, choices, None, args.require_match, args.initial, None, default)
    except (KeyboardInterrupt, EOFError):
        console.print("[yellow]Selection cancelled[/yellow]")
        return 130
    except Exception as e:
        console.print(Panel(
            f"[bold red]Error reading selection:[/bold red] {str(e)}",
            title="Error", border_style="red", expand=False
        ))
        return 1

    console.print(selection, markup=False, highlight=False)
    return 0


def run_cli():
    """Run the fuzzy-completing-read command-line interface."""
    sys.exit(main())

if __name__ == "__main__":
    run_cli()
