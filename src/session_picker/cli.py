"""
Command-line interface for the session picker.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

import yaml
from dotenv import load_dotenv
from rich.console import Console
from rich.tree import Tree

from session_picker.app import PickerApp
from session_picker.backends.tmux import BackendError, TmuxActions, TmuxBackend
from session_picker.config import PickerConfig, config_search_paths
from session_picker.logging import disable, setup_logging
from session_picker.models import SessionInfo
from session_picker.tui.keybindings import KeybindingsManager

console = Console()
err_console = Console(stderr=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Browse and switch tmux sessions, windows and panes",
        prog="session-picker",
    )

    # Global options
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output (debug logging)",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Config file (default: search standard locations)",
    )
    parser.add_argument(
        "--log-file",
        help="Write logs to this file",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Pick command
    pick_parser = subparsers.add_parser("pick", help="Open the interactive picker (default)")
    _add_pick_options(pick_parser)

    # List command
    list_parser = subparsers.add_parser("list", help="Print the session tree")
    list_parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )
    list_parser.add_argument(
        "--show-plugins",
        action="store_true",
        default=None,
        help="Include plugin panes",
    )

    # Config command with subcommands
    config_parser = subparsers.add_parser("config", help="Configuration management")
    config_subparsers = config_parser.add_subparsers(dest="config_command", help="Config commands")
    config_subparsers.add_parser("show", help="Show current configuration")
    config_init_parser = config_subparsers.add_parser("init", help="Initialize a new config file")
    config_init_parser.add_argument(
        "-o",
        "--output",
        default="session-picker.yaml",
        help="Output file path",
    )
    config_subparsers.add_parser("path", help="Show config file paths")

    return parser


def _add_pick_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--print",
        action="store_true",
        dest="print_only",
        help="Print the chosen session name instead of switching to it",
    )
    parser.add_argument(
        "--show-plugins",
        action="store_true",
        default=None,
        help="Include plugin panes",
    )


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        # Bare invocation opens the picker
        args.command = "pick"
        args.print_only = False
        args.show_plugins = None

    config = load_config(args)

    if args.command == "pick":
        cmd_pick(args, config)
    elif args.command == "list":
        cmd_list(args, config)
    elif args.command == "config":
        cmd_config(args, config)
    else:
        parser.print_help()


def load_config(args: argparse.Namespace) -> PickerConfig:
    """Load config and apply command-line overrides."""
    config = PickerConfig.load(args.config)
    if getattr(args, "show_plugins", None):
        config.show_plugins = True
    if getattr(args, "log_file", None):
        config.log_file = args.log_file
    if getattr(args, "verbose", False):
        config.log_level = "DEBUG"
    return config


def _create_backend(config: PickerConfig) -> TmuxBackend:
    return TmuxBackend(binary=config.tmux_binary, socket=config.tmux_socket)


def cmd_pick(args: argparse.Namespace, config: PickerConfig) -> None:
    """Run the interactive picker."""
    # The picker owns the terminal, so logs only go to a file
    if config.log_file:
        setup_logging(config.log_level, file=config.log_file)
    else:
        disable()

    if not sys.stdin.isatty():
        err_console.print("[red]Error:[/red] the picker needs an interactive terminal")
        sys.exit(1)

    from session_picker.tui.terminal import Terminal

    backend = _create_backend(config)
    actions = TmuxActions(backend)
    app = PickerApp(backend, actions, config, pick_only=args.print_only)
    actions.on_hide = app.hide

    # With --print, stdout carries the answer, so draw on stderr
    output = sys.stderr if args.print_only else sys.stdout
    try:
        with Terminal(stdout=output) as terminal:
            result = app.run(terminal)
    except BackendError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)

    if result is not None:
        print(result)


def cmd_list(args: argparse.Namespace, config: PickerConfig) -> None:
    """Print the session tree."""
    setup_logging(config.log_level, file=config.log_file)
    backend = _create_backend(config)
    try:
        sessions = backend.list_sessions()
    except BackendError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    if args.json:
        console.print_json(json.dumps([s.to_dict() for s in sessions], indent=2))
        return

    if not sessions:
        console.print("[dim]No sessions[/dim]")
        return

    console.print(render_session_tree(sessions, config.show_plugins))
    console.print(f"\n[dim]Total: {len(sessions)} sessions[/dim]")


def render_session_tree(sessions: list[SessionInfo], show_plugins: bool = False) -> Tree:
    """Build a rich tree mirroring the picker's hierarchy."""
    root = Tree("[bold]Sessions[/bold]")
    for session in sessions:
        label = f"[cyan]{session.name}[/cyan]"
        if session.is_current_session:
            label += " [green](attached)[/green]"
        session_branch = root.add(label)
        for tab in session.tabs:
            tab_label = f"{tab.position}: {tab.name}"
            if tab.active:
                tab_label += " [yellow](active)[/yellow]"
            tab_branch = session_branch.add(tab_label)
            for pane in session.panes_for(tab.position):
                if pane.is_plugin and not show_plugins:
                    continue
                tab_branch.add(f"[dim]%{pane.id}[/dim] {pane.title}")
    return root


def cmd_config(args: argparse.Namespace, config: PickerConfig) -> None:
    """Configuration management commands."""
    if args.config_command == "show":
        _config_show(args, config)
    elif args.config_command == "init":
        _config_init(args.output)
    elif args.config_command == "path":
        _config_path()
    else:
        console.print("[yellow]Usage: session-picker config <show|init|path>[/yellow]")


def _config_show(args: argparse.Namespace, config: PickerConfig) -> None:
    """Show current configuration."""
    candidates = [args.config] if args.config else config_search_paths()
    loaded_from = next((p for p in candidates if p.is_file()), None)
    if loaded_from is None:
        console.print("[dim]No config file found. Using defaults.[/dim]")
    else:
        console.print(f"[dim]Loaded from: {loaded_from}[/dim]\n")

    console.print("[bold]Current Configuration:[/bold]\n")
    console.print(yaml.dump(config.to_dict(), default_flow_style=False, sort_keys=False))

    keybindings = KeybindingsManager(config.keybindings)
    console.print("[bold]Keybindings:[/bold]\n")
    for action in keybindings.actions():
        console.print(f"  {action:<8} {', '.join(keybindings.get_keys(action))}")


def _config_init(output: str) -> None:
    """Initialize a new config file."""
    output_path = Path(output)

    if output_path.exists():
        console.print(f"[red]File already exists: {output_path}[/red]")
        sys.exit(1)

    default_config = PickerConfig().to_dict()
    default_config["keybindings"] = {"delete": ["delete", "x"]}

    with open(output_path, "w") as f:
        yaml.dump(default_config, f, default_flow_style=False, sort_keys=False)

    console.print(f"[green]Created config file: {output_path}[/green]")


def _config_path() -> None:
    """Show config file search paths."""
    console.print("[bold]Config file search paths:[/bold]\n")

    names = ["Current directory", "User config"]
    for name, path in zip(names, config_search_paths()):
        exists = "[green]✓[/green]" if path.exists() else "[dim]·[/dim]"
        console.print(f"  {exists} {name}: {path}")


if __name__ == "__main__":
    main()
