# -*- coding: utf-8 -*-
"""
Interactive setup for ProjectMap, using the 'pick' library for menu
selections (root directory) and plain prompts for the remaining options.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pick import pick

from . import __version__
from .projectmap_config import DEFAULT_CONTENT_SIZE_LIMIT_KB, DEFAULT_EXCLUDES, DEFAULT_OUTPUT_PATH
from .projectmap_styling import Colors
from .projectmap_utils import parse_depth_string, parse_size_string


def _choose(options: List[Tuple[str, str]], title: str) -> str:
    """Shows a single-choice menu and returns the value of the chosen option."""
    labels = [label for label, _ in options]
    _, index = pick(labels, title, indicator="=>")
    return options[index][1]


def _ask_yes_no(question: str, default: bool = False) -> bool:
    hint = f"[{Colors.GREEN}Y{Colors.RESET}/n]" if default else f"[y/{Colors.GREEN}N{Colors.RESET}]"
    answer = input(f"{question} {hint}: ").strip().lower()
    if not answer:
        return default
    return answer in ("y", "yes")


# --- Interactive Directory Selection ---
def select_directory_interactive(start_dir: Optional[str] = None) -> Optional[str]:
    """Lets the user browse to a directory. Returns its path, or None if cancelled."""
    current_path = Path(start_dir).resolve() if start_dir and Path(start_dir).is_dir() else Path.cwd()

    try:
        while True:
            options: List[Tuple[str, str]] = []
            if current_path.parent != current_path: # Not at filesystem root
                options.append(("⬆️  .. (Parent Directory)", str(current_path.parent)))

            title = f"Directory Browser - Current: {current_path}"
            try:
                subdirs = sorted((d for d in current_path.iterdir() if d.is_dir()), key=lambda d: d.name.lower())
                options.extend((f"📂 {d.name}", str(d)) for d in subdirs)
            except OSError as e:
                title += f" (Error listing: {e.strerror or e})"

            options.append((f"✅ Select Current: '{current_path.name or current_path}'", "__SELECT__"))
            options.append(("❌ Cancel Selection", "__CANCEL__"))

            choice = _choose(options, title)
            if choice == "__CANCEL__":
                return None
            if choice == "__SELECT__":
                return str(current_path)
            current_path = Path(choice)
    except KeyboardInterrupt:
        print("\nDirectory selection cancelled.")
        return None


# --- Interactive Setup Workflow ---
def run_interactive_setup() -> Dict[str, Any]:
    """
    Guides the user through the project map options.
    Returns keyword arguments for ProjectMap, or an empty dict if cancelled.
    """
    print(f"\n--- {Colors.BOLD}ProjectMap v{__version__} Interactive Setup{Colors.RESET} ---")
    config: Dict[str, Any] = {}
    current_dir_path = Path.cwd()

    # Step 1: Directory Selection
    print(f"\n{Colors.BOLD}Step 1: Directory Selection{Colors.RESET}")
    dir_choice = _choose([
        (f"Current directory: {current_dir_path}", str(current_dir_path)),
        ("Browse the file system", "__SELECT__"),
        ("Enter a path manually", "__MANUAL__"),
        ("Cancel setup", "__CANCEL__"),
    ], "Choose the project directory to map:")

    if dir_choice == "__CANCEL__":
        return {}
    elif dir_choice == "__SELECT__":
        selected_dir = select_directory_interactive(str(current_dir_path))
        if selected_dir is None:
            return {}
        config['root_dir'] = selected_dir
    elif dir_choice == "__MANUAL__":
        manual_path = Path(input("Enter directory path: ").strip()).expanduser()
        if not manual_path.is_dir():
            print(f"{Colors.RED}Error: '{manual_path}' is not a directory. Aborting.{Colors.RESET}")
            return {}
        config['root_dir'] = str(manual_path.resolve())
    else:
        config['root_dir'] = dir_choice
    print(f"Using directory: {Colors.CYAN}{config['root_dir']}{Colors.RESET}")

    # Step 2: Filtering
    print(f"\n{Colors.BOLD}Step 2: Filtering Options{Colors.RESET}")
    default_excludes = ",".join(DEFAULT_EXCLUDES)
    exclude_str = input(f"Exclude patterns, comma-separated ('*' wildcard) [{Colors.GREEN}{default_excludes}{Colors.RESET}]: ").strip()
    config['exclude'] = [p.strip() for p in exclude_str.split(",") if p.strip()] if exclude_str else list(DEFAULT_EXCLUDES)
    config['show_hidden'] = _ask_yes_no("Show hidden files/dirs (starting with '.')?")

    depth_str = input(f"Max depth (number, or empty for unlimited) [{Colors.GREEN}unlimited{Colors.RESET}]: ")
    try:
        config['max_depth'] = parse_depth_string(depth_str)
    except ValueError as e:
        print(f"{Colors.YELLOW}Warning: {e} Using unlimited depth.{Colors.RESET}")
        config['max_depth'] = None

    # Step 3: Content
    print(f"\n{Colors.BOLD}Step 3: File Content{Colors.RESET}")
    config['include_content'] = _ask_yes_no("Include file contents in the map?")
    config['content_size_limit'] = DEFAULT_CONTENT_SIZE_LIMIT_KB
    if config['include_content']:
        size_str = input(f"Max file size for content, in KB (e.g. 50, 1m) [{Colors.GREEN}{DEFAULT_CONTENT_SIZE_LIMIT_KB}{Colors.RESET}]: ").strip()
        if size_str:
            try:
                config['content_size_limit'] = parse_size_string(size_str)
            except ValueError as e:
                print(f"{Colors.YELLOW}Warning: {e} Using {DEFAULT_CONTENT_SIZE_LIMIT_KB} KB.{Colors.RESET}")

    # Step 4: Output
    print(f"\n{Colors.BOLD}Step 4: Output{Colors.RESET}")
    config['output_path'] = input(f"Output file [{Colors.GREEN}{DEFAULT_OUTPUT_PATH}{Colors.RESET}]: ").strip() or DEFAULT_OUTPUT_PATH

    # Summary
    print(f"\n{Colors.BOLD}--- Configuration Summary ---{Colors.RESET}")
    print(f"Directory: {Colors.CYAN}{config['root_dir']}{Colors.RESET}")
    print(f"Output: {config['output_path']}")
    print(f"Exclude: {', '.join(config['exclude']) or 'None'}")
    print(f"Show Hidden: {'Yes' if config['show_hidden'] else 'No'}, Max Depth: {config['max_depth'] if config['max_depth'] is not None else 'Unlimited'}")
    if config['include_content']:
        print(f"Content: Yes, up to {config['content_size_limit']} KB per file")
    else:
        print("Content: No")

    if input("\nPress Enter to generate with these settings, or 'q' to quit: ").strip().lower() == 'q':
        print("Setup cancelled.")
        return {}
    return config
