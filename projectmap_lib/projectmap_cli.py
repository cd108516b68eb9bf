# -*- coding: utf-8 -*-
"""
Command-line interface (CLI) for ProjectMap.
Handles argument parsing and runs the project map generation.
"""

import sys
import argparse
from typing import Any, Dict, List, Optional

from . import __version__
from .projectmap_core import ProjectMap
from .projectmap_interactive import run_interactive_setup
from .projectmap_config import DEFAULT_CONTENT_SIZE_LIMIT_KB, DEFAULT_EXCLUDES, DEFAULT_OUTPUT_PATH, DEFAULT_ROOT_DIR
from .projectmap_styling import Colors
from .projectmap_utils import RootNotFoundError, parse_depth_string, parse_size_string

# --- Argument Parsing ---
class ProjectMapArgumentParser(argparse.ArgumentParser):
    """Reports usage errors with exit status 1, like every other failure."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")

def build_parser() -> argparse.ArgumentParser:
    """Creates the argument parser. '-h' means --showHidden, so help is '--help' only."""
    parser = ProjectMapArgumentParser(
        prog="project-map",
        description=f"ProjectMap v{__version__} - Generate a text file with your project structure, useful for providing context to LLMs.",
        formatter_class=argparse.RawTextHelpFormatter, # Preserve formatting in help
        add_help=False,
    )

    # --- Input / Output ---
    parser.add_argument(
        '-r', '--rootDir',
        dest='root_dir',
        metavar='DIR',
        default=DEFAULT_ROOT_DIR,
        help="Root directory to start from (Default: current directory)."
    )
    parser.add_argument(
        '-o', '--output',
        dest='output_path',
        metavar='FILE',
        default=DEFAULT_OUTPUT_PATH,
        help=f"Output file path (Default: {DEFAULT_OUTPUT_PATH})."
    )

    # --- Filtering Group ---
    filter_group = parser.add_argument_group('Filtering Options')
    filter_group.add_argument(
        '-e', '--exclude',
        metavar='PATTERNS',
        default=None, # None means DEFAULT_EXCLUDES
        help=f"Comma-separated names or '*' patterns to exclude, with their contents.\nReplaces the defaults (Default: {','.join(DEFAULT_EXCLUDES)})."
    )
    filter_group.add_argument(
        '-h', '--showHidden',
        dest='show_hidden',
        action='store_true',
        default=False,
        help="Show hidden files and directories (those starting with '.')."
    )
    filter_group.add_argument(
        '-d', '--maxDepth',
        dest='max_depth',
        metavar='N',
        default=None, # Parsed in main() so bad values exit with status 1
        help="Maximum directory depth to traverse (Default: unlimited)."
    )

    # --- Content Group ---
    content_group = parser.add_argument_group('Content Options')
    content_group.add_argument(
        '-c', '--includeContent',
        dest='include_content',
        action='store_true',
        default=False,
        help="Include file contents in the output."
    )
    content_group.add_argument(
        '-s', '--contentSizeLimit',
        dest='content_size_limit',
        metavar='SIZE',
        default=None,
        help=f"Maximum file size in KB to include content for, e.g. 50, 50k, 1m (Default: {DEFAULT_CONTENT_SIZE_LIMIT_KB})."
    )

    # --- Behavior Group ---
    behavior_group = parser.add_argument_group('Behavior Options')
    behavior_group.add_argument(
        '-i', '--interactive',
        action='store_true',
        help="Choose the options through an interactive setup instead of flags."
    )
    behavior_group.add_argument(
        '-v', '--verbose',
        action='store_true',
        default=False,
        help="Show verbose logging messages during processing."
    )
    color_parser = behavior_group.add_mutually_exclusive_group()
    color_parser.add_argument(
        '--color',
        action='store_true',
        dest='colorize',
        default=sys.stderr.isatty(), # Default based on TTY
        help="Force colorized log messages (Default: auto-detect based on TTY)."
    )
    color_parser.add_argument(
        '--no-color',
        action='store_false',
        dest='colorize',
        help="Disable colorized log messages."
    )

    # --- Other ---
    parser.add_argument(
        '--version',
        action='version',
        version=f'ProjectMap v{__version__}'
    )
    parser.add_argument(
        '--help',
        action='help',
        help="Display this help message and exit."
    )
    return parser

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parses command-line arguments (defaults to sys.argv[1:])."""
    return build_parser().parse_args(argv)

def split_patterns(patterns_str: str) -> List[str]:
    """'a, *.log,,b' -> ['a', '*.log', 'b']"""
    return [pattern.strip() for pattern in patterns_str.split(",") if pattern.strip()]

def config_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Turns parsed flags into ProjectMap keyword arguments.

    Raises:
        ValueError: For an invalid --maxDepth or --contentSizeLimit.
    """
    config: Dict[str, Any] = {
        'root_dir': args.root_dir,
        'output_path': args.output_path,
        'exclude': split_patterns(args.exclude) if args.exclude is not None else list(DEFAULT_EXCLUDES),
        'show_hidden': args.show_hidden,
        'include_content': args.include_content,
        'max_depth': parse_depth_string(args.max_depth),
        'content_size_limit': DEFAULT_CONTENT_SIZE_LIMIT_KB,
    }
    if args.content_size_limit is not None:
        config['content_size_limit'] = parse_size_string(args.content_size_limit)
    return config

# --- Main Execution Logic ---
def main(argv: Optional[List[str]] = None):
    """Main function to run the project map generator."""
    try:
        args = parse_args(argv)
        red = Colors.RED if args.colorize else ""
        reset = Colors.RESET if args.colorize else ""

        if args.interactive:
            print("Launching interactive setup...")
            config = run_interactive_setup()
            if not config: # Setup was cancelled
                sys.exit(0)
        else:
            try:
                config = config_from_args(args)
            except ValueError as e_option:
                print(f"{red}Error: {e_option}{reset}", file=sys.stderr)
                sys.exit(1)

        try:
            project_map = ProjectMap(**config, verbose=args.verbose, colorize=args.colorize)
            project_map.run()
        except RootNotFoundError as e_root:
            print(f"{red}Error: {e_root}{reset}", file=sys.stderr)
            sys.exit(1)
        except ValueError as e_value:
            print(f"{red}Error: {e_value}{reset}", file=sys.stderr)
            sys.exit(1)
        except OSError as e_write:
            print(f"{red}Error: Could not write project map: {e_write}{reset}", file=sys.stderr)
            sys.exit(1)

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        sys.exit(130)  # Standard exit code for SIGINT

if __name__ == '__main__':
    main()
