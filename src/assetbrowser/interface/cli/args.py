from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates parsed argparse
namespaces into configuration overrides.
"""

import argparse
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the asset browser CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="assetbrowser",
        description="Scan a folder or zip archive into a sorted tree of categories and assets.",
    )

    # --- Source ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="Folder or .zip archive to scan (default: last used path or the current directory).",
    )

    # --- Asset Recognition ---
    p.add_argument(
        "--ext",
        dest="extensions",
        default=None,
        help="Comma-separated asset extensions, highest priority first (e.g. .doc.html,.html,.js).",
    )
    p.add_argument(
        "--stack",
        default=None,
        help="Use a named extension stack from the configuration.",
    )
    p.add_argument(
        "--any-ext",
        dest="any_extension",
        action="store_true",
        help="Treat every file with a dot in its name as an asset.",
    )

    # --- Output ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the tree as JSON instead of text.",
    )
    p.add_argument(
        "--tree-file",
        dest="tree_file",
        default=None,
        help="Also save the text tree to this file.",
    )
    p.add_argument(
        "--progress",
        dest="show_progress",
        action="store_true",
        help="Log every folder as it is read.",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the saved configuration.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Remember the effective settings for the next run.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Write a rotating diagnostic log to this file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Only options given on the command line produce a key; an explicit
    extension list clears any saved stack.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if args.input_path:
        overrides["input_path"] = args.input_path

    if args.any_extension:
        overrides["any_extension"] = True
    elif args.extensions:
        overrides["extensions"] = _split_csv(args.extensions)
        overrides["stack"] = ""
    if args.stack:
        overrides["stack"] = args.stack

    if args.json_output:
        overrides["json_output"] = True
    if args.show_progress:
        overrides["show_progress"] = True
    if args.tree_file:
        overrides["tree_file"] = args.tree_file

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
