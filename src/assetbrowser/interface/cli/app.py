from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merging
(defaults, saved state, command-line overrides), the asset scan itself and
result rendering. Ctrl+C cancels the scan cooperatively; the partial tree is
still printed.
"""

import argparse
import json
import os
import signal
import sys
import threading
import zipfile
from typing import Any, Dict, List, Optional

from assetbrowser.core.analysis.tree_renderer import render_asset_tree, tree_to_dict
from assetbrowser.core.services.asset_browser import build_asset_tree
from assetbrowser.core.services.callbacks import EventScanCallback
from assetbrowser.core.services.validator import validate_config
from assetbrowser.domain.asset_models import RootNode
from assetbrowser.domain.config import (
    DEFAULT_STACKS,
    get_default_config,
    get_stacks,
    load_app_state,
    load_config,
    save_config,
)
from assetbrowser.domain.errors import AssetScanError
from assetbrowser.domain.node_factory import DefaultNodeFactory
from assetbrowser.infra.fs import write_lines
from assetbrowser.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    get_logger,
)
from assetbrowser.infra.vfs import ZipArchiveFile, open_vfs
from assetbrowser.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_SCAN_FAILED = 1
EXIT_BAD_INPUT = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    if sys.platform == "win32" and hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")

    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 1. Logging bootstrap
    configure_logging(_logging_config(args))

    # 2. Configuration hierarchy
    if args.use_defaults:
        base_conf = get_default_config()
        stacks = {name: list(exts) for name, exts in DEFAULT_STACKS.items()}
    else:
        base_conf = load_config()
        stacks = get_stacks(load_app_state())

    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, stacks=stacks)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 3. Pre-flight input verification
    input_path = clean_conf["input_path"]
    if not os.path.exists(input_path):
        msg = f"Input path does not exist: {input_path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_BAD_INPUT
    if not os.path.isdir(input_path) and not input_path.lower().endswith(".zip"):
        msg = f"Input must be a folder or a .zip archive: {input_path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_BAD_INPUT

    if args.save_config:
        save_config(clean_conf)

    # 4. Scan
    try:
        root_dir = open_vfs(input_path)
    except (OSError, zipfile.BadZipFile) as e:
        msg = f"Cannot open '{input_path}': {e}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_BAD_INPUT

    callback = EventScanCallback(on_update=logger.info if clean_conf["show_progress"] else None)
    factory = DefaultNodeFactory(clean_conf["extensions"])
    try:
        with _cancel_on_sigint(callback):
            tree = build_asset_tree(root_dir, factory, callback)
    except AssetScanError as e:
        logger.critical(f"Scan failed at '{e.path}'", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_SCAN_FAILED
    finally:
        if isinstance(root_dir, ZipArchiveFile):
            root_dir.close()

    # 5. Output rendering
    _print_tree(tree, json_output=clean_conf["json_output"])

    if clean_conf["tree_file"]:
        try:
            write_lines(clean_conf["tree_file"], render_asset_tree(tree))
            logger.info(f"Tree saved to file: {clean_conf['tree_file']}")
        except OSError as e:
            logger.error(f"Failed to save tree to '{clean_conf['tree_file']}': {e}")
            return EXIT_SCAN_FAILED

    if callback.is_cancelled():
        print("Scan interrupted. The tree above is incomplete.", file=sys.stderr)
        return EXIT_INTERRUPTED
    return EXIT_OK

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _logging_config(args: argparse.Namespace) -> LoggingConfig:
    """
    Map the diagnostic flags onto a logging configuration.

    '--debug' without '--log-file' also keeps a rotating log in the user
    data directory.
    """
    if not args.debug:
        return LoggingConfig(level="INFO", log_file=args.log_file)
    return LoggingConfig(level="DEBUG", log_file=args.log_file or get_default_log_path())


def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge known override keys into the base configuration.

    'any_extension' is a pseudo-key: it switches 'extensions' to None and
    drops any stack selection.
    """
    out = dict(base)
    for k in ("input_path", "extensions", "stack", "show_progress", "json_output", "tree_file"):
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    if overrides.get("any_extension"):
        out["extensions"] = None
        out["stack"] = ""
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _print_tree(tree: RootNode, *, json_output: bool) -> None:
    if json_output:
        print(json.dumps(tree_to_dict(tree), ensure_ascii=False, indent=2))
        return

    for line in render_asset_tree(tree):
        print(line)
    print(f"\n{tree.count_assets()} assets")


class _cancel_on_sigint:
    """Route Ctrl+C to the scan callback instead of raising KeyboardInterrupt."""

    def __init__(self, callback: EventScanCallback) -> None:
        self._callback = callback
        self._previous: Any = None
        self._installed = False

    def __enter__(self) -> "_cancel_on_sigint":
        # Signal handlers can only be installed from the main thread
        if threading.current_thread() is threading.main_thread():
            self._previous = signal.signal(signal.SIGINT, self._handle)
            self._installed = True
        return self

    def __exit__(self, *exc_info) -> None:
        if self._installed and self._previous is not None:
            signal.signal(signal.SIGINT, self._previous)

    def _handle(self, signum: int, frame: Any) -> None:
        self._callback.cancel()
