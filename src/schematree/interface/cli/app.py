from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, logging bootstrap,
input verification, tree generation and output routing (stdout or file).
Translates every failure into a message on stderr and a process exit code.
"""

import sys
from typing import Any, List, Optional

from schematree.core.services.tree_service import file_to_tree, write_tree_output
from schematree.domain.errors import InputNotFoundError, SchemaTreeError
from schematree.infra.logging import LoggingConfig, configure_logging, get_logger
from schematree.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success and help, 1 for failure).
    """
    # Box-drawing glyphs need UTF-8 even under LANG=C or a Windows code page
    _ensure_utf8(sys.stdout)
    _ensure_utf8(sys.stderr)

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    try:
        args, unknown = parser.parse_known_args(argv)
    except SystemExit as e:
        # --help exits with 0, usage errors with 2
        return EXIT_OK if not e.code else EXIT_FAILURE

    # 2. Logging bootstrap (stderr only, quiet unless --debug)
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    if unknown:
        logger.debug(f"Ignoring unrecognised arguments: {' '.join(unknown)}")

    # 3. Pre-flight input verification
    if not args.input_file:
        parser.print_usage(sys.stderr)
        _report("No input file specified.")
        return EXIT_FAILURE

    overrides = cli_args.args_to_overrides(args)
    logger.debug(f"Render overrides: {overrides}")

    # 4. Tree generation phase
    try:
        tree = file_to_tree(args.input_file, overrides, fmt=args.input_format)
    except KeyboardInterrupt:
        _report("Interrupted by user.")
        return EXIT_INTERRUPTED
    except InputNotFoundError as e:
        _report(str(e))
        return EXIT_FAILURE
    except (SchemaTreeError, OSError, UnicodeDecodeError) as e:
        logger.debug(f"Failed to process {args.input_file}", exc_info=True)
        _report(str(e))
        return EXIT_FAILURE
    except Exception as e:
        logger.critical(f"Unexpected failure while rendering {args.input_file}: {e}", exc_info=True)
        _report(str(e) or "Failed to process file.")
        return EXIT_FAILURE

    # 5. Output routing phase
    if args.output_path:
        try:
            write_tree_output(tree, args.output_path)
        except OSError as e:
            _report(f"Cannot write {args.output_path}: {e}")
            return EXIT_FAILURE
        print(f"Tree written to {args.output_path}")
    else:
        try:
            print(tree)
        except UnicodeEncodeError as e:
            _report(f"Cannot encode the tree for this terminal ({e.encoding}); use --output instead.")
            return EXIT_FAILURE

    return EXIT_OK

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _ensure_utf8(stream: Any) -> None:
    """Switch a text stream to UTF-8 when it uses another encoding."""
    encoding = (getattr(stream, "encoding", None) or "").lower().replace("_", "-")
    if encoding in ("utf-8", "utf8"):
        return
    if hasattr(stream, "reconfigure"):
        stream.reconfigure(encoding="utf-8")


def _report(message: str) -> None:
    """Log an error and echo it to stderr in the user-facing format."""
    logger.debug(message)
    print(f"Error: {message}", file=sys.stderr)

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
