# src/winbuilder/core/handlers/compile_handler.py
import argparse
import logging
from pathlib import Path
from typing import List

from htmlbuilder import BuilderError
from winbuilder.controllers.compile_controller import CompileController

logger = logging.getLogger(__name__)

compile_help_text = """
  compile <file>... [--out DIR] [--pretty] [--separator S] [--marker M]
                      Compiles template files to HTML. Prints to stdout unless
                      --out is given, in which case <stem>.html files are written.
""".strip()


def handle_compile(args: List[str]) -> int:
    """
    Compiles one or more template files.

    Returns:
        0 for success, 1 for errors.
    """
    parser = argparse.ArgumentParser(prog="winbuilder compile", description="Compile templates to HTML.")
    parser.add_argument("files", nargs="+", type=Path, help="Template files to compile.")
    parser.add_argument("--out", "-o", type=Path, help="Directory for the generated .html files.")
    parser.add_argument("--pretty", action="store_true", default=None, help="Indent the generated HTML.")
    parser.add_argument("--separator", help="Symbol separating attributes inside brackets.")
    parser.add_argument("--marker", help="Character used for indentation.")

    try:
        parsed = parser.parse_args(args)
    except SystemExit:
        return 1

    missing = [str(p) for p in parsed.files if not p.is_file()]
    if missing:
        print(f"❌ File(s) not found: {', '.join(missing)}")
        return 1

    try:
        controller = CompileController(
            attribute_separator=parsed.separator,
            indent_marker=parsed.marker,
            pretty=parsed.pretty,
        )
        results = controller.compile_files(parsed.files, parsed.out)
    except (BuilderError, ValueError) as e:
        logger.error("Compilation failed: %s", e)
        print(f"❌ {e}")
        return 1

    for result in results:
        if result.output is None:
            print(result.html)
        else:
            print(f"✅ {result.source} -> {result.output} ({result.roots} root element(s))")
        if result.diagnostics:
            print(f"⚠️  {result.source}: {len(result.diagnostics)} token(s) skipped")
    return 0
