"""symbolmap CLI — build an SVG sprite from files and directories.

Usage:
    symbolmap icons/ -o sprite.svg
    symbolmap -p icon -a class=sprite -a hidden icons/*.svg
    find . -name '*.svg' | symbolmap -l - -o sprite.svg
"""

from __future__ import annotations

import argparse
import logging
import os
import stat
import sys
import tempfile
from pathlib import Path

from symbolmap import __version__
from symbolmap.config import settings
from symbolmap.errors import ErrorKind, SpriteError
from symbolmap.sprite import Sprite, SpriteOptions

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="symbolmap",
        description="Combine standalone SVG images into a single hidden sprite of <symbol>s.",
    )
    parser.add_argument("paths", nargs="*", metavar="PATH", help="SVG file or folder of SVGs")
    parser.add_argument(
        "-l", "--list", action="append", default=[], metavar="FILE",
        help="Read paths from a text file, one per line ('-' for STDIN)",
    )
    parser.add_argument(
        "-a", "--attribute", action="append", default=[], metavar="KEY[=VAL]",
        help="Add an attribute to the sprite's root <svg>",
    )
    parser.add_argument("-o", "--output", help="Save the sprite here instead of printing it")
    parser.add_argument(
        "-p", "--prefix", default=settings.symbolmap_default_prefix,
        help="Prefix for the generated IDs (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to STDERR")
    parser.add_argument("-V", "--version", action="version", version=f"symbolmap {__version__}")
    return parser


def write_atomic(path: Path, content: str) -> None:
    """Write ``content`` to ``path`` via a temp file in the same directory."""
    parent = path.parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(prefix=".tmp.", suffix=".svg", dir=parent)
    except OSError as e:
        raise SpriteError(ErrorKind.WRITE, path) from e

    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.chmod(tmp, _target_mode(path))
        os.replace(tmp, path)
    except OSError as e:
        raise SpriteError(ErrorKind.WRITE, path) from e
    finally:
        if os.path.exists(tmp):
            os.unlink(tmp)


def _target_mode(path: Path) -> int:
    """Permissions for the saved file: the existing file's, else 0666 minus the umask."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        pass
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def run(args: argparse.Namespace) -> None:
    # Check the destination before doing any real work.
    output = Path(args.output) if args.output else None
    if output is not None and output.is_dir():
        raise SpriteError(ErrorKind.WRITE, output)

    options = SpriteOptions(prefix=args.prefix)
    for raw in args.attribute:
        key, sep, value = raw.partition("=")
        options.set_attribute(key, value if sep else None)
    for path in args.paths:
        options.set_path(path)
    for path in args.list:
        options.set_path(path, list_file=True)

    sprite = Sprite.from_options(options)

    for path, flags in sprite.warnings.items():
        print(f"Warning: {path.name} contains {flags.describe()}.", file=sys.stderr)

    if output is None:
        print(sprite)
        return

    write_atomic(output, str(sprite))
    print(
        f"A sprite with {len(sprite)} images has been saved to {output.resolve()}",
        file=sys.stderr,
    )
    for symbol in sprite.symbols:
        print(f"  {symbol}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        # Warnings and results are already printed; logs are opt-in.
        level=getattr(logging, settings.symbolmap_log_level.upper(), logging.INFO)
        if args.verbose
        else logging.ERROR,
        format="%(name)s %(levelname)s %(message)s",
    )

    try:
        run(args)
    except SpriteError as e:
        logger.debug("Build failed (%s)", e.kind.value)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
