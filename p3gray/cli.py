"""
Command lines for the P3 grayscale converter.

Usage:
    p3gray [input.ppm] [output.ppm] [--max-dimension N] [--preview out.png] [-v]
    p3gray-from-png input.png [output.ppm]
"""
import argparse
import sys
from pathlib import Path

from .config import DEFAULT_INPUT, DEFAULT_OUTPUT, MAX_DIMENSION, max_pixel_count
from .convert import convert_file
from .errors import PPMError, PPMFormatError
from .imaging import p3_to_png, png_to_p3

EXIT_OK = 0
EXIT_IO = 1
EXIT_FORMAT = 2


def parse_args(argv=None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        prog="p3gray",
        description="Convert an ASCII color PPM (P3, maxval 255) to grayscale by channel averaging.")
    ap.add_argument("input", nargs="?", default=DEFAULT_INPUT,
                    help=f"Input P3 path (default: {DEFAULT_INPUT})")
    ap.add_argument("output", nargs="?", default=DEFAULT_OUTPUT,
                    help=f"Output P3 path (default: {DEFAULT_OUTPUT})")
    ap.add_argument("--max-dimension", type=int, default=MAX_DIMENSION,
                    help=f"Largest accepted width/height (default: {MAX_DIMENSION})")
    ap.add_argument("--preview", default=None, help="Also save the grayscale result as PNG")
    ap.add_argument("-v", "--verbose", action="store_true", help="Print progress information")
    args = ap.parse_args(argv)
    if args.max_dimension <= 0:
        ap.error("--max-dimension must be >= 1")
    return args


def main(argv=None) -> int:
    args = parse_args(argv)
    in_path = Path(args.input)
    out_path = Path(args.output)

    if not in_path.exists():
        print(f"Error: Cannot open input file '{in_path}'", file=sys.stderr)
        return EXIT_IO

    if args.verbose:
        print(f"[info] input: {in_path}")
        print(f"[info] output: {out_path}")
        print(f"[info] max dimension: {args.max_dimension} "
              f"({max_pixel_count(args.max_dimension)} pixels total)")

    try:
        header = convert_file(in_path, out_path, max_dimension=args.max_dimension)
    except PPMFormatError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FORMAT
    except PPMError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_IO

    if args.verbose:
        print(f"[info] image: {header.width}x{header.height}, maxval {header.max_value}")

    if args.preview:
        try:
            p3_to_png(out_path, args.preview)
        except (OSError, PPMError) as e:
            print(f"Error: preview failed: {e}", file=sys.stderr)
            return EXIT_IO
        if args.verbose:
            print(f"[info] preview: {args.preview}")

    print(f"Wrote {out_path}")
    return EXIT_OK


def png_main(argv=None) -> int:
    ap = argparse.ArgumentParser(
        prog="p3gray-from-png",
        description="Convert any PNG to an 8-bit RGB PPM P3 (ASCII), one image row per line.")
    ap.add_argument("input", help="Input PNG path")
    ap.add_argument("output", nargs="?", help="Output PPM path (defaults to input name with .ppm)")
    args = ap.parse_args(argv)

    in_path = Path(args.input)
    if not in_path.exists():
        print(f"Error: {in_path} does not exist.", file=sys.stderr)
        return EXIT_IO

    out_path = Path(args.output) if args.output else in_path.with_suffix(".ppm")

    try:
        png_to_p3(in_path, out_path)
    except Exception as e:
        print(f"Conversion failed: {e}", file=sys.stderr)
        return EXIT_FORMAT

    print(f"Wrote {out_path}")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
