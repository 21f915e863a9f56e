#!/usr/bin/env python3
"""
Win2Myanmar3 CLI

Command-line interface for converting Win Innwa documents to Myanmar3 Unicode.

Usage:
    win2myanmar3 <source> [options]
    win2myanmar3 letter.docx
    win2myanmar3 ./documents/                 # convert all files in directory
    win2myanmar3 notes.txt report.xlsx        # convert multiple files
    win2myanmar3 --text "jrefrm"              # convert a string

Options:
    -o, --output DIR       Output directory (default: ./win2myanmar3_output)
    --font NAME            Legacy font to convert (default: Win Innwa)
    --target-font NAME     Font given to converted runs (default: Myanmar Text)
    --encoding NAME        Encoding of .txt sources (default: utf-8)
    --text TEXT            Convert TEXT and print it
    --formats              Show all supported formats
"""

import argparse
import sys
import os

# Allow running from the project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from win2myanmar3.core import DEFAULT_SOURCE_FONT, TARGET_FONT, Win2Myanmar3
from win2myanmar3.errors import ConversionError


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="win2myanmar3",
        description=(
            "Win Innwa to Myanmar3 Unicode Converter\n\n"
            "Converts text typed in the Win Innwa legacy font into Unicode\n"
            "Myanmar text in standard storage order. Office documents keep\n"
            "their layout; only runs in the legacy font are rewritten."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  win2myanmar3 letter.docx\n"
            "  win2myanmar3 ./archive/                          # whole directory\n"
            "  win2myanmar3 notes.txt budget.xlsx slides.pptx   # multiple files\n"
            "  win2myanmar3 notes.txt --encoding cp1252         # 8-bit text file\n"
            "  win2myanmar3 letter.docx --font \"Win Innwa 2\"    # other font name\n"
            "  win2myanmar3 letter.docx -o ./unicode_out        # custom output dir\n"
            "  win2myanmar3 --text \"jrefrm\"                     # print to terminal\n"
        ),
    )

    parser.add_argument(
        "sources",
        nargs="*",
        help="Files or directories to convert",
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Output directory (default: ./win2myanmar3_output)",
    )
    parser.add_argument(
        "--font",
        default=DEFAULT_SOURCE_FONT,
        help=f"Legacy font whose runs are converted (default: {DEFAULT_SOURCE_FONT})",
    )
    parser.add_argument(
        "--target-font",
        default=TARGET_FONT,
        help=f"Font given to converted runs (default: {TARGET_FONT})",
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Encoding used to read .txt sources (default: utf-8)",
    )
    parser.add_argument(
        "--text",
        default=None,
        help="Convert TEXT and print the result instead of converting files",
    )
    parser.add_argument(
        "--formats",
        action="store_true",
        help="Show all supported input formats and exit",
    )

    args = parser.parse_args(argv)

    if args.formats:
        _show_formats()
        return

    if args.text is not None:
        print(Win2Myanmar3.convert_text(args.text))
        return

    if not args.sources:
        parser.print_help()
        print("\nError: No sources provided. Specify files or directories to convert.")
        sys.exit(1)

    engine = Win2Myanmar3(
        source_font=args.font,
        target_font=args.target_font,
        output_dir=args.output,
        encoding=args.encoding,
    )

    print("=" * 60)
    print("  WIN2MYANMAR3 - Win Innwa to Unicode Converter")
    print("=" * 60)
    print()

    success_count = 0
    error_count = 0

    for source in args.sources:
        try:
            results = engine.convert(source)
        except ConversionError as e:
            print(f"[ERROR] {source}: {e}", file=sys.stderr)
            error_count += 1
            continue

        for result in results:
            if result.ok:
                success_count += 1
            else:
                error_count += 1

    print()
    print("-" * 60)
    print(f"  Done: {success_count} converted, {error_count} errors")
    print(f"  Output: {engine.output_dir}")
    print("-" * 60)

    if error_count:
        sys.exit(1)


def _show_formats():
    """Display all supported formats."""
    formats = Win2Myanmar3.supported_formats()
    print("\nSupported Input Formats:")
    print("-" * 40)
    for category, extensions in formats.items():
        print(f"\n  {category}:")
        for ext in extensions:
            print(f"    {ext}")
    print()


if __name__ == "__main__":
    main()
