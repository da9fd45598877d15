#!/usr/bin/env python3
"""
markdown-docx CLI

Command-line interface for markdown-to-Word conversion.

Usage:
    markdown-docx <source> [options]
    markdown-docx notes.md
    markdown-docx chapter1.md chapter2.md     # convert multiple files
    markdown-docx report.md -o ./word_out     # custom output dir

Options:
    -o, --output DIR     Output directory (default: ./docx_output)
    --font NAME          Body font family
    --font-size PT       Body font size in points
    -v, --verbose        Log every conversion step
    --formats            Show all supported formats
"""

import argparse
import logging
import sys

from markdown_docx.core import MarkdownDocxConverter
from markdown_docx.styles import DEFAULT_FONT, DEFAULT_FONT_SIZE, DocumentStyle


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="markdown-docx",
        description=(
            "Markdown to Word Converter\n\n"
            "Converts markdown files into .docx documents with styled headings,\n"
            "lists, tables, quotes and code blocks. Use \\p in the source for an\n"
            "explicit paragraph gap."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  markdown-docx notes.md\n"
            "  markdown-docx chapter1.md chapter2.md\n"
            "  markdown-docx report.md -o ./word_out --font Arial --font-size 11\n"
        ),
    )

    parser.add_argument(
        "sources",
        nargs="*",
        help="Markdown files to convert",
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Output directory (default: ./docx_output)",
    )
    parser.add_argument(
        "--font",
        default=DEFAULT_FONT,
        help=f"Body font family (default: {DEFAULT_FONT})",
    )
    parser.add_argument(
        "--font-size",
        type=float,
        default=DEFAULT_FONT_SIZE,
        help=f"Body font size in points (default: {DEFAULT_FONT_SIZE:g})",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every conversion step",
    )
    parser.add_argument(
        "--formats",
        action="store_true",
        help="Show all supported input formats and exit",
    )

    args = parser.parse_args(argv)

    if args.formats:
        _show_formats()
        return 0

    if not args.sources:
        parser.print_help()
        print("\nError: No sources provided. Specify markdown files to convert.")
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        style = DocumentStyle(font=args.font, font_size=args.font_size)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    engine = MarkdownDocxConverter(style=style, output_dir=args.output)

    print("=" * 60)
    print("  MARKDOWN-DOCX - Markdown to Word Converter")
    print("=" * 60)
    print()

    success_count = 0
    error_count = 0

    for source in args.sources:
        try:
            print(f"[MD] Converting: {source}")
            engine.convert_file(source, save=True)
            print(f"[SAVED] {engine.output_path_for(source)}")
            success_count += 1
        except Exception as e:
            print(f"[ERROR] {source}: {e}", file=sys.stderr)
            error_count += 1

    print()
    print("-" * 60)
    print(f"  Done: {success_count} converted, {error_count} errors")
    print(f"  Output: {engine.output_dir}")
    print("-" * 60)

    return 0 if success_count else 1


def _show_formats():
    """Display all supported formats."""
    formats = MarkdownDocxConverter.supported_formats()
    print("\nSupported Input Formats:")
    print("-" * 40)
    for category, extensions in formats.items():
        print(f"\n  {category}:")
        for ext in extensions:
            print(f"    {ext}")
    print()


if __name__ == "__main__":
    sys.exit(main())
