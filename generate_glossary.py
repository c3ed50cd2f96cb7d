#!/usr/bin/env python3
"""
Generate a static HTML glossary site from a plain-text glossary file.

Reads stanzas (term line, definition lines, blank line) from the input file
and writes index.html plus one <term>.html page per term into the output
folder.

Usage:
    python3 generate_glossary.py data/terms.txt output
    python3 generate_glossary.py                       # prompts for both paths
    python3 generate_glossary.py terms.txt site --create-dir --progress --stats
"""

import argparse
import logging
import sys

from glossary_site import GlossaryError, GlossaryParser, generate_site, load_config

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Generate a static HTML site from a plain-text glossary'
    )
    parser.add_argument('input', nargs='?', help='Glossary text file')
    parser.add_argument('output_dir', nargs='?', help='Folder to write HTML pages into')
    parser.add_argument('--title', help='Index page title (default: Glossary)')
    parser.add_argument('--heading', help='Index page heading (default: Glossary Index)')
    parser.add_argument('--color', help='Term heading colour (default: red)')
    parser.add_argument('--encoding', help='Input file encoding (default: utf-8)')
    parser.add_argument('--create-dir', action='store_true', default=None,
                        help='Create the output folder if it does not exist')
    parser.add_argument('--progress', action='store_true', default=None,
                        help='Show a progress bar while writing term pages')
    parser.add_argument('--env-file', help='Load settings from this .env file')
    parser.add_argument('--stats', action='store_true',
                        help='Print parsing statistics')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Verbose output')
    return parser


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    try:
        config = load_config(
            env_file=args.env_file,
            input_path=args.input,
            output_dir=args.output_dir,
            title=args.title,
            heading=args.heading,
            term_color=args.color,
            encoding=args.encoding,
            create_output_dir=args.create_dir,
            show_progress=args.progress,
            log_level="DEBUG" if args.verbose else None,
        )
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    logging.getLogger().setLevel(getattr(logging, config.log_level.upper(), logging.INFO))

    # Get the input file name and output folder from the user
    if not config.input_path:
        config.input_path = input("Enter input file name: ").strip()
    if not config.output_dir:
        config.output_dir = input("Enter output folder name: ").strip()

    if not config.input_path:
        logger.error("No input file name given")
        return 1
    if not config.output_dir:
        logger.error("No output folder name given")
        return 1

    glossary_parser = GlossaryParser()
    try:
        glossary = glossary_parser.parse_file(config.input_path, encoding=config.encoding)
        result = generate_site(glossary, config.output_dir, config)
    except GlossaryError as e:
        logger.error(str(e))
        return 1

    if args.stats:
        glossary_parser.print_stats()

    print(f"Wrote {result.page_count} pages to {result.output_dir}")
    print("Glossary generation complete!")
    return 0


if __name__ == '__main__':
    sys.exit(main())
