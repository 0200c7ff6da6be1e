"""Command-line interface for SUO-KIF checking and TPTP translation."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from suokif.suokif import SUOKIF
from suokif.suokif_config import SUOKIFConfig
from suokif.suokif_error import SUOKIFError
from suokif.suokif_kb_assembler import SUOKIFKBAssembler, read_kif_file
from suokif.suokif_options import SUOKIFConversionOptions, SUOKIFOutputLanguage


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the suokif command."""
    parser = argparse.ArgumentParser(
        prog='suokif',
        description='Check SUO-KIF files and translate them to TPTP',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Translate a KIF file to TPTP on stdout
  suokif convert Merge.kif

  # Translate several files into one KB with a conjecture
  suokif convert Merge.kif Mid-level-ontology.kif --kb SUMO -o SUMO.tptp \\
      --conjecture "(instance ?X Human)"

  # Use a YAML configuration file
  suokif convert --config sumo.yaml

  # Report lexical and structural problems
  suokif check Merge.kif
"""
    )
    parser.add_argument(
        '--log-level',
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level (default: WARNING)'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    convert_parser = subparsers.add_parser('convert', help='Translate KIF files to TPTP')
    convert_parser.add_argument('files', nargs='*', help='KIF files to translate')
    convert_parser.add_argument('--config', '-c', help='YAML configuration file')
    convert_parser.add_argument('--output', '-o', help='Output file (default: stdout)')
    convert_parser.add_argument('--kb', help='Knowledge base name (default: first file name)')
    convert_parser.add_argument(
        '--lang',
        choices=[lang.value for lang in SUOKIFOutputLanguage],
        help='TPTP dialect (default: fof)'
    )
    convert_parser.add_argument('--conjecture', help='Formula to append as the conjecture')
    convert_parser.add_argument('--question', action='store_true', help='Emit the conjecture as a question')
    convert_parser.add_argument('--show-numbers', action='store_true', help='Keep numerals instead of n__ symbols')
    convert_parser.add_argument('--no-prefixes', action='store_true', help='Do not prefix symbols with s__')
    convert_parser.add_argument('--remove-strings', action='store_true', help='Drop string literal arguments')
    convert_parser.add_argument('--strict', action='store_true', help='Fail on the first untranslatable formula')

    check_parser = subparsers.add_parser('check', help='Report lexical and parse errors')
    check_parser.add_argument('files', nargs='+', help='KIF files to check')

    return parser


def _config_from_args(args: argparse.Namespace) -> SUOKIFConfig:
    """Merge the optional configuration file with command-line overrides."""
    config = SUOKIFConfig.load_from_file(args.config) if args.config else SUOKIFConfig()

    if args.files:
        config.files = list(args.files)
        if not args.kb and not args.config:
            config.kb_name = Path(args.files[0]).stem

    if args.kb:
        config.kb_name = args.kb

    if args.output:
        config.output = args.output

    if args.conjecture:
        config.conjecture = args.conjecture

    config.question = config.question or args.question
    config.strict = config.strict or args.strict

    options = config.options
    config.options = SUOKIFConversionOptions(
        hide_numbers=options.hide_numbers and not args.show_numbers,
        add_prefixes=options.add_prefixes and not args.no_prefixes,
        remove_strings=options.remove_strings or args.remove_strings,
        output_language=SUOKIFOutputLanguage(args.lang) if args.lang else options.output_language
    )
    return config


def run_convert(args: argparse.Namespace) -> int:
    """Handle the convert command."""
    config = _config_from_args(args)
    if not config.files:
        print("Error: no input files given", file=sys.stderr)
        return 1

    formulas: List[str] = []
    for file_name in config.files:
        formulas.extend(read_kif_file(file_name))

    assembler = SUOKIFKBAssembler(config.options, strict=config.strict)
    result = assembler.convert_formulas(formulas, config.kb_name, config.conjecture, config.question)

    if config.output:
        Path(config.output).write_text(result.content, encoding='utf-8')
        print(f"Wrote {result.axiom_count} axioms to {config.output} ({len(result.skipped)} skipped)")

    else:
        sys.stdout.write(result.content)

    return 0


def run_check(args: argparse.Namespace) -> int:
    """Handle the check command."""
    translator = SUOKIF()
    problems = 0
    for file_name in args.files:
        text = Path(file_name).read_text(encoding='utf-8')
        for error in translator.check(text, file_name):
            print(f"{error.location()}: {error.message}")
            problems += 1

    if problems:
        print(f"{problems} problem(s) found", file=sys.stderr)
        return 1

    return 0


def main(argv: List[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format='%(levelname)s %(name)s: %(message)s')

    if not args.command:
        parser.print_help()
        return 1

    try:
        if args.command == 'convert':
            return run_convert(args)

        return run_check(args)

    except (OSError, ValueError, SUOKIFError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
