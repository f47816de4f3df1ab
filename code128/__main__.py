"""
CLI interface for the Code 128 codec.

Usage:
    python -m code128 encode "<text>" [--subtype A|B|C] [--format NAME] [--json]
    python -m code128 gs1 "<AI + data>" ... [--format NAME] [--json]
    python -m code128 decode 104 43 73 ... [--strict]
    python -m code128 pattern "<0/1 modules>"
    python -m code128 ai 105 102 42 18 ...

Options:
    --verbose     Enable debug logging on stderr
    --log-json    Emit log lines as JSON
"""

import argparse
import json
import sys
from typing import List, Optional

import structlog

from .ai_catalog import AIRecord
from .config.logging import configure_logging
from .core.sequence import Code128
from .errors import Code128Error
from .formatters.formats import Format
from .formatters.json_formatter import sequence_to_dict

logger = structlog.get_logger(__name__)

FORMAT_NAMES = [f.value for f in Format]


def format_record(record: AIRecord, indent: int = 2) -> str:
    """Format a single GS1 element for display."""
    prefix = " " * indent
    title = record.title or "Unknown AI"
    return f"{prefix}AI({record.ai}): {title}\n{prefix}  Value: {record.data!r}"


def format_code(code: Code128, fmt: str, black: str = "1", white: str = "0") -> str:
    """Render a code in the requested output format."""
    if Format(fmt) is Format.BARCODE:
        return code.to_barcode_string(black, white)
    return code.to_string(fmt)


def _parse_values(raw: List[str]) -> List[int]:
    values: List[int] = []
    for item in raw:
        values.extend(int(v) for v in item.replace(",", " ").split())
    return values


def _build(args: argparse.Namespace) -> Code128:
    if args.command == "encode":
        return Code128.create(args.subtype, args.text)
    if args.command == "gs1":
        return Code128.create_gs1_parts(*args.parts)
    if args.command == "pattern":
        return Code128.from_pattern(args.bits)
    return Code128.from_symbols(_parse_values(args.values), strict=getattr(args, "strict", False))


def _add_output_options(parser: argparse.ArgumentParser, default: str) -> None:
    parser.add_argument(
        '--format',
        choices=FORMAT_NAMES,
        default=default,
        help=f'Output format (default: {default})'
    )
    parser.add_argument(
        '--json',
        action='store_true',
        help='Output a JSON description of the code'
    )
    parser.add_argument(
        '--black',
        default='1',
        help='Character for black modules in barcode format'
    )
    parser.add_argument(
        '--white',
        default='0',
        help='Character for white modules in barcode format'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='code128',
        description='Encode and decode Code 128 and GS1-128 barcodes'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )
    parser.add_argument(
        '--log-json',
        action='store_true',
        help='Emit log lines as JSON'
    )

    sub = parser.add_subparsers(dest='command', required=True)

    encode = sub.add_parser('encode', help='Encode text')
    encode.add_argument('text', help='Text to encode (Latin-1)')
    encode.add_argument(
        '--subtype',
        choices=['A', 'B', 'C'],
        default='B',
        help='Start set (default: B)'
    )
    _add_output_options(encode, Format.VALUES.value)

    gs1 = sub.add_parser('gs1', help='Encode GS1 element strings')
    gs1.add_argument('parts', nargs='+', help='Element strings, each AI followed by its data')
    _add_output_options(gs1, Format.VALUES.value)

    decode = sub.add_parser('decode', help='Decode symbol values')
    decode.add_argument('values', nargs='+', help='Symbol values starting with a Start code')
    decode.add_argument(
        '--strict',
        action='store_true',
        help='Verify a supplied check symbol and Stop code'
    )
    _add_output_options(decode, Format.REGULAR.value)

    pattern = sub.add_parser('pattern', help='Decode a module pattern')
    pattern.add_argument('bits', help="Modules as '1' (black) and '0' (white)")
    _add_output_options(pattern, Format.REGULAR.value)

    ai = sub.add_parser('ai', help='List GS1 Application Identifier data')
    ai.add_argument('values', nargs='+', help='Symbol values starting with a Start code')
    ai.add_argument(
        '--json',
        action='store_true',
        help='Output AI data as JSON'
    )

    return parser


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, log_json=args.log_json)

    try:
        code = _build(args)
    except Code128Error as e:
        logger.debug("command failed", command=args.command, code=e.code.value)
        if getattr(args, 'json', False):
            print(json.dumps({"error": e.to_dict()}, indent=2))
        else:
            print(f"Error [{e.code.value}]: {e.message}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.command == 'ai':
        records = code.get_ai_records()
        if args.json:
            output = {r.title or f"AI({r.ai})": r.data for r in records}
            print(json.dumps(output, indent=2, ensure_ascii=False))
        else:
            for record in records:
                print(format_record(record))
        return 0

    if args.json:
        print(json.dumps(sequence_to_dict(code), indent=2, ensure_ascii=False))
    else:
        print(format_code(code, args.format, args.black, args.white))
    return 0


if __name__ == '__main__':
    sys.exit(main())
