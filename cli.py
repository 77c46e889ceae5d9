#!/usr/bin/env python3
"""
gf-shamir CLI: split a secret into hex shares and combine them back.

Usage:
    cli.py split --message "secret" -n 5 -k 3 [--format json] [--output shares.txt]
    cli.py split --file secret.key -n 5 -k 3
    cli.py combine --shares <hex> <hex> <hex> [--output secret.bin]
    cli.py combine --input shares.txt
    cli.py verify --input shares.txt

Shares go to stdout (one hex string per line unless --format json);
diagnostics go to stderr.
"""

import argparse
import os
import sys

import structlog

from gf_shamir import codec, shamir
from gf_shamir.errors import SecretSharingError
from gf_shamir.logging import configure_logging

log = structlog.get_logger()


def _read_shares(args):
    """Collect shares from --shares, --input, or stdin, in that order."""
    if args.shares:
        return [codec.decode_share(s) for s in args.shares]
    if args.input:
        with open(args.input) as f:
            return codec.load_shares(f.read())
    return codec.load_shares(sys.stdin.read())


def cmd_split(args):
    """Split a secret into shares."""
    if args.message is not None:
        secret = args.message.encode('utf-8')
        source = 'message'
    elif args.file:
        if not os.path.exists(args.file):
            print(f"Error: file not found: {args.file}", file=sys.stderr)
            return 1
        with open(args.file, 'rb') as f:
            secret = f.read()
        source = os.path.basename(args.file)
    else:
        secret = sys.stdin.buffer.read()
        source = 'stdin'

    try:
        shares = shamir.split(secret, args.shares, args.threshold)
    except SecretSharingError as e:
        log.warning('split_failed', kind=e.kind.name, n=args.shares, k=args.threshold)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    log.info('split_complete', source=source, secret_size=len(secret),
             n=args.shares, k=args.threshold)

    text = codec.dump_shares(shares, args.format)
    if args.output:
        try:
            with open(args.output, 'w') as f:
                f.write(text)
        except OSError as e:
            print(f"Error: cannot write shares: {e}", file=sys.stderr)
            return 1
        print(f"Wrote {len(shares)} shares to {args.output} "
              f"(need {args.threshold} of {args.shares} to recover)", file=sys.stderr)
    else:
        sys.stdout.write(text if text.endswith('\n') else text + '\n')
    return 0


def _missing_input(args):
    """Report a --input path that does not exist; True when the caller should stop."""
    if args.input and not args.shares and not os.path.exists(args.input):
        print(f"Error: file not found: {args.input}", file=sys.stderr)
        return True
    return False


def cmd_combine(args):
    """Reconstruct a secret from shares."""
    if _missing_input(args):
        return 1
    try:
        shares = _read_shares(args)
        secret = shamir.combine(shares)
    except SecretSharingError as e:
        log.warning('combine_failed', kind=e.kind.name)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        log.warning('share_decode_failed', error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: cannot read shares: {e}", file=sys.stderr)
        return 1

    log.info('combine_complete', shares=len(shares), secret_size=len(secret))

    if args.output:
        try:
            with open(args.output, 'wb') as f:
                f.write(secret)
        except OSError as e:
            print(f"Error: cannot write secret: {e}", file=sys.stderr)
            return 1
        print(f"Saved {len(secret)} bytes to: {args.output}", file=sys.stderr)
        return 0

    # Print as text when possible, hex otherwise
    try:
        print(secret.decode('utf-8'))
    except UnicodeDecodeError:
        print(secret.hex())
    return 0


def cmd_verify(args):
    """Check that a share set is combinable without reconstructing it."""
    if _missing_input(args):
        return 1
    try:
        shares = _read_shares(args)
        views, xs = shamir.validate_shares(shares)
    except ValueError as e:
        print("Valid:   False")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: cannot read shares: {e}", file=sys.stderr)
        return 1

    print("Valid:   True")
    print(f"Shares:  {len(views)}")
    print(f"Secret:  {len(views[0]) - 1} bytes")
    print(f"X:       {', '.join(str(x) for x in xs)}")
    return 0


def build_parser():
    parser = argparse.ArgumentParser(
        prog='gf-shamir',
        description="Shamir's Secret Sharing over GF(2^8).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Split a text secret (3-of-5)
  %(prog)s split --message "The truth is here" -n 5 -k 3 > shares.txt

  # Recover with any 3 of them
  head -n 3 shares.txt | %(prog)s combine

  # Check a share set
  %(prog)s verify --input shares.txt
        """
    )
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging on stderr')

    sub = parser.add_subparsers(dest='command', help='Command')

    p_split = sub.add_parser('split', help='Split a secret into shares')
    p_split.add_argument('--message', '-m', help='Text secret')
    p_split.add_argument('--file', '-f', help='File holding the secret')
    p_split.add_argument('--shares', '-n', type=int, required=True, help='Total shares (N)')
    p_split.add_argument('--threshold', '-k', type=int, required=True, help='Threshold to recover (K)')
    p_split.add_argument('--format', choices=codec.FORMATS, default='lines', help='Share set format')
    p_split.add_argument('--output', '-o', help='Write shares to this file instead of stdout')

    for name, help_text in (('combine', 'Reconstruct a secret from shares'),
                            ('verify', 'Check shares without reconstructing')):
        p = sub.add_parser(name, help=help_text)
        p.add_argument('--shares', '-s', nargs='+', help='Hex shares')
        p.add_argument('--input', '-i', help='File with one hex share per line, or a JSON array')
        if name == 'combine':
            p.add_argument('--output', '-o', help='Output file (default: print to stdout)')

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging('DEBUG' if args.verbose else None)

    if not args.command:
        parser.print_help()
        return 1

    handlers = {
        'split': cmd_split,
        'combine': cmd_combine,
        'verify': cmd_verify,
    }

    log.debug('command_start', command=args.command)
    return handlers[args.command](args)


if __name__ == '__main__':
    sys.exit(main())
