from typing import List
import sys
import os
import argparse
import logging

##################################################################################################
# Main
##################################################################################################

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Check the repository for organizational conventions (license headers, script preambles, naming).")
    parser.add_argument('root', type=str, nargs='?', default='.',
                        help='Repository root (default: current directory).')
    parser.add_argument('--checks', type=str, nargs='+', default=None,
                        help='List of checks to perform. If not provided, all checks will be performed.')
    parser.add_argument('--list', action='store_true', help='List the available checks and exit.')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging.')
    return parser


def main(argv: List[str] | None = None) -> int:
    if sys.platform.lower() == "win32":
        os.system('color')
        sys.stdout.reconfigure(encoding='utf-8') # type: ignore
        sys.stderr.reconfigure(encoding='utf-8') # type: ignore

    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format='%(message)s')

    from conventions.tasks.check import all_checks, check_main, exit_status

    if args.list:
        for name in all_checks():
            print(name)
        return 0

    failures = check_main(args.root, args.checks)
    return exit_status(failures)
