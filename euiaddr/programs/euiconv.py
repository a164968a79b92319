#!/usr/bin/python3
#
# euiconv -- Convert EUI-48 and EUI-64 hardware addresses
#

import argparse
import logging
import sys

from euiaddr.cli.types import eui, octets


logger = logging.getLogger("euiconv")


def convert(value: str, to_octets: bool = False, from_octets: bool = False) -> str:
    if from_octets:
        address = octets(value)
    else:
        address = eui(value)
    logger.debug("Converted %r to %r", value, address)
    if to_octets:
        return address.to_octets().hex()
    return address.format()


def run(argv=None) -> int:
    parser = argparse.ArgumentParser("euiconv", description="Convert EUI-48 and EUI-64 hardware addresses")
    parser.add_argument("--debug", action="store_true", help="Enable debug output")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--octets", action="store_true", help="Print octets as plain hex")
    mode.add_argument("--from-octets", action="store_true", help="Read addresses as plain hex octets")
    parser.add_argument("address", help="Address to convert", nargs="+")
    args = parser.parse_args(argv)

    if args.debug:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("[%(levelname)s:%(name)s] %(msg)s"))
        root_logger = logging.getLogger()
        root_logger.setLevel(logging.DEBUG)
        root_logger.addHandler(handler)

    status = 0
    for value in args.address:
        try:
            print(convert(value, to_octets=args.octets, from_octets=args.from_octets))
        except ValueError as e:
            print(f"{value}: {e}", file=sys.stderr)
            status = 1
    return status


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
