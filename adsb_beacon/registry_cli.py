#!/usr/bin/env python3
"""Look up the registry of ICAO 24-bit addresses."""
import argparse
import logging
import sys

from adsb_beacon.registry import RegistryClassifier, address_to_binary

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s.%(msecs)03d | %(levelname)-8s | %(name)-20s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(description='Classify aircraft addresses by registry')
    parser.add_argument('addresses', nargs='*', metavar='HEX',
                        help='24-bit addresses, e.g. A0CF8D')
    parser.add_argument('--rules', action='store_true',
                        help='Show how many rules are loaded')

    args = parser.parse_args(argv)
    classifier = RegistryClassifier()

    if args.rules:
        counts = classifier.count_rules()
        logger.info(f"Top-level: {counts['top_level']}, overrides: {counts['overrides']}, "
                    f"regional: {counts['regional']}")

    status = 0
    for address in args.addresses:
        try:
            binary = address_to_binary(address)
        except ValueError:
            logger.error(f"Not a 24-bit hex address: {address}")
            status = 1
            continue
        print(f"{address.upper():<6}  {binary}  {classifier.classify(address)}")

    return status


if __name__ == '__main__':
    sys.exit(main())
