"""Entry point for querying a reference from the shell: python -m refstore."""

import argparse
import logging
import sys

from pysam.utils import SamtoolsError

from .config import RefStoreConfig
from .core import RefStoreError, load_fasta, parse_region


def main(argv: list[str] | None = None) -> int:
    """Load the configured reference into memory and print bases for each region."""
    parser = argparse.ArgumentParser(
        prog="refstore",
        description="Print reference bases for regions like chr1:1000-2000 (0-based, half-open).",
    )
    parser.add_argument("regions", nargs="+", metavar="REGION")
    args = parser.parse_args(argv)

    try:
        config = RefStoreConfig.from_env()
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")

    if not config.reference:
        print("REFSTORE_REFERENCE must point to a FASTA file", file=sys.stderr)
        return 1

    try:
        regions = [parse_region(r, max_size=config.max_query_size) for r in args.regions]
        with load_fasta(config.reference, uppercase=config.uppercase) as reader:
            for text, region in zip(args.regions, regions):
                print(f">{text}")
                print(reader.get_bases(region))
    except (RefStoreError, SamtoolsError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
