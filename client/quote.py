"""
Fetch the dollar quote from the lookup server and save it to a file.

    python -m client.quote --output cotacao.txt
"""
import argparse
import sys
from typing import List, Optional

from client import api
from lookup.core import run
from lookup.setup_logging import setup_logging


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="client.quote", description=__doc__.strip().splitlines()[0])
    parser.add_argument("--server", default=api.API, help="lookup server base URL (default: %(default)s)")
    parser.add_argument("--output", default=api.OUTPUT, help="file to write (default: %(default)s)")
    parser.add_argument("--timeout", type=float, default=api.BUDGET_S,
                        help="seconds allowed for the server call (default: %(default)s)")
    args = parser.parse_args(argv)

    setup_logging("WARNING")
    provider = api.server_quote(args.server)
    try:
        outcome = run(
            provider,
            api.file_writer(args.output),
            "USD-BRL",
            args.timeout,
            api.PERSIST_BUDGET_S,
        )
    finally:
        provider.close()
    if not outcome.ok:
        print(f"Quote failed: {outcome}")
        return 1
    print(f"Dólar: {outcome.record.bid} (saved to {args.output})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
