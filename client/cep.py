"""
Look up a CEP by racing BrasilAPI and ViaCEP; print the first answer.

    python -m client.cep 01001000
"""
import argparse
import sys
from typing import List, Optional

from client import api
from lookup.core import race
from lookup.normalizers import Address
from lookup.setup_logging import setup_logging


def print_address(addr: Address) -> None:
    print(f"API: {addr.source}")
    print(f"CEP: {addr.cep}")
    print(f"Street: {addr.street}")
    print(f"Neighborhood: {addr.neighborhood}")
    print(f"City: {addr.city}")
    print(f"State: {addr.state}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="client.cep", description=__doc__.strip().splitlines()[0])
    parser.add_argument("cep", help="8-digit CEP, with or without the dash")
    parser.add_argument("--timeout", type=float, default=api.CEP_BUDGET_S,
                        help="seconds to wait for the first answer (default: %(default)s)")
    args = parser.parse_args(argv)

    setup_logging("WARNING")
    providers = api.cep_providers()
    try:
        outcome = race(providers, args.cep, args.timeout)
    finally:
        for p in providers:
            p.close()
    if not outcome.ok:
        print(f"Lookup failed: {outcome}")
        return 1
    print_address(outcome.record)
    return 0


if __name__ == "__main__":
    sys.exit(main())
