#!/usr/bin/env python3
"""
Generate an app bundle from the command line.
Usage: python scripts/generate_app.py "Create a recipe sharing app" --database fireproof --rpc alchemy --out ./out
"""
import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.core.config import GeneratorConfig, settings
from app.core.engine import AppGenerator
from app.core.errors import GeneratorError
from app.core.logging import configure_logging
from app.generators.app_gen.types import InfrastructureSelection
from app.generators.app_gen.writer import write_bundle


DEFAULT_STORAGE = "ipfs"
DEFAULT_RPC = "base-public"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate app scaffolding from a prompt")
    parser.add_argument("prompt", help="Natural-language description of the app")
    parser.add_argument("--template", help="Template id from the catalog")
    parser.add_argument("--database", help="Database id (e.g. fireproof)")
    parser.add_argument("--storage", help=f"Storage id (default {DEFAULT_STORAGE}, needs --database)")
    parser.add_argument("--rpc", help=f"RPC provider id (default {DEFAULT_RPC}, needs --database)")
    parser.add_argument("--paymaster", help="Paymaster id (needs --database)")
    parser.add_argument("--out", type=Path, help="Write files here instead of printing JSON")
    return parser


def parse_infrastructure(parser: argparse.ArgumentParser, args: argparse.Namespace) -> Optional[InfrastructureSelection]:
    """Build the selection from the infra flags; the other flags require --database."""
    if not args.database:
        given = [f"--{name}" for name in ("storage", "rpc", "paymaster") if getattr(args, name)]
        if given:
            parser.error(f"{', '.join(given)} requires --database")
        return None
    return InfrastructureSelection(
        database=args.database,
        storage=args.storage or DEFAULT_STORAGE,
        rpc=args.rpc or DEFAULT_RPC,
        paymaster=args.paymaster,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    infrastructure = parse_infrastructure(parser, args)

    configure_logging()

    generator = AppGenerator(GeneratorConfig.from_settings(settings))
    try:
        bundle = generator.generate_full_app(args.prompt, args.template, infrastructure)
    except GeneratorError as e:
        print(json.dumps({"success": False, "error": str(e)}), file=sys.stderr)
        return 1

    if args.out:
        files = write_bundle(bundle, args.out)
        print(f"Wrote {len(files)} files to {args.out}")
        if bundle.degraded:
            print("Warning: the model answer could not be parsed; a default specification was used")
    else:
        print(json.dumps({"success": True, "data": bundle.to_dict()}, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
