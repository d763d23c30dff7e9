"""CLI: command-line entry point for flashcards."""

import argparse
import random

from flashcards.app import App
from flashcards.config import load_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="flashcards", description="Interactive flashcards")
    parser.add_argument("--import_from", metavar="PATH", help="Import cards on launch")
    parser.add_argument("--export_to", metavar="PATH", help="Export cards on exit")
    parser.add_argument("--seed", type=int, help="Seed for the order of quiz questions")
    return parser


def main():
    args = build_parser().parse_args()
    settings = load_settings()

    import_from = args.import_from or settings.get("import_from") or None
    export_to = args.export_to or settings.get("export_to") or None
    seed = args.seed if args.seed is not None else settings.get("seed")
    rng = random.Random(seed) if seed is not None else None

    app = App(import_from=import_from, export_to=export_to, rng=rng)
    app.run()
