#!/usr/bin/env python3
"""
plugcalc.py — CLI narzędzie PlugCalc.

Działa całkowicie lokalnie: ładuje pluginy z katalogu i liczy wyrażenia,
nie wymaga uruchomionego serwera API.

Konfiguracja: zmienne środowiskowe z prefiksem PLUGCALC_
lub plik .env (np. PLUGCALC_PLUGINS_DIR=./plugins).

Podkomendy:
    eval       — policz jedno wyrażenie
    repl       — interaktywna pętla (błąd nie kończy sesji)
    providers  — listuj zarejestrowane providery funkcji

Użycie:
    python plugcalc.py eval --text "(2+3)*4"
    python plugcalc.py eval --steps --text "sin(0)+2^3"
    echo "log(100)" | python plugcalc.py eval
    python plugcalc.py repl
    python plugcalc.py providers
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from rich import box
from rich.console import Console
from rich.table import Table

PROMPT = "Write expression (can use: sin, cos, tg, ctg, log, ln, +, -, *, /, ^ ): "
_EXIT_WORDS = {"exit", "quit", "q"}


# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


def _settings():
    from config import Settings

    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())
    return settings


def _read_text(args: argparse.Namespace) -> str:
    text = getattr(args, "text", None) or sys.stdin.read().strip()
    if not text:
        print("Error: pass an expression with --text or stdin", file=sys.stderr)
        sys.exit(1)
    return text


def _print_steps(steps: list[str]) -> None:
    table = Table(title=f"Steps [{len(steps)}]", box=box.ASCII, show_header=False)
    table.add_column("#", justify="right", no_wrap=True, style="cyan")
    table.add_column("Step")
    for idx, step in enumerate(steps, 1):
        table.add_row(str(idx), step)
    _console().print(table)


def _print_providers_table(providers: list[Any]) -> None:
    table = Table(
        title=f"Function providers [{len(providers)}]",
        box=box.ASCII,
        show_lines=False,
    )
    table.add_column("#", justify="right", no_wrap=True)
    table.add_column("Name", no_wrap=True, style="cyan")
    table.add_column("Kind", no_wrap=True)
    table.add_column("Source")
    for idx, info in enumerate(providers, 1):
        table.add_row(str(idx), info.name, info.kind, info.source or "-")
    _console().print(table)


# -- podkomendy ------------------------------------------------------------

def _eval(args: argparse.Namespace) -> None:
    from bootstrap import build_evaluator

    text = _read_text(args)
    evaluator, loader = build_evaluator(_settings())
    try:
        outcome = evaluator.try_evaluate(text)
    finally:
        loader.unload_all()

    if not outcome.ok:
        print(f"Mistake [{outcome.error_code}]: {outcome.error_message}", file=sys.stderr)
        sys.exit(1)

    if args.steps and outcome.steps:
        _print_steps(outcome.steps)
    print(f"Result: {outcome.result}")


def _repl(args: argparse.Namespace) -> None:
    from bootstrap import build_evaluator

    evaluator, loader = build_evaluator(_settings())
    try:
        while True:
            try:
                line = input(PROMPT)
            except EOFError:
                print()
                break
            line = line.strip()
            if not line:
                continue
            if line.lower() in _EXIT_WORDS:
                break

            outcome = evaluator.try_evaluate(line)
            if outcome.ok:
                if args.steps and outcome.steps:
                    _print_steps(outcome.steps)
                print(f"Result: {outcome.result}")
            else:
                print(f"Mistake [{outcome.error_code}]: {outcome.error_message}", file=sys.stderr)
    finally:
        loader.unload_all()


def _providers(args: argparse.Namespace) -> None:
    from bootstrap import build_evaluator

    evaluator, loader = build_evaluator(_settings())
    try:
        _print_providers_table(evaluator.registry.describe())
    finally:
        loader.unload_all()


# -- main ------------------------------------------------------------------

def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="plugcalc",
        description="PlugCalc — expression calculator with pluggable functions",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # eval
    p = sub.add_parser("eval", help="Evaluate a single expression")
    p.add_argument("--text", "-t", help="Expression (or stdin)")
    p.add_argument("--steps", "-s", action="store_true",
                   help="Show reduction steps")

    # repl
    p = sub.add_parser("repl", help="Interactive read-evaluate loop")
    p.add_argument("--steps", "-s", action="store_true",
                   help="Show reduction steps")

    # providers
    sub.add_parser("providers", help="List registered function providers")

    args = parser.parse_args(argv)

    commands = {
        "eval":      _eval,
        "repl":      _repl,
        "providers": _providers,
    }
    commands[args.command](args)


if __name__ == "__main__":
    main()
