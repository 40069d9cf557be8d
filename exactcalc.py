#!/usr/bin/env python3
"""
exactcalc.py — CLI narzędzie ExactCalc.

Działa całkowicie lokalnie — nie wymaga uruchomionego serwera API.
Wejściem jest drzewo wyrażenia w JSON (wynik zewnętrznego parsera),
np. {"node_type": "add", "left": {"node_type": "number", "value": "1/2"},
     "right": {"node_type": "number", "value": "1/3"}}

Konfiguracja: zmienne środowiskowe z prefiksem EXACT_CALC_ lub plik .env
(np. EXACT_CALC_MAX_EXPONENT=1000).

Podkomendy:
    eval     — oblicz dokładną wartość drzewa (opcjonalnie z krokami)
    render   — wypisz drzewo w postaci z pełnymi nawiasami
    consts   — listuj znane stałe

Kody wyjścia: 0 — ok, 1 — błąd ewaluacji, 2 — niepoprawne wejście.

Użycie:
    python exactcalc.py eval --expr '{"node_type": "number", "value": "5/6"}'
    python exactcalc.py eval --file tree.json --steps
    python exactcalc.py render --file tree.json
    python exactcalc.py consts
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from pydantic import TypeAdapter, ValidationError
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from adapters.evaluator.ast_evaluator import ASTEvaluator
from adapters.identifier_resolver.constant_resolver import ConstantResolver
from adapters.number_type.fraction_number import FractionNumber
from config import Settings
from contracts import EvaluationError, ExprAST, format_rational, render_expr

_EXPR_ADAPTER: TypeAdapter[ExprAST] = TypeAdapter(ExprAST)


# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


def _print_kv_table(title: str, rows: list[tuple[str, Any]]) -> None:
    table = Table(title=title, box=box.ASCII, show_header=False, pad_edge=False)
    table.add_column("Key", no_wrap=True, style="bold cyan")
    table.add_column("Value")
    for key, value in rows:
        table.add_row(escape(str(key)), escape(str(value)))
    _console().print(table)


def _plain(text: str) -> None:
    # wynik dosłownie: bez markupu rich ("[bold]x" to nazwa, nie styl) i bez zawijania
    _console().print(text, markup=False, soft_wrap=True)


def _read_json(args: argparse.Namespace) -> str:
    if getattr(args, "file", None):
        try:
            with open(args.file, encoding="utf-8") as fh:
                return fh.read()
        except OSError as e:
            print(f"Błąd odczytu pliku: {e}", file=sys.stderr)
            sys.exit(2)
    text = getattr(args, "expr", None) or sys.stdin.read().strip()
    if not text:
        print("Błąd: podaj drzewo przez --expr, --file lub stdin", file=sys.stderr)
        sys.exit(2)
    return text


def _load_tree(args: argparse.Namespace) -> ExprAST:
    try:
        return _EXPR_ADAPTER.validate_json(_read_json(args))
    except ValidationError as e:
        print(f"Niepoprawne drzewo wyrażenia:\n{e}", file=sys.stderr)
        sys.exit(2)


def _build(settings: Settings) -> tuple[ASTEvaluator, ConstantResolver]:
    number = FractionNumber(max_exponent=settings.max_exponent)
    resolver = ConstantResolver(number)
    return ASTEvaluator(number=number, resolver=resolver), resolver


# -- podkomendy ------------------------------------------------------------

def _eval(args: argparse.Namespace, evaluator: ASTEvaluator) -> None:
    tree = _load_tree(args)
    try:
        if args.steps:
            result = evaluator.explain(tree)
            value, steps = result.value, result.steps
        else:
            value, steps = evaluator.evaluate(tree), []
    except EvaluationError as e:
        print(f"Błąd ({e.kind}): {e.message}", file=sys.stderr)
        sys.exit(1)

    if args.steps:
        _print_kv_table("Wynik", [("expr", render_expr(tree)), ("value", format_rational(value))])
        table = Table(title="Kroki", box=box.ASCII, pad_edge=False)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Krok")
        for i, step in enumerate(steps, 1):
            table.add_row(str(i), escape(step))
        _console().print(table)
    else:
        _plain(format_rational(value))


def _render(args: argparse.Namespace) -> None:
    _plain(render_expr(_load_tree(args)))


def _consts(resolver: ConstantResolver) -> None:
    _print_kv_table("Stałe", [(name, format_rational(resolver.resolve(name))) for name in resolver.names()])


# -- main ------------------------------------------------------------------

def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="exactcalc",
        description="ExactCalc — dokładna ewaluacja drzew wyrażeń (lokalnie)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # eval
    p = sub.add_parser("eval", help="Oblicz dokładną wartość drzewa")
    p.add_argument("--expr", "-e", help="Drzewo w JSON (lub stdin)")
    p.add_argument("--file", "-f", help="Ścieżka do pliku JSON z drzewem")
    p.add_argument("--steps", "-s", action="store_true",
                   help="Wyświetl kroki obliczenia")

    # render
    p = sub.add_parser("render", help="Wypisz drzewo z pełnymi nawiasami")
    p.add_argument("--expr", "-e", help="Drzewo w JSON (lub stdin)")
    p.add_argument("--file", "-f", help="Ścieżka do pliku JSON z drzewem")

    # consts
    sub.add_parser("consts", help="Listuj znane stałe")

    args = parser.parse_args(argv)

    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())
    evaluator, resolver = _build(settings)

    if args.command == "eval":
        _eval(args, evaluator)
    elif args.command == "render":
        _render(args)
    elif args.command == "consts":
        _consts(resolver)


if __name__ == "__main__":
    main()
