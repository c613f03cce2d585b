"""CLI for passcraft: generate passwords and score them."""

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel

from .config import load_config, policy_from_config
from .errors import InvalidPolicy
from .generator import generate
from .score import VARIETY_WEIGHT, length_points, score

log = logging.getLogger(__name__)

console = Console(emoji=False, highlight=False)
EXIT_INVALID_POLICY = 2


def _policy(args, cfg):
    return policy_from_config(
        cfg,
        length=args.length,
        include_uppercase=args.upper,
        include_lowercase=args.lower,
        include_numbers=args.digits,
        include_symbols=args.symbols,
    )


def _strength_text(result):
    return f"[{result.color_tier}]{result.label}[/{result.color_tier}] ({result.score}/10)"


def cmd_generate(args, cfg):
    policy = _policy(args, cfg)
    for i in range(args.copies):
        pw = generate(policy)
        line = f"[bold green]Password #{i+1}:[/bold green] {escape(pw)}"
        if args.show_strength:
            line += "  " + _strength_text(score(pw, policy))
        console.print(line, soft_wrap=True)


def cmd_score(args, cfg):
    # the policy length is irrelevant here; only the password length is scored
    policy = _policy(args, cfg)
    pw = args.password
    result = score(pw, policy)
    body = (
        f"Length: {len(pw)} characters (+{length_points(len(pw))})\n"
        f"Character classes: {policy.variety()} (+{policy.variety() * VARIETY_WEIGHT:g})"
    )
    console.print(Panel(body, title=f"Strength: {_strength_text(result)}"))


def _add_policy_flags(p):
    p.add_argument("--length", type=int, default=None, help="Password length (1-128)")
    p.add_argument("--no-upper", dest="upper", action="store_false", default=None, help="Disable uppercase")
    p.add_argument("--no-lower", dest="lower", action="store_false", default=None, help="Disable lowercase")
    p.add_argument("--no-digits", dest="digits", action="store_false", default=None, help="Disable digits")
    p.add_argument("--no-symbols", dest="symbols", action="store_false", default=None, help="Disable symbols")


def build_parser():
    parser = argparse.ArgumentParser(prog="passcraft")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    _add_policy_flags(gen)
    gen.add_argument("--copies", type=int, default=1, help="How many passwords to generate")
    gen.add_argument("--show-strength", action="store_true", help="Print the strength score next to each password")
    gen.set_defaults(func=cmd_generate)

    sc = sub.add_parser("score", help="Score a password for the given character classes")
    sc.add_argument("password", type=str, help="Password to evaluate (wrap in quotes)")
    _add_policy_flags(sc)
    sc.set_defaults(func=cmd_score)
    return parser


def setup_logging(level):
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def main(argv=None):
    args = build_parser().parse_args(argv)
    cfg = load_config()
    setup_logging("DEBUG" if args.verbose else cfg.get("log_level", "WARNING"))
    try:
        args.func(args, cfg)
    except InvalidPolicy as e:
        log.debug("Rejected policy", exc_info=True)
        console.print(f"[red]Invalid options: {escape(str(e))}[/red]", soft_wrap=True)
        return EXIT_INVALID_POLICY
    return 0


if __name__ == "__main__":
    sys.exit(main())
