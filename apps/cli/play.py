# apps/cli/play.py
"""
CLI entry point for a two-player wordduel game.

    python -m apps.cli.play host --name Ana --difficulty hard --language portuguese
    python -m apps.cli.play join --name Bia --host 127.0.0.1

The host listens, accepts one opponent, draws the secret word and runs the
game; the joining side relays what its player types. Game text goes to
stdout, logs to stderr.
"""

from __future__ import annotations

import argparse
import logging
import random
import socket
import sys

import colorama

from wordduel.errors import WordDuelError
from wordduel.game.settings import DEFAULT_HOST, DEFAULT_PORT, Difficulty, Language
from wordduel.net.session import run_host, run_peer

logger = logging.getLogger("wordduel.cli")


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _ask_name(name: str | None) -> str:
    while not name:
        name = input("Username: ").strip()
    return name


def _host(args) -> int:
    name = _ask_name(args.name)
    rng = random.Random(args.seed) if args.seed is not None else None

    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listener:
        listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        listener.bind((args.host, args.port))
        listener.listen(1)
        print(f"Waiting for an opponent on {args.host}:{args.port} ...")
        conn, addr = listener.accept()

    logger.info("Accepted connection from %s:%d", *addr[:2])
    winner = run_host(
        conn,
        name,
        difficulty=Difficulty(args.difficulty),
        language=Language(args.language),
        data_dir=args.wordlists,
        rng=rng,
        timeout=args.timeout,
    )
    logger.info("Game over, winner: %s", winner)
    return 0


def _join(args) -> int:
    name = _ask_name(args.name)
    sock = socket.create_connection((args.host, args.port))
    logger.info("Connected to %s:%d", args.host, args.port)
    run_peer(sock, name)
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordduel — two-player word guessing over TCP")
    ap.add_argument("--log-level", default="WARNING",
                    help="logging level for stderr (DEBUG, INFO, WARNING, ...)")
    sub = ap.add_subparsers(dest="command", required=True)

    host = sub.add_parser("host", help="host a game and wait for one opponent")
    host.add_argument("--name", help="your player name (prompted if omitted)")
    host.add_argument("--host", default=DEFAULT_HOST, help="address to listen on")
    host.add_argument("--port", type=int, default=DEFAULT_PORT, help="TCP port to listen on")
    host.add_argument("--difficulty", choices=[d.value for d in Difficulty], default=Difficulty.NORMAL.value,
                      help="easy=6, normal=7, hard=8 letters (hard allows repeated words)")
    host.add_argument("--language", choices=[lang.value for lang in Language], default=Language.ENGLISH.value)
    host.add_argument("--wordlists", default=None,
                      help="directory holding wordlist_<language>_<length>.txt (default: bundled lists)")
    host.add_argument("--seed", type=int, help="RNG seed for the secret word draw")
    host.add_argument("--timeout", type=float, default=None,
                      help="give up after this many seconds without the opponent's guess (default: wait forever)")
    host.set_defaults(func=_host)

    join = sub.add_parser("join", help="join a hosted game")
    join.add_argument("--name", help="your player name (prompted if omitted)")
    join.add_argument("--host", default=DEFAULT_HOST, help="host address")
    join.add_argument("--port", type=int, default=DEFAULT_PORT, help="host TCP port")
    join.set_defaults(func=_join)
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    _setup_logging(args.log_level)
    colorama.just_fix_windows_console()

    try:
        return args.func(args)
    except ConnectionAbortedError as e:
        logger.error("Connection aborted: %s", e)
        print("Connection closed by the other player.", file=sys.stderr)
    except TimeoutError as e:
        logger.error("%s", e)
        print(f"Timed out: {e}", file=sys.stderr)
    except WordDuelError as e:
        logger.error("%s: %s", type(e).__name__, e)
        print(f"Error: {e}", file=sys.stderr)
    except OSError as e:
        logger.error("Network error: %s", e)
        print(f"Network error: {e}", file=sys.stderr)
    except (KeyboardInterrupt, EOFError):
        print("", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
