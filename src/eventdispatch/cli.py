"""Command-line entry point replaying a reference dispatch scenario."""
from __future__ import annotations

import argparse
import logging
from typing import Any, Callable, Sequence

from dotenv import load_dotenv

from .config.settings import DispatcherConfig
from .core import EventDispatcher, IndentedLogHook
from .logging import configure_logging

logger = logging.getLogger(__name__)


class Tester:
    label = "TESTER"

    def __init__(self, out: Callable[[str], None]) -> None:
        self.out = out

    def fn_a(self, data: Any) -> None:
        self.out(f"~ in Tester.fn_a(); label: {self.label}; data: {data}")

    def fn_b(self, data: Any) -> None:
        self.out(f"~ in Tester.fn_b(); label: {self.label}; data: {data}")


def build_scenario(dispatcher: EventDispatcher, out: Callable[[str], None]) -> Tester:
    """Register the demo listeners; ``hello`` with payload ``world`` also dispatches ``sub.hello``."""
    tester = Tester(out)

    def fn_c(data: Any) -> None:
        out(f"~ in fn_c(); data: {data}")
        if data == "world":
            dispatcher.dispatch("sub.hello", "sub.world")

    def greet(owner: Tester, data: Any) -> None:
        out(f"~ in greet(); label: {owner.label}; data: {data}")

    (
        dispatcher.register("hello", tester, "fn_b")
        .register("hello", tester, greet)
        .register("hello", fn_c)
        .register("hello", tester, tester.fn_a, 100)
        .register("sub.hello", fn_c)
    )
    return tester


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Replay the event dispatcher reference scenario.")
    parser.add_argument("--payload", default="world", help="payload dispatched with the 'hello' event")
    parser.add_argument("--config", default=None, help="YAML dispatcher configuration")
    parser.add_argument("--quiet", action="store_true", help="disable the debug trace")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    load_dotenv()
    args = parse_args(argv)

    config = DispatcherConfig.load(args.config) if args.config else DispatcherConfig.from_env()
    configure_logging(config.log_level)

    dispatcher = EventDispatcher(
        debug=not args.quiet,
        log_hook=IndentedLogHook(config.log_indent_text, sink=print),
        config=config,
    )
    build_scenario(dispatcher, print)
    logger.info("Dispatching 'hello'", extra={"payload": args.payload})
    dispatcher.dispatch("hello", args.payload)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
