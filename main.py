from __future__ import annotations
from typing import Iterable, Optional, TextIO
from abstract.factory.registry import create_factory
from client import client_code
from utils.config import AppConfig
from utils.logger import Logger
import sys

ORDINALS = ("first", "second", "third", "fourth", "fifth")


def label(index: int) -> str:
    ordinal = ORDINALS[index] if index < len(ORDINALS) else f"#{index + 1}"
    if index == 0:
        return f"Client: Testing client code with the {ordinal} factory type..."
    return f"Client: Testing the same client code with the {ordinal} factory type..."


def run_demo(families: Iterable[str] = ("win", "mac"), out: Optional[TextIO] = None) -> None:
    out = out if out is not None else sys.stdout
    for index, family in enumerate(families):
        # resolve before writing anything, so a bad name leaves no partial run
        factory = create_factory(family)
        if index:
            print("", file=out)
        print(label(index), file=out)
        for line in client_code(factory):
            print(line, file=out)
        Logger().info("Client ran with %s", type(factory).__name__)


def main() -> None:
    try:
        config = AppConfig()
        Logger(level=config.log_level(), to_file=config.log_to_file(), log_dir=config.log_dir())
        run_demo(config.families())
    except Exception as e:
        Logger().critical("Fatal error: %s", e, exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
