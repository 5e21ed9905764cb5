"""
Console and file logging for the seed import.

Colored step/result lines (colorama) for humans watching the seeder, plus a
logger that also keeps a DEBUG trail in logs/<name>.log.
"""

import datetime
import logging
import os
import sys
from typing import Optional

from colorama import Fore, Style, init

init(autoreset=True)

LOG_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "logs")


class C:
    HEADER = Fore.CYAN + Style.BRIGHT
    STEP = Fore.BLUE + Style.BRIGHT
    OK = Fore.GREEN + Style.BRIGHT
    ERR = Fore.RED + Style.BRIGHT
    VALUE = Fore.GREEN
    RESET = Style.RESET_ALL


def _ts() -> str:
    return datetime.datetime.now().strftime("%H:%M:%S")


def header(msg: str) -> None:
    """Print a bold banner for a seed run."""
    bar = "=" * 60
    print(f"\n{C.HEADER}{bar}\n  {msg}\n{bar}{C.RESET}\n")


def step(msg: str) -> None:
    print(f"{C.STEP}[{_ts()}] >> {msg}{C.RESET}")


def ok(msg: str) -> None:
    print(f"{C.OK}[{_ts()}] OK {msg}{C.RESET}")


def err(msg: str) -> None:
    print(f"{C.ERR}[{_ts()}] ERR {msg}{C.RESET}")


def summary_table(title: str, rows: list[tuple[str, str]]) -> None:
    """Print label/value pairs, labels left-aligned to the longest one."""
    print(f"\n{C.HEADER}{title}{C.RESET}")
    width = max((len(label) for label, _ in rows), default=0)
    for label, value in rows:
        print(f"  {label:<{width}}  {C.VALUE}{value}{C.RESET}")
    print()


def setup_verbose_logging(
    name: str = "seed",
    level: int = logging.DEBUG,
    log_dir: Optional[str] = None,
) -> logging.Logger:
    """
    Logger writing INFO+ to stdout and DEBUG+ to <log_dir>/<name>.log.

    Calling it again for the same name returns the already configured logger.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if logger.handlers:
        return logger

    fmt = logging.Formatter(
        "[%(asctime)s] %(levelname)-8s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(logging.INFO)
    console.setFormatter(fmt)
    logger.addHandler(console)

    log_dir = log_dir or LOG_DIR
    os.makedirs(log_dir, exist_ok=True)
    trail = logging.FileHandler(os.path.join(log_dir, f"{name}.log"))
    trail.setLevel(logging.DEBUG)
    trail.setFormatter(fmt)
    logger.addHandler(trail)

    return logger
