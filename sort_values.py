import logging
import os
import sys
from typing import TextIO

from ordset import AVLTree

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger()


def parse_tokens(tokens: list[str]) -> list[int] | list[str]:
    """Compare as integers when every token is one, otherwise as strings."""
    try:
        return [int(token) for token in tokens]
    except ValueError:
        return tokens


def main(
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout

    tokens = sys.argv[1:] if argv is None else argv
    if not tokens:
        tokens = stdin.read().split()

    values = parse_tokens(tokens)
    tree = AVLTree()
    added = tree.update(values)

    if added < len(values):
        logger.info(f"Ignored {len(values) - added} duplicate values")
    logger.debug(f"Tree height {tree.height()} for {len(tree)} values")

    for value in tree:
        stdout.write(f"{value}\n")
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        pass
