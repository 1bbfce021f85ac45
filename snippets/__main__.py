"""Run the snippets tour: ``python -m snippets``."""

from .config import configure_logging
from .demo import run_demo


def main() -> None:
    configure_logging()
    run_demo()


if __name__ == "__main__":
    main()
