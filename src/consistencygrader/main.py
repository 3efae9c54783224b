"""Main entry point for the Content Consistency Grader."""

import sys

from consistencygrader.cli import main as cli_main


def main():
    """Main entry point - delegates to the CLI."""
    sys.exit(cli_main())


if __name__ == "__main__":
    main()
