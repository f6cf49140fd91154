"""
Entry point for Folder Census.

Kept separate from the CLI application so the console script and
``python -m folder_census`` share one function.
"""


def main():
    """Main entry point for Folder Census."""
    from folder_census.cli.app import main as cli_main

    return cli_main()


if __name__ == "__main__":
    import sys

    sys.exit(main())
