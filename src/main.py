"""Main entry point for the terminal task list."""
import click
from cli import build_cli
from config import load_settings
from logging_setup import setup_logging


@click.command()
def main():
    """Interactive task list; tasks persist to TASKLIST_FILE on exit."""
    settings = load_settings()
    setup_logging(settings.log_level)
    build_cli(settings.tasks_file).run()

if __name__ == "__main__":
    main()
