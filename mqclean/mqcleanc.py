"""
Commandline interface for the mqclean package. Cleans MaxQuant proteinGroups
tables (false hit removal, identifier extraction, log2 intensities) and draws
diagnostic plots of them.
"""

import logging

import click

from mqclean import __version__ as __version__

from mqclean.commands.clean.maxquant import clean_maxquant_pg_cmd as maxquant_pg_clean

# Utility commands
from mqclean.commands.utils.plot import plot_cmd as plot_utils
from mqclean.commands.utils.report import report_cmd as report_utils

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.version_option(
    version=__version__, package_name="mqclean", message="%(package)s %(version)s"
)
@click.group(context_settings=CONTEXT_SETTINGS)
def cli() -> None:
    """
    mqclean - A tool for cleaning MaxQuant protein group tables
    """
    logging.basicConfig(
        level=logging.INFO,
        datefmt="%H:%M:%S",
        format="[%(asctime)s] %(levelname).1s | %(name)s | %(message)s",
    )


@cli.group()
def clean():
    """Clean search engine output tables."""
    pass


@cli.group()
def visualize():
    """Visualize proteinGroups data."""
    pass


@cli.group()
def report():
    """Generate diagnostic reports."""
    pass


# Clean commands
clean.add_command(maxquant_pg_clean, name="maxquant-pg")

# Visualization commands
visualize.add_command(plot_utils, name="plot")

# Report commands
for command_name, command in report_utils.commands.items():
    report.add_command(command, name=command_name)


def mqclean_main() -> None:
    """
    Main function to run the mqclean command line interface
    :return: none
    """
    cli()


if __name__ == "__main__":
    mqclean_main()
