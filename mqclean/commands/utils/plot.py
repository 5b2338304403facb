from pathlib import Path

import click

from mqclean.core.common import ZERO_POLICIES, ZERO_POLICY_MISSING
from mqclean.core.maxquant.protein_groups import ProteinGroups
from mqclean.operate.plots import (
    plot_log2_intensity_distribution,
    plot_qvalue_distribution,
)
from mqclean.utils.logger import get_logger

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group(name="plot", context_settings=CONTEXT_SETTINGS)
def plot_cmd() -> None:
    """Visualization commands for proteinGroups tables"""
    pass


@plot_cmd.command(
    "qvalue-histogram",
    short_help="Plot the Q-value distribution after false hit filtering",
)
@click.option(
    "--protein-groups-file",
    help="MaxQuant proteinGroups.txt file",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--save-path",
    help="Output image path (e.g. plot.svg)",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
)
def plot_qvalue_cmd(protein_groups_file: Path, save_path: Path) -> None:
    """Plot a histogram of protein Q-values.

    Contaminants, reverse hits and proteins only identified by site are
    removed first, so the plot shows the Q-values of the proteins that go
    on to the next analysis step.

    Example:
        mqcleanc visualize plot qvalue-histogram \\
            --protein-groups-file proteinGroups.txt \\
            --save-path ./plots/qvalue.svg
    """
    logger = get_logger("mqclean.commands.plot")
    try:
        processor = ProteinGroups()
        df = processor.filter_false_hits(
            processor.read_protein_groups(protein_groups_file)
        )
        plot_qvalue_distribution(df, save_path)
    except Exception as e:
        logger.error(f"Error plotting Q-values: {str(e)}", exc_info=True)
        raise click.ClickException(f"Error: {str(e)}\nCheck the logs for more details.")


@plot_cmd.command(
    "log2-histogram",
    short_help="Plot log2 LFQ intensity distributions per sample",
)
@click.option(
    "--protein-groups-file",
    help="MaxQuant proteinGroups.txt file",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--save-path",
    help="Output image path (e.g. plot.svg)",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--zero-policy",
    help="How zero intensities are log-transformed",
    default=ZERO_POLICY_MISSING,
    type=click.Choice(ZERO_POLICIES),
)
def plot_log2_cmd(protein_groups_file: Path, save_path: Path, zero_policy: str) -> None:
    """Plot overlaid histograms of the log2 LFQ intensity of every sample.

    Example:
        mqcleanc visualize plot log2-histogram \\
            --protein-groups-file proteinGroups.txt \\
            --save-path ./plots/log2_intensity.svg
    """
    logger = get_logger("mqclean.commands.plot")
    try:
        df = ProteinGroups(zero_policy=zero_policy).clean(protein_groups_file)
        plot_log2_intensity_distribution(df, save_path)
    except Exception as e:
        logger.error(f"Error plotting log2 intensities: {str(e)}", exc_info=True)
        raise click.ClickException(f"Error: {str(e)}\nCheck the logs for more details.")
