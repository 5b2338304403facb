from pathlib import Path

import click

from mqclean.core.common import MAXQUANT_FLAG_COLUMNS
from mqclean.core.maxquant.protein_groups import ProteinGroups
from mqclean.utils.logger import get_logger

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group(name="report", context_settings=CONTEXT_SETTINGS)
def report_cmd() -> None:
    """Diagnostic reports for proteinGroups tables"""
    pass


@report_cmd.command(
    "summary",
    short_help="Summarize false hits and the Q-value distribution",
)
@click.option(
    "--protein-groups-file",
    help="MaxQuant proteinGroups.txt file",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
def summary_cmd(protein_groups_file: Path) -> None:
    """Summarize false hits and the Q-value distribution of a proteinGroups file.

    Counts the rows flagged as potential contaminant, reverse hit or only
    identified by site, then reports min / median / max of the Q-value
    column for the rows kept after filtering.

    Example:
        mqcleanc report summary --protein-groups-file proteinGroups.txt
    """
    logger = get_logger("mqclean.commands.report")

    try:
        processor = ProteinGroups()
        df = processor.read_protein_groups(protein_groups_file)
        hits = processor.false_hit_summary(df)
        qvalues = processor.qvalue_summary(processor.filter_false_hits(df))
    except Exception as e:
        logger.error(f"Error in proteinGroups report: {str(e)}", exc_info=True)
        raise click.ClickException(f"Error: {str(e)}\nCheck the logs for more details.")

    click.echo(f"Protein groups: {hits['total_rows']}")
    for col in MAXQUANT_FLAG_COLUMNS:
        click.echo(f"  {col}: {hits[col]}")
    click.echo(f"Removed: {hits['total_removed']}")
    click.echo(f"Kept: {hits['total_rows'] - hits['total_removed']}")
    click.echo(
        f"Q-value (n={qvalues['count']}): min={qvalues['min']:.4g} "
        f"median={qvalues['median']:.4g} max={qvalues['max']:.4g}"
    )
