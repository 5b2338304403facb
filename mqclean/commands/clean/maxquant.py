"""
MaxQuant-specific cleaning commands.
"""

import logging
from pathlib import Path
from typing import Optional

import click

from mqclean.core.common import LFQ_INTENSITY_PREFIX, ZERO_POLICIES, ZERO_POLICY_MISSING
from mqclean.core.maxquant.protein_groups import ProteinGroups, write_cleaned_table
from mqclean.core.project import check_directory, create_uuid_filename
from mqclean.utils.logger import get_logger

OUTPUT_EXTENSIONS = {"parquet": ".pg.parquet", "tsv": ".pg.tsv"}


@click.command(
    "maxquant-pg",
    short_help="Clean MaxQuant proteinGroups.txt and add log2 intensities",
)
@click.option(
    "--protein-groups-file",
    help="MaxQuant proteinGroups.txt file",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--output-folder",
    help="Output folder",
    required=True,
    type=click.Path(file_okay=False, path_type=Path),
)
@click.option(
    "--output-prefix",
    help="Output file prefix",
)
@click.option(
    "--output-format",
    help="Output file format",
    default="parquet",
    type=click.Choice(list(OUTPUT_EXTENSIONS)),
)
@click.option(
    "--zero-policy",
    help="How zero intensities are log-transformed: NaN, -inf or an error",
    default=ZERO_POLICY_MISSING,
    type=click.Choice(ZERO_POLICIES),
)
@click.option(
    "--intensity-prefix",
    help="Prefix of the intensity columns after header normalization",
    default=LFQ_INTENSITY_PREFIX,
)
@click.option("--verbose", help="Enable verbose logging", is_flag=True)
def clean_maxquant_pg_cmd(
    protein_groups_file: Path,
    output_folder: Path,
    output_prefix: Optional[str],
    output_format: str = "parquet",
    zero_policy: str = ZERO_POLICY_MISSING,
    intensity_prefix: str = LFQ_INTENSITY_PREFIX,
    verbose: bool = False,
):
    """
    Clean MaxQuant protein groups from proteinGroups.txt.

    Removes contaminants, reverse hits and proteins only identified by site,
    extracts protein name, UniProt accession and gene from the identifiers,
    casts the LFQ intensities to numbers and adds one LOG2 column per sample.

    Example:
        mqcleanc clean maxquant-pg \\
            --protein-groups-file proteinGroups.txt \\
            --output-folder ./output \\
            --output-format tsv
    """
    logger = get_logger("mqclean.commands.maxquant")
    if verbose:
        logger.setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")

    try:
        output_folder = check_directory(output_folder)
        logger.info(f"Using output directory: {output_folder}")

        prefix = output_prefix or "pg"
        filename = create_uuid_filename(prefix, OUTPUT_EXTENSIONS[output_format])
        output_path = output_folder / filename

        logger.info("Initializing MaxQuant proteinGroups cleaner...")
        processor = ProteinGroups(
            intensity_prefix=intensity_prefix, zero_policy=zero_policy
        )
        df = processor.clean(protein_groups_file)

        write_cleaned_table(df, output_path)
        logger.info(f"Cleaned protein groups successfully saved to: {output_path}")

    except Exception as e:
        logger.error(f"Error in MaxQuant proteinGroups cleaning: {str(e)}", exc_info=True)
        raise click.ClickException(f"Error: {str(e)}\nCheck the logs for more details.")
