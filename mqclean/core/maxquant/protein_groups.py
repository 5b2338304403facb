"""MaxQuant proteinGroups.txt cleaning module"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from mqclean.core.common import (
    ENTRY_SEPARATOR,
    FASTA_HEADERS_COLUMN,
    GENE_COLUMN,
    GENE_PATTERN,
    HEADER_INVALID_CHARS,
    LFQ_INTENSITY_PREFIX,
    LOG2_PREFIX,
    MAXQUANT_FLAG_COLUMNS,
    MAXQUANT_FLAG_VALUE,
    MAXQUANT_PG_REQUIRED_COLUMNS,
    PROTEIN_ACCESSION_PATTERN,
    PROTEIN_COLUMN,
    PROTEIN_IDS_COLUMN,
    PROTEIN_NAME_COLUMN,
    PROTEIN_NAME_PATTERN,
    QVALUE_COLUMN,
    ZERO_POLICY_MISSING,
)
from mqclean.utils.intensity_utils import (
    check_zero_policy,
    log2_series,
    summarize_distribution,
)

logger = logging.getLogger(__name__)


class MissingColumnsError(ValueError):
    """Raised when proteinGroups.txt lacks columns the cleaning steps need."""

    def __init__(self, expected: List[str], found: List[str]):
        self.expected = list(expected)
        self.found = list(found)
        super().__init__(
            f"proteinGroups table is missing required columns. "
            f"Expected: {self.expected}. Found: {self.found}"
        )


# ============================================================================
# Utility Functions
# ============================================================================


def normalize_header(name: str) -> str:
    """Normalize a MaxQuant header the way read.delim does: 'LFQ intensity S1' -> 'LFQ.intensity.S1'"""
    return HEADER_INVALID_CHARS.sub(".", name)


def is_maxquant_flag(value) -> bool:
    """MaxQuant marks flagged rows with '+' and leaves the others empty"""
    return value == MAXQUANT_FLAG_VALUE


def first_entry(text) -> str:
    """Keep only the first entry of a semicolon separated field"""
    if not isinstance(text, str):
        return ""
    return text.split(ENTRY_SEPARATOR, 1)[0]


def _search_group(pattern, text) -> str:
    if not isinstance(text, str):
        return ""
    match = pattern.search(text)
    return match.group(1) if match else ""


def extract_protein_name(fasta_header) -> str:
    """
    Extract the protein description from a FASTA header.

    Args:
        fasta_header: e.g. "sp|P12345|FOO_HUMAN Some Description OS=Homo sapiens"

    Returns:
        Text between "_HUMAN" + one character and the first one character +
        "OS" (the organism marker), e.g. "Some Description"; empty string when
        the header does not match.
    """
    return _search_group(PROTEIN_NAME_PATTERN, fasta_header)


def extract_protein_accession(protein_ids) -> str:
    """Extract the UniProt accession between the first two '|' of a protein ID"""
    return _search_group(PROTEIN_ACCESSION_PATTERN, protein_ids)


def extract_gene(protein_ids) -> str:
    """
    Extract the gene name from a UniProt protein ID.

    The gene is the text following a 6 or 10 character accession
    (bounded by '|') and preceding "_HUMAN", e.g. "FOO" for
    "sp|P12345|FOO_HUMAN". Accessions of any other length do not match.
    """
    return _search_group(GENE_PATTERN, protein_ids)


# ============================================================================
# MaxQuant proteinGroups Processor
# ============================================================================


class ProteinGroups:
    """Cleans a MaxQuant proteinGroups.txt table for downstream analysis"""

    def __init__(
        self,
        intensity_prefix: str = LFQ_INTENSITY_PREFIX,
        log_prefix: str = LOG2_PREFIX,
        zero_policy: str = ZERO_POLICY_MISSING,
        normalize_headers: bool = True,
    ):
        self.intensity_prefix = intensity_prefix
        self.log_prefix = log_prefix
        self.zero_policy = check_zero_policy(zero_policy)
        self.normalize_headers = normalize_headers
        self.required_columns = MAXQUANT_PG_REQUIRED_COLUMNS

    # ============================================================================
    # Loading
    # ============================================================================

    def read_protein_groups(self, protein_groups_path: Union[Path, str]) -> pd.DataFrame:
        """Read proteinGroups.txt with every field kept as text"""
        try:
            df = pd.read_csv(
                protein_groups_path,
                sep="\t",
                dtype=str,
                keep_default_na=False,
            )
        except OSError as e:
            logger.error(f"Could not read proteinGroups file {protein_groups_path}: {e}")
            raise
        except pd.errors.EmptyDataError as e:
            logger.error(f"Could not read proteinGroups file {protein_groups_path}: {e}")
            raise MissingColumnsError(self.required_columns, []) from e

        if self.normalize_headers:
            df.columns = [normalize_header(col) for col in df.columns]

        self.validate_columns(df)
        logger.info(
            f"Loaded {len(df):,} protein groups and {len(df.columns)} columns "
            f"from {protein_groups_path}"
        )
        return df

    def validate_columns(self, df: pd.DataFrame) -> None:
        missing = [col for col in self.required_columns if col not in df.columns]
        if missing:
            raise MissingColumnsError(self.required_columns, list(df.columns))

    # ============================================================================
    # False Hit Filtering
    # ============================================================================

    @staticmethod
    def _false_hit_mask(df: pd.DataFrame) -> pd.Series:
        mask = pd.Series(False, index=df.index)
        for col in MAXQUANT_FLAG_COLUMNS:
            mask |= df[col].map(is_maxquant_flag).astype(bool)
        return mask

    def filter_false_hits(self, df: pd.DataFrame) -> pd.DataFrame:
        """Remove contaminants, reverse hits and only-identified-by-site rows"""
        mask = self._false_hit_mask(df)
        filtered = df.loc[~mask].copy()
        logger.info(
            f"Removed {int(mask.sum()):,} false hits, {len(filtered):,} protein groups left"
        )
        return filtered

    def false_hit_summary(self, df: pd.DataFrame) -> Dict[str, int]:
        """Count flagged rows per flag column; a row can carry more than one flag"""
        summary = {
            col: int(df[col].map(is_maxquant_flag).astype(bool).sum())
            for col in MAXQUANT_FLAG_COLUMNS
        }
        summary["total_removed"] = int(self._false_hit_mask(df).sum())
        summary["total_rows"] = len(df)
        logger.info(
            "False hits: "
            + ", ".join(f"{col}={summary[col]}" for col in MAXQUANT_FLAG_COLUMNS)
            + f", removed {summary['total_removed']} of {summary['total_rows']}"
        )
        return summary

    def qvalue_summary(self, df: pd.DataFrame) -> Dict[str, float]:
        """
        Distribution of the protein Q-value column.

        Diagnostic only: no row is dropped on Q-value grounds here.
        """
        qvalues = pd.to_numeric(df[QVALUE_COLUMN], errors="coerce")
        summary = summarize_distribution(qvalues)
        logger.debug(
            f"Q-value min={summary['min']}, median={summary['median']}, max={summary['max']}"
        )
        return summary

    # ============================================================================
    # Identifier Extraction
    # ============================================================================

    def extract_identifiers(self, df: pd.DataFrame) -> pd.DataFrame:
        """Truncate IDs and headers to their first entry and derive name, accession and gene"""
        df = df.copy()
        df[PROTEIN_IDS_COLUMN] = df[PROTEIN_IDS_COLUMN].map(first_entry)
        df[FASTA_HEADERS_COLUMN] = df[FASTA_HEADERS_COLUMN].map(first_entry)

        df[PROTEIN_NAME_COLUMN] = df[FASTA_HEADERS_COLUMN].map(extract_protein_name)
        df[PROTEIN_COLUMN] = df[PROTEIN_IDS_COLUMN].map(extract_protein_accession)
        df[GENE_COLUMN] = df[PROTEIN_IDS_COLUMN].map(extract_gene)

        unmatched = int((df[GENE_COLUMN] == "").sum())
        if unmatched:
            logger.debug(f"{unmatched} protein groups have no gene name")
        return df

    # ============================================================================
    # Intensities
    # ============================================================================

    def get_intensity_columns(self, df: pd.DataFrame) -> List[str]:
        """Intensity columns in source order; fatal when there are none"""
        cols = [col for col in df.columns if col.startswith(self.intensity_prefix)]
        if not cols:
            raise MissingColumnsError([f"{self.intensity_prefix}<sample>"], list(df.columns))
        return cols

    def cast_intensities(self, df: pd.DataFrame) -> pd.DataFrame:
        """Convert intensity columns to float64, unparseable cells become NaN"""
        df = df.copy()
        for col in self.get_intensity_columns(df):
            df[col] = pd.to_numeric(df[col], errors="coerce").astype("float64")
        return df

    def log_column_name(self, intensity_column: str) -> str:
        return self.log_prefix + intensity_column[len(self.intensity_prefix) :]

    def log2_transform(self, df: pd.DataFrame) -> pd.DataFrame:
        """Add a LOG2.<sample> column for every intensity column"""
        df = df.copy()
        for col in self.get_intensity_columns(df):
            values = pd.to_numeric(df[col], errors="coerce").astype("float64")
            df[self.log_column_name(col)] = log2_series(values, self.zero_policy)
        return df

    # ============================================================================
    # Pipeline
    # ============================================================================

    def clean_table(self, df: pd.DataFrame) -> pd.DataFrame:
        """Run filtering, identifier extraction, casting and log transform on a loaded table"""
        self.validate_columns(df)
        df = self.filter_false_hits(df)
        df = self.extract_identifiers(df)
        df = self.cast_intensities(df)
        df = self.log2_transform(df)
        logger.info(
            f"Cleaned table has {len(df):,} protein groups and "
            f"{len(self.get_intensity_columns(df))} samples"
        )
        return df

    def clean(self, protein_groups_path: Union[Path, str]) -> pd.DataFrame:
        """Load proteinGroups.txt and return the cleaned table"""
        return self.clean_table(self.read_protein_groups(protein_groups_path))


# ============================================================================
# Standalone Functions
# ============================================================================


def read_protein_groups(protein_groups_path: Union[Path, str]) -> pd.DataFrame:
    """Read proteinGroups.txt with every field kept as text"""
    return ProteinGroups().read_protein_groups(protein_groups_path)


def clean_protein_groups(
    protein_groups_path: Union[Path, str],
    zero_policy: str = ZERO_POLICY_MISSING,
    intensity_prefix: Optional[str] = None,
) -> pd.DataFrame:
    processor = ProteinGroups(
        intensity_prefix=intensity_prefix or LFQ_INTENSITY_PREFIX,
        zero_policy=zero_policy,
    )
    return processor.clean(protein_groups_path)


def write_cleaned_table(df: pd.DataFrame, output_path: Union[Path, str]) -> None:
    """Write the cleaned table as parquet (by extension) or tab separated text"""
    output_path = Path(output_path)
    if output_path.suffix == ".parquet":
        table = pa.Table.from_pandas(df, preserve_index=False)
        pq.write_table(table, output_path)
    else:
        df.to_csv(output_path, sep="\t", index=False)
    logger.info(f"Wrote {len(df):,} protein groups to {output_path}")
