"""Column names and patterns shared by the MaxQuant proteinGroups cleaning code."""

import re

# ============================================================================
# proteinGroups.txt columns (after header normalization)
# ============================================================================

PROTEIN_IDS_COLUMN = "Protein.IDs"
FASTA_HEADERS_COLUMN = "Fasta.headers"
QVALUE_COLUMN = "Q.value"

CONTAMINANT_COLUMN = "Potential.contaminant"
REVERSE_COLUMN = "Reverse"
ONLY_BY_SITE_COLUMN = "Only.identified.by.site"

MAXQUANT_FLAG_COLUMNS = [
    CONTAMINANT_COLUMN,
    REVERSE_COLUMN,
    ONLY_BY_SITE_COLUMN,
]
MAXQUANT_FLAG_VALUE = "+"

MAXQUANT_PG_REQUIRED_COLUMNS = MAXQUANT_FLAG_COLUMNS + [
    QVALUE_COLUMN,
    PROTEIN_IDS_COLUMN,
    FASTA_HEADERS_COLUMN,
]

LFQ_INTENSITY_PREFIX = "LFQ.intensity."
LOG2_PREFIX = "LOG2."

# ============================================================================
# Derived columns
# ============================================================================

PROTEIN_NAME_COLUMN = "Protein.name"
PROTEIN_COLUMN = "Protein"
GENE_COLUMN = "Gene"

DERIVED_IDENTIFIER_COLUMNS = [PROTEIN_NAME_COLUMN, PROTEIN_COLUMN, GENE_COLUMN]

# ============================================================================
# Identifier patterns
# ============================================================================

ENTRY_SEPARATOR = ";"

# "sp|P12345|FOO_HUMAN Some Description OS=Homo sapiens" -> "Some Description"
PROTEIN_NAME_PATTERN = re.compile(r"_HUMAN.(.*?).OS")
# "sp|P12345|FOO_HUMAN" -> "P12345"
PROTEIN_ACCESSION_PATTERN = re.compile(r"\|([^|]*)\|")
# UniProt accessions are 6 or 10 alphanumeric characters
GENE_PATTERN = re.compile(r"\|(?:[A-Za-z0-9]{6}|[A-Za-z0-9]{10})\|(.*)_HUMAN")

# read.delim style header normalization: "LFQ intensity S1" -> "LFQ.intensity.S1"
HEADER_INVALID_CHARS = re.compile(r"[^A-Za-z0-9._]")

# ============================================================================
# Log transform policies for non-positive intensities
# ============================================================================

ZERO_POLICY_MISSING = "missing"
ZERO_POLICY_INF = "inf"
ZERO_POLICY_RAISE = "raise"

ZERO_POLICIES = [ZERO_POLICY_MISSING, ZERO_POLICY_INF, ZERO_POLICY_RAISE]
