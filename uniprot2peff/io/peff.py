"""
PEFF (PSI Extended FASTA Format) encoding.

Header line layout:
    >db|accession|entry_name OS=organism \\VariantSimple=(..)(..) \\VariantComplex=(..) \\ModResPsi=(..)

Blocks with no annotations are omitted; tuples are concatenated without
separators in feature order.
"""

from typing import List, Sequence, TextIO

from .. import __version__
from ..config import ConversionConfig
from ..core.models import RecordAnnotations, SequenceRecord
from ..core.ontology import OntologyMap
from ..utils.sequence import wrap_sequence


PEFF_VERSION = "1.0"


def _flag(value: bool) -> str:
    return "true" if value else "false"


def format_file_header(config: ConversionConfig, ontology: OntologyMap) -> List[str]:
    """
    Comment lines opening the PEFF file.

    VariantSimple is declared whenever either variant profile is enabled,
    since the unified profile also emits simple variants.
    """
    return [
        f"# PEFF {PEFF_VERSION} generated by uniprot2peff {__version__}",
        f"# VariantSimple={_flag(config.variants_enabled)}",
        f"# VariantComplex={_flag(config.variant_complex)}",
        f"# {ontology.header_key}={_flag(config.enable_ptms)}",
    ]


def _block(key: str, annotations: Sequence) -> str:
    if not annotations:
        return ""
    return f" \\{key}=" + "".join(a.to_peff() for a in annotations)


def format_header_line(
    record: SequenceRecord,
    annotations: RecordAnnotations,
    mod_key: str = "ModResPsi",
) -> str:
    """
    Build the '>' header line of one entry.

    Args:
        record: Entry metadata
        annotations: Annotation lists for the entry
        mod_key: PEFF key for the modification block

    Returns:
        Header line without trailing newline
    """
    header = f">{record.dataset.db_tag}|{record.accession}|{record.entry_name}"
    if record.organism:
        header += f" OS={record.organism}"

    header += _block("VariantSimple", annotations.simple_variants)
    header += _block("VariantComplex", annotations.complex_variants)
    header += _block(mod_key, annotations.modifications)
    return header


def encode_record(
    record: SequenceRecord,
    annotations: RecordAnnotations,
    mod_key: str = "ModResPsi",
    line_width: int = 60,
) -> str:
    """Encode one entry as header line plus folded sequence, newline-terminated."""
    lines = [format_header_line(record, annotations, mod_key)]
    lines.extend(wrap_sequence(record.sequence, line_width))
    return "\n".join(lines) + "\n"


class PeffWriter:
    """Writes PEFF entries to an open text stream."""

    def __init__(self, handle: TextIO, config: ConversionConfig, ontology: OntologyMap):
        self.handle = handle
        self.config = config
        self.ontology = ontology
        self.entries_written = 0

    def write_header(self):
        for line in format_file_header(self.config, self.ontology):
            self.handle.write(line + "\n")

    def write_record(self, record: SequenceRecord, annotations: RecordAnnotations):
        self.handle.write(encode_record(
            record,
            annotations,
            mod_key=self.ontology.header_key,
            line_width=self.config.line_width,
        ))
        self.entries_written += 1
