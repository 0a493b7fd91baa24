"""
I/O modules for uniprot2peff.
"""

from .output import write_statistics_tsv
from .peff import (
    PeffWriter,
    encode_record,
    format_file_header,
    format_header_line,
)
from .uniprot_xml import (
    UNKNOWN_ACCESSION,
    parse_entry,
    parse_uniprot_xml,
    read_uniprot_xml,
)

__all__ = [
    'read_uniprot_xml',
    'parse_uniprot_xml',
    'parse_entry',
    'UNKNOWN_ACCESSION',
    'PeffWriter',
    'encode_record',
    'format_file_header',
    'format_header_line',
    'write_statistics_tsv',
]
