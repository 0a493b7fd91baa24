"""
Utility modules for uniprot2peff.
"""

from .sequence import (
    STANDARD_AMINO_ACIDS,
    SUBSTITUTION_PATTERN,
    clean_sequence,
    is_valid_amino_acid,
    match_substitution,
    wrap_sequence,
)

__all__ = [
    'STANDARD_AMINO_ACIDS',
    'SUBSTITUTION_PATTERN',
    'is_valid_amino_acid',
    'match_substitution',
    'clean_sequence',
    'wrap_sequence',
]
