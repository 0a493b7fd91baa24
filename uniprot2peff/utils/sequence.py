"""
Protein sequence utilities.

Provides the amino-acid alphabet check, the textual substitution matcher,
and sequence cleanup/folding helpers used by the PEFF writer.
"""

import re
from typing import List, Optional, Tuple


# The 20 standard amino acids. Ambiguity and non-standard codes
# (B, J, O, U, X, Z) are deliberately absent.
STANDARD_AMINO_ACIDS = frozenset('ACDEFGHIKLMNPQRSTVWY')

# "A -> T" as written in UniProt variant descriptions
SUBSTITUTION_PATTERN = re.compile(r'([A-Z])\s*->\s*([A-Z])')

_WHITESPACE = re.compile(r'\s+')


def is_valid_amino_acid(residue: str) -> bool:
    """Check if residue is exactly one of the 20 standard one-letter codes."""
    return len(residue) == 1 and residue in STANDARD_AMINO_ACIDS


def match_substitution(text: str) -> Optional[Tuple[str, str]]:
    """
    Find the first "<letter> -> <letter>" substitution in free text.

    Args:
        text: Feature description, e.g. "A -> T (in dbSNP:rs1234)"

    Returns:
        (reference, alternate) tuple, or None if no substitution is found

    Examples:
        >>> match_substitution("In allele B; A->T.")
        ('A', 'T')
        >>> match_substitution("Missing") is None
        True
    """
    match = SUBSTITUTION_PATTERN.search(text)
    if match is None:
        return None
    return match.group(1), match.group(2)


def clean_sequence(seq: str) -> str:
    """Remove all whitespace (line breaks, spaces, tabs) from a sequence."""
    return _WHITESPACE.sub('', seq)


def wrap_sequence(seq: str, width: int = 60) -> List[str]:
    """Split a sequence into lines of at most `width` residues.

    A width of 0 or less returns the whole sequence as one line.
    An empty sequence yields no lines.
    """
    if not seq:
        return []
    if width <= 0:
        return [seq]
    return [seq[i:i + width] for i in range(0, len(seq), width)]
