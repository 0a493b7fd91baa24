"""
Reference/alternate residue extraction for sequence variants.
"""

from typing import Optional, Tuple

from ..errors import NoResiduePairError
from ..utils.sequence import match_substitution


def extract_residue_pair(
    original: Optional[str],
    variation: Optional[str],
    description: Optional[str] = None,
) -> Tuple[str, str]:
    """
    Derive (reference, alternate) residues for a variant.

    Structured <original>/<variation> text wins when both are exactly one
    character. Otherwise the first "X -> Y" in the description is used.
    Residues are not checked against the amino-acid alphabet here.

    Args:
        original: Text of <original>, if present
        variation: Text of <variation>, if present
        description: Feature description, if present

    Returns:
        (reference, alternate) tuple

    Raises:
        NoResiduePairError: If neither source yields a pair
    """
    if original is not None and variation is not None:
        if len(original) == 1 and len(variation) == 1:
            return original, variation

    if description:
        pair = match_substitution(description)
        if pair is not None:
            return pair

    raise NoResiduePairError(
        f"No residue pair in original={original!r}, variation={variation!r}, "
        f"description={description!r}"
    )
