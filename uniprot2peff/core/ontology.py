"""
Modification ontology maps.

Maps UniProt "modified residue" descriptions (controlled vocabulary from
ptmlist.txt) to PSI-MOD or Unimod accessions. Lookups are exact and
case-sensitive; several descriptions may share one code.
"""

from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional

from ..config import ModProfile


class OntologyMap:
    """Immutable description -> ontology code table."""

    def __init__(self, name: str, codes: Mapping[str, str]):
        """
        Args:
            name: Ontology name as used in the PEFF key, e.g. "Psi" for
                \\ModResPsi
            codes: Description to accession mapping
        """
        self.name = name
        self._codes = MappingProxyType(dict(codes))

    @property
    def header_key(self) -> str:
        """PEFF header key for modification blocks, e.g. 'ModResPsi'."""
        return f"ModRes{self.name}"

    def lookup(self, description: str) -> Optional[str]:
        return self._codes.get(description)

    def __contains__(self, description: object) -> bool:
        return description in self._codes

    def __iter__(self) -> Iterator[str]:
        return iter(self._codes)

    def __len__(self) -> int:
        return len(self._codes)

    def __repr__(self) -> str:
        return f"OntologyMap(name={self.name}, entries={len(self)})"


_PSI_MOD_CODES: Dict[str, str] = {
    # Phosphorylation
    "Phosphoserine": "MOD:00046",
    "Phosphothreonine": "MOD:00047",
    "Phosphotyrosine": "MOD:00048",

    # Acetylation / formylation
    "N-acetylalanine": "MOD:00394",
    "N-acetylaspartate": "MOD:00394",
    "N-acetylcysteine": "MOD:00394",
    "N-acetylglutamate": "MOD:00394",
    "N-acetylglycine": "MOD:00394",
    "N-acetylmethionine": "MOD:00394",
    "N-acetylproline": "MOD:00394",
    "N-acetylserine": "MOD:00394",
    "N-acetylthreonine": "MOD:00394",
    "N-acetyltyrosine": "MOD:00394",
    "N-formylmethionine": "MOD:00160",

    # Methylation
    "Dimethylated arginine": "MOD:00638",
    "Asymmetric dimethylarginine": "MOD:00077",
    "Asymmetric dimethylarginine; by PRMT1": "MOD:00077",
    "Symmetric dimethylarginine": "MOD:00076",
    "Trimethyllysine": "MOD:00083",
    "Lysine methyl ester": "MOD:00323",
    "Leucine methyl ester": "MOD:00304",
    "Aspartate methyl ester": "MOD:00407",
    "Cysteine methyl ester": "MOD:00114",
    "Glutamate methyl ester (Gln)": "MOD:00407",

    # Oxidation / hydroxylation
    "Methionine sulfoxide": "MOD:00719",
    "Methionine sulfone": "MOD:00256",
    "3-hydroxyproline": "MOD:00038",
    "4-hydroxyproline": "MOD:00039",
    "3,4-dihydroxyproline": "MOD:00287",
    "4-hydroxylysine": "MOD:00240",
    "3-hydroxyphenylalanine": "MOD:01385",
    "3-hydroxytryptophan": "MOD:00327",
    "3-hydroxytryptophan; by autocatalysis": "MOD:00327",
    "3,4-dihydroxyarginine": "MOD:00374",
    "4-hydroxyarginine": "MOD:00220",

    # Deamidation
    "Deamidated asparagine": "MOD:00684",
    "Deamidated glutamine": "MOD:00685",
    "Citrulline": "MOD:00219",

    # Lipidation
    "Myristoylation": "MOD:00438",
    "Farnesylation": "MOD:00437",
    "Geranylgeranylation": "MOD:00441",

    # Sulfation
    "Sulfocysteine": "MOD:00180",
    "Sulfothreonine": "MOD:00180",
    "Sulfotyrosine": "MOD:00367",

    # ADP-ribosylation
    "ADP-ribosylarginine": "MOD:00177",
    "ADP-ribosylcysteine": "MOD:00178",
    "ADP-ribosylserine": "MOD:00242",
}

# Same vocabulary, Unimod accessions. Unimod encodes the mass delta only,
# so residue-specific PSI-MOD terms collapse onto one accession.
_UNIMOD_CODES: Dict[str, str] = {
    # Phosphorylation
    "Phosphoserine": "UNIMOD:21",
    "Phosphothreonine": "UNIMOD:21",
    "Phosphotyrosine": "UNIMOD:21",

    # Acetylation / formylation
    "N-acetylalanine": "UNIMOD:1",
    "N-acetylaspartate": "UNIMOD:1",
    "N-acetylcysteine": "UNIMOD:1",
    "N-acetylglutamate": "UNIMOD:1",
    "N-acetylglycine": "UNIMOD:1",
    "N-acetylmethionine": "UNIMOD:1",
    "N-acetylproline": "UNIMOD:1",
    "N-acetylserine": "UNIMOD:1",
    "N-acetylthreonine": "UNIMOD:1",
    "N-acetyltyrosine": "UNIMOD:1",
    "N-formylmethionine": "UNIMOD:122",

    # Methylation
    "Dimethylated arginine": "UNIMOD:36",
    "Asymmetric dimethylarginine": "UNIMOD:36",
    "Asymmetric dimethylarginine; by PRMT1": "UNIMOD:36",
    "Symmetric dimethylarginine": "UNIMOD:36",
    "Trimethyllysine": "UNIMOD:37",
    "Lysine methyl ester": "UNIMOD:34",
    "Leucine methyl ester": "UNIMOD:34",
    "Aspartate methyl ester": "UNIMOD:34",
    "Cysteine methyl ester": "UNIMOD:34",
    "Glutamate methyl ester (Gln)": "UNIMOD:528",

    # Oxidation / hydroxylation
    "Methionine sulfoxide": "UNIMOD:35",
    "Methionine sulfone": "UNIMOD:425",
    "3-hydroxyproline": "UNIMOD:35",
    "4-hydroxyproline": "UNIMOD:35",
    "3,4-dihydroxyproline": "UNIMOD:425",
    "4-hydroxylysine": "UNIMOD:35",
    "3-hydroxyphenylalanine": "UNIMOD:35",
    "3-hydroxytryptophan": "UNIMOD:35",
    "3-hydroxytryptophan; by autocatalysis": "UNIMOD:35",
    "3,4-dihydroxyarginine": "UNIMOD:425",
    "4-hydroxyarginine": "UNIMOD:35",

    # Deamidation
    "Deamidated asparagine": "UNIMOD:7",
    "Deamidated glutamine": "UNIMOD:7",
    "Citrulline": "UNIMOD:7",

    # Lipidation
    "Myristoylation": "UNIMOD:45",
    "Farnesylation": "UNIMOD:44",
    "Geranylgeranylation": "UNIMOD:48",

    # Sulfation
    "Sulfocysteine": "UNIMOD:40",
    "Sulfothreonine": "UNIMOD:40",
    "Sulfotyrosine": "UNIMOD:40",

    # ADP-ribosylation
    "ADP-ribosylarginine": "UNIMOD:213",
    "ADP-ribosylcysteine": "UNIMOD:213",
    "ADP-ribosylserine": "UNIMOD:213",
}

PSI_MOD = OntologyMap("Psi", _PSI_MOD_CODES)
UNIMOD = OntologyMap("Unimod", _UNIMOD_CODES)


def get_ontology_map(profile: ModProfile) -> OntologyMap:
    """Return the ontology map for a modification profile."""
    if profile == ModProfile.UNIMOD:
        return UNIMOD
    return PSI_MOD
