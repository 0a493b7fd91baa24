"""
Data models for UniProt records, their features, and PEFF annotations.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class Dataset(Enum):
    """UniProtKB section an entry belongs to."""
    REVIEWED = 'Swiss-Prot'
    UNREVIEWED = 'TrEMBL'

    @property
    def db_tag(self) -> str:
        """PEFF database tag: 'sp' for Swiss-Prot, 'tr' otherwise."""
        return 'sp' if self is Dataset.REVIEWED else 'tr'


class FeatureType(Enum):
    """UniProt feature types the engine acts on."""
    MODIFIED_RESIDUE = 'modified residue'
    SEQUENCE_VARIANT = 'sequence variant'
    SPLICE_VARIANT = 'splice variant'
    MUTAGENESIS_SITE = 'mutagenesis site'


@dataclass(frozen=True)
class FeatureLocation:
    """
    Raw location subtree of a feature.

    Attributes:
        position: Value of a <position> element, if present
        begin: Value of a <begin> element, if present
        end: Value of an <end> element, if present
    """
    position: Optional[int] = None
    begin: Optional[int] = None
    end: Optional[int] = None

    @property
    def is_single(self) -> bool:
        return self.position is not None


@dataclass(frozen=True)
class Feature:
    """
    A single annotated point or span on a protein record.

    Attributes:
        type: Feature type
        description: Free-text description (e.g. "Phosphoserine")
        location: Location subtree, or None when the feature has none
        original: Text of the <original> element, if present
        variation: Text of the first <variation> element, if present.
            An empty element is an empty string, not None.
    """
    type: FeatureType
    description: Optional[str] = None
    location: Optional[FeatureLocation] = None
    original: Optional[str] = None
    variation: Optional[str] = None


@dataclass(frozen=True)
class SequenceRecord:
    """
    One UniProt entry reduced to what PEFF output needs.

    Attributes:
        accession: Primary accession
        entry_name: Entry name (e.g. "P53_HUMAN"), may be empty
        organism: Scientific organism name, may be empty
        dataset: Swiss-Prot or TrEMBL
        sequence: Residue sequence with whitespace removed, may be empty
        features: Features in document order
        missing_fields: Names of required source fields that were absent
    """
    accession: str
    entry_name: str = ''
    organism: str = ''
    dataset: Dataset = Dataset.UNREVIEWED
    sequence: str = ''
    features: Tuple[Feature, ...] = ()
    missing_fields: Tuple[str, ...] = ()

    def __repr__(self) -> str:
        return f"SequenceRecord(accession={self.accession}, features={len(self.features)})"


@dataclass(frozen=True)
class ModificationAnnotation:
    """A modified residue mapped to an ontology code."""
    position: int
    code: str

    def to_peff(self) -> str:
        return f"({self.position}|{self.code})"


@dataclass(frozen=True)
class SimpleVariantAnnotation:
    """
    A single-residue substitution.

    The reference residue is only kept by the unified variant profile.
    """
    position: int
    alternate: str
    reference: Optional[str] = None

    def to_peff(self) -> str:
        if self.reference is None:
            return f"({self.position}|{self.alternate})"
        return f"({self.position}|{self.reference}|{self.alternate})"


@dataclass(frozen=True)
class ComplexVariantAnnotation:
    """
    Any alteration other than a single-residue substitution.

    An empty replacement is a deletion of start..end.
    """
    start: int
    end: int
    replacement: str = ''

    def to_peff(self) -> str:
        return f"({self.start}|{self.end}|{self.replacement})"


@dataclass
class RecordAnnotations:
    """Annotation lists produced for a single record."""
    simple_variants: List[SimpleVariantAnnotation] = field(default_factory=list)
    complex_variants: List[ComplexVariantAnnotation] = field(default_factory=list)
    modifications: List[ModificationAnnotation] = field(default_factory=list)
