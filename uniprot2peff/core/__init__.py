"""
Core feature classification modules for uniprot2peff.
"""

from .classification import (
    SimpleVariantClassifier,
    UnifiedVariantClassifier,
    VariantClassification,
    VariantClassifier,
    VariantOutcome,
    select_simple_variants,
)
from .engine import AnnotationEngine
from .location import resolve_span
from .models import (
    ComplexVariantAnnotation,
    Dataset,
    Feature,
    FeatureLocation,
    FeatureType,
    ModificationAnnotation,
    RecordAnnotations,
    SequenceRecord,
    SimpleVariantAnnotation,
)
from .modifications import ModificationResolver
from .ontology import PSI_MOD, UNIMOD, OntologyMap, get_ontology_map
from .residues import extract_residue_pair
from .statistics import RunStatistics

__all__ = [
    # Models
    'Dataset',
    'FeatureType',
    'FeatureLocation',
    'Feature',
    'SequenceRecord',
    'ModificationAnnotation',
    'SimpleVariantAnnotation',
    'ComplexVariantAnnotation',
    'RecordAnnotations',
    # Ontology
    'OntologyMap',
    'PSI_MOD',
    'UNIMOD',
    'get_ontology_map',
    # Resolvers
    'resolve_span',
    'extract_residue_pair',
    'ModificationResolver',
    # Variant classification
    'VariantOutcome',
    'VariantClassification',
    'VariantClassifier',
    'SimpleVariantClassifier',
    'UnifiedVariantClassifier',
    'select_simple_variants',
    # Engine
    'AnnotationEngine',
    'RunStatistics',
]
