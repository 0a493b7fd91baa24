"""
Per-record annotation engine.

Runs the enabled resolvers/classifiers over one record's features and
returns the three annotation lists for the PEFF encoder.
"""

from typing import Optional

from ..config import ConversionConfig
from .classification import (
    SimpleVariantClassifier,
    UnifiedVariantClassifier,
    select_simple_variants,
)
from .models import RecordAnnotations, SequenceRecord
from .modifications import ModificationResolver
from .ontology import OntologyMap, get_ontology_map
from .statistics import RunStatistics


class AnnotationEngine:
    """
    Feature classification for a conversion run.

    Args:
        config: Run configuration selecting the enabled profiles
        ontology: Ontology map for modified residues; defaults to the map
            of config.mod_profile
    """

    def __init__(self, config: ConversionConfig, ontology: Optional[OntologyMap] = None):
        self.config = config
        self.ontology = ontology or get_ontology_map(config.mod_profile)

        self.modification_resolver = (
            ModificationResolver(self.ontology, strict=config.strict)
            if config.enable_ptms else None
        )
        self.simple_classifier = (
            SimpleVariantClassifier(config.exclude_marker)
            if config.variant_simple else None
        )
        self.unified_classifier = (
            UnifiedVariantClassifier()
            if config.variant_complex else None
        )

    def annotate(self, record: SequenceRecord, stats: RunStatistics) -> RecordAnnotations:
        """
        Classify all features of a record.

        Args:
            record: Parsed UniProt entry
            stats: Run statistics to update

        Returns:
            RecordAnnotations with simple variants, complex variants and
            modifications in feature order

        Raises:
            UnmappedModificationError: In strict mode
        """
        annotations = RecordAnnotations()

        if self.modification_resolver is not None:
            annotations.modifications = self.modification_resolver.resolve(
                record.features, stats
            )

        simple_only = []
        if self.simple_classifier is not None:
            simple_only, _ = self.simple_classifier.classify(record.features, stats)

        unified_simple = []
        if self.unified_classifier is not None:
            unified_simple, annotations.complex_variants = self.unified_classifier.classify(
                record.features, stats
            )

        annotations.simple_variants = select_simple_variants(
            unified_simple, simple_only, unified_enabled=self.unified_classifier is not None
        )

        stats.modifications += len(annotations.modifications)
        stats.simple_variants += len(annotations.simple_variants)
        stats.complex_variants += len(annotations.complex_variants)

        return annotations
