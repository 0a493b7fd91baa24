"""
Sequence variant classification.

Two classification profiles share the span resolver and residue-pair
extractor:

- Simple-only: sequence variants at a single position whose residue pair
  comes from <original>/<variation> or, failing that, an "X -> Y"
  description. Emits (position|alt).
- Unified: sequence variants, splice variants and mutagenesis sites with
  verbatim <original>/<variation>. Each feature is either:
    - Simple: one standard residue replaced by one standard residue at a
      single position, emitted as (position|ref|alt)
    - Complex: anything else (deletion, insertion, multi-residue
      substitution, span, non-standard residue), emitted as
      (start|end|replacement)
"""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterable, List, Optional, Tuple, Union

from ..errors import MissingLocationError, NoResiduePairError
from ..utils.sequence import is_valid_amino_acid
from .location import resolve_span
from .models import (
    ComplexVariantAnnotation,
    Feature,
    FeatureType,
    SimpleVariantAnnotation,
)
from .residues import extract_residue_pair
from .statistics import (
    COMPLEX_MUTAGENESIS,
    COMPLEX_SEQUENCE_VARIANT,
    SKIP_COMPLEX_LOCATION,
    SKIP_INVALID_AA,
    SKIP_NON_SIMPLE,
    RunStatistics,
)


class VariantOutcome(Enum):
    """Variant classification categories."""
    SIMPLE = 'simple'
    COMPLEX = 'complex'
    SKIPPED = 'skipped'


@dataclass
class VariantClassification:
    """Result of classifying one feature."""
    outcome: VariantOutcome
    annotation: Optional[Union[SimpleVariantAnnotation, ComplexVariantAnnotation]] = None
    skip_reason: Optional[str] = None

    @classmethod
    def skipped(cls, reason: str) -> 'VariantClassification':
        return cls(outcome=VariantOutcome.SKIPPED, skip_reason=reason)


class VariantClassifier:
    """Base class for variant classification profiles."""

    feature_types: FrozenSet[FeatureType] = frozenset()

    def classify_feature(self, feature: Feature) -> VariantClassification:
        raise NotImplementedError

    def classify(
        self,
        features: Iterable[Feature],
        stats: RunStatistics,
    ) -> Tuple[List[SimpleVariantAnnotation], List[ComplexVariantAnnotation]]:
        """
        Classify all relevant features of one record.

        Args:
            features: Record features in document order
            stats: Run statistics to update with skip and complex counters

        Returns:
            Tuple of (simple annotations, complex annotations), each in
            feature order
        """
        simple = []
        complex_ = []

        for feature in features:
            if feature.type not in self.feature_types:
                continue

            result = self.classify_feature(feature)

            if result.outcome == VariantOutcome.SKIPPED:
                stats.skip_variant(result.skip_reason)
            elif result.outcome == VariantOutcome.SIMPLE:
                simple.append(result.annotation)
            else:
                complex_.append(result.annotation)
                if feature.type == FeatureType.MUTAGENESIS_SITE:
                    stats.variant_complex[COMPLEX_MUTAGENESIS] += 1
                elif feature.type == FeatureType.SEQUENCE_VARIANT:
                    stats.variant_complex[COMPLEX_SEQUENCE_VARIANT] += 1

        return simple, complex_


class SimpleVariantClassifier(VariantClassifier):
    """
    Simple-only profile.

    Classification hierarchy:
    1. No single <position> -> skipped (complex_location)
    2. Description contains the exclusion marker -> skipped (marker)
    3. No residue pair from fields or description -> skipped (non_simple)
    4. Either residue outside the standard alphabet -> skipped (invalid_aa)
    5. Otherwise -> SIMPLE, alternate residue only
    """

    feature_types = frozenset({FeatureType.SEQUENCE_VARIANT})

    def __init__(self, exclude_marker: str):
        self.exclude_marker = exclude_marker

    def classify_feature(self, feature: Feature) -> VariantClassification:
        location = feature.location
        if location is None or not location.is_single:
            return VariantClassification.skipped(SKIP_COMPLEX_LOCATION)

        if feature.description and self.exclude_marker in feature.description:
            return VariantClassification.skipped(self.exclude_marker)

        try:
            ref, alt = extract_residue_pair(
                feature.original, feature.variation, feature.description
            )
        except NoResiduePairError:
            return VariantClassification.skipped(SKIP_NON_SIMPLE)

        if not is_valid_amino_acid(ref) or not is_valid_amino_acid(alt):
            return VariantClassification.skipped(SKIP_INVALID_AA)

        return VariantClassification(
            outcome=VariantOutcome.SIMPLE,
            annotation=SimpleVariantAnnotation(position=location.position, alternate=alt),
        )


class UnifiedVariantClassifier(VariantClassifier):
    """
    Unified simple + complex profile.

    Classification hierarchy:
    1. No location subtree -> skipped (complex_location)
    2. <original> or <variation> absent -> skipped (non_simple)
    3. Location without position/begin/end -> skipped (complex_location)
    4. 1 -> 1 standard residues at start == end -> SIMPLE with ref and alt
    5. Otherwise -> COMPLEX with the replacement text verbatim
    """

    feature_types = frozenset({
        FeatureType.SEQUENCE_VARIANT,
        FeatureType.SPLICE_VARIANT,
        FeatureType.MUTAGENESIS_SITE,
    })

    def classify_feature(self, feature: Feature) -> VariantClassification:
        if feature.location is None:
            return VariantClassification.skipped(SKIP_COMPLEX_LOCATION)

        original = feature.original
        variation = feature.variation
        if original is None or variation is None:
            return VariantClassification.skipped(SKIP_NON_SIMPLE)

        try:
            start, end = resolve_span(feature.location)
        except MissingLocationError:
            return VariantClassification.skipped(SKIP_COMPLEX_LOCATION)

        if (
            start == end
            and is_valid_amino_acid(original)
            and is_valid_amino_acid(variation)
        ):
            return VariantClassification(
                outcome=VariantOutcome.SIMPLE,
                annotation=SimpleVariantAnnotation(
                    position=start, alternate=variation, reference=original
                ),
            )

        return VariantClassification(
            outcome=VariantOutcome.COMPLEX,
            annotation=ComplexVariantAnnotation(start=start, end=end, replacement=variation),
        )


def select_simple_variants(
    unified_simple: List[SimpleVariantAnnotation],
    simple_only: List[SimpleVariantAnnotation],
    unified_enabled: bool,
) -> List[SimpleVariantAnnotation]:
    """
    Choose the record's VariantSimple block when both profiles may run.

    If the unified profile ran and produced simple variants for the record,
    they replace the simple-only profile's list entirely. Otherwise the
    simple-only list is used (empty if that profile did not run).
    """
    if unified_enabled and unified_simple:
        return unified_simple
    return simple_only
