"""
Modified residue resolution.

Turns "modified residue" features into (position, ontology code) pairs.
"""

from typing import Iterable, List
import logging

from ..errors import UnmappedModificationError
from .models import Feature, FeatureType, ModificationAnnotation
from .ontology import OntologyMap
from .statistics import RunStatistics

logger = logging.getLogger(__name__)


class ModificationResolver:
    """
    Map modified residues to ontology codes.

    Only features with both a description and a single <position> are
    considered; others are skipped without being counted. In strict mode a
    description missing from the ontology map aborts the run, otherwise the
    feature is dropped and tallied.
    """

    def __init__(self, ontology: OntologyMap, strict: bool = False):
        self.ontology = ontology
        self.strict = strict

    def resolve(
        self,
        features: Iterable[Feature],
        stats: RunStatistics,
    ) -> List[ModificationAnnotation]:
        """
        Resolve all modified residues of one record.

        Args:
            features: Record features in document order
            stats: Run statistics to update

        Returns:
            ModificationAnnotation list in feature order

        Raises:
            UnmappedModificationError: In strict mode, on the first
                description without an ontology code
        """
        mods = []

        for feature in features:
            if feature.type != FeatureType.MODIFIED_RESIDUE:
                continue

            location = feature.location
            if not feature.description or location is None or not location.is_single:
                continue

            description = feature.description
            stats.ptm_counts[description] += 1

            code = self.ontology.lookup(description)
            if code is None:
                if self.strict:
                    raise UnmappedModificationError(description)
                stats.unmapped_ptms[description] += 1
                logger.debug(f"Dropping unmapped PTM '{description}' at {location.position}")
                continue

            mods.append(ModificationAnnotation(position=location.position, code=code))

        return mods
