"""
Per-run diagnostic counters.

A RunStatistics instance is created for each conversion run and passed
explicitly to every classifier. Nothing here affects the PEFF output.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List
import logging

logger = logging.getLogger(__name__)


# Variant skip reasons
SKIP_COMPLEX_LOCATION = 'complex_location'
SKIP_NON_SIMPLE = 'non_simple'
SKIP_INVALID_AA = 'invalid_aa'

# Complex variant origins
COMPLEX_MUTAGENESIS = 'mutagenesis'
COMPLEX_SEQUENCE_VARIANT = 'sequence_variant'


@dataclass
class RunStatistics:
    """Skip, rejection and emission counters for one run."""
    entries_processed: int = 0
    entries_missing_fields: int = 0

    # Modified residue descriptions seen with a position, mapped or not
    ptm_counts: Counter = field(default_factory=Counter)
    unmapped_ptms: Counter = field(default_factory=Counter)

    variant_skipped: Counter = field(default_factory=Counter)
    variant_complex: Counter = field(default_factory=Counter)

    # Annotations written
    modifications: int = 0
    simple_variants: int = 0
    complex_variants: int = 0

    def skip_variant(self, reason: str):
        self.variant_skipped[reason] += 1

    def summary(self) -> Dict[str, int]:
        """
        Flatten the counters into a single dict.

        Returns:
            Dict with entry counts, annotation counts, and one key per
            skip reason / complex origin (prefixed 'skipped_' / 'complex_')
        """
        summary = {
            'entries_processed': self.entries_processed,
            'entries_missing_fields': self.entries_missing_fields,
            'modifications': self.modifications,
            'ptm_descriptions': len(self.ptm_counts),
            'unmapped_ptm_descriptions': len(self.unmapped_ptms),
            'unmapped_ptms': sum(self.unmapped_ptms.values()),
            'simple_variants': self.simple_variants,
            'complex_variants': self.complex_variants,
        }
        for reason, count in sorted(self.variant_skipped.items()):
            summary[f'skipped_{reason}'] = count
        for origin, count in sorted(self.variant_complex.items()):
            summary[f'complex_{origin}'] = count
        return summary

    def to_rows(self) -> List[Dict]:
        """One row per counter, for tabular export."""
        rows = [
            {'category': 'run', 'name': name, 'count': count}
            for name, count in (
                ('entries_processed', self.entries_processed),
                ('entries_missing_fields', self.entries_missing_fields),
                ('modifications', self.modifications),
                ('simple_variants', self.simple_variants),
                ('complex_variants', self.complex_variants),
            )
        ]
        for category, counter in (
            ('variant_skipped', self.variant_skipped),
            ('variant_complex', self.variant_complex),
            ('ptm', self.ptm_counts),
            ('unmapped_ptm', self.unmapped_ptms),
        ):
            for name, count in counter.most_common():
                rows.append({'category': category, 'name': name, 'count': count})
        return rows

    def log_summary(self, top_n: int = 10):
        """Log the end-of-run diagnostics."""
        logger.info(
            f"Processed {self.entries_processed} entries "
            f"({self.entries_missing_fields} with missing fields)"
        )
        logger.info(
            f"Wrote {self.modifications} modifications, {self.simple_variants} simple "
            f"and {self.complex_variants} complex variants"
        )

        if self.ptm_counts:
            logger.info(f"PTM descriptions seen ({len(self.ptm_counts)} distinct), top {top_n}:")
            for description, count in self.ptm_counts.most_common(top_n):
                logger.info(f"  {description}: {count}")

        if self.unmapped_ptms:
            logger.warning(
                f"{sum(self.unmapped_ptms.values())} modified residues dropped "
                f"({len(self.unmapped_ptms)} unmapped descriptions)"
            )
            for description, count in self.unmapped_ptms.most_common(top_n):
                logger.warning(f"  unmapped: {description}: {count}")

        for reason, count in self.variant_skipped.most_common():
            logger.info(f"Variants skipped ({reason}): {count}")
        for origin, count in self.variant_complex.most_common():
            logger.info(f"Complex variants ({origin}): {count}")
