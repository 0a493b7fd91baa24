"""
Diagnostic output for conversion runs.
"""

from pathlib import Path
import logging

import pandas as pd

from ..core.statistics import RunStatistics
from ..errors import UnwritableOutputError

logger = logging.getLogger(__name__)


STATISTICS_COLUMNS = ['category', 'name', 'count']


def write_statistics_tsv(stats: RunStatistics, output_path: Path) -> Path:
    """
    Write run statistics to a TSV file.

    One row per counter: run totals first, then variant skip reasons,
    complex variant origins, PTM descriptions and unmapped PTM descriptions,
    each sorted by count.

    Args:
        stats: Statistics of a finished run
        output_path: Path for output TSV

    Returns:
        Path to written file
    """
    df = pd.DataFrame(stats.to_rows(), columns=STATISTICS_COLUMNS)

    try:
        df.to_csv(output_path, sep='\t', index=False)
    except OSError as e:
        raise UnwritableOutputError(f"Failed to write statistics file {output_path}: {e}")

    logger.info(f"Wrote run statistics to {output_path}")

    return output_path
