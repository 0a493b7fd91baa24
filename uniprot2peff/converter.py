"""
Conversion run orchestration.

Reads a UniProt XML document, classifies every entry's features, and
writes one PEFF entry per UniProt entry in document order.
"""

from pathlib import Path
from typing import Optional
import logging

from .config import ConversionConfig
from .core.engine import AnnotationEngine
from .core.models import SequenceRecord
from .core.ontology import OntologyMap
from .core.statistics import RunStatistics
from .errors import UnwritableOutputError
from .io.peff import PeffWriter
from .io.uniprot_xml import read_uniprot_xml

logger = logging.getLogger(__name__)


class PeffConverter:
    """
    Converts one UniProt XML file to PEFF.

    The input is parsed completely before the output file is opened. Entries
    are then classified and written one at a time. A strict-mode abort
    propagates UnmappedModificationError and leaves the entries written so
    far in the output file.
    """

    def __init__(self, config: ConversionConfig, ontology: Optional[OntologyMap] = None):
        self.config = config
        self.engine = AnnotationEngine(config, ontology)
        self.stats: Optional[RunStatistics] = None

    @property
    def ontology(self) -> OntologyMap:
        return self.engine.ontology

    def run(self, input_path: Path, output_path: Path) -> RunStatistics:
        """
        Run the conversion.

        Args:
            input_path: UniProt XML file
            output_path: PEFF file to create (overwritten if present)

        Returns:
            RunStatistics for this run only; each call starts from zero

        Raises:
            UnreadableInputError: Input cannot be opened
            UnparseableDocumentError: Input is not well-formed XML
            UnwritableOutputError: Output cannot be opened or written
            UnmappedModificationError: Strict mode and an unmapped PTM
        """
        self.stats = RunStatistics()
        self.config.log_summary()

        records = read_uniprot_xml(Path(input_path))

        try:
            with open(output_path, 'w', newline='\n') as handle:
                writer = PeffWriter(handle, self.config, self.ontology)
                writer.write_header()
                for record in records:
                    self._process_record(record, writer)
        except OSError as e:
            raise UnwritableOutputError(f"Failed to write output file {output_path}: {e}")

        logger.info(f"Wrote {self.stats.entries_processed} entries to {output_path}")
        self.stats.log_summary()

        return self.stats

    def _process_record(self, record: SequenceRecord, writer: PeffWriter):
        if record.missing_fields:
            self.stats.entries_missing_fields += 1
            missing = ' '.join(f"<{name}>" for name in record.missing_fields)
            logger.warning(
                f"Entry {record.accession} missing {missing} - "
                "processing features within this entry regardless"
            )

        annotations = self.engine.annotate(record, self.stats)
        writer.write_record(record, annotations)
        self.stats.entries_processed += 1


def convert(
    input_path: Path,
    output_path: Path,
    config: Optional[ConversionConfig] = None,
) -> RunStatistics:
    """
    Convert a UniProt XML file to PEFF.

    Args:
        input_path: UniProt XML file
        output_path: PEFF output file
        config: Run configuration (defaults: PTMs on, variants off, lenient)

    Returns:
        RunStatistics for the run
    """
    converter = PeffConverter(config or ConversionConfig())
    return converter.run(input_path, output_path)
