"""
uniprot2peff - UniProtKB XML to PEFF (PSI Extended FASTA Format) converter.
"""

__version__ = "0.1.0"

from .config import ConversionConfig, ModProfile, load_config
from .converter import PeffConverter, convert
from .core.engine import AnnotationEngine
from .core.statistics import RunStatistics
from .errors import ConversionError, UnmappedModificationError

__all__ = [
    "ConversionConfig",
    "ModProfile",
    "load_config",
    "AnnotationEngine",
    "PeffConverter",
    "convert",
    "RunStatistics",
    "ConversionError",
    "UnmappedModificationError",
    "__version__",
]
