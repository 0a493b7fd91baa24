"""
Exceptions raised during UniProt XML to PEFF conversion.
"""


class ConversionError(Exception):
    """Base class for all errors that abort a conversion run."""
    pass


class UnreadableInputError(ConversionError):
    """The input file does not exist or cannot be opened."""
    pass


class UnparseableDocumentError(ConversionError):
    """The input file is not a well-formed UniProt XML document."""
    pass


class UnwritableOutputError(ConversionError):
    """The output file cannot be opened or written."""
    pass


class ConfigurationError(ConversionError):
    """A configuration file is missing, malformed, or has invalid values."""
    pass


class UnmappedModificationError(ConversionError):
    """
    A modified residue description has no ontology code.

    Only raised in strict mode; lenient runs drop the feature instead.
    """

    def __init__(self, description: str):
        super().__init__(f"Unmapped PTM: {description}")
        self.description = description


class MissingLocationError(ValueError):
    """A feature has no position, begin or end to resolve a span from."""
    pass


class NoResiduePairError(ValueError):
    """Neither structured fields nor the description yield a residue pair."""
    pass
