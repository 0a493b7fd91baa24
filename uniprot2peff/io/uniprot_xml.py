"""
UniProtKB XML reader.

Parses a complete UniProt XML document into SequenceRecord objects. Only
the elements needed for PEFF output are read: accession, name, organism,
dataset, sequence, and modified residue / variant / mutagenesis features.
"""

from pathlib import Path
from typing import Iterator, List, Optional, Union
import logging
import xml.etree.ElementTree as ET

from ..core.models import (
    Dataset,
    Feature,
    FeatureLocation,
    FeatureType,
    SequenceRecord,
)
from ..errors import UnparseableDocumentError, UnreadableInputError
from ..utils.sequence import clean_sequence

logger = logging.getLogger(__name__)


UNKNOWN_ACCESSION = "UNKNOWN_ACCESSION"

_FEATURE_TYPES = {t.value: t for t in FeatureType}


def _local_name(tag: str) -> str:
    """Strip the XML namespace from a tag, e.g. '{ns}entry' -> 'entry'."""
    return tag.rsplit('}', 1)[-1]


def _children(elem: ET.Element, name: str) -> Iterator[ET.Element]:
    for child in elem:
        if _local_name(child.tag) == name:
            yield child


def _child(elem: ET.Element, name: str) -> Optional[ET.Element]:
    return next(_children(elem, name), None)


def _text(elem: Optional[ET.Element]) -> Optional[str]:
    """Stripped text of an element; '' for an empty element, None if absent."""
    if elem is None:
        return None
    return (elem.text or '').strip()


def _position_attr(location: ET.Element, name: str) -> Optional[int]:
    """Integer 'position' attribute of a location child, if usable."""
    elem = _child(location, name)
    if elem is None:
        return None
    try:
        return int(elem.get('position'))
    except (TypeError, ValueError):
        # e.g. <begin status="unknown"/>
        return None


def parse_location(elem: Optional[ET.Element]) -> Optional[FeatureLocation]:
    if elem is None:
        return None
    return FeatureLocation(
        position=_position_attr(elem, 'position'),
        begin=_position_attr(elem, 'begin'),
        end=_position_attr(elem, 'end'),
    )


def parse_feature(elem: ET.Element) -> Optional[Feature]:
    """
    Parse a <feature> element.

    Returns:
        Feature, or None if the feature type is not one the engine uses
    """
    feature_type = _FEATURE_TYPES.get(elem.get('type', ''))
    if feature_type is None:
        return None

    return Feature(
        type=feature_type,
        description=elem.get('description'),
        location=parse_location(_child(elem, 'location')),
        original=_text(_child(elem, 'original')),
        variation=_text(_child(elem, 'variation')),
    )


def _organism_name(entry: ET.Element) -> str:
    organism = _child(entry, 'organism')
    if organism is None:
        return ''

    names = list(_children(organism, 'name'))
    for name in names:
        if name.get('type') == 'scientific':
            return _text(name)
    if names:
        return _text(names[0])
    return _text(organism)


def parse_entry(entry: ET.Element) -> SequenceRecord:
    """
    Parse an <entry> element into a SequenceRecord.

    A missing accession is replaced by UNKNOWN_ACCESSION and a missing
    sequence by an empty one; both are listed in missing_fields.
    """
    missing = []

    accession = _text(_child(entry, 'accession'))
    if not accession:
        missing.append('accession')
        accession = UNKNOWN_ACCESSION

    sequence = _child(entry, 'sequence')
    if sequence is None:
        missing.append('sequence')
        residues = ''
    else:
        residues = clean_sequence(sequence.text or '')

    dataset = Dataset.REVIEWED if entry.get('dataset') == Dataset.REVIEWED.value else Dataset.UNREVIEWED

    features = []
    for feature_elem in _children(entry, 'feature'):
        feature = parse_feature(feature_elem)
        if feature is not None:
            features.append(feature)

    return SequenceRecord(
        accession=accession,
        entry_name=_text(_child(entry, 'name')) or '',
        organism=_organism_name(entry),
        dataset=dataset,
        sequence=residues,
        features=tuple(features),
        missing_fields=tuple(missing),
    )


def parse_uniprot_root(root: ET.Element) -> List[SequenceRecord]:
    """Parse all <entry> children of a <uniprot> root element."""
    return [parse_entry(entry) for entry in _children(root, 'entry')]


def parse_uniprot_xml(text: Union[str, bytes]) -> List[SequenceRecord]:
    """
    Parse UniProt XML from a string.

    Raises:
        UnparseableDocumentError: If the text is not well-formed XML
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise UnparseableDocumentError(f"Failed to parse XML: {e}")
    return parse_uniprot_root(root)


def read_uniprot_xml(path: Path) -> List[SequenceRecord]:
    """
    Read and parse a UniProt XML file.

    The whole document is loaded into memory before any record is returned.

    Args:
        path: UniProt XML file

    Returns:
        List of SequenceRecord in document order

    Raises:
        UnreadableInputError: If the file cannot be opened
        UnparseableDocumentError: If the file is not well-formed XML
    """
    path = Path(path)
    logger.info(f"Reading UniProt XML: {path}")

    try:
        tree = ET.parse(path)
    except ET.ParseError as e:
        raise UnparseableDocumentError(f"Failed to load XML {path}: {e}")
    except OSError as e:
        raise UnreadableInputError(f"Cannot read input file {path}: {e}")

    records = parse_uniprot_root(tree.getroot())
    logger.info(f"Loaded {len(records)} entries")
    return records
