"""Shared fixtures for uniprot2peff tests."""

import pytest


# 70 residues: folds into one 60-residue line and one 10-residue line
SEQUENCE = "ACDEFGHIKLMNPQRSTVWY" * 3 + "ACDEFGHIKL"

SAMPLE_XML = f"""<?xml version="1.0" encoding="UTF-8"?>
<uniprot xmlns="http://uniprot.org/uniprot" xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance">
<entry dataset="Swiss-Prot" created="2000-01-01" version="1">
  <accession>P12345</accession>
  <accession>Q99999</accession>
  <name>TEST_HUMAN</name>
  <protein><recommendedName><fullName>Test protein</fullName></recommendedName></protein>
  <organism>
    <name type="scientific">Homo sapiens</name>
    <name type="common">Human</name>
  </organism>
  <feature type="chain" description="Test protein" id="PRO_1">
    <location><begin position="1"/><end position="70"/></location>
  </feature>
  <feature type="modified residue" description="Phosphoserine">
    <location><position position="12"/></location>
  </feature>
  <feature type="modified residue" description="Unknown Mod XYZ">
    <location><position position="20"/></location>
  </feature>
  <feature type="sequence variant" description="In dbSNP:rs1." id="VAR_1">
    <original>A</original>
    <variation>T</variation>
    <location><position position="45"/></location>
  </feature>
  <feature type="sequence variant" description="In strain: SGRP X; A -> G">
    <location><position position="30"/></location>
  </feature>
  <feature type="mutagenesis site" description="Loss of activity.">
    <original>KLM</original>
    <variation></variation>
    <location><begin position="10"/><end position="12"/></location>
  </feature>
  <feature type="splice variant" id="VSP_1">
    <original>ABC</original>
    <variation>DE</variation>
    <location><begin position="50"/><end position="52"/></location>
  </feature>
  <sequence length="70" mass="7777" checksum="0" modified="2000-01-01" version="1">
{SEQUENCE[:35]}
{SEQUENCE[35:]}
  </sequence>
</entry>
<entry dataset="TrEMBL" created="2000-01-01" version="1">
  <name>TEST2_YEAST</name>
  <organism>
    <name type="scientific">Saccharomyces cerevisiae</name>
  </organism>
  <feature type="sequence variant" description="In allele 2; A -> V.">
    <location><position position="7"/></location>
  </feature>
</entry>
</uniprot>
"""

# Second entry has a PTM missing from the ontology maps
STRICT_XML = """<?xml version="1.0" encoding="UTF-8"?>
<uniprot xmlns="http://uniprot.org/uniprot">
<entry dataset="Swiss-Prot">
  <accession>P00001</accession>
  <name>FIRST_HUMAN</name>
  <feature type="modified residue" description="Phosphothreonine">
    <location><position position="3"/></location>
  </feature>
  <sequence>MKTAYIAK</sequence>
</entry>
<entry dataset="Swiss-Prot">
  <accession>P00002</accession>
  <name>SECOND_HUMAN</name>
  <feature type="modified residue" description="Unknown Mod XYZ">
    <location><position position="5"/></location>
  </feature>
  <sequence>MKTAYIAK</sequence>
</entry>
<entry dataset="Swiss-Prot">
  <accession>P00003</accession>
  <name>THIRD_HUMAN</name>
  <sequence>MKTAYIAK</sequence>
</entry>
</uniprot>
"""


@pytest.fixture
def sample_xml():
    return SAMPLE_XML


@pytest.fixture
def sample_sequence():
    return SEQUENCE


@pytest.fixture
def sample_xml_path(tmp_path):
    path = tmp_path / "sample.xml"
    path.write_text(SAMPLE_XML)
    return path


@pytest.fixture
def strict_xml_path(tmp_path):
    path = tmp_path / "strict.xml"
    path.write_text(STRICT_XML)
    return path
