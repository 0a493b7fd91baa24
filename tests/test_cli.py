"""End-to-end tests for the converter and command-line interface."""

import pandas as pd
import pytest
from click.testing import CliRunner

from uniprot2peff.cli import cli, main
from uniprot2peff.config import ConversionConfig
from uniprot2peff.converter import PeffConverter, convert
from uniprot2peff.errors import (
    UnmappedModificationError,
    UnreadableInputError,
    UnwritableOutputError,
)


FILE_HEADER = [
    "# PEFF 1.0 generated by uniprot2peff 0.1.0",
    "# VariantSimple=false",
    "# VariantComplex=false",
    "# ModResPsi=true",
]


class TestConverter:
    """Test PeffConverter runs."""

    def test_default_run(self, sample_xml_path, sample_sequence, tmp_path):
        """Test PTMs only: unmapped PTM dropped, no variant blocks."""
        output = tmp_path / "out.peff"
        stats = convert(sample_xml_path, output)

        assert output.read_text().splitlines() == FILE_HEADER + [
            ">sp|P12345|TEST_HUMAN OS=Homo sapiens \\ModResPsi=(12|MOD:00046)",
            sample_sequence[:60],
            sample_sequence[60:],
            ">tr|UNKNOWN_ACCESSION|TEST2_YEAST OS=Saccharomyces cerevisiae",
        ]
        assert stats.entries_processed == 2
        assert stats.entries_missing_fields == 1
        assert stats.unmapped_ptms == {"Unknown Mod XYZ": 1}

    def test_both_variant_profiles(self, sample_xml_path, tmp_path):
        """Test unified precedence on entry 1 and simple-only fallback on entry 2."""
        output = tmp_path / "out.peff"
        config = ConversionConfig(variant_simple=True, variant_complex=True)
        stats = convert(sample_xml_path, output, config)

        lines = output.read_text().splitlines()
        assert lines[1:3] == ["# VariantSimple=true", "# VariantComplex=true"]
        assert lines[4] == (
            ">sp|P12345|TEST_HUMAN OS=Homo sapiens"
            " \\VariantSimple=(45|A|T)"
            " \\VariantComplex=(10|12|)(50|52|DE)"
            " \\ModResPsi=(12|MOD:00046)"
        )
        assert lines[7] == (
            ">tr|UNKNOWN_ACCESSION|TEST2_YEAST OS=Saccharomyces cerevisiae"
            " \\VariantSimple=(7|V)"
        )
        assert stats.variant_skipped == {"SGRP": 1, "non_simple": 2}
        assert stats.variant_complex == {"mutagenesis": 1}

    def test_simple_profile_only(self, sample_xml_path, tmp_path):
        """Test the simple-only profile skips the SGRP variant."""
        output = tmp_path / "out.peff"
        convert(sample_xml_path, output, ConversionConfig(variant_simple=True))

        lines = output.read_text().splitlines()
        assert lines[4] == (
            ">sp|P12345|TEST_HUMAN OS=Homo sapiens"
            " \\VariantSimple=(45|T)"
            " \\ModResPsi=(12|MOD:00046)"
        )
        assert "VariantComplex=(" not in output.read_text()

    def test_output_is_deterministic(self, sample_xml_path, tmp_path):
        """Test two runs produce byte-identical files."""
        config = ConversionConfig(variant_simple=True, variant_complex=True)
        first = tmp_path / "first.peff"
        second = tmp_path / "second.peff"
        convert(sample_xml_path, first, config)
        convert(sample_xml_path, second, config)
        assert first.read_bytes() == second.read_bytes()

    def test_strict_keeps_partial_output(self, strict_xml_path, tmp_path):
        """Test a strict abort leaves the entries written before it."""
        output = tmp_path / "out.peff"
        converter = PeffConverter(ConversionConfig(strict=True))

        with pytest.raises(UnmappedModificationError, match="Unknown Mod XYZ"):
            converter.run(strict_xml_path, output)

        assert output.read_text().splitlines() == FILE_HEADER + [
            ">sp|P00001|FIRST_HUMAN \\ModResPsi=(3|MOD:00047)",
            "MKTAYIAK",
        ]

    def test_missing_input(self, tmp_path):
        """Test a missing input file."""
        with pytest.raises(UnreadableInputError):
            convert(tmp_path / "missing.xml", tmp_path / "out.peff")

    def test_unwritable_output(self, sample_xml_path, tmp_path):
        """Test an output path in a missing directory."""
        with pytest.raises(UnwritableOutputError):
            convert(sample_xml_path, tmp_path / "missing_dir" / "out.peff")

    def test_statistics_reset_per_run(self, sample_xml_path, tmp_path):
        """Test repeated runs on one converter report their own counters."""
        converter = PeffConverter(ConversionConfig())
        first = converter.run(sample_xml_path, tmp_path / "first.peff")
        second = converter.run(sample_xml_path, tmp_path / "second.peff")

        assert second is not first
        assert second.entries_processed == 2
        assert second.entries_missing_fields == 1
        assert second.unmapped_ptms == {"Unknown Mod XYZ": 1}
        assert first.entries_processed == 2


class TestCli:
    """Test the uniprot2peff command."""

    def setup_method(self):
        self.runner = CliRunner()

    def test_basic_run(self, sample_xml_path, tmp_path):
        """Test a default run writes the PEFF file."""
        output = tmp_path / "out.peff"
        result = self.runner.invoke(cli, [str(sample_xml_path), str(output)])

        assert result.exit_code == 0
        assert "Done. Processed 2 entries, 1 with missing fields." in result.output
        assert output.read_text().splitlines()[:4] == FILE_HEADER

    def test_unimod_and_line_width(self, sample_xml_path, sample_sequence, tmp_path):
        """Test --unimod and --line-width."""
        output = tmp_path / "out.peff"
        result = self.runner.invoke(
            cli, [str(sample_xml_path), str(output), "--unimod", "--line-width", "0"]
        )

        assert result.exit_code == 0
        lines = output.read_text().splitlines()
        assert lines[3] == "# ModResUnimod=true"
        assert lines[4].endswith(" \\ModResUnimod=(12|UNIMOD:21)")
        assert lines[5] == sample_sequence

    def test_no_ptms(self, sample_xml_path, tmp_path):
        """Test --no-ptms disables the ModRes block."""
        output = tmp_path / "out.peff"
        result = self.runner.invoke(cli, [str(sample_xml_path), str(output), "--no-ptms"])

        assert result.exit_code == 0
        text = output.read_text()
        assert "# ModResPsi=false" in text
        assert "\\ModResPsi=(" not in text

    def test_strict_exit_code(self, strict_xml_path, tmp_path):
        """Test --strict exits 1 on an unmapped PTM."""
        output = tmp_path / "out.peff"
        result = self.runner.invoke(cli, [str(strict_xml_path), str(output), "--strict"])

        assert result.exit_code == 1
        assert "Unmapped PTM: Unknown Mod XYZ" in result.output
        assert "P00001" in output.read_text()
        assert "P00002" not in output.read_text()

    def test_stats_file(self, sample_xml_path, tmp_path):
        """Test --stats writes the statistics TSV."""
        output = tmp_path / "out.peff"
        stats_path = tmp_path / "stats.tsv"
        result = self.runner.invoke(
            cli,
            [str(sample_xml_path), str(output), "--variant-simple", "--stats", str(stats_path)],
        )

        assert result.exit_code == 0
        df = pd.read_csv(stats_path, sep='\t')
        row = df[(df['category'] == 'variant_skipped') & (df['name'] == 'SGRP')]
        assert row['count'].iloc[0] == 1

    def test_config_file(self, sample_xml_path, tmp_path):
        """Test options from --config with a command-line override."""
        config_path = tmp_path / "peff.yaml"
        config_path.write_text("variant_simple: true\nexclude_marker: dbSNP\n")
        output = tmp_path / "out.peff"
        result = self.runner.invoke(
            cli,
            [str(sample_xml_path), str(output), "--config", str(config_path),
             "--exclude-marker", "SGRP"],
        )

        assert result.exit_code == 0
        assert " \\VariantSimple=(45|T)" in output.read_text()

    def test_invalid_config_file(self, sample_xml_path, tmp_path):
        """Test configuration errors exit 1."""
        config_path = tmp_path / "peff.yaml"
        config_path.write_text("mod_profile: resid\n")
        result = self.runner.invoke(
            cli, [str(sample_xml_path), str(tmp_path / "out.peff"), "--config", str(config_path)]
        )

        assert result.exit_code == 1
        assert "Error:" in result.output


class TestMain:
    """Test exit statuses of the console entry point."""

    def run_main(self, args):
        with pytest.raises(SystemExit) as excinfo:
            main(args)
        return excinfo.value.code

    def test_success(self, sample_xml_path, tmp_path):
        """Test a successful run exits 0."""
        assert self.run_main([str(sample_xml_path), str(tmp_path / "out.peff")]) == 0

    def test_missing_arguments(self):
        """Test missing positional arguments exit 1."""
        assert self.run_main([]) == 1

    def test_unknown_option(self, sample_xml_path, tmp_path):
        """Test unknown options exit 1."""
        assert self.run_main(
            [str(sample_xml_path), str(tmp_path / "out.peff"), "--frobnicate"]
        ) == 1

    def test_missing_input(self, tmp_path):
        """Test an unreadable input exits 1."""
        assert self.run_main([str(tmp_path / "missing.xml"), str(tmp_path / "out.peff")]) == 1

    def test_unwritable_output(self, sample_xml_path, tmp_path):
        """Test an unwritable output path exits 1."""
        assert self.run_main(
            [str(sample_xml_path), str(tmp_path / "missing_dir" / "out.peff")]
        ) == 1

    def test_non_string_marker_in_config(self, sample_xml_path, tmp_path):
        """Test a config with a numeric exclude_marker exits 1."""
        config_path = tmp_path / "peff.yaml"
        config_path.write_text("variant_simple: true\nexclude_marker: 123\n")
        assert self.run_main(
            [str(sample_xml_path), str(tmp_path / "out.peff"), "--config", str(config_path)]
        ) == 1

    def test_help(self):
        """Test --help exits 0."""
        assert self.run_main(["--help"]) == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
