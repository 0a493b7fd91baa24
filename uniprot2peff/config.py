"""
Run configuration for UniProt XML to PEFF conversion.

Options come from command-line flags and, optionally, a YAML file; flags
given on the command line override values from the file.
"""

from dataclasses import dataclass, fields, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional
import logging

import yaml

from .errors import ConfigurationError

logger = logging.getLogger(__name__)


DEFAULT_LINE_WIDTH = 60

# Description marker of variants from the Saccharomyces Genome Resequencing
# Project; these are strain polymorphisms, not curated variants.
DEFAULT_EXCLUDE_MARKER = "SGRP"


class ModProfile(Enum):
    """Ontology used to encode modified residues."""
    PSI = "psi"
    UNIMOD = "unimod"


@dataclass
class ConversionConfig:
    """
    Options for one conversion run.

    Attributes:
        strict: Abort on modified residues without an ontology code
        enable_ptms: Emit the ModRes block
        variant_simple: Run the simple-only variant profile
        variant_complex: Run the unified simple + complex variant profile
        mod_profile: Ontology for ModRes codes (PSI-MOD or Unimod)
        line_width: Residues per sequence line, 0 for a single line
        exclude_marker: Description text that excludes a variant from the
            simple-only profile
    """
    strict: bool = False
    enable_ptms: bool = True
    variant_simple: bool = False
    variant_complex: bool = False
    mod_profile: ModProfile = ModProfile.PSI
    line_width: int = DEFAULT_LINE_WIDTH
    exclude_marker: str = DEFAULT_EXCLUDE_MARKER

    def __post_init__(self):
        if isinstance(self.mod_profile, str):
            try:
                self.mod_profile = ModProfile(self.mod_profile.lower())
            except ValueError:
                choices = ', '.join(p.value for p in ModProfile)
                raise ConfigurationError(
                    f"Unknown mod_profile '{self.mod_profile}' (expected one of: {choices})"
                )
        if not isinstance(self.mod_profile, ModProfile):
            choices = ', '.join(p.value for p in ModProfile)
            raise ConfigurationError(
                f"mod_profile must be one of: {choices}, got {self.mod_profile!r}"
            )
        if not isinstance(self.line_width, int) or isinstance(self.line_width, bool):
            raise ConfigurationError(f"line_width must be an integer, got {self.line_width!r}")
        if self.line_width < 0:
            raise ConfigurationError(f"line_width must be >= 0, got {self.line_width}")
        if not isinstance(self.exclude_marker, str) or not self.exclude_marker:
            raise ConfigurationError(
                f"exclude_marker must be a non-empty string, got {self.exclude_marker!r}"
            )

    @property
    def variants_enabled(self) -> bool:
        return self.variant_simple or self.variant_complex

    def with_overrides(self, **overrides: Any) -> 'ConversionConfig':
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)

    def enabled_blocks(self) -> List[str]:
        """Names of the annotation blocks this run can emit."""
        blocks = []
        if self.variants_enabled:
            blocks.append("VariantSimple")
        if self.variant_complex:
            blocks.append("VariantComplex")
        if self.enable_ptms:
            blocks.append(f"ModRes ({self.mod_profile.value})")
        return blocks

    def log_summary(self):
        """Log the effective configuration."""
        blocks = self.enabled_blocks()
        logger.info(f"Annotation blocks: {', '.join(blocks) if blocks else 'none'}")
        logger.info(f"Strict mode: {'on' if self.strict else 'off'}")
        if self.variant_simple:
            logger.info(f"Excluding simple variants marked '{self.exclude_marker}'")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ConversionConfig':
        """Create a configuration from a mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        # YAML files may use the short key "ptms"
        data = dict(data)
        if 'ptms' in data:
            data['enable_ptms'] = data.pop('ptms')

        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

        for key in ('strict', 'enable_ptms', 'variant_simple', 'variant_complex'):
            if key in data and not isinstance(data[key], bool):
                raise ConfigurationError(f"{key} must be true or false, got {data[key]!r}")

        return cls(**data)

    @classmethod
    def from_yaml(cls, path: Path) -> 'ConversionConfig':
        """Load configuration from YAML file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigurationError(f"Cannot read config file {path}: {e}")
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}")

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping")

        logger.debug(f"Loaded configuration from {path}")
        return cls.from_dict(data)


def load_config(path: Optional[Path] = None, **overrides: Any) -> ConversionConfig:
    """
    Build the run configuration.

    Args:
        path: Optional YAML config file
        **overrides: Option values from the command line; None means
            "not given" and keeps the file or default value

    Returns:
        ConversionConfig
    """
    base = ConversionConfig.from_yaml(path) if path else ConversionConfig()
    # replace() re-runs __post_init__, so overrides are validated too
    return base.with_overrides(**overrides)
