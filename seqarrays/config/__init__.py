"""Configuration Module

Defaults, enums, configuration dataclasses and validation for seqarrays.

Default Configuration (loaded from defaults.yaml):
    from seqarrays.config import get_default, get_defaults

    block_capacity = get_default('blocked.block_capacity')

Recommended Usage:
    from seqarrays.config import create_validated_config
    from seqarrays.config.enums import GrowthPolicy

    config = create_validated_config(policy=GrowthPolicy.INCREMENT_BLOCK, block=16)

Import Policy:
    DO NOT use: from seqarrays.config import *

Submodules:
    enums: GrowthPolicy, StructureKind, BenchmarkOperation
    defaults: default constants
    yaml_loader: YAML defaults loader (get_default, get_defaults)
    sequence_config: configuration dataclasses
    validation: validate_config, warn_if_unsafe, create_validated_config
"""

from seqarrays.config.enums import BenchmarkOperation, GrowthPolicy, StructureKind
# Import YAML loader functions first (no circular dependencies)
from seqarrays.config.yaml_loader import get_default, get_defaults, reload_defaults
from seqarrays.config.sequence_config import (
    BenchmarkConfig,
    BlockedConfig,
    BufferConfig,
    SparseConfig,
    SuiteConfig,
    create_default_config,
    load_suite_config,
)
from seqarrays.config.validation import (
    ConfigurationError,
    ConfigurationWarning,
    create_validated_config,
    validate_and_warn,
    validate_config,
    validate_config_section,
    warn_if_unsafe,
)


__all__ = [
    # Enums
    "GrowthPolicy",
    "StructureKind",
    "BenchmarkOperation",
    # Config classes
    "BufferConfig",
    "BlockedConfig",
    "SparseConfig",
    "BenchmarkConfig",
    "SuiteConfig",
    # Factory functions
    "create_default_config",
    "create_validated_config",
    "load_suite_config",
    # Validation
    "ConfigurationError",
    "ConfigurationWarning",
    "validate_config",
    "validate_and_warn",
    "validate_config_section",
    "warn_if_unsafe",
    # YAML defaults access
    "get_default",
    "get_defaults",
    "reload_defaults",
]
