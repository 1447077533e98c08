"""Checks applied to a SuiteConfig before anything is built from it.

Hard errors (negative sizes, unknown policies) raise ConfigurationError;
choices that are legal but slow only emit a ConfigurationWarning.

Import Policy:
    from seqarrays.config.validation import validate_config, warn_if_unsafe

DO NOT use: from seqarrays.config.validation import *
"""

import warnings
from typing import List, Tuple

from seqarrays.config.defaults import INCREMENT_ONE_WARN_SIZE
from seqarrays.config.enums import GrowthPolicy, StructureKind
from seqarrays.config.sequence_config import SuiteConfig


class ConfigurationError(Exception):
    """A configuration (or one of its sections) has errors."""


class ConfigurationWarning(Warning):
    """Configuration is valid but will run slowly or waste memory."""


def validate_config(config: SuiteConfig, raise_on_error: bool = True) -> Tuple[bool, List[str]]:
    """Collect every error of a suite configuration.

    Args:
        config: SuiteConfig to check
        raise_on_error: Raise instead of returning when errors are found

    Returns:
        (is_valid, errors)

    Raises:
        ConfigurationError: On errors, unless raise_on_error is False
    """
    errors = config.validate()

    if errors:
        if raise_on_error:
            raise ConfigurationError(
                f"{len(errors)} configuration error(s):\n"
                + "\n".join(f"  - {err}" for err in errors)
            )
        return False, errors

    return True, []


def validate_config_section(section) -> None:
    """Validate one sub-configuration (BufferConfig, BlockedConfig, ...).

    Args:
        section: Any config dataclass with a validate() method

    Raises:
        ConfigurationError: If the section has errors
    """
    errors = section.validate()
    if errors:
        raise ConfigurationError(
            f"{type(section).__name__} is invalid:\n"
            + "\n".join(f"  - {err}" for err in errors)
        )


def warn_if_unsafe(config: SuiteConfig) -> List[str]:
    """Check for configuration choices that are valid but slow or wasteful.

    Each finding is emitted as a ConfigurationWarning and also returned.

    Args:
        config: SuiteConfig to check

    Returns:
        Warning messages, possibly empty
    """
    findings = []
    largest = max(config.benchmark.sizes) if config.benchmark.sizes else 0

    # Check 1: increment-by-one growth at large sizes is quadratic
    uses_increment_one = (
        StructureKind.INCREMENT_ONE in config.benchmark.structures
        or config.buffer.policy == GrowthPolicy.INCREMENT_ONE
    )
    if uses_increment_one and largest > INCREMENT_ONE_WARN_SIZE:
        findings.append(
            f"increment_one growth with {largest} elements reallocates on every push. "
            f"Recommend sizes <= {INCREMENT_ONE_WARN_SIZE} for this policy."
        )

    # Check 2: block of one degenerates to increment-by-one
    if config.buffer.policy == GrowthPolicy.INCREMENT_BLOCK and config.buffer.block == 1:
        findings.append(
            "increment_block growth with block=1 behaves like increment_one."
        )

    # Check 3: one-element blocks turn every block boundary into a cascade
    if config.blocked.block_capacity == 1:
        findings.append(
            "blocked.block_capacity=1 stores one element per block; "
            "every interior insert cascades through all later blocks."
        )

    for message in findings:
        warnings.warn(message, ConfigurationWarning, stacklevel=2)

    return findings


def validate_and_warn(config: SuiteConfig) -> SuiteConfig:
    """Validate a configuration and issue warnings for unsafe choices.

    Args:
        config: SuiteConfig to validate

    Returns:
        The same SuiteConfig

    Raises:
        ConfigurationError: If validation fails
    """
    validate_config(config)
    warn_if_unsafe(config)
    return config


def create_validated_config(**kwargs) -> SuiteConfig:
    """Create a suite configuration with overrides applied and validated.

    Overrides are matched by attribute name against each sub-config in
    the order buffer, blocked, sparse, benchmark.

    Args:
        **kwargs: Field values replacing the packaged defaults

    Returns:
        Validated SuiteConfig

    Raises:
        ConfigurationError: If the resulting configuration is invalid
        ValueError: If an override names no known parameter

    Example:
        >>> config = create_validated_config(block_capacity=64, repeats=1)
    """
    from seqarrays.config.sequence_config import create_default_config

    config = create_default_config()

    for key, value in kwargs.items():
        if hasattr(config.buffer, key):
            setattr(config.buffer, key, value)
        elif hasattr(config.blocked, key):
            setattr(config.blocked, key, value)
        elif hasattr(config.sparse, key):
            setattr(config.sparse, key, value)
        elif hasattr(config.benchmark, key):
            setattr(config.benchmark, key, value)
        else:
            raise ValueError(f"Unknown configuration parameter: {key}")

    return validate_and_warn(config)
