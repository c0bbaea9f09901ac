"""Settings for processor runs.

Settings come from keyword arguments, environment variables or a YAML
file, so a driver can tune the engine without modifying code.

Example YAML configuration:

    processors:
      seed: 1234
      locale: en_US
      similarity_attempts: 100
      mask_char: "*"
      strict_uuid: false
      similarity_thresholds:
        FakeCity: 0.6
"""

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional

import yaml


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _as_bool(value: Any) -> bool:
    """Coerce a YAML or environment flag.

    Quoted scalars such as ``"false"`` arrive as strings and would otherwise
    be truthy.

    Raises:
        ValueError: If value is not a recognized boolean spelling.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        flag = value.strip().lower()
        if flag in _TRUE_VALUES:
            return True
        if flag in _FALSE_VALUES:
            return False
    raise ValueError(f"Expected a boolean, got {value!r}")


@dataclass
class ProcessorSettings:
    """Tunable parameters for a ``ColumnAnonymizer``.

    Attributes:
        seed: Seed for every random draw; None uses OS entropy.
        locale: Faker locale for synthesized values.
        similarity_attempts: Candidates drawn before the similarity gate gives up.
        mask_char: Single character used by ScrubString.
        strict_uuid: Raise InvalidUUIDError on unparsable UUIDs instead of
            returning an empty string.
        similarity_thresholds: Per-processor threshold overrides.
    """

    seed: Optional[int] = None
    locale: str = "en_US"
    similarity_attempts: int = 100
    mask_char: str = "*"
    strict_uuid: bool = False
    similarity_thresholds: dict[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.similarity_attempts < 1:
            raise ValueError(
                f"similarity_attempts must be at least 1, got {self.similarity_attempts}"
            )
        if len(self.mask_char) != 1:
            raise ValueError(f"mask_char must be a single character, got {self.mask_char!r}")
        if not self.locale:
            raise ValueError("locale cannot be empty")
        for name, threshold in self.similarity_thresholds.items():
            if not 0.0 <= threshold <= 1.0:
                raise ValueError(
                    f"Threshold for {name} must be between 0.0 and 1.0, got {threshold}"
                )

    @classmethod
    def from_env(cls) -> "ProcessorSettings":
        """Load settings from environment variables.

        Environment variables:
            PII_PROCESSORS_SEED: Integer seed
            PII_PROCESSORS_LOCALE: Faker locale
            PII_PROCESSORS_SIMILARITY_ATTEMPTS: Similarity attempt budget
            PII_PROCESSORS_MASK_CHAR: Scrub mask character
            PII_PROCESSORS_STRICT_UUID: true/false

        Raises:
            ValueError: If a variable holds an invalid value.
        """
        kwargs: dict[str, Any] = {}

        seed = os.getenv("PII_PROCESSORS_SEED")
        if seed:
            kwargs["seed"] = int(seed)
        locale = os.getenv("PII_PROCESSORS_LOCALE")
        if locale:
            kwargs["locale"] = locale
        attempts = os.getenv("PII_PROCESSORS_SIMILARITY_ATTEMPTS")
        if attempts:
            kwargs["similarity_attempts"] = int(attempts)
        mask_char = os.getenv("PII_PROCESSORS_MASK_CHAR")
        if mask_char:
            kwargs["mask_char"] = mask_char
        strict_uuid = os.getenv("PII_PROCESSORS_STRICT_UUID")
        if strict_uuid:
            kwargs["strict_uuid"] = _as_bool(strict_uuid)

        return cls(**kwargs)

    def threshold_for(self, processor: str, default: float) -> float:
        """Return the configured threshold for a processor, or ``default``."""
        return self.similarity_thresholds.get(processor, default)


def load_settings_from_yaml(path: Path | str) -> ProcessorSettings:
    """Load settings from a YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        ProcessorSettings built from the ``processors`` section.

    Raises:
        FileNotFoundError: If the configuration file doesn't exist.
        ValueError: If the YAML structure or a value is invalid.
        yaml.YAMLError: If the YAML is malformed.
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return ProcessorSettings()

    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML structure: expected dict, got {type(data).__name__}")

    section = data.get("processors", {})
    if not isinstance(section, dict):
        raise ValueError(
            f"Invalid processors structure: expected dict, got {type(section).__name__}"
        )

    known = {f.name for f in fields(ProcessorSettings)}
    unknown = set(section) - known
    if unknown:
        raise ValueError(f"Unknown settings: {sorted(unknown)}")

    thresholds = section.get("similarity_thresholds", {})
    if not isinstance(thresholds, dict):
        raise ValueError(
            f"Invalid similarity_thresholds: expected dict, got {type(thresholds).__name__}"
        )

    if "strict_uuid" in section:
        section = {**section, "strict_uuid": _as_bool(section["strict_uuid"])}

    return ProcessorSettings(**section)


def load_settings_from_yaml_safe(path: Path | str) -> tuple[ProcessorSettings, Optional[str]]:
    """Load settings, returning defaults and an error message on failure.

    Returns:
        Tuple of (settings, error_message). If successful, error_message is None.
    """
    try:
        return load_settings_from_yaml(path), None
    except FileNotFoundError as e:
        return ProcessorSettings(), str(e)
    except (TypeError, ValueError) as e:
        return ProcessorSettings(), f"Configuration error: {e}"
    except yaml.YAMLError as e:
        return ProcessorSettings(), f"YAML parsing error: {e}"
