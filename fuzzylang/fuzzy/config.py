"""
Declarative definitions of primitive fuzzy sets.

Shaped membership functions can be described in a dict or YAML file and
turned into named PrimitiveSets over floats:

    ```yaml
    cold: {type: triangular, parameters: [-5, 5, 15]}
    mild: {type: trapezoidal, parameters: [10, 15, 22, 27]}
    hot:  {type: gaussian, parameters: [35, 5]}
    ```
"""

from pathlib import Path
from typing import Annotated, Literal, Optional, Union

import yaml
from pydantic import BaseModel, Field, RootModel, field_validator, model_validator

from fuzzylang import get_logger, log_entry_exit
from fuzzylang.errors import (
    ConfigurationError,
    ConfigurationFileError,
    ErrorCodes,
    InvalidConfigurationError,
)
from fuzzylang.fuzzy.membership import MembershipFunctionFactory
from fuzzylang.fuzzy.sets import FuzzySet, primitive
from fuzzylang.runtime.scope import ScopeStack

logger = get_logger(__name__)


class TriangularMFConfig(BaseModel):
    """
    Configuration for a triangular membership function [a, b, c], a ≤ b ≤ c.
    """

    type: Literal["triangular"] = "triangular"
    parameters: list[float] = Field(
        ...,
        min_length=3,
        max_length=3,
        description="Three parameters [a, b, c]: start, peak, end",
    )

    @field_validator("parameters")
    @classmethod
    def validate_parameters(cls, parameters: list[float]) -> list[float]:
        a, b, c = parameters
        if not (a <= b <= c):
            raise ConfigurationError(
                message="Triangular membership function parameters must satisfy: a ≤ b ≤ c",
                error_code=ErrorCodes.MF_INVALID_PARAMETER_ORDER,
                details={"parameters": {"a": a, "b": b, "c": c}},
            )
        return parameters


class TrapezoidalMFConfig(BaseModel):
    """
    Configuration for a trapezoidal membership function [a, b, c, d], a ≤ b ≤ c ≤ d.
    """

    type: Literal["trapezoidal"] = "trapezoidal"
    parameters: list[float] = Field(
        ...,
        min_length=4,
        max_length=4,
        description="Four parameters [a, b, c, d]: start, plateau start, plateau end, end",
    )

    @field_validator("parameters")
    @classmethod
    def validate_parameters(cls, parameters: list[float]) -> list[float]:
        a, b, c, d = parameters
        if not (a <= b <= c <= d):
            raise ConfigurationError(
                message="Trapezoidal membership function parameters must satisfy: a ≤ b ≤ c ≤ d",
                error_code=ErrorCodes.MF_INVALID_PARAMETER_ORDER,
                details={"parameters": {"a": a, "b": b, "c": c, "d": d}},
            )
        return parameters


class GaussianMFConfig(BaseModel):
    """
    Configuration for a Gaussian membership function [μ, σ], σ > 0.
    """

    type: Literal["gaussian"] = "gaussian"
    parameters: list[float] = Field(
        ...,
        min_length=2,
        max_length=2,
        description="Two parameters [μ, σ]: center and standard deviation",
    )

    @field_validator("parameters")
    @classmethod
    def validate_parameters(cls, parameters: list[float]) -> list[float]:
        mu, sigma = parameters
        if sigma <= 0:
            raise ConfigurationError(
                message="Gaussian membership function sigma must be greater than 0",
                error_code=ErrorCodes.MF_INVALID_SIGMA,
                details={"sigma": sigma},
            )
        return parameters


MembershipFunctionConfig = Annotated[
    Union[TriangularMFConfig, TrapezoidalMFConfig, GaussianMFConfig],
    Field(discriminator="type"),
]


class FuzzySetDefinitions(RootModel[dict[str, MembershipFunctionConfig]]):
    """Named primitive set definitions; the key becomes the variable name."""

    @model_validator(mode="after")
    def validate_not_empty(self) -> "FuzzySetDefinitions":
        if not self.root:
            raise ConfigurationError(
                message="At least one fuzzy set must be defined",
                error_code=ErrorCodes.CONFIG_EMPTY_DEFINITIONS,
                details={},
            )
        logger.debug(f"Validated fuzzy set definitions: {list(self.root)}")
        return self


class FuzzySetConfigLoader:
    """
    Loads fuzzy set definitions and turns them into primitive sets.
    """

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        """
        Args:
            config_dir: Directory relative paths are resolved against;
                defaults to the current working directory
        """
        self.config_dir = Path(config_dir) if config_dir else Path.cwd()

    @staticmethod
    def load_from_dict(config_dict: dict) -> FuzzySetDefinitions:
        """
        Validate definitions held in a dictionary.

        Raises:
            ConfigurationError: If a definition is invalid
            InvalidConfigurationError: If the structure fails schema validation
        """
        try:
            return FuzzySetDefinitions.model_validate(config_dict)
        except ConfigurationError:
            raise
        except Exception as e:
            logger.error(f"Failed to validate fuzzy set definitions: {e}")
            raise InvalidConfigurationError(
                message="Fuzzy set definitions failed validation",
                error_code=ErrorCodes.CONFIG_VALIDATION_FAILED,
                details={"validation_errors": str(e)},
            ) from e

    def load_from_yaml(self, file_path: Union[str, Path]) -> FuzzySetDefinitions:
        """
        Load and validate definitions from a YAML file.

        Args:
            file_path: Path to the file; relative paths resolve against config_dir

        Raises:
            ConfigurationFileError: If the file does not exist or cannot be read
            InvalidConfigurationError: If the YAML is malformed or fails validation
            ConfigurationError: If a definition is invalid
        """
        path = Path(file_path)
        if not path.is_absolute():
            path = self.config_dir / path

        logger.info(f"Loading fuzzy set definitions from file: {path}")

        if not path.exists():
            logger.error(f"Fuzzy set definitions file not found: {path}")
            raise ConfigurationFileError(
                message=f"Fuzzy set definitions file not found: {path}",
                error_code=ErrorCodes.CONFIG_FILE_NOT_FOUND,
                details={"path": str(path)},
            )

        try:
            with open(path) as file:
                config_dict = yaml.safe_load(file)
        except yaml.YAMLError as e:
            logger.error(f"Invalid YAML in fuzzy set definitions file: {e}")
            raise InvalidConfigurationError(
                message="Invalid YAML format in fuzzy set definitions file",
                error_code=ErrorCodes.CONFIG_INVALID_YAML,
                details={"path": str(path), "yaml_error": str(e)},
            ) from e
        except OSError as e:
            logger.error(f"Cannot read fuzzy set definitions file: {e}")
            raise ConfigurationFileError(
                message=f"Cannot read fuzzy set definitions file: {path}",
                error_code=ErrorCodes.CONFIG_LOAD_FAILED,
                details={"path": str(path), "error": str(e)},
            ) from e

        if config_dict is None:
            logger.warning(f"Empty fuzzy set definitions file: {path}")
            config_dict = {}

        definitions = self.load_from_dict(config_dict)
        logger.info(f"Loaded {len(definitions.root)} fuzzy set definition(s) from {path}")
        return definitions

    @staticmethod
    def build_sets(definitions: FuzzySetDefinitions) -> dict[str, FuzzySet]:
        """
        Create a named PrimitiveSet over floats for each definition.

        Returns:
            Mapping of definition name to fuzzy set, in definition order
        """
        return {
            name: primitive(
                MembershipFunctionFactory.create(mf_config.type, mf_config.parameters),
                element_type=float,
                name=name,
            )
            for name, mf_config in definitions.root.items()
        }

    @log_entry_exit(log_args=True)
    def populate(self, scopes: ScopeStack, definitions: FuzzySetDefinitions) -> dict[str, FuzzySet]:
        """
        Build every defined set and assign it in the innermost scope of ``scopes``.

        Returns:
            The sets that were assigned, keyed by name
        """
        fuzzy_sets = self.build_sets(definitions)
        for name, fuzzy_set in fuzzy_sets.items():
            scopes.assign(name, fuzzy_set)
        return fuzzy_sets
