"""
Configuration and data classes for the permopt optimizers.
"""

import logging
import os
from dataclasses import dataclass, field, fields
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)


def _optional_int(value: Optional[str]) -> Optional[int]:
    """Parse an optional integer environment value ("" and None mean unset)."""
    if value is None or value.strip() == "":
        return None
    return int(value)


@dataclass
class GeneticSearchConfig:
    """
    Configuration for the genetic optimizer.

    The defaults reproduce the reference schedule: 500 generations, at most
    120 members, breeding whenever the pair draw exceeds 0.2.

    pair_stride controls how far the pair cursor moves after each pair. The
    default of 2 visits every disjoint adjacent pair once per generation;
    3 only visits the pairs starting at 0, 3, 6, ... and leaves the rest alone.
    """

    # Evolution hyperparameters
    n_generations: int = 500
    max_population_size: int = 120
    breed_threshold: float = 0.2
    pair_stride: int = 2

    # Randomness
    seed: Optional[int] = None

    # Logging
    log_level: str = "INFO"
    log_generation_stats: bool = True
    log_interval: int = 50

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.n_generations < 1:
            raise ValueError("n_generations must be at least 1")
        if self.max_population_size < 1:
            raise ValueError("max_population_size must be at least 1")
        if not 0.0 <= self.breed_threshold <= 1.0:
            raise ValueError("breed_threshold must be between 0 and 1")
        if self.pair_stride < 2:
            raise ValueError("pair_stride must be at least 2")
        if self.log_interval < 1:
            raise ValueError("log_interval must be at least 1")
        if not isinstance(getattr(logging, self.log_level.upper(), None), int):
            raise ValueError(f"Unknown log_level: {self.log_level}")
        if self.pair_stride > 2:
            logger.warning(
                f"pair_stride={self.pair_stride} leaves some members untouched each generation"
            )

    @classmethod
    def from_yaml(cls, config_path: Path) -> "GeneticSearchConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML configuration file

        Returns:
            GeneticSearchConfig instance

        Raises:
            ValueError: If the file names a field the config does not have
        """
        with open(config_path) as f:
            config = yaml.safe_load(f) or {}

        # Extract nested parameters if present
        genetic_config = config.get("genetic", config) or {}

        unknown = sorted(set(genetic_config) - {f.name for f in fields(cls)})
        if unknown:
            raise ValueError(f"Unknown config fields: {', '.join(unknown)}")

        return cls(**genetic_config)

    @classmethod
    def from_env(cls) -> "GeneticSearchConfig":
        """
        Load configuration from environment variables.

        Reads the following environment variables:
        - PERMOPT_GENERATIONS: n_generations
        - PERMOPT_MAX_POPULATION: max_population_size
        - PERMOPT_BREED_THRESHOLD: breed_threshold
        - PERMOPT_PAIR_STRIDE: pair_stride
        - PERMOPT_SEED: seed (unset for a fresh seed every run)
        - LOG_LEVEL: log_level

        Returns:
            GeneticSearchConfig instance
        """
        return cls(
            n_generations=int(os.getenv("PERMOPT_GENERATIONS", "500")),
            max_population_size=int(os.getenv("PERMOPT_MAX_POPULATION", "120")),
            breed_threshold=float(os.getenv("PERMOPT_BREED_THRESHOLD", "0.2")),
            pair_stride=int(os.getenv("PERMOPT_PAIR_STRIDE", "2")),
            seed=_optional_int(os.getenv("PERMOPT_SEED")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "n_generations": self.n_generations,
            "max_population_size": self.max_population_size,
            "breed_threshold": self.breed_threshold,
            "pair_stride": self.pair_stride,
            "seed": self.seed,
            "log_level": self.log_level,
            "log_generation_stats": self.log_generation_stats,
            "log_interval": self.log_interval,
        }

    def to_yaml(self, save_path: Path) -> None:
        """
        Save configuration to YAML file.

        Args:
            save_path: Path where to save the configuration
        """
        with open(save_path, 'w') as f:
            yaml.dump({"genetic": self.to_dict()}, f, default_flow_style=False)

        logger.info(f"Saved configuration to {save_path}")


@dataclass
class GenerationHistory:
    """
    Statistics for a single generation of the genetic search.
    """

    generation: int
    population_size: int
    best_cost: int
    worst_cost: int
    avg_cost: float
    n_bred: int = 0
    n_mutated: int = 0
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "generation": self.generation,
            "population_size": self.population_size,
            "best_cost": self.best_cost,
            "worst_cost": self.worst_cost,
            "avg_cost": self.avg_cost,
            "n_bred": self.n_bred,
            "n_mutated": self.n_mutated,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GenerationHistory":
        """Create instance from dictionary."""
        return cls(**data)
