"""
Search logger for recording a genetic search run as JSON.

Writes one file per stage of the run:
- Initial (scored) population
- Per-generation statistics
- Final best ordering

Files are written under a per-run subdirectory for easy analysis.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

from ..core.population import Population, ScoredOrdering
from ..optimization.config import GenerationHistory


logger = logging.getLogger(__name__)


class SearchLogger:
    """
    Detailed JSON logger for a genetic search run.
    """

    def __init__(self, output_dir: Path, run_id: str):
        """
        Initialize the search logger.

        Args:
            output_dir: Base output directory
            run_id: Run identifier (used as subdirectory name)
        """
        self.output_dir = output_dir / f"run_{run_id}"
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.run_id = run_id

        logger.info(f"SearchLogger initialized for run {run_id} at {self.output_dir}")

    def log_initial_population(self, population: Population):
        """
        Log the initial population after its first scoring.

        Args:
            population: Scored initial population
        """
        data = {
            "run_id": self.run_id,
            "generation": 0,
            "phase": "initial_population",
            "timestamp": datetime.now().isoformat(),
            "members": [self._member_to_dict(m, i) for i, m in enumerate(population)],
            "statistics": population.statistics()
        }

        self._save_json("generation_0_initial.json", data)
        logger.debug(f"Logged initial population: {len(population)} members")

    def log_history(self, history: List[GenerationHistory]):
        """
        Log per-generation statistics for the whole run.

        Args:
            history: Generation statistics in generation order
        """
        data = {
            "run_id": self.run_id,
            "phase": "history",
            "timestamp": datetime.now().isoformat(),
            "generations": [h.to_dict() for h in history],
        }

        self._save_json("history.json", data)
        logger.debug(f"Logged history for {len(history)} generations")

    def log_final_best(self, member: ScoredOrdering, gen: int):
        """
        Log the final best ordering.

        Args:
            member: Best member of the final population
            gen: Final generation number
        """
        data = {
            "run_id": self.run_id,
            "final_generation": gen,
            "phase": "final_best",
            "timestamp": datetime.now().isoformat(),
            "best": self._member_to_dict(member, 0),
        }

        self._save_json("final_best.json", data)
        logger.info(f"Logged final best ordering with cost {member.cost}")

    def _member_to_dict(self, member: ScoredOrdering, idx: int) -> Dict[str, Any]:
        """
        Convert a population member to a dictionary for logging.

        Args:
            member: Member to convert
            idx: Index in the population

        Returns:
            Dictionary representation of the member
        """
        return {
            "rank": idx,
            "cost": member.cost,
            "ordering": [item.unique_id for item in member.ordering],
        }

    def _save_json(self, filename: str, data: Dict):
        """
        Save data to a JSON file.

        Args:
            filename: Name of the file
            data: Data to save
        """
        filepath = self.output_dir / filename

        try:
            with open(filepath, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.error(f"Failed to save {filename}: {e}")
