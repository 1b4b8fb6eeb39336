"""Boundary between stored simulations and the projection engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from wealth_projection.config import ProjectionSettings
from wealth_projection.core.inputs import LifeStatus, ProjectionResult, SimulationSnapshot
from wealth_projection.core.simulator import project
from wealth_projection.core.what_if import compare_statuses
from wealth_projection.exceptions import SimulationNotFoundError
from wealth_projection.logging import get_logger
from wealth_projection.validation.checks import validate_end_year, validate_projection_request, validate_snapshot

logger = get_logger(__name__)


@dataclass
class SimulationRepository:
    """In-memory store of fully hydrated simulation snapshots."""

    simulations: Dict[int, SimulationSnapshot] = field(default_factory=dict)

    def add(self, simulation: SimulationSnapshot) -> None:
        self.simulations[simulation.id] = simulation

    def get(self, simulation_id: int) -> SimulationSnapshot:
        try:
            return self.simulations[simulation_id]
        except KeyError:
            raise SimulationNotFoundError(f"Simulation {simulation_id} not found") from None


class ProjectionService:
    def __init__(self, repository: SimulationRepository, settings: Optional[ProjectionSettings] = None) -> None:
        self.repository = repository
        self.settings = settings or ProjectionSettings()

    def _load(self, simulation_id: int) -> SimulationSnapshot:
        try:
            simulation = self.repository.get(simulation_id)
        except SimulationNotFoundError:
            logger.warning("Projection requested for unknown simulation %s", simulation_id)
            raise
        validate_snapshot(simulation)
        return simulation

    def _log_result(self, result: ProjectionResult) -> None:
        logger.info(
            "Generated %d-year projection for simulation %s (%s)",
            len(result.projections),
            result.simulation_id,
            result.status.value,
            extra={"extra": {"simulation_id": result.simulation_id, "status": result.status.value}},
        )

    def generate_projection(
        self, simulation_id: int, status: LifeStatus, end_year: Optional[int] = None
    ) -> ProjectionResult:
        if end_year is None:
            end_year = self.settings.default_end_year
        status, end_year = validate_projection_request(status, end_year, self.settings)

        result = project(self._load(simulation_id), status, end_year)
        self._log_result(result)
        return result

    def compare_projections(
        self, simulation_ids: Iterable[int], status: LifeStatus, end_year: Optional[int] = None
    ) -> List[ProjectionResult]:
        return [self.generate_projection(simulation_id, status, end_year) for simulation_id in simulation_ids]

    def compare_statuses(
        self, simulation_id: int, end_year: Optional[int] = None
    ) -> Dict[LifeStatus, ProjectionResult]:
        """One projection of the simulation per life status."""
        if end_year is None:
            end_year = self.settings.default_end_year
        end_year = validate_end_year(end_year, self.settings)

        results = compare_statuses(self._load(simulation_id), end_year)
        for result in results.values():
            self._log_result(result)
        return results
