"""Booking scenarios loaded from ``data/booking_scenarios.json``.

Each scenario names a party composition for the search form. The JSON keys
use camelCase (``childAgeRange``) and are mapped to snake_case here.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from booking_ui.errors import ScenarioDataError

logger = logging.getLogger(__name__)

SCENARIOS_FILE = Path(__file__).resolve().parent / "data" / "booking_scenarios.json"


@dataclass
class AgeRange:
    min: int
    max: int

    def contains(self, age: int) -> bool:
        return self.min <= age <= self.max


@dataclass
class BookingScenario:
    name: str
    adults: int
    children: int
    description: str = ""
    child_age_range: Optional[AgeRange] = None

    @classmethod
    def from_dict(cls, data: dict) -> "BookingScenario":
        if not isinstance(data, dict):
            raise ScenarioDataError("Booking scenario must be an object", payload={"scenario": data})
        age_range = data.get("childAgeRange")
        try:
            return cls(
                name=data["name"],
                adults=int(data["adults"]),
                children=int(data["children"]),
                description=data.get("description", ""),
                child_age_range=AgeRange(int(age_range["min"]), int(age_range["max"])) if age_range else None,
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise ScenarioDataError(f"Malformed booking scenario: {exc}", payload={"scenario": data}) from exc

    def to_dict(self) -> dict:
        data = {
            "name": self.name,
            "adults": self.adults,
            "children": self.children,
            "description": self.description,
        }
        if self.child_age_range:
            data["childAgeRange"] = {"min": self.child_age_range.min, "max": self.child_age_range.max}
        return data


@dataclass
class BookingScenariosData:
    scenarios: List[BookingScenario] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "BookingScenariosData":
        if not isinstance(data, dict):
            raise ScenarioDataError('Scenario file must hold an object with a "scenarios" list', payload={"data": data})
        scenarios = data.get("scenarios", [])
        if not isinstance(scenarios, list):
            raise ScenarioDataError('"scenarios" must be a list', payload={"scenarios": scenarios})
        return cls(scenarios=[BookingScenario.from_dict(s) for s in scenarios])


def load_booking_scenarios(path: Union[str, Path, None] = None) -> BookingScenariosData:
    """Load and parse the scenario file.

    Raises:
        ScenarioDataError: The file is missing, not JSON, or a scenario is malformed.
    """
    data_path = Path(path) if path else SCENARIOS_FILE
    try:
        raw = json.loads(data_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        logger.error(f"Error loading booking scenarios from {data_path}: {exc}")
        raise ScenarioDataError(
            f"Failed to load booking scenarios: {exc}", payload={"path": str(data_path)}
        ) from exc
    return BookingScenariosData.from_dict(raw)


def get_scenario_by_name(name: str, path: Union[str, Path, None] = None) -> Optional[BookingScenario]:
    for scenario in load_booking_scenarios(path).scenarios:
        if scenario.name == name:
            return scenario
    return None


def get_default_scenario(path: Union[str, Path, None] = None) -> BookingScenario:
    """First scenario in the file."""
    scenarios = load_booking_scenarios(path).scenarios
    if not scenarios:
        raise ScenarioDataError("No booking scenarios found in test data", payload={"path": str(path or SCENARIOS_FILE)})
    return scenarios[0]


def get_all_scenarios(path: Union[str, Path, None] = None) -> List[BookingScenario]:
    return load_booking_scenarios(path).scenarios


def validate_scenario(scenario: BookingScenario) -> bool:
    if not scenario.name or scenario.adults <= 0 or scenario.children < 0:
        return False
    age_range = scenario.child_age_range
    if age_range is not None and (age_range.min < 0 or age_range.max < age_range.min):
        return False
    return True
