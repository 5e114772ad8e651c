"""Named scenario bundles for quick comparisons."""

from dataclasses import dataclass
from decimal import Decimal

from grossup.models.scenario import NO_CITY, ScenarioInputs


@dataclass(frozen=True)
class Preset:
    name: str
    description: str
    # (work_state, residence_state, work_city, benefit overrides)
    scenarios: tuple[tuple[str, str, str, dict[str, Decimal]], ...]

    def build(self) -> list[ScenarioInputs]:
        """Fresh ScenarioInputs (new ids) for this preset."""
        return [
            ScenarioInputs(
                work_state=work,
                residence_state=residence,
                work_city=city,
                **benefits,
            )
            for work, residence, city, benefits in self.scenarios
        ]


PRESETS: dict[str, Preset] = {
    p.name: p
    for p in (
        Preset(
            name="remote-worker",
            description="No-income-tax states (TX, FL, WA) vs CA",
            scenarios=(
                ("TX", "TX", NO_CITY, {}),
                ("FL", "FL", NO_CITY, {}),
                ("WA", "WA", NO_CITY, {}),
                ("CA", "CA", NO_CITY, {}),
            ),
        ),
        Preset(
            name="nyc-vs-neighbors",
            description="NYC (with city tax) vs NJ, CT, PA",
            scenarios=(
                ("NY", "NY", "NYC", {}),
                ("NJ", "NJ", NO_CITY, {}),
                ("CT", "CT", NO_CITY, {}),
                ("PA", "PA", NO_CITY, {}),
            ),
        ),
        Preset(
            name="tech-hub",
            description="CA, WA, TX, CO - popular tech locations",
            scenarios=(
                ("CA", "CA", NO_CITY, {}),
                ("WA", "WA", NO_CITY, {}),
                ("TX", "TX", NO_CITY, {}),
                ("CO", "CO", NO_CITY, {}),
            ),
        ),
        Preset(
            name="benefits-package",
            description="CA with a typical pre-tax benefits package",
            scenarios=(
                (
                    "CA",
                    "CA",
                    NO_CITY,
                    {
                        "health_insurance": Decimal("6000"),
                        "dental_vision": Decimal("600"),
                        "hsa": Decimal("3850"),
                        "retirement_401k": Decimal("23000"),
                    },
                ),
            ),
        ),
        Preset(
            name="cross-state-commute",
            description="Work in one state, live in another",
            scenarios=(
                ("NY", "NJ", "NYC", {}),
                ("NY", "CT", "NYC", {}),
                ("DC", "VA", NO_CITY, {}),
                ("DC", "MD", NO_CITY, {}),
            ),
        ),
    )
}


def get_preset(name: str) -> list[ScenarioInputs]:
    """Scenarios for a named preset. Raises KeyError for unknown names."""
    return PRESETS[name.lower()].build()
