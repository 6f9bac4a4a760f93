"""Form page layout and the pure rendering of lookup results into table cells."""

from dataclasses import dataclass

from pydantic.alias_generators import to_camel

from interval_lookup.db.models import CATEGORY_FIELDS
from interval_lookup.schemas.intervals import LookupResult

BUCKET_STEP_MILES = 5000
BUCKET_COUNT = 10

# (value submitted as id, option label)
MILEAGE_BUCKETS = [
    (n * BUCKET_STEP_MILES, f"{n * BUCKET_STEP_MILES:,} miles")
    for n in range(1, BUCKET_COUNT + 1)
]

VEHICLE_CLASSES = ("Gasoline", "Electric Vehicles", "Hybrids")

CATEGORY_LABELS = {
    "engine_oil": "Engine Oil",
    "tire_rotation": "Tire Rotation",
    "brake_fluid": "Brake Fluid",
    "differential_fluid": "Differential Fluid",
    "transmission_fluid": "Transmission Fluid",
    "coolant": "Coolant",
    "air_filter": "Air Filter",
    "cabin_filter": "Cabin Filter",
}

DUE_TEXT = "Due"


@dataclass(frozen=True)
class TableRow:
    label: str
    key: str  # wire name of the category, e.g. "engineOil"
    cells: tuple[str, str, str]


@dataclass(frozen=True)
class DisplayState:
    """Last successfully applied lookup result. Empty means every cell is blank."""

    flags: tuple[tuple[str, tuple[bool, ...]], ...] = ()

    @classmethod
    def from_results(cls, results: list) -> "DisplayState":
        if not isinstance(results, list) or not results:
            return cls()
        result = results[0]
        if not isinstance(result, LookupResult):
            result = LookupResult.model_validate(result)
        return cls(flags=tuple((field, tuple(getattr(result, field))) for field in CATEGORY_FIELDS))

    @property
    def is_empty(self) -> bool:
        return not self.flags

    def flags_for(self, field: str) -> tuple[bool, ...]:
        return dict(self.flags).get(field, ())


def cell_text(flag) -> str:
    # "not due" and "no data" both render blank
    return DUE_TEXT if flag else ""


def category_key(field: str) -> str:
    return to_camel(field)


def render_rows(state: DisplayState) -> list[TableRow]:
    """Build the fixed table body. Row order and count never depend on the data."""
    rows = []
    for field, label in CATEGORY_LABELS.items():
        flags = state.flags_for(field)
        cells = tuple(
            cell_text(flags[i] if i < len(flags) else None)
            for i in range(len(VEHICLE_CLASSES))
        )
        rows.append(TableRow(label=label, key=category_key(field), cells=cells))
    return rows
