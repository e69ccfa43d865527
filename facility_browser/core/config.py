"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

from dataclasses import dataclass, field

from facility_browser.core.directions import DEFAULT_DIRECTIONS_URL
from facility_browser.core.facility import (
    DEFAULT_FACILITIES,
    DEFAULT_USER_LOCATION,
    WASTE_TYPES,
    Coordinate,
    Facility,
    find_duplicate_ids,
)
from facility_browser.core.filters import ALL, is_known_category
from facility_browser.core.progress import DEFAULT_METRICS, HealthMetric


@dataclass
class Config:
    """Application configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        facilities: Collection points to browse, in display order
        user_location: Reference point shown on the map
        initial_category: Filter applied when a session starts
        directions_base_url: Map service used for directions
        tile_url: Tile server for static map rendering (None for OSM)
        event_webhook_url: Endpoint notified of selections and directions
        metrics: Health impact metrics
    """
    facilities: list[Facility] = field(default_factory=lambda: list(DEFAULT_FACILITIES))
    user_location: Coordinate = DEFAULT_USER_LOCATION
    initial_category: str = ALL
    directions_base_url: str = DEFAULT_DIRECTIONS_URL
    tile_url: str | None = None
    event_webhook_url: str | None = None
    metrics: list[HealthMetric] = field(default_factory=lambda: list(DEFAULT_METRICS))


@dataclass
class ValidationError:
    """A configuration validation error.

    Attributes:
        field: The field that has an error
        message: Human-readable error description
        severity: 'error' or 'warning'
    """
    field: str
    message: str
    severity: str = "error"


@dataclass
class ValidationResult:
    """Result of validating configuration.

    Attributes:
        valid: True if no errors (warnings are OK)
        errors: List of validation errors/warnings
    """
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationError]:
        """Get only warnings."""
        return [e for e in self.errors if e.severity == "warning"]

    @property
    def critical_errors(self) -> list[ValidationError]:
        """Get only critical errors."""
        return [e for e in self.errors if e.severity == "error"]


def validate_coordinates(lat: float, lon: float, field_name: str) -> list[ValidationError]:
    """Validate latitude/longitude coordinates.

    Pure function.

    Args:
        lat: Latitude value
        lon: Longitude value
        field_name: Name of the field for error messages

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not -90 <= lat <= 90:
        errors.append(ValidationError(
            field=field_name,
            message=f"Latitude {lat} out of range [-90, 90]",
        ))

    if not -180 <= lon <= 180:
        errors.append(ValidationError(
            field=field_name,
            message=f"Longitude {lon} out of range [-180, 180]",
        ))

    return errors


def validate_waste_types(facility: Facility, field_name: str) -> list[ValidationError]:
    """Validate a facility's waste types.

    Pure function. An empty list is an error; types outside the domain
    are warnings since they only make the facility unreachable by filter.
    """
    if not facility.waste_types:
        return [ValidationError(
            field=field_name,
            message=f"Facility '{facility.id}' has no waste types",
        )]

    return [
        ValidationError(
            field=field_name,
            message=f"Unknown waste type '{t}' (expected one of {', '.join(WASTE_TYPES)})",
            severity="warning",
        )
        for t in facility.waste_types
        if not is_known_category(t)
    ]


def validate_config(config: Config) -> ValidationResult:
    """Validate configuration for errors and warnings.

    Pure function.

    Args:
        config: Configuration to validate

    Returns:
        ValidationResult with any errors/warnings found
    """
    errors: list[ValidationError] = []

    for i, facility in enumerate(config.facilities):
        errors.extend(validate_coordinates(
            facility.latitude, facility.longitude,
            f"facilities[{i}]",
        ))
        errors.extend(validate_waste_types(
            facility,
            f"facilities[{i}].waste_types",
        ))

    for duplicate in sorted(find_duplicate_ids(config.facilities)):
        errors.append(ValidationError(
            field="facilities",
            message=f"Duplicate facility id '{duplicate}'",
            severity="warning",
        ))

    if not config.facilities:
        errors.append(ValidationError(
            field="facilities",
            message="No facilities configured",
            severity="warning",
        ))

    errors.extend(validate_coordinates(
        config.user_location.latitude, config.user_location.longitude,
        "user_location",
    ))

    if config.initial_category != ALL and not is_known_category(config.initial_category):
        errors.append(ValidationError(
            field="initial_category",
            message=f"Unknown waste type '{config.initial_category}', sessions will start empty",
            severity="warning",
        ))

    for i, metric in enumerate(config.metrics):
        if metric.target <= 0:
            errors.append(ValidationError(
                field=f"metrics[{i}].target",
                message=f"Target must be positive, got {metric.target}",
                severity="warning",
            ))

    has_critical = any(e.severity == "error" for e in errors)

    return ValidationResult(
        valid=not has_critical,
        errors=errors,
    )
