from typing import Iterable, NamedTuple

from .errors import ConfigurationError


class ZipCase(NamedTuple):
    country_code: str
    zip_code: str
    expected_place_name: str


# Hard-coded for now; any source yielding ZipCase rows will do.
ZIP_CODES_AND_PLACES: tuple[ZipCase, ...] = (
    ZipCase("us", "90210", "Beverly Hills"),
    ZipCase("us", "12345", "Schenectady"),
    ZipCase("ca", "B2R", "Waverley"),
)


def validate_cases(cases: Iterable[tuple[str, str, str]]) -> tuple[ZipCase, ...]:
    """Normalize rows to ZipCase, rejecting an empty table or blank fields."""
    validated = []
    for row in cases:
        try:
            case = ZipCase(*row)
        except TypeError as e:
            raise ConfigurationError(f"Fixture row {row!r} is not a 3-tuple") from e
        for field, value in zip(ZipCase._fields, case):
            if not isinstance(value, str) or not value:
                raise ConfigurationError(f"Fixture {row!r}: {field} must be a non-empty string")
        validated.append(case)

    if not validated:
        raise ConfigurationError("Fixture table is empty")
    return tuple(validated)
