"""
Request options for the Forecast service and their query-string tokens.

Each option set is a closed enumeration. The tokens the service expects are
kept in per-enumeration lookup tables rather than on the enum members, and
``to_value`` is the single entry point for converting an option to its token.
"""

from collections.abc import Iterable
from enum import Enum, auto

from forecast_client.errors import UnrecognizedVariantError


class Unit(Enum):
    """
    Units of measurement supported by the Forecast service.

    US: Fahrenheit, inches, miles per hour, millibars, miles.
    SI: Celsius, centimeters, meters per second, hectopascals, kilometers.
    CA: Same as SI, but wind speed in kilometers per hour.
    UK: Same as SI, but wind speed in miles per hour.
    AUTO: Chosen by the service based on the requested location.
    """

    US = auto()
    SI = auto()
    CA = auto()
    UK = auto()
    AUTO = auto()


class Extend(Enum):
    """Data blocks that can have their ranges extended."""

    # Hourly block covers the next seven days instead of two.
    # Ignored by the service for time machine requests.
    HOURLY = auto()


class Exclude(Enum):
    """Data blocks that can be excluded from a response."""

    CURRENTLY = auto()
    MINUTELY = auto()
    HOURLY = auto()
    DAILY = auto()
    ALERTS = auto()
    FLAGS = auto()


class Language(Enum):
    """Languages the service can return text summaries in."""

    GERMAN = auto()
    ENGLISH = auto()
    SPANISH = auto()
    FRENCH = auto()
    DUTCH = auto()
    TETUM = auto()


UNIT_TOKENS: dict[Unit, str] = {
    Unit.US: "us",
    Unit.SI: "si",
    Unit.CA: "ca",
    Unit.UK: "uk",
    Unit.AUTO: "auto",
}

EXTEND_TOKENS: dict[Extend, str] = {
    Extend.HOURLY: "hourly",
}

EXCLUDE_TOKENS: dict[Exclude, str] = {
    Exclude.CURRENTLY: "currently",
    Exclude.MINUTELY: "minutely",
    Exclude.HOURLY: "hourly",
    Exclude.DAILY: "daily",
    Exclude.ALERTS: "alerts",
    Exclude.FLAGS: "flags",
}

LANGUAGE_TOKENS: dict[Language, str] = {
    Language.GERMAN: "de",
    Language.ENGLISH: "en",
    Language.SPANISH: "es",
    Language.FRENCH: "fr",
    Language.DUTCH: "nl",
    Language.TETUM: "tet",
}

_TOKEN_TABLES: dict[type[Enum], dict] = {
    Unit: UNIT_TOKENS,
    Extend: EXTEND_TOKENS,
    Exclude: EXCLUDE_TOKENS,
    Language: LANGUAGE_TOKENS,
}

RequestOption = Unit | Extend | Exclude | Language


def to_value(option: RequestOption) -> str:
    """
    Give the Forecast service token for a request option.

    Args:
        option: A member of Unit, Extend, Exclude or Language

    Returns:
        The literal token the service expects in the query string

    Raises:
        UnrecognizedVariantError: If ``option`` is not a member with a known token
    """
    table = _TOKEN_TABLES.get(type(option))
    if table is None or option not in table:
        raise UnrecognizedVariantError(option)
    return table[option]


def encode_blocks(
    blocks: Iterable[Exclude] | Iterable[Extend] | None,
    block_type: type[Exclude] | type[Extend] = Exclude,
) -> str | None:
    """
    Comma-join the tokens for a collection of data blocks.

    Duplicates are dropped and tokens follow the declaration order of
    ``block_type``, so equal sets of blocks always encode to the same string.

    Args:
        blocks: Members of ``block_type``
        block_type: Exclude or Extend, the option set the blocks belong to

    Returns:
        The joined tokens, or None when there are no blocks

    Raises:
        UnrecognizedVariantError: If any block is not a member of ``block_type``
    """
    unique = set(blocks or ())
    if not unique:
        return None

    for block in unique:
        if not isinstance(block, block_type):
            raise UnrecognizedVariantError(block)

    return ",".join(to_value(block) for block in block_type if block in unique)


def build_query(
    unit: Unit | None = None,
    extends: Iterable[Extend] | None = None,
    excludes: Iterable[Exclude] | None = None,
    language: Language | None = None,
) -> dict[str, str]:
    """Build the optional query parameters for a forecast request."""
    query: dict[str, str] = {}

    if unit is not None:
        query["units"] = to_value(unit)

    extend_value = encode_blocks(extends, Extend)
    if extend_value:
        query["extend"] = extend_value

    exclude_value = encode_blocks(excludes, Exclude)
    if exclude_value:
        query["exclude"] = exclude_value

    if language is not None:
        query["lang"] = to_value(language)

    return query


def from_value(option_type: type[Enum], token: str) -> RequestOption:
    """
    Look up the request option for a service token.

    Args:
        option_type: One of Unit, Extend, Exclude or Language
        token: Service token, e.g. ``"si"`` or ``"fr"`` (case-insensitive)

    Raises:
        UnrecognizedVariantError: If the token is not known for ``option_type``
    """
    table = _TOKEN_TABLES.get(option_type)
    if table is not None:
        for option, value in table.items():
            if value == token.strip().lower():
                return option
    raise UnrecognizedVariantError(token)


def tokens_for(option_type: type[Enum]) -> list[str]:
    """Return every service token for an option type, in declaration order."""
    table = _TOKEN_TABLES.get(option_type)
    if table is None:
        raise UnrecognizedVariantError(option_type)
    return [table[option] for option in option_type if option in table]
