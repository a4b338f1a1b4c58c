"""
Indicator definition registry.

Maps the ``name`` tag of a serialized definition to the configuration type it
describes. This is the only place a new indicator kind has to be registered;
formula code knows nothing about tags or serialized forms.
"""

import dataclasses
import json
from typing import Any, Mapping, Optional, get_args, get_type_hints

import structlog

from ..errors import IndicatorNotSetError, MalformedDefinitionError
from .base import Indicator
from .moving_average import DEMA, EMA, HMA, SMA, WMA
from .oscillator import CCI, MACD, ROC, RSI, Aroon, Stoch

logger = structlog.get_logger(__name__)

INDICATOR_TYPES: dict[str, type[Indicator]] = {}


def register_indicator(cls: type[Indicator]) -> type[Indicator]:
    """Register an indicator type under its ``name`` tag. Usable as a decorator."""
    if not cls.name:
        raise ValueError(f"{cls.__name__} has no name tag")
    if not dataclasses.is_dataclass(cls):
        raise ValueError(f"{cls.__name__} must be a dataclass to be decoded from a definition")
    INDICATOR_TYPES[cls.name] = cls
    return cls


for _indicator_type in (Aroon, CCI, DEMA, EMA, HMA, MACD, ROC, RSI, SMA, Stoch, WMA):
    register_indicator(_indicator_type)


def from_dict(data: Mapping[str, Any]) -> Indicator:
    """
    Decode a tagged definition into an indicator configuration.

    The result is not validated; call ``validate()`` before trusting it.

    Args:
        data: Mapping with a ``name`` tag plus formula-specific fields

    Returns:
        Indicator configuration

    Raises:
        IndicatorNotSetError: If the tag is missing or unknown
        MalformedDefinitionError: If the definition has the wrong shape
    """
    if not isinstance(data, Mapping):
        raise MalformedDefinitionError(
            f"Indicator definition must be a mapping, got {type(data).__name__}",
            raw_data=str(data)[:100],
        )

    name = data.get("name")
    cls = INDICATOR_TYPES.get(name) if isinstance(name, str) else None
    if cls is None:
        raise IndicatorNotSetError(f"Unknown indicator: {name!r}", name=name)

    known_fields = {field.name for field in dataclasses.fields(cls)}
    kwargs: dict[str, Any] = {}

    for key, value in data.items():
        if key == "name":
            continue
        if key not in known_fields:
            raise MalformedDefinitionError(
                f"Unknown field '{key}' for indicator '{name}'",
                raw_data=str(data)[:100],
                field=key,
            )
        kwargs[key] = _decode_field(cls, key, value)

    indicator = cls(**kwargs)
    logger.debug("Indicator decoded", indicator=name, fields=sorted(kwargs))
    return indicator


def from_json(text: str) -> Indicator:
    """Decode a JSON indicator definition."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedDefinitionError(f"Invalid JSON definition: {e}", raw_data=text[:100])

    return from_dict(data)


def to_dict(indicator: Indicator) -> dict[str, Any]:
    """Encode an indicator configuration to its tagged form."""
    return indicator.to_dict()


def to_json(indicator: Indicator) -> str:
    """Encode an indicator configuration to JSON."""
    return json.dumps(indicator.to_dict())


def embedded_type(cls: type[Indicator], key: str) -> Optional[type[Indicator]]:
    """Return the indicator type a field embeds, from its annotation, or None."""
    hint = get_type_hints(cls).get(key)
    for candidate in get_args(hint) or (hint,):
        if isinstance(candidate, type) and issubclass(candidate, Indicator):
            return candidate
    return None


def _decode_field(cls: type[Indicator], key: str, value: Any) -> Any:
    embedded = embedded_type(cls, key)
    if embedded is not None:
        return _decode_embedded(embedded, key, value)

    if key == "length":
        if isinstance(value, bool) or not isinstance(value, int):
            raise MalformedDefinitionError(
                f"Field 'length' must be an integer, got {type(value).__name__}",
                raw_data=str(value)[:100],
                field=key,
            )
        return value

    if key == "trend":
        if not isinstance(value, str):
            raise MalformedDefinitionError(
                f"Field 'trend' must be a string, got {type(value).__name__}",
                raw_data=str(value)[:100],
                field=key,
            )
        return value

    return value


def _decode_embedded(embedded: type[Indicator], key: str, value: Any) -> Optional[Indicator]:
    if value is None:
        return None

    if not isinstance(value, Mapping):
        raise MalformedDefinitionError(
            f"Field '{key}' must be a mapping, got {type(value).__name__}",
            raw_data=str(value)[:100],
            field=key,
        )

    if embedded is Indicator:
        return from_dict(value)

    # Fields typed with a concrete kind may omit the tag
    definition = dict(value)
    definition.setdefault("name", embedded.name)
    if definition["name"] != embedded.name:
        raise MalformedDefinitionError(
            f"Field '{key}' must describe a {embedded.__name__}, got {definition['name']!r}",
            raw_data=str(value)[:100],
            field=key,
        )

    return from_dict(definition)
