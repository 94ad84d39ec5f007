"""
Multi-field record factories.

A record encloses several immutable fields and exposes read-only views, each
reporting its own disjoint subset of the fields. All views of one record
share the same enclosed snapshot.
"""

from __future__ import annotations

import logging
from collections import namedtuple
from typing import Any, Callable, Dict, Mapping, NamedTuple, Sequence, Tuple

from closure_alpha.core.sinks import Sink, console_sink

logger = logging.getLogger(__name__)


class CarCapabilities(NamedTuple):
    car_model: Callable[[], Tuple[str, str]]
    car_details: Callable[[], Tuple[str, str]]


def make_car(
    model: str = "Model 1",
    name: str = "Toyota",
    color: str = "Black",
    manufactured_at: str = "24/2025",
    sink: Sink = console_sink,
) -> CarCapabilities:
    """
    Enclose a car's fields behind two views.

    car_model() reports and returns (model, manufactured_at).
    car_details() reports and returns (name, color).
    """

    def car_model() -> Tuple[str, str]:
        sink(model)
        sink(manufactured_at)
        return model, manufactured_at

    def car_details() -> Tuple[str, str]:
        sink(name)
        sink(color)
        return name, color

    return CarCapabilities(car_model, car_details)


def _check_views(fields: Mapping[str, Any], views: Mapping[str, Sequence[str]]) -> None:
    if not views:
        raise ValueError("a record needs at least one view")

    owner: Dict[str, str] = {}
    for view_name, field_names in views.items():
        for field_name in field_names:
            if field_name not in fields:
                raise ValueError(f"view {view_name!r} references unknown field {field_name!r}")
            if field_name in owner:
                raise ValueError(
                    f"field {field_name!r} appears in both {owner[field_name]!r} and {view_name!r}"
                )
            owner[field_name] = view_name


def make_record(
    fields: Mapping[str, Any],
    views: Mapping[str, Sequence[str]],
    sink: Sink = console_sink,
    typename: str = "RecordCapabilities",
):
    """
    Generalized record factory.

    Args:
        fields: field name -> value; copied now, so later changes to the
            mapping are not seen by the record
        views: view name -> field names; views must be disjoint
        sink: where each reported field value goes
        typename: name of the returned NamedTuple type

    Returns:
        NamedTuple with one read-only operation per view, in `views` order.
        Each operation reports its values one per line and returns them as a tuple.

    Raises:
        ValueError: if views overlap, reference unknown fields, or are empty
    """
    _check_views(fields, views)
    snapshot = dict(fields)

    def _make_view(field_names: Tuple[str, ...]) -> Callable[[], Tuple[Any, ...]]:
        def view() -> Tuple[Any, ...]:
            values = tuple(snapshot[f] for f in field_names)
            for value in values:
                sink(str(value))
            return values
        return view

    capabilities_type = namedtuple(typename, list(views))
    logger.debug(f"[RECORD] Created {typename} with views {list(views)}")
    return capabilities_type(*(_make_view(tuple(names)) for names in views.values()))
