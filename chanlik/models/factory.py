# chanlik/models/factory.py

"""Build channels from plain dicts / YAML config sections.

A channel spec is {"type": <name>, **params}:

    awgn:      {type: awgn, variance: 1.0}
    laplace:   {type: aggn, mean: 0.0, variance: 1.0, shape: 1.0}
    per_bit:   {type: multi, table: {0: awgn, 1: laplace}}

`multi` tables refer to other channels by name; the referenced instances are
shared, so the same object backs every input that names it.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from chanlik.models.base import Channel
from chanlik.models.binary import BinarySymmetricChannel
from chanlik.models.composite import MultiChannel
from chanlik.models.deterministic import NoiselessChannel, ShiftChannel
from chanlik.models.gaussian import AGNChannel, AWGNChannel
from chanlik.models.generalized import AGGNChannel
from chanlik.utils.errors import InvalidParameterError

logger = logging.getLogger(__name__)


CHANNEL_TYPES: Dict[str, Callable[..., Channel]] = {
    "noiseless": NoiselessChannel,
    "shift": ShiftChannel,
    "awgn": AWGNChannel,
    "agn": AGNChannel,
    "aggn": AGGNChannel,
    "bsc": BinarySymmetricChannel,
}


def _resolve(ref: Any, registry: Mapping[str, Channel]) -> Channel:
    """Turn a table entry (instance, inline spec or name) into a Channel."""
    if isinstance(ref, Channel):
        return ref
    if isinstance(ref, Mapping):
        return build_channel(ref, registry)  # inline sub-channel spec
    if ref not in registry:
        raise InvalidParameterError(f"unknown channel reference: {ref!r}")
    return registry[ref]


def build_channel(spec: Mapping[str, Any],
                  registry: Optional[Mapping[str, Channel]] = None) -> Channel:
    """Main factory: construct one channel from its spec."""
    registry = registry or {}
    params = dict(spec)
    kind = str(params.pop("type", "")).lower()

    if kind == "multi":
        table = params.pop("table", None)
        if params:
            raise InvalidParameterError(f"unexpected multi parameters: {sorted(params)}")
        if not isinstance(table, Mapping):
            raise InvalidParameterError("multi channel requires a 'table' mapping")
        return MultiChannel({k: _resolve(v, registry) for k, v in table.items()})

    if kind not in CHANNEL_TYPES:
        raise InvalidParameterError(f"Unknown channel type: {kind!r}")
    try:
        return CHANNEL_TYPES[kind](**params)
    except TypeError as exc:  # wrong / missing keyword arguments
        raise InvalidParameterError(f"bad parameters for {kind} channel: {exc}") from exc


def _references(spec: Mapping[str, Any]) -> List[str]:
    """Names a spec depends on, including those inside inline multi specs."""
    if str(spec.get("type", "")).lower() != "multi":
        return []
    table = spec.get("table") or {}
    refs: List[str] = []
    for v in table.values():
        if isinstance(v, str):
            refs.append(v)
        elif isinstance(v, Mapping):
            refs.extend(_references(v))  # nested specs can point further down the config
    return refs


def build_channels(cfg: Mapping[str, Any]) -> Dict[str, Channel]:
    """Build every named channel in a `channels:` config section.

    Channels are built in dependency order so multi tables can point at any
    other entry; a reference cycle is rejected.
    """
    specs = cfg.get("channels", cfg)
    built: Dict[str, Channel] = {}
    visiting = set()

    def visit(name: str) -> Channel:
        if name in built:
            return built[name]
        if name not in specs:
            raise InvalidParameterError(f"unknown channel reference: {name!r}")
        if name in visiting:
            raise InvalidParameterError(f"channel reference cycle through {name!r}")
        visiting.add(name)
        for ref in _references(specs[name]):
            visit(ref)
        built[name] = build_channel(specs[name], built)
        visiting.discard(name)
        logger.debug("built channel %s = %r", name, built[name])
        return built[name]

    for name in specs:
        visit(name)
    return built
