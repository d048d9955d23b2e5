"""Game data fetched from the Space Traders API."""

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

_LOGGER = logging.getLogger("pixeltraders.API")


def _lookup(mapping, key, default=None):
    if not isinstance(mapping, Mapping):
        return default
    if key in mapping:
        return mapping[key]
    lowered = key.lower()
    return next(
        (value for name, value in mapping.items() if isinstance(name, str) and name.lower() == lowered),
        default,
    )


def _text(mapping, key):
    value = _lookup(mapping, key)
    return value if isinstance(value, str) else ""


def _number(mapping, key):
    value = _lookup(mapping, key)
    return value if isinstance(value, int) and not isinstance(value, bool) else 0


def _flag(mapping, key):
    value = _lookup(mapping, key)
    return value if isinstance(value, bool) else False


def _object(mapping, key):
    value = _lookup(mapping, key)
    return value if isinstance(value, Mapping) else {}


def _items(mapping, key):
    value = _lookup(mapping, key)
    return value if isinstance(value, list) else []


def _load(payload):
    if isinstance(payload, Mapping):
        return payload
    try:
        decoded = json.loads(payload)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"invalid JSON payload: {exc}") from exc
    if not isinstance(decoded, Mapping):
        raise ValueError("JSON payload is not an object")
    return decoded


@dataclass
class Location:
    sector: str = ""
    system: str = ""
    waypoint: str = ""


@dataclass
class Agent:
    symbol: str = ""
    headquarters: str = ""
    credits: int = 0
    starting_faction: str = ""
    ship_count: int = 0
    location: Location = field(default_factory=Location)

    @classmethod
    def from_json(cls, payload):
        """Build from an agent response ({"data": {...}}), decoded or raw."""
        data = _object(_load(payload), "data")
        location = _object(data, "location")
        return cls(
            symbol=_text(data, "symbol"),
            headquarters=_text(data, "headquarters"),
            credits=_number(data, "credits"),
            starting_faction=_text(data, "startingFaction"),
            ship_count=_number(data, "shipCount"),
            location=Location(
                sector=_text(location, "sector"),
                system=_text(location, "system"),
                waypoint=_text(location, "waypoint"),
            ),
        )

    def symbol_label(self):
        return f"Symbol : {self.symbol}"

    def headquarter_label(self):
        return f"Headquarter : {self.headquarters}"

    def credits_label(self):
        return f"Credits : {self.credits} "

    def faction_label(self):
        return f"Faction : {self.starting_faction}"

    def fleet_label(self):
        return f"Fleet : {self.ship_count}"

    def _headquarters_part(self, index):
        parts = self.headquarters.split("-")
        if index >= len(parts):
            raise ValueError(f"headquarters {self.headquarters!r} has no part {index}")
        return parts[index]

    def location_sector(self):
        return self._headquarters_part(0)

    def location_system(self):
        return f"{self.location_sector()}-{self._headquarters_part(1)}"

    def location_waypoint(self):
        return f"{self.location_system()}-{self._headquarters_part(2)}"


@dataclass
class Orbital:
    symbol: str = ""


@dataclass
class Trait:
    symbol: str = ""
    name: str = ""
    description: str = ""


@dataclass
class Faction:
    symbol: str = ""


@dataclass
class Chart:
    submitted_by: str = ""
    submitted_on: str = ""


@dataclass
class System:
    system_symbol: str = ""
    symbol: str = ""
    type: str = ""
    x: int = 0
    y: int = 0
    orbitals: list = field(default_factory=list)
    traits: list = field(default_factory=list)
    modifiers: list = field(default_factory=list)
    chart: Chart = field(default_factory=Chart)
    faction: Faction = field(default_factory=Faction)
    is_under_construction: bool = False

    @classmethod
    def from_json(cls, payload):
        """Build from a waypoint response ({"data": {...}}), decoded or raw."""
        data = _object(_load(payload), "data")
        chart = _object(data, "chart")
        return cls(
            system_symbol=_text(data, "systemSymbol"),
            symbol=_text(data, "symbol"),
            type=_text(data, "type"),
            x=_number(data, "x"),
            y=_number(data, "y"),
            orbitals=[Orbital(_text(item, "symbol")) for item in _items(data, "orbitals")],
            traits=[
                Trait(_text(item, "symbol"), _text(item, "name"), _text(item, "description"))
                for item in _items(data, "traits")
            ],
            modifiers=[item for item in _items(data, "modifiers") if isinstance(item, str)],
            chart=Chart(_text(chart, "submittedBy"), _text(chart, "submittedOn")),
            faction=Faction(_text(_object(data, "faction"), "symbol")),
            is_under_construction=_flag(data, "isUnderConstruction"),
        )


@dataclass
class ContractMeta:
    total: int = 0
    page: int = 0
    limit: int = 0


@dataclass
class Contracts:
    meta: ContractMeta = field(default_factory=ContractMeta)

    @classmethod
    def from_json(cls, payload):
        """Build from a contract list response ({"meta": {...}}), decoded or raw."""
        meta = _object(_load(payload), "meta")
        return cls(ContractMeta(_number(meta, "total"), _number(meta, "page"), _number(meta, "limit")))


@dataclass
class GameState:
    agent: Agent = field(default_factory=Agent)
    position: System = field(default_factory=System)
    contracts: Contracts = field(default_factory=Contracts)


def _parse(factory, data, message):
    try:
        return factory.from_json(data)
    except ValueError as exc:
        _LOGGER.error(message, exc_info=exc)
        return factory()


def fetch_agent(client):
    """Fetch the player's agent; an unreadable answer gives an empty agent."""
    _LOGGER.debug("Get Agent data")
    return _parse(Agent, client.get(["my", "agent"]), "Error get agent data")


def fetch_agent_start(client, agent):
    """Fetch the waypoint of the agent's headquarters."""
    parts = ["systems", agent.location_system(), "waypoints", agent.location_waypoint()]
    return _parse(System, client.get(parts), "Error get agent start data")


def fetch_contracts(client):
    return _parse(Contracts, client.get(["my", "contracts"]), "Error start contract")


def negotiate_contract(client):
    data = client.post(["my", "ships", "", "negotiate", "contract"], None)
    return _parse(Contracts, data, "Error start contract")


def fetch_systems(client):
    return _parse(System, client.get(["systems"]), "Error get systems data")


def init_game_state(client):
    """Load the agent, its starting waypoint and its contracts."""
    agent = fetch_agent(client)
    position = fetch_agent_start(client, agent)
    contracts = fetch_contracts(client)
    negotiate_contract(client)
    return GameState(agent=agent, position=position, contracts=contracts)