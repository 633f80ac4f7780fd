"""System event envelope delivered to plugins."""

from __future__ import annotations

from dataclasses import dataclass, field

from jmapcontract.plugincontract.args import Args


@dataclass(frozen=True, slots=True)
class EventPayload:
    """Asynchronous notification such as ``account.created``."""

    __hash__ = None  # data is a dict

    event_type: str
    occurred_at: str
    account_id: str
    data: Args = field(default_factory=Args)

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", Args.of(self.data))

    @property
    def has_data(self) -> bool:
        return bool(self.data)
