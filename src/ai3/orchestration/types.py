"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Request records and action tags understood by the orchestrator.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, model_validator

from ..errors import UnrecognizedAction

Action = Literal["direct-compute", "cached-compute"]

DIRECT_COMPUTE: Action = "direct-compute"
CACHED_COMPUTE: Action = "cached-compute"

# Legacy assistant tags are accepted as aliases.
_ACTION_ALIASES: dict[str, Action] = {
    "direct-compute": DIRECT_COMPUTE,
    "cached-compute": CACHED_COMPUTE,
    "query-llm": DIRECT_COMPUTE,
    "cached-query": CACHED_COMPUTE,
}


def resolve_action(tag: object) -> Action:
    """
    Map an incoming action tag onto its canonical action.

    Raises:
        UnrecognizedAction: when `tag` is not a string naming a known action.
    """
    key = tag.strip().lower().replace("_", "-") if isinstance(tag, str) else ""
    action = _ACTION_ALIASES.get(key)
    if action is None:
        raise UnrecognizedAction(str(tag))
    return action


class RequestRecord(BaseModel):
    """
    One ephemeral request routed by `RequestOrchestrator`.

    `payload` is either the prompt string itself or a mapping holding it under
    `"prompt"`. Flat mappings such as ``{"action": ..., "prompt": ...}`` are
    folded into `payload` on validation.
    """

    model_config = ConfigDict(frozen=True)

    action: str
    payload: str | dict[str, Any]
    user_id: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _fold_flat_prompt(cls, data: Any) -> Any:
        if isinstance(data, Mapping) and "payload" not in data and "prompt" in data:
            row = dict(data)
            row["payload"] = {"prompt": row.pop("prompt")}
            return row
        return data

    @property
    def prompt(self) -> str:
        """Prompt text carried by `payload`."""
        if isinstance(self.payload, str):
            return self.payload
        value = self.payload.get("prompt")
        if not isinstance(value, str):
            raise ValueError("Request payload must carry a string 'prompt'")
        return value
