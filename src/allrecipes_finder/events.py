"""Normalized events produced from the agent runtime's message stream."""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class _Event(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        """Wire form, e.g. ``{"kind": "usage", "inputTokens": 10, "outputTokens": 5}``."""
        return self.model_dump(by_alias=True)


class TextEvent(_Event):
    """A text fragment written by the assistant."""

    kind: Literal["text"] = "text"
    text: str


class ToolEvent(_Event):
    """The assistant invoked a tool."""

    kind: Literal["tool"] = "tool"
    name: str


class UsageEvent(_Event):
    """Token usage reported by the runtime."""

    kind: Literal["usage"] = "usage"
    input_tokens: int = Field(default=0, alias="inputTokens")
    output_tokens: int = Field(default=0, alias="outputTokens")


class ResultEvent(_Event):
    """Final result text of the session."""

    kind: Literal["result"] = "result"
    text: str


class DoneEvent(_Event):
    """Terminal marker, always the last event of a stream."""

    kind: Literal["done"] = "done"


AgentEvent = Annotated[
    Union[TextEvent, ToolEvent, UsageEvent, ResultEvent, DoneEvent],
    Field(discriminator="kind"),
]

_event_adapter: TypeAdapter[AgentEvent] = TypeAdapter(AgentEvent)


def parse_event(data: dict[str, Any]) -> AgentEvent:
    """Validate a wire-form dict back into the matching event model."""
    return _event_adapter.validate_python(data)
