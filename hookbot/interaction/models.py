"""Inbound interaction payloads and outbound interaction responses.

Only the members the dispatcher needs are parsed; everything else in the
platform's payload is ignored.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from hookbot.errors import InvalidPayloadError
from hookbot.interaction.embed import Embed


class InteractionType(IntEnum):
    PING = 1
    APPLICATION_COMMAND = 2
    MESSAGE_COMPONENT = 3
    APPLICATION_COMMAND_AUTOCOMPLETE = 4
    MODAL_SUBMIT = 5


class InteractionResponseType(IntEnum):
    PONG = 1
    CHANNEL_MESSAGE_WITH_SOURCE = 4
    DEFERRED_CHANNEL_MESSAGE_WITH_SOURCE = 5
    APPLICATION_COMMAND_AUTOCOMPLETE_RESULT = 8


class OptionType(IntEnum):
    SUB_COMMAND = 1
    SUB_COMMAND_GROUP = 2
    STRING = 3
    BOOLEAN = 5


@dataclass
class OptionChoice:
    name: str
    value: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "value": self.value}


@dataclass
class CommandOption:
    """One option in a command's registration definition."""

    name: str
    description: str
    type: OptionType = OptionType.STRING
    required: bool = False
    autocomplete: bool = False
    choices: list[OptionChoice] | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "type": int(self.type),
            "required": self.required,
            "autocomplete": self.autocomplete,
        }
        if self.choices is not None:
            data["choices"] = [c.to_dict() for c in self.choices]
        return data


@dataclass
class CommandResponse:
    """Callback data of an interaction response."""

    content: str | None = None
    embeds: list[Embed] | None = None
    choices: list[OptionChoice] | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.content is not None:
            data["content"] = self.content
        if self.embeds is not None:
            data["embeds"] = [e.to_dict() for e in self.embeds]
        if self.choices is not None:
            data["choices"] = [c.to_dict() for c in self.choices]
        return data


@dataclass
class Interaction:
    type: InteractionType
    token: str = ""
    id: str | None = None
    command_name: str | None = None
    options: dict[str, str] = field(default_factory=dict)
    focused: str | None = None      # name of the option being autocompleted
    username: str | None = None

    @classmethod
    def from_dict(cls, raw: Any) -> "Interaction":
        if not isinstance(raw, dict):
            raise InvalidPayloadError("interaction must be a JSON object")
        try:
            ty = InteractionType(raw.get("type"))
        except ValueError as exc:
            raise InvalidPayloadError(f"unknown interaction type {raw.get('type')!r}") from exc

        data = _object(raw.get("data"), "data")
        command_name = data.get("name")
        if command_name is not None and not isinstance(command_name, str):
            raise InvalidPayloadError("data.name must be a string")

        raw_options = data.get("options")
        if raw_options is None:
            raw_options = []
        elif not isinstance(raw_options, list):
            raise InvalidPayloadError("data.options must be a list")

        options: dict[str, str] = {}
        focused = None
        for opt in raw_options:
            if not isinstance(opt, dict) or not isinstance(opt.get("name"), str):
                raise InvalidPayloadError("malformed command option")
            value = opt.get("value")
            options[opt["name"]] = "" if value is None else str(value)
            if opt.get("focused"):
                focused = opt["name"]

        return cls(
            type=ty,
            token=raw.get("token", ""),
            id=raw.get("id"),
            command_name=command_name,
            options=options,
            focused=focused,
            username=_username(raw),
        )


def _object(value: Any, path: str) -> dict[str, Any]:
    """*value* if it is a JSON object, ``{}`` if absent."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise InvalidPayloadError(f"{path} must be an object")
    return value


def _username(raw: dict[str, Any]) -> str | None:
    # guild interactions carry member.user, direct messages carry user
    member = _object(raw.get("member"), "member")
    user = _object(member.get("user"), "member.user") or _object(raw.get("user"), "user")
    username = user.get("username")
    if username is not None and not isinstance(username, str):
        raise InvalidPayloadError("username must be a string")
    return username or None


def interaction_response(
    ty: InteractionResponseType, data: CommandResponse | None = None
) -> dict[str, Any]:
    body: dict[str, Any] = {"type": int(ty)}
    if data is not None:
        body["data"] = data.to_dict()
    return body
