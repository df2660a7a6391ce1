import json

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Any


class Action(BaseModel):
    """JSON-RPC action the host invokes when an item is selected"""

    model_config = ConfigDict(populate_by_name=True)

    command: str = Field(
        default="", alias="method", description="Name of the handler to invoke"
    )
    parameters: list[str] = Field(
        default_factory=lambda: [""],
        description="Single positional argument passed to the handler",
    )
    keep_open_after_action: bool = Field(
        default=True,
        alias="dontHideAfterAction",
        description="Whether the launcher stays open after the action runs",
    )

    @field_validator("parameters")
    @classmethod
    def _single_parameter(cls, value: list[str]) -> list[str]:
        if len(value) != 1:
            raise ValueError(
                f"Actions carry exactly one parameter, got {len(value)}"
            )
        return value


class Item(BaseModel):
    """One rankable, actionable entry shown by the launcher"""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(alias="Title", description="Display text")
    subtitle: str = Field(
        default="", alias="SubTitle", description="Secondary display text"
    )
    icon_path: str = Field(default="", alias="IcoPath", description="Icon reference")
    action: Action = Field(default_factory=Action, alias="JsonRPCAction")

    @classmethod
    def build(
        cls,
        title: str,
        subtitle: str = "",
        icon: str = "",
        command: str = "",
        parameter: str = "",
        keep_open_after_action: bool = True,
    ) -> "Item":
        return cls(
            title=title,
            subtitle=subtitle,
            icon_path=icon,
            action=Action(
                command=command,
                parameters=[parameter],
                keep_open_after_action=keep_open_after_action,
            ),
        )

    @property
    def title_and_subtitle(self) -> str:
        return f"{self.title} {self.subtitle}"


class Response(BaseModel):
    """Payload returned to the launcher for a query"""

    result: list[Item] = Field(default_factory=list)

    def to_wire(self) -> str:
        # the host expects a UTF-8 BOM in front of the JSON document
        return "\ufeff" + self.model_dump_json(by_alias=True)


class RpcRequest(BaseModel):
    """Request sent by the launcher on the plugin's command line"""

    method: str = Field(description="Registered handler name")
    parameters: list[Any] = Field(default_factory=list)

    def string_parameters(self) -> list[str]:
        params = []
        for value in self.parameters:
            if isinstance(value, str):
                params.append(value)
            elif isinstance(value, bool):
                params.append("true" if value else "false")
            elif isinstance(value, (int, float)):
                params.append(str(value))
            else:
                params.append(json.dumps(value, separators=(",", ":")))
        return params


class PluginInfo(BaseModel):
    """Contents of a plugin's plugin.json manifest"""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="ID")
    name: str = Field(alias="Name")
    keywords: list[str] = Field(default_factory=list, alias="ActionKeywords")
    description: str = Field(default="", alias="Description")
    author: str = Field(default="", alias="Author")
    version: str = Field(default="", alias="Version")
    website: str = Field(default="", alias="Website")
    icon: str = Field(default="", alias="IcoPath")
    file: str = Field(default="", alias="ExecuteFileName")

    @model_validator(mode="before")
    @classmethod
    def _merge_keywords(cls, data: Any) -> Any:
        if isinstance(data, dict) and "ActionKeyword" in data:
            data = dict(data)
            data["ActionKeywords"] = [data.pop("ActionKeyword")]
        return data

    @property
    def dir_name(self) -> str:
        return f"{self.name}-{self.id}"
