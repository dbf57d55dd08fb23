from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, PositiveInt, field_validator


class LauncherModel(BaseModel):
    search_url: str = "https://www.google.com/search?q={query}"
    idle_status: str = "Nothing selected"

    @field_validator("search_url")
    @classmethod
    def _has_placeholder(cls, v: str) -> str:
        if "{query}" not in v:
            raise ValueError("search_url must contain a {query} placeholder")
        return v


class CompletionModel(BaseModel):
    cost_sub: int = Field(default=1, ge=0)
    cost_ins: int = Field(default=5, ge=0)
    cost_del: int = Field(default=5, ge=0)
    buffer_size: PositiveInt = 20
    max_suggestions: int = Field(default=20, ge=1, le=1000)


class PoolsModel(BaseModel):
    executable_dirs: list[str] = Field(default_factory=lambda: ["/usr/bin"])
    use_path: bool = False
    tags: list[str] = Field(default_factory=list)
    views: list[str] = Field(default_factory=list)


class ExecutorModel(BaseModel):
    # "auto" opens URLs with xdg-open; anything else is a command with a {url} placeholder.
    browser: str = "auto"
    can_open_urls: bool = True
    can_spawn: bool = True


class CommandsModel(BaseModel):
    adhoc_tag_style: Literal["uuid", "counter"] = "uuid"


class UIModel(BaseModel):
    prompt: str = "> "
    # "auto" uses the XDG state dir (e.g. ~/.local/state/sublaunch/status.json).
    status_path: str = "auto"
    log_level: str = "INFO"
    # "auto" uses the XDG state dir, "off" disables the log file.
    log_path: str = "auto"

    @field_validator("log_path", mode="before")
    @classmethod
    def _bare_off(cls, v: object) -> object:
        # YAML reads a bare `off` as false
        return "off" if v is False else v

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        name = v.upper().strip()
        if name not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {v}")
        return name


class ConfigModel(BaseModel):
    launcher: LauncherModel = Field(default_factory=LauncherModel)
    completion: CompletionModel = Field(default_factory=CompletionModel)
    pools: PoolsModel = Field(default_factory=PoolsModel)
    executor: ExecutorModel = Field(default_factory=ExecutorModel)
    commands: CommandsModel = Field(default_factory=CommandsModel)
    ui: UIModel = Field(default_factory=UIModel)
