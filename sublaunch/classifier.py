from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import quote

DEFAULT_SEARCH_URL = "https://www.google.com/search?q={query}"
DEFAULT_IDLE_STATUS = "Nothing selected"

RE_URL = re.compile(
    r"^https?://[a-z0-9]+([\-.][a-z0-9]+)*\.[a-z]{2,}(:[0-9]{1,5})?(/.*)?$",
    re.IGNORECASE,
)
RE_COMMAND = re.compile(r"^[A-Za-z0-9-]+(\s+[@#][A-Za-z0-9-]+)*$")


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class UrlIntent:
    target: str


@dataclass(frozen=True)
class CommandIntent:
    raw: str


@dataclass(frozen=True)
class SearchIntent:
    query: str
    target: str


Intent = Empty | UrlIntent | CommandIntent | SearchIntent


def search_url(query: str, template: str = DEFAULT_SEARCH_URL) -> str:
    return template.replace("{query}", quote(query, safe=""))


def classify(text: str, *, search_template: str = DEFAULT_SEARCH_URL) -> Intent:
    t = (text or "").strip()
    if not t:
        return Empty()

    # URL first: a bare word is a valid command too.
    if RE_URL.match(t):
        return UrlIntent(target=t)
    if RE_COMMAND.match(t):
        return CommandIntent(raw=t)
    return SearchIntent(query=t, target=search_url(t, search_template))


def status_for(intent: Intent, *, idle: str = DEFAULT_IDLE_STATUS) -> str:
    if isinstance(intent, (UrlIntent, SearchIntent)):
        return f"Goto {intent.target}"
    if isinstance(intent, CommandIntent):
        return f"Launch {intent.raw}"
    return idle
