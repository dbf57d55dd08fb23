from __future__ import annotations

import logging

from sublaunch.classifier import CommandIntent, Empty, Intent, SearchIntent, UrlIntent, classify, status_for
from sublaunch.commands import Action, OpenUrl, RunCommand, TagFactory, make_tag_factory, parse_command
from sublaunch.config import Config
from sublaunch.distance import EditDistance
from sublaunch.executor import Host
from sublaunch.pools import CandidatePools
from sublaunch.ranker import Guess, Ranker, last_token

log = logging.getLogger(__name__)


def _as_text(text: str | bytes | None) -> str:
    if text is None:
        return ""
    if isinstance(text, bytes):
        # strict: malformed input is the caller's bug
        return text.decode("utf-8")
    return text


class Engine:
    """Launcher core driven by the host: status, completion, commit.

    One instance owns its pools and its edit-distance buffers; calls must not
    overlap.
    """

    def __init__(
        self,
        pools: CandidatePools | None = None,
        *,
        config: Config | None = None,
        tag_factory: TagFactory | None = None,
    ) -> None:
        self.config = config or Config()
        c = self.config.completion
        self._ranker = Ranker(
            EditDistance(
                cost_sub=c.cost_sub,
                cost_ins=c.cost_ins,
                cost_del=c.cost_del,
                buffer_size=c.buffer_size,
            )
        )
        self._tag_factory = tag_factory or make_tag_factory(self.config.commands.adhoc_tag_style)
        self._pools = pools or CandidatePools()

    @classmethod
    def from_host(cls, host: Host, *, config: Config | None = None, tag_factory: TagFactory | None = None) -> Engine:
        engine = cls(config=config, tag_factory=tag_factory)
        engine.refresh_pools(pools_from_host(host))
        return engine

    @property
    def pools(self) -> CandidatePools:
        return self._pools

    def refresh_pools(self, pools: CandidatePools) -> None:
        self._pools = pools
        log.info(
            "Pools: tags=%d views=%d executables=%d",
            len(pools.tags),
            len(pools.views),
            pools.executable_count,
        )

    def classify(self, text: str | bytes | None) -> Intent:
        return classify(_as_text(text), search_template=self.config.launcher.search_url)

    def on_text_changed(self, text: str | bytes | None) -> str:
        return status_for(self.classify(text), idle=self.config.launcher.idle_status)

    def guesses(self, text: str | bytes | None) -> list[Guess]:
        return self._ranker.guesses(self._pools, last_token(_as_text(text)))

    def on_completion_requested(self, text: str | bytes | None, select_index: int) -> str | None:
        return self._ranker.rank(self._pools, last_token(_as_text(text)), select_index)

    def on_commit(self, text: str | bytes | None) -> Action | None:
        intent = self.classify(text)
        if isinstance(intent, Empty):
            return None
        if isinstance(intent, (UrlIntent, SearchIntent)):
            return OpenUrl(url=intent.target)
        if isinstance(intent, CommandIntent):
            return RunCommand(command=parse_command(intent.raw, tag_factory=self._tag_factory))
        raise TypeError(f"unexpected intent: {intent!r}")


def pools_from_host(host: Host) -> CandidatePools:
    return CandidatePools.from_names(
        tags=host.tag_names(),
        views=host.view_names(),
        executables=host.executable_names(),
    )
