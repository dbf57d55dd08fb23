from __future__ import annotations

import logging
from typing import Iterable

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document

from sublaunch.engine import Engine, pools_from_host
from sublaunch.executor import Host, UnsupportedTarget, perform
from sublaunch.ranker import last_token
from sublaunch.status import StatusWriter

log = logging.getLogger(__name__)


class LauncherCompleter(Completer):
    """Ranked guesses for the token under the cursor; Tab walks the ranks."""

    def __init__(self, engine: Engine, *, limit: int = 20) -> None:
        self._engine = engine
        self._limit = limit

    def get_completions(self, document: Document, complete_event: CompleteEvent) -> Iterable[Completion]:
        text = document.text_before_cursor
        if not text or text[-1].isspace():
            return
        token = last_token(text)
        for guess in self._engine.guesses(text)[: self._limit]:
            yield Completion(
                guess.suggestion,
                start_position=-len(token),
                display_meta=str(guess.score),
            )


def read_and_run(
    engine: Engine,
    host: Host,
    *,
    prompt: str = "> ",
    status: StatusWriter | None = None,
    loop: bool = False,
) -> int:
    session: PromptSession[str] = PromptSession()
    completer = LauncherCompleter(engine, limit=engine.config.completion.max_suggestions)

    def toolbar() -> str:
        text = session.default_buffer.text
        msg = engine.on_text_changed(text)
        if status is not None:
            status.update(state="typing" if text.strip() else "idle", message=msg, input=text)
        return msg

    if status is not None:
        status.update(state="idle", message=engine.config.launcher.idle_status, input="", force=True)

    rc = 0
    while True:
        try:
            line = session.prompt(
                prompt,
                completer=completer,
                complete_while_typing=False,
                bottom_toolbar=toolbar,
            )
        except (EOFError, KeyboardInterrupt):
            break

        action = engine.on_commit(line)
        if action is not None:
            try:
                msg = perform(action, host)
            except UnsupportedTarget as e:
                log.warning("%s", e)
                print(f"Error: {e}")
                if status is not None:
                    status.update(state="error", message=str(e), last_error=str(e), force=True)
                rc = 1
            else:
                print(msg)
                rc = 0
                if status is not None:
                    status.update(state="launching", message=msg, input=line, force=True)
            finally:
                # tags and views stay on the host even when a launch fails
                engine.refresh_pools(pools_from_host(host))

        if not loop:
            break

    if status is not None:
        status.update(state="idle", message=engine.config.launcher.idle_status, input="", force=True)
    return rc
