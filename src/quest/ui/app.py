from __future__ import annotations

from enum import StrEnum

from textual.app import App, ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.widgets import Input, RichLog, Static

from quest.cases.loader import CaseWorld
from quest.deduction.verdict import Verdict, evaluate_accusation, tally_suspects
from quest.domain.errors import InvalidAccusationError
from quest.exploration.engine import ExplorationEngine
from quest.narrative import messages


class Stage(StrEnum):
    EXPLORE = "explore"
    ACCUSE = "accuse"
    DONE = "done"


class QuestApp(App):
    TITLE = ""
    SUB_TITLE = ""
    BINDINGS = [
        ("f6", "focus_log", "Focus log"),
        ("f7", "focus_detail", "Focus detail"),
        ("f8", "focus_input", "Focus input"),
    ]
    CSS = """
    Screen {
        layout: vertical;
    }
    #header {
        height: auto;
        padding: 1 1;
    }
    #log {
        height: 2fr;
        border: solid $secondary;
        padding: 0 1;
    }
    #detail {
        height: 1fr;
        border: solid $secondary;
        padding: 0 1;
    }
    #detail_view {
        width: 100%;
    }
    #menu {
        height: auto;
        padding: 1 1;
    }
    #command {
        height: 3;
        padding: 0 1;
    }
    """

    def __init__(self, world: CaseWorld) -> None:
        super().__init__()
        self.world = world
        self.engine = ExplorationEngine(world.room_map)
        self.stage = Stage.EXPLORE
        self.verdict: Verdict | None = None

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Static("", id="header")
            yield RichLog(id="log", wrap=True)
            yield VerticalScroll(Static("", id="detail_view", expand=True), id="detail")
            yield Static(messages.MENU, id="menu")
            yield Input(placeholder="e, d ou s...", id="command")

    def on_mount(self) -> None:
        for line in messages.banner(self.world.case.title, self.world.case.intro):
            self._write(line)
        self._write_lines(messages.room_lines(self.engine.enter()))
        self._refresh()
        self.query_one("#command", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        value = event.value
        event.input.value = ""
        if self.stage == Stage.EXPLORE:
            self._handle_command(value)
        elif self.stage == Stage.ACCUSE:
            self._handle_accusation(value)
        elif value.strip().lower() in ("q", "s", "sair", "quit"):
            self.exit(self.verdict)
        self._refresh()

    def _handle_command(self, value: str) -> None:
        if not value.strip():
            return
        result = self.engine.handle(value)
        self._write_lines(messages.step_lines(result))
        if self.engine.ended:
            self._start_accusation()

    def _start_accusation(self) -> None:
        self.stage = Stage.ACCUSE
        self._write("")
        self._write(messages.CLUES_HEADER)
        self._write_lines(messages.clue_lines(self.engine.clues.enumerate()))
        self._write("")
        self._write(messages.ACCUSE_PROMPT)
        self.query_one("#menu", Static).update("Digite o nome do acusado.")
        self.query_one("#command", Input).placeholder = "Nome do suspeito..."

    def _handle_accusation(self, value: str) -> None:
        self.stage = Stage.DONE
        try:
            self.verdict = evaluate_accusation(self.engine.clues, self.world.index, value)
        except InvalidAccusationError:
            self._write(messages.EMPTY_ACCUSATION)
        else:
            self._write_lines(messages.verdict_lines(self.verdict))
        self._write("")
        self._write(messages.FAREWELL)
        self.query_one("#menu", Static).update("Digite 'q' para sair.")
        self.query_one("#command", Input).placeholder = "q"

    def _write(self, message: str) -> None:
        self.query_one("#log", RichLog).write(message)

    def _write_lines(self, lines: list[str]) -> None:
        for line in lines:
            self._write(line)

    def action_focus_log(self) -> None:
        self.query_one("#log", RichLog).focus()

    def action_focus_detail(self) -> None:
        self.query_one("#detail", VerticalScroll).focus()

    def action_focus_input(self) -> None:
        self.query_one("#command", Input).focus()

    def _refresh(self) -> None:
        header = self.query_one("#header", Static)
        header.update(
            f"{self.world.case.title}  |  Sala: {self.engine.current.name}  |  "
            f"Pistas: {len(self.engine.clues)}"
        )
        detail = self.query_one("#detail_view", Static)
        detail.update("\n".join(self._detail_lines()))

    def _detail_lines(self) -> list[str]:
        lines = ["Caminho:", " -> ".join(self.engine.path) or "(nenhum)", ""]
        exits = self.world.room_map.children(self.engine.current.name)
        if self.stage == Stage.EXPLORE:
            lines.append("Saídas:")
            if exits:
                lines.extend(f"- {side}: {room.name}" for side, room in exits.items())
            else:
                lines.append("(nenhuma)")
            lines.append("")
        lines.append("Pistas coletadas:")
        lines.extend(messages.clue_lines(self.engine.clues.enumerate()))
        if self.stage != Stage.EXPLORE:
            lines.append("")
            lines.append("Suspeitos apontados:")
            tally = tally_suspects(self.engine.clues, self.world.index)
            if tally:
                lines.extend(f"- {name}: {count}" for name, count in sorted(tally.items()))
            else:
                lines.append("(nenhum)")
        return lines
