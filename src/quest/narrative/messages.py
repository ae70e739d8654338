"""Player-facing text for the console and Textual front-ends."""

from __future__ import annotations

from quest.deduction.verdict import Verdict
from quest.domain.enums import Side
from quest.exploration.results import RoomReport, StepOutcome, StepResult

MENU = "Escolha: (e) esquerda  (d) direita  (s) sair"
PROMPT = "Opcao: "
ACCUSE_PROMPT = "Quem você acusa como culpado? (escreva o nome exato): "
CLUES_HEADER = "===== Pistas coletadas (ordem alfabética) ====="
NO_CLUES = "Nenhuma pista coletada."
READ_ERROR = "Erro na leitura. Encerrando verificação."
EMPTY_ACCUSATION = "Nenhum nome fornecido. Acusação inválida."
FAREWELL = "Obrigado por jogar Detective Quest!"

_SIDE_LABELS = {Side.LEFT: "esquerda", Side.RIGHT: "direita"}


def banner(title: str, intro: str) -> list[str]:
    lines = [f"=== {title} ==="]
    if intro:
        lines.append(intro)
    return lines


def room_lines(report: RoomReport) -> list[str]:
    lines = ["", f"Você entrou na sala: {report.room.name}"]
    if report.clue:
        lines.append(f'  Pista encontrada: "{report.clue}"')
    else:
        lines.append("  (Nenhuma pista nesta sala)")
    return lines


def step_lines(result: StepResult) -> list[str]:
    if result.outcome == StepOutcome.MOVED and result.report is not None:
        return room_lines(result.report)
    if result.outcome == StepOutcome.NO_PATH and result.side is not None:
        return [f"Não há caminho à {_SIDE_LABELS[result.side]}."]
    if result.outcome == StepOutcome.INVALID:
        return ["Opção inválida. Use e, d ou s."]
    if result.outcome == StepOutcome.QUIT:
        return ["Exploração encerrada pelo jogador."]
    if result.outcome == StepOutcome.INPUT_CLOSED:
        return ["Entrada inválida. Encerrando."]
    return []


def clue_lines(clues: list[str]) -> list[str]:
    if not clues:
        return [NO_CLUES]
    return [f" - {clue}" for clue in clues]


def verdict_lines(verdict: Verdict) -> list[str]:
    lines = [
        "",
        f"Acusado: {verdict.accused}",
        f"Pistas que apontam para {verdict.accused}: {verdict.count}",
        "",
    ]
    if verdict.is_guilty:
        lines.append(
            f"VEREDICTO: Há pistas suficientes! {verdict.accused} é considerado culpado."
        )
    else:
        lines.append(
            f"VEREDICTO: Pistas insuficientes. {verdict.accused} não pode ser acusado com segurança."
        )
    return lines
