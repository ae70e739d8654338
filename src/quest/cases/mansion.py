"""The built-in mansion case."""

from __future__ import annotations

from quest.domain.models import CaseFile

MANSION_CASE = CaseFile(
    title="Detective Quest: Investigacao Final",
    intro="Explore a mansão e colete pistas. Quando terminar, acuse o suspeito.",
    root="Hall de Entrada",
    rooms=[
        {"name": "Hall de Entrada", "clue": "Pegada suja", "left": "Sala de Estar", "right": "Biblioteca"},
        {"name": "Sala de Estar", "clue": "Perfume feminino caro", "left": "Cozinha", "right": "Jardim"},
        {"name": "Biblioteca", "clue": "Livro rasgado", "right": "Porão"},
        {"name": "Cozinha", "clue": "Copo com fragmento de esmalte"},
        {"name": "Jardim", "clue": "Filtro de cigarro"},
        {"name": "Porão", "clue": "Luva encharcada"},
    ],
    associations=[
        {"clue": "Pegada suja", "suspect": "Carlos"},
        {"clue": "Perfume feminino caro", "suspect": "Dona Beatriz"},
        {"clue": "Livro rasgado", "suspect": "Professor Otávio"},
        {"clue": "Copo com fragmento de esmalte", "suspect": "Dona Beatriz"},
        {"clue": "Filtro de cigarro", "suspect": "Carlos"},
        {"clue": "Luva encharcada", "suspect": "Professor Otávio"},
    ],
)
