from quest.evidence.clue_set import ClueSet


def test_empty_set_enumerates_nothing():
    clues = ClueSet()
    assert clues.enumerate() == []
    assert len(clues) == 0
    assert not clues


def test_enumeration_is_sorted_and_unique():
    clues = ClueSet()
    inserted = ["Pegada suja", "Livro rasgado", "Pegada suja", "Luva encharcada", "Livro rasgado"]
    for clue in inserted:
        clues.insert(clue)
    assert clues.enumerate() == ["Livro rasgado", "Luva encharcada", "Pegada suja"]
    assert len(clues) == 3


def test_insert_reports_new_clues_only():
    clues = ClueSet()
    assert clues.insert("Filtro de cigarro") is True
    assert clues.insert("Filtro de cigarro") is False
    assert clues.insert("") is False
    assert clues.enumerate() == ["Filtro de cigarro"]


def test_enumeration_is_restartable():
    clues = ClueSet()
    for clue in ["b", "a", "c"]:
        clues.insert(clue)
    assert list(clues) == list(clues) == ["a", "b", "c"]


def test_membership():
    clues = ClueSet()
    clues.insert("Perfume feminino caro")
    assert "Perfume feminino caro" in clues
    assert "Perfume" not in clues
    assert 3 not in clues


def test_degenerate_insertion_order_keeps_all_clues():
    clues = ClueSet()
    words = [f"clue-{n:03d}" for n in range(200)]
    for word in reversed(words):
        clues.insert(word)
    assert clues.enumerate() == words


def test_case_and_accents_compare_by_code_point():
    clues = ClueSet()
    for clue in ["porão", "Porão", "porao"]:
        clues.insert(clue)
    assert clues.enumerate() == ["Porão", "porao", "porão"]
