from slovnik.core.folding import REPLACEABLE_LETTERS, FoldingConfiguration
from slovnik.core.scripts import RenderStyle


def test_toggle_flips_known_letters():
    folding = FoldingConfiguration()

    assert folding.toggle("č") is folding
    assert folding.pairs == (("č", "c"),)

    folding.toggle("čx")
    assert folding.pairs == ()


def test_toggle_appends_in_order():
    folding = FoldingConfiguration()
    folding.toggle("žš")

    assert folding.sources == ["ž", "š"]
    assert folding.targets == ["z", "s"]
    assert folding.as_dict() == {"from": ["ž", "š"], "to": ["z", "s"]}


def test_set_accepts_pairs_and_mapping():
    folding = FoldingConfiguration([("ě", "e")])
    assert folding.sources == ["ě"]

    folding.set({"from": ["ž"], "to": ["z"]})
    assert folding.pairs == (("ž", "z"),)

    folding.set([])
    assert folding.pairs == ()


def test_is_fully_active():
    folding = FoldingConfiguration()
    assert not folding.is_fully_active()

    folding.toggle("".join(source for source, _ in REPLACEABLE_LETTERS))
    assert folding.is_fully_active()


def test_has_target_in():
    folding = FoldingConfiguration().toggle("č")

    assert folding.has_target_in("ca")
    assert not folding.has_target_in("da")


def test_apply_folds_inactive_letters():
    folding = FoldingConfiguration()

    assert folding.apply("Žena", RenderStyle.STANDARD) == "zena"

    folding.toggle("ž")
    assert folding.apply("Žena", RenderStyle.STANDARD) == "žena"


def test_apply_standard_style_folds_non_standard_letters():
    folding = FoldingConfiguration().toggle("ę")

    assert folding.apply("pęť", RenderStyle.STANDARD) == "pet"
    assert folding.apply("pęť", RenderStyle.ETYMOLOGICAL) == "pęt"
