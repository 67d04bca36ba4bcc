import dataclasses

import pytest

from charmarkov.models.markov import (
    CharData,
    FollowList,
    LanguageModel,
    MarkovConfig,
    calculate_probabilities,
)


def test_calculate_probabilities():
    counts = [1, 2, 1]
    pairs = calculate_probabilities(counts)
    assert pairs == [(0.25, 0.25), (0.5, 0.75), (0.25, 1.0)]
    assert counts == [1, 2, 1]


def test_calculate_probabilities_sums_to_one():
    counts = [3, 7, 1, 1, 5, 2, 9]
    pairs = calculate_probabilities(counts)
    assert sum(p for p, _ in pairs) == pytest.approx(1.0, abs=1e-9)
    cps = [cp for _, cp in pairs]
    assert cps == sorted(cps)
    assert cps[-1] == pytest.approx(1.0, abs=1e-9)


def test_calculate_probabilities_rejects_empty():
    with pytest.raises(ValueError):
        calculate_probabilities([])
    with pytest.raises(ValueError):
        calculate_probabilities([0, 0])


@pytest.mark.parametrize("window_length", [0, -1, True, 2.5])
def test_config_rejects_bad_window_length(window_length):
    with pytest.raises(ValueError):
        MarkovConfig(window_length=window_length)


def test_follow_list_keeps_first_occurrence_order():
    probs = FollowList()
    for c in "zyzxy":
        probs.update(c)
    assert probs.chars() == ["z", "y", "x"]
    assert [cd.count for cd in probs.freeze()] == [2, 2, 1]


def test_follow_list_freeze():
    probs = FollowList()
    for c in "xyyz":
        probs.update(c)
    frozen = probs.freeze()
    assert frozen == (
        CharData("x", 1, 0.25, 0.25),
        CharData("y", 2, 0.5, 0.75),
        CharData("z", 1, 0.25, 1.0),
    )
    with pytest.raises(dataclasses.FrozenInstanceError):
        frozen[0].count = 5


def test_language_model_is_read_only():
    model = LanguageModel(2, {"ab": (CharData("c", 1, 1.0, 1.0),)})
    assert len(model) == 1
    assert list(model) == ["ab"]
    assert model["ab"][0].chr == "c"
    assert model.get("zz") is None
    with pytest.raises(TypeError):
        model["cd"] = ()


def test_language_model_rejects_partial_windows():
    with pytest.raises(ValueError):
        LanguageModel(3, {"ab": (CharData("c", 1, 1.0, 1.0),)})


def test_language_model_str():
    model = LanguageModel(1, {
        "a": (CharData("b", 2, 1.0, 1.0),),
        "b": (CharData("a", 1, 1.0, 1.0),),
    })
    assert str(model) == "a : ((b 2 1.0 1.0))\nb : ((a 1 1.0 1.0))\n"
    assert str(LanguageModel(1, {})) == ""
