from wordfinder.scoring import points


def test_one_point_per_letter():
    assert points("works") == 5
    assert points("silk") == 4
    assert points("") == 0
