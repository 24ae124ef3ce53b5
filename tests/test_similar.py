from utilbox.similar import SimilarComparator, similarity


def test_similarity():
    _, ok = similarity("hello", "he", 0.3)
    assert ok is True


def test_identical_strings_have_zero_rate():
    rate, ok = SimilarComparator("hello", "hello").similar(0.1)
    assert rate == 0
    assert ok is False


def test_rate_grows_with_difference():
    near, _ = similarity("hello", "hellp", 0.0)
    far, _ = similarity("hello", "xyzzy", 0.0)
    assert 0 < near < far


def test_high_threshold_not_reached():
    _, ok = similarity("hello", "he", 0.9)
    assert ok is False