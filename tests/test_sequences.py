"""
tests/test_sequences.py - Sequence catalog
"""
import pytest

from intseq_gp.sequences import (UnknownSequenceError, available_sequences, describe,
                                 get_test_pairs)


def test_simple_is_the_identity():
    pairs = get_test_pairs('simple')
    assert len(pairs) == 20
    assert all(x == expected for x, expected in pairs)


@pytest.mark.parametrize('seq_id, head', [
    ('A000217', [0, 1, 3, 6, 10]),
    ('A000290', [0, 1, 4, 9, 16]),
    ('A000292', [0, 1, 4, 10, 20]),
    ('A000578', [0, 1, 8, 27, 64]),
    ('A037270', [0, 1, 10, 45, 136]),
])
def test_first_terms(seq_id, head):
    assert [expected for _, expected in get_test_pairs(seq_id)[:5]] == head


def test_ids_are_case_insensitive_and_accept_keywords():
    assert get_test_pairs(':a000292') == get_test_pairs('A000292')


def test_unknown_sequence():
    with pytest.raises(UnknownSequenceError):
        get_test_pairs('A999999')
    with pytest.raises(KeyError):
        describe('nope')


def test_catalog_lists_simple_first():
    assert available_sequences()[0] == 'simple'
    assert 'A037270' in available_sequences()
