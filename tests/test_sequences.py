import pytest

from probset.sequences import count_protein_sequences, split_teams


def _gap(a, b, labels):
    first = sum(x for x, label in zip(a, labels) if label == 1)
    second = sum(y for y, label in zip(b, labels) if label == 2)
    return abs(first - second)


def test_repeated_codon_sequences():
    assert count_protein_sequences("AAAAAA", {"AAA": "K"}) == 2


def test_too_short_strand_has_no_sequences():
    assert count_protein_sequences("AA", {"AAA": "K"}) == 0


def test_mapping_and_pairs_agree():
    table = {"ATG": "M", "TGA": "X", "GAT": "D"}
    dna = "ATGATGACGT"
    assert count_protein_sequences(dna, table) == count_protein_sequences(dna, list(table.items()))


def test_duplicate_codon_keeps_first_entry():
    dna = "AAAAAACCC"
    with_duplicate = [("AAA", "K"), ("AAA", "N"), ("CCC", "P")]
    without = [("AAA", "K"), ("CCC", "P")]
    assert count_protein_sequences(dna, with_duplicate) == count_protein_sequences(dna, without)


def test_longer_strand_never_has_fewer_sequences():
    table = {"ACG": "T", "GTA": "V", "CAT": "H"}
    dna = "ACGTACATG"
    assert count_protein_sequences(dna, table) <= count_protein_sequences(dna + "ACGTCAT", table)


def test_extra_amino_acid_never_decreases_count():
    dna = "ACGTACGTACGT"
    small = {"ACG": "T"}
    large = {"ACG": "T", "CGT": "R"}
    assert count_protein_sequences(dna, small) <= count_protein_sequences(dna, large)


def test_result_is_reduced_modulo():
    dna = "A" * 300
    table = {"AAA": "K", "AAA ".strip(): "K"}
    assert 0 <= count_protein_sequences(dna, table) < 1_000_000_007


def test_invalid_nucleotide_raises():
    with pytest.raises(ValueError):
        count_protein_sequences("ACGX", {"ACG": "T"})


def test_invalid_codon_length_raises():
    with pytest.raises(ValueError):
        count_protein_sequences("ACGT", {"AC": "T"})


def test_two_people_split():
    assert split_teams([1, 1], [1, 1]) == [1, 2]


def test_split_has_equal_team_sizes():
    a = [3, 8, 1, 9, 4, 7]
    b = [2, 6, 5, 1, 8, 3]
    labels = split_teams(a, b)
    assert len(labels) == len(a)
    assert labels.count(1) == labels.count(2) == 3


def test_split_beats_simple_splits():
    a = [10, 3, 7, 2, 9, 1, 5, 6]
    b = [4, 8, 2, 7, 1, 9, 3, 5]
    labels = split_teams(a, b)
    naive = [1] * 4 + [2] * 4
    assert _gap(a, b, labels) <= _gap(a, b, naive)
    assert _gap(a, b, labels) <= _gap(a, b, naive[::-1])


def test_symmetric_scores_start_with_team_one():
    values = [4, 9, 2, 7, 5, 1]
    labels = split_teams(values, values)
    assert labels[0] == 1


def test_empty_split():
    assert split_teams([], []) == []


def test_odd_count_raises():
    with pytest.raises(ValueError):
        split_teams([1, 2, 3], [1, 2, 3])


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        split_teams([1, 2], [1, 2, 3, 4])