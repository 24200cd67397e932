import socket

import pytest

from chunkwork.pool import greetings, main, map_chunks, processor_name, split_evenly


def test_processor_name_is_hostname():
    assert processor_name() == socket.gethostname()


def test_split_evenly_last_part_takes_remainder():
    items = list(range(1, 11))
    chunks = split_evenly(items, 3)
    assert [len(c) for c in chunks] == [3, 3, 4]


@pytest.mark.parametrize("parts", [1, 2, 3, 4, 7, 10, 15])
def test_split_evenly_concatenates_back(parts):
    items = list(range(23))
    chunks = split_evenly(items, parts)
    assert len(chunks) == parts
    assert [x for chunk in chunks for x in chunk] == items


def test_split_evenly_more_parts_than_items():
    chunks = split_evenly([5, 6], 4)
    assert [list(c) for c in chunks] == [[], [], [], [5, 6]]


def test_split_evenly_keeps_ranges():
    chunks = split_evenly(range(10, 20), 2)
    assert chunks == [range(10, 15), range(15, 20)]


@pytest.mark.parametrize("parts", [0, -1])
def test_split_evenly_rejects_bad_parts(parts):
    with pytest.raises(ValueError):
        split_evenly([1, 2, 3], parts)


def test_map_chunks_preserves_order():
    chunks = [[1, 2], [3], [4, 5, 6]]
    assert map_chunks(sum, chunks, 3) == [sum(c) for c in chunks]


def test_map_chunks_rejects_zero_workers():
    with pytest.raises(ValueError):
        map_chunks(len, [[1]], 0)


def test_greetings_one_per_rank():
    lines = greetings(3)
    name = socket.gethostname()
    assert lines == [
        f"Hello World from processor {name}, rank {rank} out of 3 processors"
        for rank in range(3)
    ]


def test_greetings_rejects_zero_workers():
    with pytest.raises(ValueError):
        greetings(0)


def test_main_prints_each_worker(capsys):
    assert main(["--workers", "4"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 4
    assert all(line.endswith("out of 4 processors") for line in lines)