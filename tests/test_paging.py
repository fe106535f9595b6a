import pytest

from ossim.paging import (
    PageEvent,
    PagingResult,
    fifo_replacement,
    lru_replacement,
    optimal_replacement,
)

REFERENCES = [7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2, 3]


def _all_policies(references, frame_count):
    return [
        fifo_replacement(references, frame_count),
        lru_replacement(references, frame_count),
        optimal_replacement(references, frame_count),
    ]


def test_fifo_fault_count_on_sample():
    assert fifo_replacement(REFERENCES, 3).faults == 10


def test_lru_fault_count_on_sample():
    assert lru_replacement(REFERENCES, 3).faults == 9


def test_optimal_fault_count_on_sample():
    assert optimal_replacement(REFERENCES, 3).faults == 7


def test_rejects_bad_frame_counts():
    with pytest.raises(ValueError):
        fifo_replacement(REFERENCES, 0)
    with pytest.raises(ValueError):
        fifo_replacement([1, 2], 3)
    with pytest.raises(ValueError):
        lru_replacement(REFERENCES, 0)
    with pytest.raises(ValueError):
        lru_replacement([1, 2], 3)
    with pytest.raises(ValueError):
        optimal_replacement(REFERENCES, 0)
    with pytest.raises(ValueError):
        optimal_replacement([1, 2], 3)


@pytest.mark.parametrize("frame_count", [1, 2, 3, 4])
def test_trace_invariants(frame_count):
    results = [
        fifo_replacement(REFERENCES, frame_count),
        lru_replacement(REFERENCES, frame_count),
        optimal_replacement(REFERENCES, frame_count),
    ]
    for result in results:
        assert result.faults + result.hits == len(REFERENCES)
        assert [e.page for e in result.events] == REFERENCES
        previous: tuple = ()
        for index, event in enumerate(result.events):
            assert event.page in event.frames
            if index >= frame_count:
                assert len(event.frames) == frame_count
                assert event.hit == (event.page in previous)
                if event.hit:
                    assert event.frames == previous
                else:
                    assert event.evicted in previous
            previous = event.frames
        assert result.frames == result.events[-1].frames


def test_initial_load_faults_even_on_repeat():
    results = [
        fifo_replacement([1, 1, 2], 2),
        lru_replacement([1, 1, 2], 2),
        optimal_replacement([1, 1, 2], 2),
    ]
    for result in results:
        assert not result.events[0].hit
        assert not result.events[1].hit
        assert result.events[1].frames == (1, 1)


def test_single_frame_hits_only_on_repeat():
    refs = [1, 2, 2, 1, 3, 3, 3, 1]
    results = [
        fifo_replacement(refs, 1),
        lru_replacement(refs, 1),
        optimal_replacement(refs, 1),
    ]
    for result in results:
        for prev, event in zip(refs, result.events[1:]):
            assert event.hit == (event.page == prev)


def test_all_policies_agree_on_hit_free_trace():
    refs = [1, 2, 3]
    results = _all_policies(refs, 3)
    assert [r.faults for r in results] == [3, 3, 3]
    assert [r.hits for r in results] == [0, 0, 0]


def test_fifo_evicts_in_arrival_order():
    refs = list(range(10))
    result = fifo_replacement(refs, 3)
    evicted = [e.evicted for e in result.events if e.evicted is not None]
    assert evicted == refs[:7]


def test_lru_evicts_least_recent_page():
    result = lru_replacement([1, 2, 1, 3], 2)
    assert result.events[-1].evicted == 2
    assert result.frames == (1, 3)


def test_lru_on_distinct_pages_matches_fifo():
    refs = list(range(10))
    assert lru_replacement(refs, 4).events == fifo_replacement(refs, 4).events


def test_optimal_keeps_page_needed_more_often():
    result = optimal_replacement([1, 2, 3, 1, 1, 2], 2)
    assert result.events[2].evicted == 2
    assert result.events[2].frames == (1, 3)


def test_optimal_ties_go_to_last_frame():
    refs = list(range(10))
    result = optimal_replacement(refs, 3)
    evicted = [e.evicted for e in result.events if e.evicted is not None]
    assert evicted == refs[2:9]


def test_result_properties_from_events():
    events = (
        PageEvent(1, False, (1,)),
        PageEvent(1, True, (1,)),
        PageEvent(2, False, (2,), 1),
    )
    result = PagingResult(1, events)
    assert result.faults == 2
    assert result.hits == 1
    assert result.frames == (2,)