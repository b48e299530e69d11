import pytest

from eventgen.hepevt import HepEVTError, HepEVTReader

EVENT_TEXT = """2
1 11 0 0 0 0 1.5 -2.5 3.5 4.75 0.000511 0.1 0.2 0.3 0.4
2 -13 1 1 0 0 -1.0 2.0 -3.0 5.0 0.105 1.0 2.0 3.0 4.0
1
1 22 0 0 0 0 0.0 0.0 7.0 7.0 0.0 0.0 0.0 -1.0 0.0
"""


@pytest.fixture
def event_file(tmp_path):
    path = tmp_path / "events.hepevt"
    path.write_text(EVENT_TEXT)
    return path


def test_reads_particle_fields(event_file):
    with HepEVTReader(event_file) as reader:
        particles = reader.read_event()
    assert len(particles) == 2
    first = particles[0]
    assert first.pdg == 11
    assert first.generator_status == 1
    assert first.momentum == (1.5, -2.5, 3.5)
    assert first.mass == 0.000511
    assert first.vertex == (0.1, 0.2, 0.3)
    assert first.time == 0.4
    assert particles[1].pdg == -13
    assert particles[1].generator_status == 2


def test_reads_consecutive_events_then_fails(event_file):
    with HepEVTReader(event_file) as reader:
        reader.read_event()
        second = reader.read_event()
        assert [p.pdg for p in second] == [22]
        assert second[0].vertex == (0.0, 0.0, -1.0)
        with pytest.raises(HepEVTError, match="End of file reached"):
            reader.read_event()


def test_iteration_yields_all_events(event_file):
    with HepEVTReader(event_file) as reader:
        sizes = [len(event) for event in reader]
    assert sizes == [2, 1]


def test_truncated_event_raises(tmp_path):
    path = tmp_path / "short.hepevt"
    path.write_text("2\n1 11 0 0 0 0 1 2 3 4 0 0 0 0 0\n1 22 0 0\n")
    with HepEVTReader(path) as reader:
        with pytest.raises(HepEVTError, match="before reading all the hits"):
            reader.read_event()


def test_missing_file_raises(tmp_path):
    with pytest.raises(HepEVTError, match="Failed to open input stream"):
        HepEVTReader(tmp_path / "absent.hepevt")


def test_empty_file_has_no_events(tmp_path):
    path = tmp_path / "empty.hepevt"
    path.write_text("")
    with HepEVTReader(path) as reader:
        assert list(reader) == []
        with pytest.raises(HepEVTError):
            reader.read_event()


def test_event_without_particles(tmp_path):
    path = tmp_path / "zero.hepevt"
    path.write_text("0\n")
    with HepEVTReader(path) as reader:
        assert reader.read_event() == []
        with pytest.raises(HepEVTError):
            reader.read_event()


def test_malformed_record_raises(tmp_path):
    path = tmp_path / "bad.hepevt"
    path.write_text("1\n1 eleven 0 0 0 0 1 2 3 4 0 0 0 0 0\n")
    with HepEVTReader(path) as reader:
        with pytest.raises(HepEVTError, match="Malformed"):
            reader.read_event()


def test_close_closes_file(event_file):
    reader = HepEVTReader(event_file)
    reader.close()
    with pytest.raises(ValueError):
        reader.read_event()