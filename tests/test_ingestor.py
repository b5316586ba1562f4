from __future__ import annotations

from gedcom_chart.graph import EventKind, GraphIngestor, RecordEvent, clean_id, ingest
from gedcom_chart.core.pipeline import load_graph

E = EventKind


def _person(pid, *fields):
    yield RecordEvent(E.PERSON_START, pid)
    for kind, value in fields:
        yield RecordEvent(kind, value)
    yield RecordEvent(E.PERSON_END, pid)


def _family(fid, *fields):
    yield RecordEvent(E.FAMILY_START, fid)
    for kind, value in fields:
        yield RecordEvent(kind, value)
    yield RecordEvent(E.FAMILY_END, fid)


def test_clean_id_strips_markers_and_placeholder():
    assert clean_id("@I12@") == "I12"
    assert clean_id("F3") == "F3"
    assert clean_id("@I-1@") is None
    assert clean_id(None) is None


def test_person_fields_are_collected():
    graph = ingest(
        _person(
            "@I3@",
            (E.NAME, "Johannes /Siboro/"),
            (E.PARENT_FAMILY, "@F1@"),
            (E.CHILD_FAMILY, "@F2@"),
            (E.CHILD_FAMILY, "@F3@"),
        )
    )

    person = graph.get_person("I3")
    assert person.name == "Johannes /Siboro/"
    assert person.parent_family == "F1"
    assert person.child_families == ["F2", "F3"]


def test_first_name_wins():
    graph = ingest(_person("@I5@", (E.NAME, "Tiurma /Hutabarat/"), (E.NAME, "Tiur /Hutabarat/")))

    assert graph.get_person("I5").name == "Tiurma /Hutabarat/"


def test_last_parent_family_wins():
    graph = ingest(_person("@I1@", (E.PARENT_FAMILY, "@F1@"), (E.PARENT_FAMILY, "@F9@")))

    assert graph.get_person("I1").parent_family == "F9"


def test_family_drops_unknown_parent():
    graph = ingest(
        _family("@F5@", (E.PARENT, "@I-1@"), (E.PARENT, "@I12@"), (E.CHILD, "@I13@"))
    )

    family = graph.get_family("F5")
    assert family.parents == ["I12"]
    assert family.children == ["I13"]


def test_children_keep_record_order():
    graph = ingest(
        _family("@F1@", (E.CHILD, "@I7@"), (E.CHILD, "@I3@"), (E.CHILD, "@I4@"))
    )

    assert graph.get_family("F1").children == ["I7", "I3", "I4"]


def test_visibility_default_depends_on_root_filter():
    events = list(_person("@I1@")) + list(_family("@F1@"))

    everything = ingest(events, root_requested=False)
    assert everything.get_person("I1").visible
    assert everything.get_family("F1").visible

    filtered = ingest(events, root_requested=True)
    assert not filtered.get_person("I1").visible
    assert not filtered.get_family("F1").visible


def test_feed_resets_cursor_after_record_end():
    ingestor = GraphIngestor()
    for event in _person("@I1@", (E.NAME, "A /B/")):
        ingestor.feed(event)

    assert ingestor.current_person is None
    assert "I1" in ingestor.graph.persons


def test_placeholder_individual_record_is_skipped():
    events = [
        *_person("@I-1@", (E.NAME, "Unknown /Person/"), (E.CHILD_FAMILY, "@F1@")),
        *_person("@I2@", (E.NAME, "Known /Person/")),
    ]

    graph = ingest(events)

    assert list(graph.persons) == ["I2"]
    assert "" not in graph.persons
    assert graph.get_person("I2").name == "Known /Person/"


def test_parent_family_references_existing_family_or_none(siboro_path):
    graph = load_graph(siboro_path)

    assert len(graph.persons) == 17
    assert len(graph.families) == 7
    for person in graph.persons.values():
        assert person.parent_family is None or person.parent_family in graph.families


def test_mock_file_graph_shape(siboro_path):
    graph = load_graph(siboro_path)

    assert graph.get_person("I3").child_families == ["F2", "F3"]
    assert graph.get_person("I17").name == "Lamhot /Siboro/"
    assert graph.get_family("F1").parents == ["I1", "I2"]
    assert graph.get_family("F0").parents == ["I14"]
    assert graph.get_family("F5").parents == ["I12"]
