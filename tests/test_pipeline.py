from __future__ import annotations

import pytest

from gedcom_chart import ChartPipeline, ChartRequest, run_chart
from gedcom_chart.config import ChartConfig
from gedcom_chart.core.exceptions import ChartExecutionError, RootNotFoundError, UsageError
from gedcom_chart.graph import SelectionMode


def test_run_chart_for_person_root(siboro_path):
    result = run_chart(ChartRequest(input_path=str(siboro_path), root_id="I3"))

    assert result.lines[0] == "Johannes M. Siboro (1)"
    assert result.stats["people"] == 17
    assert result.stats["families"] == 7
    assert result.stats["visible_people"] == 5
    assert result.stats["lines"] == len(result.lines)


def test_request_options_override_config(siboro_path):
    config = ChartConfig({"chart": {"initials": True, "family_separator": True}})
    request = ChartRequest(
        input_path=str(siboro_path),
        root_id="I3",
        use_initials=False,
        family_separator=False,
    )

    result = ChartPipeline(request, config=config).run()

    assert result.lines == [
        "Johannes Martua Siboro (1)",
        "|   + Tiurma Hutabarat",
        "|-Arnold Pardamean Siboro (2)",
        "|   + Maria Simanjuntak",
    ]


def test_config_defaults_apply_when_request_is_silent(siboro_path):
    config = ChartConfig({"chart": {"initials": False, "family_separator": False}})

    result = ChartPipeline(ChartRequest(str(siboro_path), root_id="I6"), config=config).run()

    assert result.lines == ["Arnold Pardamean Siboro (1)"]


def test_config_honorifics(siboro_path):
    config = ChartConfig({"chart": {"honorifics": ["Datu"]}})

    result = ChartPipeline(ChartRequest(str(siboro_path), root_id="I1"), config=config).run()

    assert result.lines[0] == "Ompu R. Siboro (1)"


def test_stats_only_run_renders_nothing(siboro_path):
    request = ChartRequest(str(siboro_path), root_id="I3", mode=SelectionMode.BLOOD)

    result = ChartPipeline(request).run(render=False)

    assert result.lines == []
    assert result.stats["visible_people"] == 10
    assert result.stats["visible_families"] == 6


def test_missing_root_propagates_lookup_error(siboro_path):
    with pytest.raises(RootNotFoundError):
        run_chart(ChartRequest(str(siboro_path), root_id="I99"))


def test_malformed_file_is_wrapped(tmp_path):
    path = tmp_path / "broken.ged"
    path.write_text("0 HEAD\nnot a gedcom line\n", encoding="utf-8")

    with pytest.raises(ChartExecutionError) as excinfo:
        run_chart(ChartRequest(str(path)))
    assert excinfo.value.input_path == str(path)


def test_missing_file_is_wrapped(tmp_path):
    with pytest.raises(ChartExecutionError):
        run_chart(ChartRequest(str(tmp_path / "absent.ged")))


def test_root_id_is_normalized(siboro_path):
    result = run_chart(ChartRequest(str(siboro_path), root_id=" i3 "))

    assert result.lines[0] == "Johannes M. Siboro (1)"


def test_malformed_root_is_rejected_before_loading(tmp_path):
    with pytest.raises(UsageError):
        run_chart(ChartRequest(str(tmp_path / "never-read.ged"), root_id="Z99"))
