import logging

import pytest

from diagram_copilot.errors import EmptyInputError, MalformedDecisionError
from diagram_copilot.models import DecisionStep, DiagramSettings, PlainStep
from diagram_copilot.segmenter import segment


def test_segment_plain_and_decision_steps() -> None:
    steps = segment("Gather requirements -> Design system -> If tests pass, Deploy,Rollback")

    assert steps == (
        PlainStep(text="Gather requirements"),
        PlainStep(text="Design system"),
        DecisionStep(condition="If tests pass", branches=("Deploy", "Rollback")),
    )


def test_segment_single_step() -> None:
    assert segment("Only step") == (PlainStep(text="Only step"),)


def test_segment_keeps_plain_text_verbatim() -> None:
    steps = segment("Collect  evidence -> Review (draft)")

    assert steps[0] == PlainStep(text="Collect  evidence")
    assert steps[1] == PlainStep(text="Review (draft)")


def test_segment_trims_surrounding_line_breaks_only() -> None:
    assert segment("Start audit -> Close audit\r\n") == (
        PlainStep(text="Start audit"),
        PlainStep(text="Close audit"),
    )
    assert segment("  Start audit -> Close audit") == (
        PlainStep(text="  Start audit"),
        PlainStep(text="Close audit"),
    )


@pytest.mark.parametrize(
    ("description", "position"),
    [
        (" -> ", 1),
        (" -> Ship", 1),
        ("Plan -> Ship -> ", 3),
        ("Plan -> Ship -> \n", 3),
    ],
)
def test_segment_delimiter_at_edge_leaves_blank_segment(description: str, position: int) -> None:
    with pytest.raises(EmptyInputError) as excinfo:
        segment(description)

    assert excinfo.value.position == position


def test_segment_decision_with_blank_condition_raises() -> None:
    with pytest.raises(MalformedDecisionError) as excinfo:
        segment("Plan -> , If a")

    assert excinfo.value.reason == "blank condition"
    assert excinfo.value.position == 2


def test_segment_decision_with_single_branch() -> None:
    (step,) = segment("If approved, Archive")

    assert step == DecisionStep(condition="If approved", branches=("Archive",))


def test_segment_decision_trims_branch_labels() -> None:
    (step,) = segment("If risk is high, Escalate, Accept ,Mitigate")

    assert isinstance(step, DecisionStep)
    assert step.condition == "If risk is high"
    assert step.branches == ("Escalate", "Accept", "Mitigate")


def test_segment_decision_marker_is_case_sensitive() -> None:
    (step,) = segment("if lowercase, stays plain")

    assert step == PlainStep(text="if lowercase, stays plain")


@pytest.mark.parametrize("description", ["", "   ", "\n\t"])
def test_segment_empty_description_raises(description: str) -> None:
    with pytest.raises(EmptyInputError) as excinfo:
        segment(description)

    assert excinfo.value.position is None


def test_segment_blank_segment_reports_position() -> None:
    with pytest.raises(EmptyInputError) as excinfo:
        segment("Plan ->   -> Ship")

    assert excinfo.value.position == 2


def test_segment_decision_without_delimiter_raises() -> None:
    with pytest.raises(MalformedDecisionError) as excinfo:
        segment("Plan -> If ready then ship")

    assert excinfo.value.position == 2
    assert excinfo.value.segment == "If ready then ship"
    assert "If ready then ship" in str(excinfo.value)


def test_segment_decision_with_zero_paths_raises() -> None:
    with pytest.raises(MalformedDecisionError) as excinfo:
        segment("If ready, ,")

    assert excinfo.value.reason == "no paths given"


def test_segment_decision_with_blank_path_raises() -> None:
    with pytest.raises(MalformedDecisionError):
        segment("If ready, Ship,,Hold")


def test_segment_uses_settings_delimiters() -> None:
    settings = DiagramSettings(step_delimiter=" | ", decision_marker="When", branch_delimiter="/")

    steps = segment("Receive invoice | When amount > 1000, Approve/Reject", settings)

    assert steps == (
        PlainStep(text="Receive invoice"),
        DecisionStep(condition="When amount > 1000", branches=("Approve", "Reject")),
    )


def test_segment_logs_step_count(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="diagram_copilot.segmenter"):
        segment("A -> B")

    assert "Segmented description into 2 steps" in caplog.text
