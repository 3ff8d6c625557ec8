"""Tests for the reportable-event filter.

Property-based checks use hypothesis to cover arbitrary types, actions and
exit codes; the example-based tests pin the documented edge cases.
"""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from docker_watcher.models.events import Actor, RuntimeEvent
from docker_watcher.reporting.filter import is_reportable


def _make_event(
    type_: str = "container",
    action: str = "die",
    exit_code: str | None = "137",
) -> RuntimeEvent:
    attributes = {"name": "web1", "image": "nginx:latest"}
    if exit_code is not None:
        attributes["exitCode"] = exit_code
    return RuntimeEvent(type=type_, action=action, actor=Actor(id="abc123", attributes=attributes))


_exit_codes = st.one_of(st.none(), st.text(max_size=5))


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


@given(type_=st.text().filter(lambda t: t != "container"), action=st.text(), exit_code=_exit_codes)
def test_non_container_events_never_reportable(type_: str, action: str, exit_code: str | None) -> None:
    assert not is_reportable(_make_event(type_=type_, action=action, exit_code=exit_code))


@given(action=st.text().filter(lambda a: a not in ("die", "exec_die")), exit_code=_exit_codes)
def test_other_actions_never_reportable(action: str, exit_code: str | None) -> None:
    assert not is_reportable(_make_event(action=action, exit_code=exit_code))


@given(action=st.sampled_from(["die", "exec_die"]), exit_code=st.text(min_size=1).filter(lambda c: c != "0"))
def test_exit_actions_with_non_zero_code_reportable(action: str, exit_code: str) -> None:
    assert is_reportable(_make_event(action=action, exit_code=exit_code))


# ---------------------------------------------------------------------------
# Edge cases
# ---------------------------------------------------------------------------


class TestExitCode:
    def test_zero_exit_code_not_reportable(self) -> None:
        assert not is_reportable(_make_event(exit_code="0"))

    def test_137_reportable(self) -> None:
        assert is_reportable(_make_event(exit_code="137"))

    def test_exec_die_zero_not_reportable(self) -> None:
        assert not is_reportable(_make_event(action="exec_die", exit_code="0"))

    def test_missing_exit_code_not_reportable(self) -> None:
        """An exit event without an exitCode attribute is ignored."""
        assert not is_reportable(_make_event(exit_code=None))

    def test_exit_code_compared_as_string(self) -> None:
        """Only the exact string "0" means success."""
        assert is_reportable(_make_event(exit_code="00"))
        assert is_reportable(_make_event(exit_code=""))


class TestTypeAndAction:
    def test_action_match_is_case_sensitive(self) -> None:
        assert not is_reportable(_make_event(action="DIE"))

    def test_exec_die_reportable(self) -> None:
        assert is_reportable(_make_event(action="exec_die", exit_code="1"))

    def test_kill_and_stop_not_reportable(self) -> None:
        assert not is_reportable(_make_event(action="kill"))
        assert not is_reportable(_make_event(action="stop"))
