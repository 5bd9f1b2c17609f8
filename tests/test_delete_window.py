from typing import List

import pytest

from hostsift.exceptions import PersistenceError, StorageError, WorkflowError
from hostsift.hosts import Host
from hostsift.windows import Choice, DeletePopupWindow, ShowData


class RecordingSaver:
    def __init__(self, fail: bool = False) -> None:
        self.calls: List[List[Host]] = []
        self.fail = fail

    def __call__(self, hosts: List[Host]) -> None:
        self.calls.append(list(hosts))
        if self.fail:
            raise StorageError("disk full")


def _hosts(*names: str) -> List[Host]:
    return [Host(name=n) for n in names]


def _names(items) -> List[str]:
    return [h.name for h in items]


def _shown(saver: RecordingSaver, index: int = 1, **kwargs) -> DeletePopupWindow[Host]:
    canonical = _hosts("a", "b", "c")
    window: DeletePopupWindow[Host] = DeletePopupWindow(saver, **kwargs)
    window.show(ShowData(index=index, item=canonical[index], collection=canonical))
    return window


# ---------- Showing ----------


def test_initially_inactive() -> None:
    window: DeletePopupWindow[Host] = DeletePopupWindow(RecordingSaver())
    assert window.is_active is False
    assert window.target is None
    assert window.prompt() == ""
    assert window.accept() is None


def test_show_captures_target_and_defaults_to_cancel() -> None:
    window = _shown(RecordingSaver())
    assert window.is_active
    assert window.cursor is Choice.CANCEL
    assert window.target is not None
    assert window.target.index == 1
    assert window.prompt() == "Delete `b` record?"


def test_confirm_by_default() -> None:
    window = _shown(RecordingSaver(), confirm_by_default=True)
    assert window.cursor is Choice.CONFIRM


def test_show_resets_cursor() -> None:
    window = _shown(RecordingSaver())
    window.previous()
    window.dismiss()
    canonical = _hosts("a", "b")
    window.show(ShowData(index=0, item=canonical[0], collection=canonical))
    assert window.cursor is Choice.CANCEL


def test_show_while_active_raises() -> None:
    window = _shown(RecordingSaver())
    with pytest.raises(WorkflowError):
        window.show(ShowData(index=0, item=Host(name="a"), collection=_hosts("a")))
    assert window.target is not None and window.target.item.name == "b"


def test_show_with_index_outside_snapshot_raises() -> None:
    window: DeletePopupWindow[Host] = DeletePopupWindow(RecordingSaver())
    with pytest.raises(WorkflowError):
        window.show(ShowData(index=3, item=Host(name="x"), collection=_hosts("a", "b", "c")))
    assert window.is_active is False


def test_toggle() -> None:
    window: DeletePopupWindow[Host] = DeletePopupWindow(RecordingSaver())
    data = ShowData(index=0, item=Host(name="a"), collection=_hosts("a"))
    window.toggle(data)
    assert window.is_active
    window.toggle(data)
    assert window.is_active is False


# ---------- Cursor ----------


def test_cursor_moves() -> None:
    window = _shown(RecordingSaver())
    window.previous()
    assert window.cursor is Choice.CONFIRM
    window.next()
    assert window.cursor is Choice.CANCEL


def test_cursor_is_noop_while_inactive() -> None:
    window: DeletePopupWindow[Host] = DeletePopupWindow(RecordingSaver())
    window.previous()
    assert window.cursor is Choice.CANCEL


# ---------- Accepting ----------


def test_confirm_removes_target_and_saves() -> None:
    saver = RecordingSaver()
    window = _shown(saver)
    window.previous()
    result = window.accept()
    assert result is not None
    assert _names(result) == ["a", "c"]
    assert [_names(c) for c in saver.calls] == [["a", "c"]]
    assert window.is_active is False


def test_cancel_does_not_save() -> None:
    saver = RecordingSaver()
    window = _shown(saver)
    window.next()
    assert window.accept() is None
    assert saver.calls == []
    assert window.is_active is False


@pytest.mark.parametrize("confirm", [True, False])
def test_dismiss_never_saves(confirm: bool) -> None:
    saver = RecordingSaver()
    window = _shown(saver)
    if confirm:
        window.previous()
    window.dismiss()
    assert window.is_active is False
    assert saver.calls == []
    assert window.accept() is None


def test_commits_against_snapshot_not_live_collection() -> None:
    saver = RecordingSaver()
    canonical = _hosts("a", "b", "c")
    window: DeletePopupWindow[Host] = DeletePopupWindow(saver, confirm_by_default=True)
    window.show(ShowData(index=2, item=canonical[2], collection=canonical))
    canonical.insert(0, Host(name="z"))
    result = window.accept()
    assert result is not None
    assert _names(result) == ["a", "b"]


def test_save_failure_keeps_prompt_open() -> None:
    saver = RecordingSaver(fail=True)
    window = _shown(saver, confirm_by_default=True)
    with pytest.raises(PersistenceError) as excinfo:
        window.accept()
    assert isinstance(excinfo.value.__cause__, StorageError)
    assert window.is_active
    assert window.target is not None and window.target.index == 1

    saver.fail = False
    result = window.accept()
    assert result is not None
    assert _names(result) == ["a", "c"]
    assert len(saver.calls) == 2


def test_show_with_item_not_at_index_raises() -> None:
    saver = RecordingSaver()
    canonical = _hosts("a", "b", "c")
    window: DeletePopupWindow[Host] = DeletePopupWindow(saver, confirm_by_default=True)
    with pytest.raises(WorkflowError):
        window.show(ShowData(index=0, item=canonical[1], collection=canonical))
    assert window.is_active is False
    assert window.accept() is None
    assert saver.calls == []
