from __future__ import annotations

import logging

from dashboard.status import StatusEntry, StatusLog


def test_status_log_keeps_latest_entries():
    log = StatusLog(limit=3)
    for i in range(5):
        log.info(f"step {i}")

    assert [e.message for e in log.entries] == ["step 2", "step 3", "step 4"]


def test_status_log_notifies_listeners_and_logging(caplog):
    seen: list[StatusEntry] = []
    log = StatusLog()
    log.subscribe(seen.append)

    with caplog.at_level(logging.INFO, logger="dashboard.status"):
        log.error("ERROR: API rate limit reached")
        log.success("Loaded 9 demo articles")

    assert [(e.level, e.message) for e in seen] == [
        ("error", "ERROR: API rate limit reached"),
        ("success", "Loaded 9 demo articles"),
    ]
    assert caplog.records[0].levelno == logging.ERROR
    assert caplog.records[0].status_message == "ERROR: API rate limit reached"
    assert caplog.records[1].levelno == logging.INFO
