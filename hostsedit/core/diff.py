#!/usr/bin/env python3
import enum
import logging

from hostsedit import config
from hostsedit.exceptions import ElevationError

_END = object()


class CommitResult(enum.Enum):
    UNCHANGED = "unchanged"
    WRITTEN = "written"
    RELAUNCHED = "relaunched"
    RELAUNCH_FAILED = "relaunch_failed"


def same_line(a, b):
    return a.casefold() == b.casefold()


def diff_lines(old_lines, new_lines, notify=print):
    """Compare two line sequences position by position and report what changed.

    Both sequences are consumed lazily through their own cursor. Matching
    lines advance both cursors. Otherwise the old line is reported as a
    removal, and once the old side is exhausted every remaining new line is
    an addition. There is no realignment after a mismatch, so an insertion
    in the middle shows up as every later line removed and added again.

    Returns True if anything was added or removed.
    """
    old_iter = iter(old_lines)
    new_iter = iter(new_lines)
    old = next(old_iter, _END)
    new = next(new_iter, _END)
    has_diffs = False

    while old is not _END or new is not _END:
        if old is not _END and new is not _END and same_line(old, new):
            old = next(old_iter, _END)
            new = next(new_iter, _END)
        elif old is not _END:
            notify(f"Removing {old}.")
            has_diffs = True
            old = next(old_iter, _END)
        else:
            notify(f"Adding {new}.")
            has_diffs = True
            new = next(new_iter, _END)

    if not has_diffs:
        notify(config.NO_CHANGES_NOTICE)
    return has_diffs


def commit(hosts_handler, new_lines, gate, argv, notify=print):
    """Write new_lines to the hosts file if they differ from what is on disk.

    The comparison is made against a fresh read of the file. Without
    elevated rights nothing is written; the whole command line is handed to
    an elevated copy of the program instead.
    """
    if not diff_lines(hosts_handler.read(), new_lines, notify):
        return CommitResult.UNCHANGED

    if gate.is_elevated():
        hosts_handler.write(new_lines)
        return CommitResult.WRITTEN

    logging.info("Not elevated, relaunching to apply changes")
    try:
        gate.relaunch_elevated(argv)
    except ElevationError as e:
        logging.debug(f"Elevated relaunch failed: {e}")
        return CommitResult.RELAUNCH_FAILED
    return CommitResult.RELAUNCHED
