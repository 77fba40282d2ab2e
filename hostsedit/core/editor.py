#!/usr/bin/env python3
import logging

from hostsedit import config
from hostsedit.core.diff import commit
from hostsedit.file_handlers.hosts_file import HostsFileHandler, is_comment_or_blank
from hostsedit.security.privilege import SystemPrivilegeGate


class HostsEditor:
    def __init__(self, argv, hosts_handler=None, gate=None, notify=print):
        # Arguments are kept verbatim so an elevated relaunch can replay them
        self.argv = list(argv)
        self.hosts_handler = hosts_handler or HostsFileHandler()
        self.gate = gate or SystemPrivilegeGate()
        self.notify = notify
        self.lines = self.hosts_handler.load()

    def entries(self):
        return [line for line in self.lines if not is_comment_or_blank(line)]

    def list_entries(self):
        """Print every entry, or a notice when there are none"""
        entries = self.entries()
        for line in entries:
            self.notify(line)
        if not entries:
            self.notify(config.EMPTY_NOTICE)

    def remove(self, names):
        """Drop every entry that has one of the names as a token"""
        for name in names:
            wanted = name.casefold()
            kept = []
            for line in self.lines:
                if not is_comment_or_blank(line) and wanted in (t.casefold() for t in line.split()):
                    logging.debug(f"Dropping '{line}' for {name}")
                    continue
                kept.append(line)
            self.lines = kept

    def add(self, address, name):
        self.lines.append(f"{address} {name}")

    def block(self, names):
        for name in names:
            self.add(config.BLOCK_ADDRESS, name)

    def commit(self):
        result = commit(self.hosts_handler, self.lines, self.gate, self.argv, self.notify)
        logging.info(f"Commit result: {result.value}")
        return result
