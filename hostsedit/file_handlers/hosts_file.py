#!/usr/bin/env python3
import os
import logging

from hostsedit import config


def is_comment_or_blank(line):
    """True for '#' comments and whitespace-only lines"""
    return line.startswith('#') or not line.strip()


class HostsFileHandler:
    # Bytes that are not valid UTF-8 are carried through unchanged
    errors = "surrogateescape"

    def __init__(self, hosts_path=None, encoding="utf-8", read_encoding="utf-8-sig"):
        self.hosts_path = hosts_path or config.hosts_path()
        self.encoding = encoding
        self.read_encoding = read_encoding

    def read(self):
        """Yield the lines of the hosts file in order, without line terminators.

        Every call opens the file again, so each iteration sees the current
        on-disk state. A missing or unreadable file raises OSError on the
        first step of the iteration. A leading byte order mark is dropped.
        """
        logging.debug(f"Reading hosts file {self.hosts_path}")
        with open(self.hosts_path, 'r', encoding=self.read_encoding, errors=self.errors) as f:
            for line in f:
                if line.endswith('\n'):
                    line = line[:-1]
                yield line

    def load(self):
        """Read the whole hosts file into a list"""
        lines = list(self.read())
        logging.info(f"Loaded {len(lines)} lines from {self.hosts_path}")
        return lines

    def write(self, lines):
        """Overwrite the hosts file, ending every line with the platform line separator"""
        lines = list(lines)
        content = os.linesep.join(lines) + os.linesep if lines else ""
        with open(self.hosts_path, 'w', encoding=self.encoding, errors=self.errors, newline='') as f:
            f.write(content)
        logging.info(f"Wrote {len(lines)} lines to {self.hosts_path}")
