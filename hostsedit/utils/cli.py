#!/usr/bin/env python3
import sys
import logging

from hostsedit import config
from hostsedit.core.editor import HostsEditor

PROG = "hostsedit"

USAGE = f"""Usage:

{PROG} list - list entries in hosts file
{PROG} remove [name] - removes name from hosts file
{PROG} add [ip name] - adds ip and name to hosts file
{PROG} block [name] - adds {config.BLOCK_ADDRESS} and name to hosts file"""


def print_usage(notify=print):
    notify(USAGE)


def configure_logging():
    """Log to stderr, and to a file as well when one is configured"""
    handlers = [logging.StreamHandler()]
    log_file = config.log_file()
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=config.log_level(),
        format=config.LOG_FORMAT,
        handlers=handlers
    )


def run(argv, editor):
    """Apply the verbs in argv to the editor, left to right.

    remove, add and block take every argument after them, so a second
    mutating verb on the same command line is read as a name.
    """
    if not argv:
        editor.list_entries()
        return

    i = 0
    while i < len(argv):
        verb = argv[i].casefold()
        rest = argv[i + 1:]
        if verb == "list":
            editor.list_entries()
            i += 1
        elif verb == "remove" and rest:
            editor.remove(rest)
            i = len(argv)
            editor.commit()
        elif verb == "add" and rest:
            # A trailing address without a name is dropped
            for j in range(0, len(rest) - 1, 2):
                editor.add(rest[j], rest[j + 1])
            i = len(argv)
            editor.commit()
        elif verb == "block" and rest:
            editor.block(rest)
            i = len(argv)
            editor.commit()
        else:
            logging.debug(f"Unrecognized argument: {argv[i]}")
            print_usage(editor.notify)
            i += 1


def main(argv=None):
    """Main entry point"""
    if argv is None:
        argv = sys.argv[1:]

    configure_logging()

    # Entries may hold bytes that are not valid UTF-8; print them back as they were read
    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure:
        reconfigure(errors="surrogateescape")

    try:
        editor = HostsEditor(argv)
        run(argv, editor)
    except OSError as e:
        logging.error(f"Failed to update hosts file: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
