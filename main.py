#!/usr/bin/env python3
"""
hostsedit - Edit the system hosts file from the command line.

Lists, adds, removes and blocks entries in the hosts file. Changes are
written only when they differ from what is on disk, and the program
re-launches itself with elevated rights when it needs them.

Usage:
    python main.py list                        # Show entries
    python main.py add 10.0.0.1 build.local    # Map a name to an address
    python main.py remove build.local          # Drop entries for a name
    python main.py block ads.example.com       # Map a name to 127.0.0.1
"""

from hostsedit.utils.cli import main

if __name__ == "__main__":
    main()
