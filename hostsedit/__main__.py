#!/usr/bin/env python3
from hostsedit.utils.cli import main

if __name__ == "__main__":
    main()
