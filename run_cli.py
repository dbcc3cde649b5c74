#!/usr/bin/env python
"""
Ado CLI Launcher

Run this file directly to start Ado without installing it.

Usage:
    python run_cli.py -?
    python run_cli.py -wait notepad.exe C:\Windows\win.ini
    python run_cli.py -k dir C:\
"""

import sys
from ado.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
