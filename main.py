#!/usr/bin/env python3
"""
Main Application Entry Point

Inspect how full names resolve against a namespace module.

    python main.py resolve service:session --namespace myapp.services
    python main.py known service --namespace myapp.services
"""

import sys

from ember_owner.cli import main

if __name__ == '__main__':
    sys.exit(main())
