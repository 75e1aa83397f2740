#!/usr/bin/env python3
"""
RPC Stub Generator

Describes Python service classes and generates TypeScript interface
modules for cross-language RPC clients.

Usage:
    python generate_stubs.py services.py Inspector --output-dir generated/
    python generate_stubs.py services.py Inspector --generator ts --lf
"""

import sys
from pathlib import Path

# Add parent directory to path so rpcgen package can be found
sys.path.insert(0, str(Path(__file__).parent.parent))

from rpcgen.cli import main


if __name__ == "__main__":
    sys.exit(main())
