#!/usr/bin/env python3
"""
Quick Start Script for the Document Archiver - CLI Mode

Run from the program folder that sits next to the category folders:
    python run_cli.py --config config.yaml
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

# Run CLI
if __name__ == "__main__":
    from src.archiver.cli import main
    sys.exit(main())
