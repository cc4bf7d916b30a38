"""
Entry point for the Users API contract suite
"""

import sys

from users_contract.runners.unified_runner import main

if __name__ == "__main__":
    sys.exit(main())
