# =============================================================================
# Spam Detector Entry Point for `python -m spam_detector`
# =============================================================================
# This module allows Spam Detector to be run as a Python module:
#
#   python -m spam_detector
#
# This is equivalent to running the 'spam-detector' command after installation.
# =============================================================================

import sys

from spam_detector.app import main

if __name__ == "__main__":
    sys.exit(main())
