# =============================================================================
# UI Module
# =============================================================================
# Textual-based user interface for Spam Detector.
#
# Structure:
#   - screens/: Full-screen views
#   - widgets/: Reusable UI components (result panel, sample messages)
#
# Styles live next to each screen / widget as inline CSS.
# =============================================================================

from spam_detector.ui.screens.detector import DetectorScreen
from spam_detector.ui.widgets.result_panel import ResultPanel
from spam_detector.ui.widgets.samples import SamplesPanel

__all__ = [
    "DetectorScreen",
    "ResultPanel",
    "SamplesPanel",
]
