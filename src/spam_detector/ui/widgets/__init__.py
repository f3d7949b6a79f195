# =============================================================================
# UI Widgets
# =============================================================================
# Reusable UI components for Spam Detector:
#   - ResultPanel: Verdict and confidence for the checked message
#   - SamplesPanel: Buttons with sample spam / ham messages
# =============================================================================

from spam_detector.ui.widgets.result_panel import ResultPanel
from spam_detector.ui.widgets.samples import SAMPLE_HAM, SAMPLE_SPAM, SamplesPanel

__all__ = ["ResultPanel", "SamplesPanel", "SAMPLE_SPAM", "SAMPLE_HAM"]
