# =============================================================================
# UI Screens
# =============================================================================
# Full-screen views for the application. There is a single screen:
#   - DetectorScreen: Train the model, type a message, see the verdict
# =============================================================================

from spam_detector.ui.screens.detector import DetectorScreen

__all__ = ["DetectorScreen"]
