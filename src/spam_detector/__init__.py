# =============================================================================
# Spam Detector: Naive Bayes Spam Classification for SMS and Email
# =============================================================================
#
# Spam Detector trains a multinomial Naive Bayes classifier on a labeled
# message corpus and tells you whether a message is spam or ham, along with
# how confident it is.
#
# Features:
#   - Trains from the public SMS Spam Collection (or any CSV you point it at)
#   - Laplace smoothing and log-space arithmetic for stable probabilities
#   - Terminal UI with sample messages to try
#   - Headless --classify mode for scripts
#   - XDG Base Directory compliant
#
# =============================================================================

__version__ = "0.1.0"
__app_name__ = "spam-detector"

# Main entry point - this is what gets called by the 'spam-detector' command
from spam_detector.app import main

__all__ = ["main", "__version__", "__app_name__"]
