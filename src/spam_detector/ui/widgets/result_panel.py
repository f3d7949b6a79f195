# =============================================================================
# Result Panel Widget
# =============================================================================
# Shows the outcome of checking a message: the verdict, the label and the
# confidence percentage. Also used for input errors ("Please enter a
# message to check"). Hidden until there is something to show.
# =============================================================================

from textual.widgets import Static

from spam_detector.spam import Prediction


def escape(text: str) -> str:
    """Escape Rich markup in user-facing text."""
    return text.replace("[", "\\[")


class ResultPanel(Static):
    """
    Displays a Prediction or an error.

    Usage:
        >>> panel = ResultPanel(id="result-panel")
        >>> panel.show_prediction(prediction)
    """

    DEFAULT_CSS = """
    ResultPanel {
        height: auto;
        padding: 1 2;
        margin-top: 1;
        border: heavy $panel;
    }

    ResultPanel.spam {
        border: heavy $error;
        background: $error 10%;
    }

    ResultPanel.ham {
        border: heavy $success;
        background: $success 10%;
    }

    ResultPanel.error {
        border: heavy $warning;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__("", **kwargs)
        self._prediction: Prediction | None = None

    def on_mount(self) -> None:
        self.display = False

    @property
    def prediction(self) -> Prediction | None:
        """The prediction currently shown, if any."""
        return self._prediction

    def show_prediction(self, prediction: Prediction) -> None:
        """
        Display a classification result.

        Args:
            prediction: Result from the classifier.
        """
        self._prediction = prediction
        kind = prediction.label.value
        heading = "🚨 Spam Detected!" if prediction.is_spam else "✅ Legitimate Message"

        self._set_kind(kind)
        self.update(
            f"[bold]{heading}[/]\n\n"
            f"This message is classified as [bold]{kind.upper()}[/]\n"
            f"Confidence: [bold]{prediction.percent}%[/]"
        )
        self.display = True

    def show_error(self, message: str) -> None:
        """Display an error instead of a result."""
        self._prediction = None
        self._set_kind("error")
        self.update(f"[bold]Error[/]\n\n{escape(message)}")
        self.display = True

    def clear(self) -> None:
        """Hide the panel."""
        self._prediction = None
        self._set_kind(None)
        self.update("")
        self.display = False

    def _set_kind(self, kind: str | None) -> None:
        self.remove_class("spam", "ham", "error")
        if kind:
            self.add_class(kind)
