# =============================================================================
# Sample Messages Panel
# =============================================================================
# Buttons with ready-made spam and ham messages, so the classifier can be
# tried without typing. Clicking a sample posts SamplesPanel.Selected with
# the message text; the screen puts it into the input box.
# =============================================================================

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.widgets import Button, Static


SAMPLE_SPAM = [
    "Win a free iPhone! Click here now!",
    "Congratulations! You have won $1000. Claim your prize now!",
    "URGENT: Your account will be closed. Verify now: http://fake-link.com",
    "Free tickets for IPL! Limited time offer. Reply STOP to opt out.",
    "You have been selected! Claim your prize: www.win-now.com",
]

SAMPLE_HAM = [
    "Hey, are we still meeting for lunch tomorrow?",
    "Thanks for the email. I will review it and get back to you.",
    "Can you send me the report by end of day?",
    "See you at the conference next week.",
    "The meeting has been rescheduled to 3 PM.",
]


class SamplesPanel(Vertical):
    """
    A titled column of sample message buttons.

    Usage:
        >>> SamplesPanel("spam", SAMPLE_SPAM, id="spam-samples")
    """

    DEFAULT_CSS = """
    SamplesPanel {
        width: 1fr;
        height: auto;
        padding: 0 1;
        border: round $panel;
    }

    SamplesPanel > .samples-title {
        text-style: bold;
        margin-bottom: 1;
    }

    SamplesPanel.spam > .samples-title {
        color: $error;
    }

    SamplesPanel.ham > .samples-title {
        color: $success;
    }

    SamplesPanel Button {
        width: 100%;
        margin-bottom: 1;
    }
    """

    class Selected(Message):
        """Posted when a sample is clicked."""

        def __init__(self, text: str) -> None:
            super().__init__()
            self.text = text

    def __init__(self, kind: str, samples: list[str], **kwargs) -> None:
        """
        Initialize the panel.

        Args:
            kind: "spam" or "ham". Used for the title and styling.
            samples: Message texts, one button each.
            **kwargs: Additional arguments passed to Vertical.
        """
        super().__init__(**kwargs)
        self._kind = kind
        self._samples = list(samples)
        self.add_class(kind)

    def compose(self) -> ComposeResult:
        title = "⚠ Sample Spam Messages" if self._kind == "spam" else "✔ Sample Legitimate Messages"
        yield Static(title, classes="samples-title")
        for index, sample in enumerate(self._samples):
            yield Button(sample, id=f"sample-{self._kind}-{index}", classes="sample")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Turn a button press into a Selected message."""
        event.stop()
        index = int(event.button.id.rsplit("-", 1)[1])
        self.post_message(self.Selected(self._samples[index]))

    def set_enabled(self, enabled: bool) -> None:
        """Enable or disable all sample buttons."""
        for button in self.query(Button):
            button.disabled = not enabled
