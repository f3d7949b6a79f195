# =============================================================================
# Detector Screen
# =============================================================================
# The only view of Spam Detector:
#   - Training status with a progress bar (while the model trains)
#   - Training error with a retry button (if training failed)
#   - Message input with a character counter
#   - Check button and the result panel
#   - Sample spam / ham messages to try
#
# Training starts as soon as the screen is mounted and runs in a background
# worker. The input and buttons are disabled until a model is ready.
# =============================================================================

from textual import work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, ProgressBar, Static, TextArea

from spam_detector.dataset import DatasetError
from spam_detector.detector import EmptyInputError, SpamDetector, TrainingProgress
from spam_detector.spam import DegenerateTrainingDataError, NotTrainedError
from spam_detector.ui.widgets import SAMPLE_HAM, SAMPLE_SPAM, ResultPanel, SamplesPanel


class DetectorScreen(Screen):
    """
    Message checking screen.

    Keybindings:
        - Ctrl+K: Check the message
        - Ctrl+L: Clear the input and result
    """

    BINDINGS = [
        Binding("ctrl+k", "check", "Check"),
        Binding("ctrl+l", "clear", "Clear"),
    ]

    CSS = """
    #detector-container {
        padding: 1 2;
    }

    #training-status {
        height: auto;
        padding: 1 2;
        margin-bottom: 1;
        border: round $primary;
    }

    #training-title, #error-title {
        text-style: bold;
        margin-bottom: 1;
    }

    #training-detail {
        color: $text-muted;
    }

    #error-panel {
        height: auto;
        padding: 1 2;
        margin-bottom: 1;
        border: round $error;
    }

    #error-title {
        color: $error;
    }

    #error-message {
        margin-bottom: 1;
    }

    #input-label {
        text-style: bold;
    }

    #message-input {
        height: 10;
        border: tall $primary;
    }

    #input-info {
        height: 1;
        margin-bottom: 1;
    }

    #char-count {
        width: 1fr;
        color: $text-muted;
    }

    #model-status {
        width: auto;
        color: $success;
    }

    #check-btn {
        width: 100%;
    }

    #samples {
        height: auto;
        margin-top: 1;
    }
    """

    def __init__(self, detector: SpamDetector, *, show_samples: bool = True) -> None:
        """
        Initialize the detector screen.

        Args:
            detector: Detector service used for training and checking.
            show_samples: Show the sample message panels.
        """
        super().__init__()
        self._detector = detector
        self._show_samples = show_samples

    def compose(self) -> ComposeResult:
        """
        Compose the screen layout.

        Layout:
        ┌─────────────────────────────────────────────────┐
        │                    Header                        │
        ├─────────────────────────────────────────────────┤
        │ Training Model...  [██████████░░░░░░░░░░]  60%   │
        ├─────────────────────────────────────────────────┤
        │ ✉ Enter Email or SMS Message                     │
        │ [                                              ] │
        │ 42 characters                      ✓ Model ready │
        │ [              Check Message                   ] │
        ├─────────────────────────────────────────────────┤
        │ 🚨 Spam Detected!  Confidence: 97%               │
        ├────────────────────────┬────────────────────────┤
        │ Sample Spam Messages   │ Sample Legit Messages  │
        └────────────────────────┴────────────────────────┘
        """
        yield Header()

        with VerticalScroll(id="detector-container"):
            with Vertical(id="training-status"):
                yield Static("⏳ Training Model...", id="training-title")
                yield ProgressBar(total=100, show_eta=False, id="training-progress")
                yield Static("", id="training-detail")

            with Vertical(id="error-panel"):
                yield Static("⚠ Training Error", id="error-title")
                yield Static("", id="error-message")
                yield Button("Retry Training", id="retry-btn", variant="error")

            yield Static("✉ Enter Email or SMS Message", id="input-label")
            yield TextArea(id="message-input")
            with Horizontal(id="input-info"):
                yield Static("0 characters", id="char-count")
                yield Static("", id="model-status")

            yield Button("Training Model...", id="check-btn", variant="primary", disabled=True)
            yield ResultPanel(id="result-panel")

            if self._show_samples:
                with Horizontal(id="samples"):
                    yield SamplesPanel("spam", SAMPLE_SPAM, id="spam-samples")
                    yield SamplesPanel("ham", SAMPLE_HAM, id="ham-samples")

        yield Footer()

    def on_mount(self) -> None:
        """Hide the status panels and start training."""
        self.query_one("#training-status").display = False
        self.query_one("#error-panel").display = False
        self._refresh_controls()
        self.start_training()

    # -------------------------------------------------------------------------
    # Training
    # -------------------------------------------------------------------------

    @work(exclusive=True, name="training")
    async def start_training(self) -> None:
        """Background worker that (re)trains the classifier."""
        self.query_one("#error-panel").display = False
        self.query_one("#training-status").display = True
        self._refresh_controls(training=True)

        try:
            stats = await self._detector.retrain(on_progress=self._on_progress)
        except (DatasetError, DegenerateTrainingDataError) as e:
            self.query_one("#error-message", Static).update(str(e).replace("[", "\\["))
            self.query_one("#error-panel").display = True
            self.notify(f"Training failed: {e}", severity="error")
        else:
            self.notify(
                f"Model trained on {stats.total_messages} messages "
                f"({stats.spam_count} spam, {stats.ham_count} ham)",
                timeout=3,
            )
        finally:
            self.query_one("#training-status").display = False
            self._refresh_controls()

    def _on_progress(self, progress: TrainingProgress) -> None:
        """Update the progress bar from a training progress report."""
        self.query_one("#training-progress", ProgressBar).update(progress=progress.percent)
        detail = f"{round(progress.percent)}% complete - {progress.status.name.title()}..."
        if progress.examples:
            detail += f" ({progress.examples} messages)"
        self.query_one("#training-detail", Static).update(detail)

    def _refresh_controls(self, *, training: bool = False) -> None:
        """Enable or disable inputs based on model state."""
        ready = self._detector.is_ready

        check_btn = self.query_one("#check-btn", Button)
        check_btn.disabled = not ready or training
        check_btn.label = "Check Message" if ready else "Training Model..."

        self.query_one("#message-input", TextArea).disabled = not ready
        self.query_one("#model-status", Static).update("✓ Model ready" if ready else "")

        for panel in self.query(SamplesPanel):
            panel.set_enabled(ready)

    # -------------------------------------------------------------------------
    # Event Handlers
    # -------------------------------------------------------------------------

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        if event.button.id == "check-btn":
            self.action_check()
        elif event.button.id == "retry-btn":
            self.start_training()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        """Update the character counter and drop a stale result."""
        length = len(event.text_area.text)
        self.query_one("#char-count", Static).update(f"{length} characters")
        self.query_one("#result-panel", ResultPanel).clear()

    def on_samples_panel_selected(self, event: SamplesPanel.Selected) -> None:
        """Put a sample message into the input box."""
        text_area = self.query_one("#message-input", TextArea)
        text_area.load_text(event.text)
        text_area.focus()
        self.query_one("#result-panel", ResultPanel).clear()

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def action_check(self) -> None:
        """Classify the message in the input box."""
        text = self.query_one("#message-input", TextArea).text
        result_panel = self.query_one("#result-panel", ResultPanel)

        try:
            prediction = self._detector.check(text)
        except (EmptyInputError, NotTrainedError) as e:
            result_panel.show_error(str(e))
            return

        result_panel.show_prediction(prediction)

    def action_clear(self) -> None:
        """Clear the input and the result."""
        self.query_one("#message-input", TextArea).load_text("")
        self.query_one("#result-panel", ResultPanel).clear()
