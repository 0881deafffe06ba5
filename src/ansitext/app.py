import argparse
import logging
from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.widgets import Footer, Static

from ansitext.config import AnsiTextConfig, load_config
from ansitext.converter import convert
from ansitext.document import Document
from ansitext.errors import AnsiConversionError
from ansitext.utils import normalize_line_endings

logger = logging.getLogger(__name__)


class DocumentView(Static):
    """Displays a converted document with its styles."""

    def __init__(self, document: Document):
        super().__init__(document.to_text())
        self.document = document


class AnsiViewerApp(App):
    TITLE = "ansitext"

    CSS = """
    DocumentView {
        width: auto;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("ctrl+q", "quit", "Quit"),
        Binding("f2", "toggle_footer", "Toggle Help"),
    ]

    def __init__(self, document: Document, config: AnsiTextConfig, title: str | None = None):
        self.document = document
        self.config = config
        self.footer_visible = config.show_footer
        super().__init__()
        if title:
            self.title = title

    def compose(self) -> ComposeResult:
        with VerticalScroll():
            yield DocumentView(self.document)
        footer = Footer()
        footer.display = self.footer_visible
        yield footer

    def action_toggle_footer(self) -> None:
        """Toggle the visibility of the footer."""
        footer = self.query_one(Footer)
        self.footer_visible = not self.footer_visible
        footer.display = self.footer_visible


def load_document(path: Path, config: AnsiTextConfig) -> Document:
    """Read *path* and convert its contents."""
    data = path.read_bytes()
    if config.normalize_line_endings:
        data = normalize_line_endings(data)
    return convert(data)


def main():
    """Main entry point for the ansitext-view command."""
    parser = argparse.ArgumentParser(description="View a file containing ANSI colors")
    parser.add_argument("path", type=Path, help="File to display")
    parser.add_argument(
        "--fullscreen", action="store_true", default=None, help="Full screen"
    )
    parser.add_argument(
        "--keep-carriage-returns",
        action="store_true",
        default=None,
        help="Do not convert CRLF and CR line endings to LF",
    )
    parser.add_argument(
        "--logging", action="store_true", default=None, help="Enable logging"
    )
    args = parser.parse_args()

    config, config_error = load_config()

    # Command-line arguments override config
    if args.fullscreen is not None:
        config.fullscreen = args.fullscreen
    if args.keep_carriage_returns:
        config.normalize_line_endings = False
    if args.logging:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            filename=config.log_file or "ansitext.log",
            filemode="a",  # append mode
        )

    try:
        document = load_document(args.path, config)
    except (OSError, AnsiConversionError) as e:
        logger.error(f"Failed to load {args.path}: {e}")
        parser.exit(1, f"ansitext-view: {args.path}: {e}\n")

    app = AnsiViewerApp(document, config, title=args.path.name)

    # Show config error if any (as a notification once app starts)
    if config_error:
        app.call_later(
            lambda: app.notify(
                f"Config error: {config_error}", severity="warning", timeout=10
            )
        )

    if config.fullscreen:
        app.run()
    else:
        app.run(inline=True, inline_no_clear=True)


if __name__ == "__main__":
    main()
